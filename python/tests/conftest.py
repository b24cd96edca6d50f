"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pinzi import config as cfg
import pinzi.pinyin.chart as chart_module
from pinzi.pinyin import PinyinChart


@pytest.fixture
def tiny_chart_data():
    """A small chart in the JSON layout used by the packaged charts."""
    return {
        "initials": [
            {"id": "Basic", "desc": "consonants", "initials": ["s", "sh", "h"]},
            {"id": "Null", "desc": "no initial", "initials": [["∅", ""]]},
        ],
        "finals": ["a", "an", ["ang", "ang", "hang"], ["i", "i", "yi"], ["ui", "hui"]],
        "overrides": {"shi": ["sh", "-i"]},
    }


@pytest.fixture
def tiny_chart(tiny_chart_data):
    """The tiny chart, loaded."""
    return PinyinChart.from_dict(tiny_chart_data, name="tiny")


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Use fallback config and a fresh chart cache for every test."""
    monkeypatch.setattr(cfg, "_find_config", lambda: None)
    cfg.reset()
    loaders = dict(chart_module._LOADERS)
    chart_module._CHARTS.clear()
    yield
    cfg.reset()
    chart_module._LOADERS.clear()
    chart_module._LOADERS.update(loaders)
    chart_module._CHARTS.clear()
