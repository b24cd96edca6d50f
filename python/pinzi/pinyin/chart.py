"""Pinyin charts: how a syllable divides into initial and final.

Different teaching systems draw the line between initial and final in
different places (``xing`` is x + ing in the standard table, but xi + (e)ng in
some mnemonic systems). A chart captures one convention as data:

    - initials: ordered groups of productions
    - finals: ordered productions
    - overrides: exact syllable -> (initial, final) answers

A production is ``(label, surface, surface, ...)``: the label is what the
syllable splits into, the surfaces are the spellings that match it, e.g.
``("iu", "iu", "you")``.

Chart JSON (``pinzi/data/*_chart.json``)::

    {
      "initials": [{"id": "Basic", "desc": "...", "initials": ["b", ["∅", ""]]}],
      "finals": ["a", ["iu", "iu", "you"]],
      "overrides": {"ju": ["j", "ü"]}
    }

A bare string ``"b"`` is shorthand for ``["b", "b"]``.

Usage:
    from pinzi.pinyin import get_chart, list_charts, register_chart

    chart = get_chart("standard")
    list_charts()  # ["standard", "mm", "hmm", "hh"]
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Union

from .. import config as cfg
from ..errors import ChartError

logger = logging.getLogger(__name__)

Production = tuple[str, ...]

PACKAGE_DATA_DIR = Path(__file__).parent.parent / "data"


class PinyinInitialGroupId(Enum):
    """Groups initials are organised into on a chart."""

    BASIC = "Basic"
    WITH_I = "_i"
    WITH_U = "_u"
    WITH_V = "_v"
    NULL = "Null"
    EVERYTHING = "Everything"


@dataclass(frozen=True)
class PinyinInitialGroup:
    """A named group of initial productions."""

    id: PinyinInitialGroupId
    desc: str
    initials: tuple[Production, ...]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PinyinInitialGroup":
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise ChartError(f"initial group must be an object, got {data!r}")
        try:
            group_id = PinyinInitialGroupId(data["id"])
        except KeyError as e:
            raise ChartError(f"initial group is missing {e}") from e
        except ValueError as e:
            raise ChartError(f"unknown initial group id: {data['id']!r}") from e

        desc = data.get("desc", "")
        if not isinstance(desc, str):
            raise ChartError(f"initial group desc must be a string, got {desc!r}")

        return cls(
            id=group_id,
            desc=desc,
            initials=_productions(data.get("initials"), f"initials[{group_id.value}]"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id.value,
            "desc": self.desc,
            "initials": [list(p) for p in self.initials],
        }


@dataclass(frozen=True)
class PinyinChart:
    """One convention for splitting syllables into initial and final."""

    initials: tuple[PinyinInitialGroup, ...]
    finals: tuple[Production, ...]
    overrides: Mapping[str, tuple[str, str]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    name: str = ""

    def initial_productions(self) -> list[Production]:
        """All initial productions, across groups, in chart order."""
        return [p for group in self.initials for p in group.initials]

    def expanded_initials(self) -> list[tuple[str, str]]:
        """Initials as (label, surface) pairs, longest surface first."""
        return _by_length_descending(expand_combinations(self.initial_productions()))

    def expanded_finals(self) -> list[tuple[str, str]]:
        """Finals as (label, surface) pairs, longest surface first."""
        return _by_length_descending(expand_combinations(self.finals))

    def duplicate_initials(self) -> list[str]:
        """Initial surfaces that appear more than once."""
        return _duplicates(s for _, s in expand_combinations(self.initial_productions()))

    def duplicate_finals(self) -> list[str]:
        """Final surfaces that appear more than once."""
        return _duplicates(s for _, s in expand_combinations(self.finals))

    @classmethod
    def from_dict(cls, data: dict[str, Any], name: str = "") -> "PinyinChart":
        """Create from dictionary, validating its shape."""
        if not isinstance(data, dict):
            raise ChartError(f"chart must be an object, got {type(data).__name__}")

        groups = data.get("initials")
        if not isinstance(groups, list):
            raise ChartError("chart initials must be a list of groups")

        overrides_data = data.get("overrides") or {}
        if not isinstance(overrides_data, dict):
            raise ChartError("chart overrides must be an object")
        overrides: dict[str, tuple[str, str]] = {}
        for syllable, pair in overrides_data.items():
            if (
                not isinstance(pair, list)
                or len(pair) != 2
                or not all(isinstance(x, str) for x in pair)
            ):
                raise ChartError(
                    f"override for {syllable!r} must be [initial, final], got {pair!r}"
                )
            overrides[syllable] = (pair[0], pair[1])

        return cls(
            initials=tuple(PinyinInitialGroup.from_dict(g) for g in groups),
            finals=_productions(data.get("finals"), "finals"),
            overrides=MappingProxyType(overrides),
            name=name,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "initials": [g.to_dict() for g in self.initials],
            "finals": [list(p) for p in self.finals],
            "overrides": {k: list(v) for k, v in self.overrides.items()},
        }

    @classmethod
    def load(cls, filepath: Union[Path, str], name: str = "") -> "PinyinChart":
        """Load chart from JSON file."""
        filepath = Path(filepath)
        logger.debug("Loading pinyin chart %s from %s", name or "?", filepath)
        with open(filepath, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ChartError(f"{filepath}: invalid JSON: {e}") from e
        return cls.from_dict(data, name=name or filepath.stem)


def expand_combinations(productions: list[Production]) -> list[tuple[str, str]]:
    """Flatten productions into (label, surface) pairs.

    Example:
        [("iu", "iu", "you")] -> [("iu", "iu"), ("iu", "you")]
    """
    return [(label, surface) for label, *surfaces in productions for surface in surfaces]


def _by_length_descending(pairs: list[tuple[str, str]]) -> list[tuple[str, str]]:
    # sorted() is stable, so equal lengths keep chart order.
    return sorted(pairs, key=lambda pair: len(pair[1]), reverse=True)


def _duplicates(items) -> list[str]:
    seen: set[str] = set()
    duplicates = []
    for item in items:
        if item in seen:
            duplicates.append(item)
        else:
            seen.add(item)
    return duplicates


def _productions(items: Any, where: str) -> tuple[Production, ...]:
    """Normalize a list of productions, expanding the bare-string shorthand."""
    if not isinstance(items, list):
        raise ChartError(f"{where} must be a list")

    productions = []
    for item in items:
        if isinstance(item, str):
            productions.append((item, item))
        elif (
            isinstance(item, list)
            and len(item) >= 2
            and all(isinstance(x, str) for x in item)
        ):
            productions.append(tuple(item))
        else:
            raise ChartError(
                f"{where}: production must be a string or [label, surface, ...], "
                f"got {item!r}"
            )
    return tuple(productions)


# =============================================================================
# Registry
# =============================================================================

ChartLoader = Callable[[], PinyinChart]

_LOADERS: dict[str, ChartLoader] = {}

# Loaded charts
_CHARTS: dict[str, PinyinChart] = {}


def data_dir() -> Path:
    """Directory holding chart and syllable data files."""
    configured = cfg.default_data_dir()
    if configured:
        path = Path(configured)
        if path.is_dir():
            return path
        logger.warning("Configured data_dir %s does not exist, using package data", path)
    return PACKAGE_DATA_DIR


def _file_loader(name: str, filename: str) -> ChartLoader:
    def load() -> PinyinChart:
        return PinyinChart.load(data_dir() / filename, name=name)

    return load


def _init_registry():
    """Initialize the registry with the charts shipped in the package."""
    global _LOADERS
    _LOADERS = {
        "standard": _file_loader("standard", "standard_chart.json"),
        "mm": _file_loader("mm", "mm_chart.json"),
        "hmm": _file_loader("hmm", "hmm_chart.json"),
        "hh": _file_loader("hh", "hh_chart.json"),
    }


_init_registry()


def get_chart(name: Optional[str] = None) -> PinyinChart:
    """Get a chart by name (cached).

    Args:
        name: Chart name; the configured default chart if None.

    Returns:
        PinyinChart instance.
    """
    name = name or cfg.default_chart()
    if name not in _LOADERS:
        raise ChartError(f"Unknown chart: {name}. Available: {list(_LOADERS.keys())}")

    if name not in _CHARTS:
        _CHARTS[name] = _LOADERS[name]()

    return _CHARTS[name]


def register_chart(name: str, loader: Union[ChartLoader, PinyinChart]) -> None:
    """Register a custom chart.

    Args:
        name: Name to register under.
        loader: Chart, or a function returning one on first use.
    """
    if isinstance(loader, PinyinChart):
        chart = loader
        _LOADERS[name] = lambda: chart
    else:
        _LOADERS[name] = loader
    # Clear cached chart if exists
    if name in _CHARTS:
        del _CHARTS[name]


def list_charts() -> list[str]:
    """List available chart names."""
    return list(_LOADERS.keys())


def load_pinyin_syllables() -> list[str]:
    """Load the reference list of toneless syllables."""
    filepath = data_dir() / "pinyin_syllables.json"
    with open(filepath, "r", encoding="utf-8") as f:
        syllables = json.load(f)
    if not isinstance(syllables, list) or not all(isinstance(s, str) for s in syllables):
        raise ChartError(f"{filepath}: expected a list of strings")
    return syllables
