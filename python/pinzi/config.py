"""Configuration loader for pinzi.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "chart": "standard",
    "data_dir": None,
    "verbose": False,
}

_config: Optional[dict[str, Any]] = None


def _find_config() -> Optional[Path]:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/pinzi -> root
        Path.cwd() / "config.json",
        Path.cwd().parent / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                _config = data
                return _config
            logger.warning("Ignoring %s: expected a JSON object", config_path)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring %s: %s", config_path, e)

    # Fallback
    _config = {"defaults": dict(FALLBACK_DEFAULTS)}
    return _config


def reset() -> None:
    """Forget the loaded configuration so the next access reloads it."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_chart() -> str:
    return get_default("chart", FALLBACK_DEFAULTS["chart"])


def default_data_dir() -> Optional[str]:
    return get_default("data_dir", FALLBACK_DEFAULTS["data_dir"])


def default_verbose() -> bool:
    return bool(get_default("verbose", FALLBACK_DEFAULTS["verbose"]))
