"""Configuration loader for lgdict.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "output_dir": "output",
    "locale": "EN_us",
    "cost": "zero",
    "commit_every": 10000,
    "log_every": 10000,
    "link_prefix": "T",
    "quiet": False,
    "verbose": False,
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/lgdict -> root
        Path(__file__).parent.parent / "config.json",
        Path.cwd() / "config.json",
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
            with open(config_path) as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable %s: %s", config_path, e)

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    return _config


def reset() -> None:
    """Forget the loaded configuration so the next load() re-reads it."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_output_dir() -> str:
    return get_default("output_dir", FALLBACK_DEFAULTS["output_dir"])


def default_locale() -> str:
    return get_default("locale", FALLBACK_DEFAULTS["locale"])


def default_cost() -> str:
    return get_default("cost", FALLBACK_DEFAULTS["cost"])


def default_commit_every() -> int:
    return get_default("commit_every", FALLBACK_DEFAULTS["commit_every"])


def default_log_every() -> int:
    return get_default("log_every", FALLBACK_DEFAULTS["log_every"])


def default_link_prefix() -> str:
    return get_default("link_prefix", FALLBACK_DEFAULTS["link_prefix"])
