"""Persistent JSON config helpers.

Stores driver defaults: symlink-following during recursive traversal and the
text encoding used for file content.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import codecs
import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "lazyfiles"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
DEFAULT_TEXT_ENCODING = "utf-8"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem and serialization errors are logged and otherwise ignored so a
    read-only config directory never breaks callers.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("Could not save config to %s: %s", CONFIG_PATH, exc)


def _load_bool(key: str) -> bool:
    """Return the persisted boolean under ``key``; anything else reads as ``False``."""
    value = load_config().get(key)
    return value if isinstance(value, bool) else False


def _save_bool(key: str, value: bool) -> None:
    config = load_config()
    config[key] = bool(value)
    save_config(config)


def load_follow_symlinks() -> bool:
    """Return persisted symlink-following preference."""
    return _load_bool("follow_symlinks")


def save_follow_symlinks(follow_symlinks: bool) -> None:
    _save_bool("follow_symlinks", follow_symlinks)


def _is_known_encoding(name: str) -> bool:
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True


def load_text_encoding() -> str:
    """Load the default text encoding, falling back to UTF-8 when unset/unknown."""
    value = load_config().get("text_encoding")
    if not isinstance(value, str):
        return DEFAULT_TEXT_ENCODING
    stripped = value.strip()
    if not stripped or not _is_known_encoding(stripped):
        return DEFAULT_TEXT_ENCODING
    return stripped


def save_text_encoding(encoding: str) -> None:
    """Persist the default text encoding; unknown codec names are ignored."""
    stripped = str(encoding).strip()
    if not stripped or not _is_known_encoding(stripped):
        return
    config = load_config()
    config["text_encoding"] = stripped
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_TEXT_ENCODING",
    "load_config",
    "save_config",
    "load_follow_symlinks",
    "save_follow_symlinks",
    "load_text_encoding",
    "save_text_encoding",
]
