"""Pytest bootstrap shared by every lazyfiles test.

Puts the repository root on ``sys.path`` so ``import lazyfiles`` works from a
plain checkout, and points the persisted config at a throwaway file so a
developer's own ``config.json`` never leaks into test runs.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

REPOSITORY_ROOT = Path(__file__).resolve().parent.parent

if str(REPOSITORY_ROOT) not in sys.path:
    sys.path.insert(0, str(REPOSITORY_ROOT))


@pytest.fixture(autouse=True)
def isolated_config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    from lazyfiles import config

    config_path = tmp_path / "lazyfiles-config" / "config.json"
    monkeypatch.setattr(config, "CONFIG_PATH", config_path)
    return config_path
