# tests/conftest.py
# Shared fixtures: deterministic user lookups and config reload hygiene.

from __future__ import annotations

import importlib
from typing import Dict, List

import pytest

from navpath.paths import UserNotFoundError


class FakeUserDirectory:
    """In-memory stand-in for the passwd database that records queries."""

    def __init__(self, homes: Dict[str, str]) -> None:
        self.homes = dict(homes)
        self.calls: List[str] = []

    def __call__(self, name: str) -> str:
        self.calls.append(name)
        try:
            return self.homes[name]
        except KeyError:
            raise UserNotFoundError(name) from None


@pytest.fixture
def user_directory() -> FakeUserDirectory:
    return FakeUserDirectory({"bob": "/home/bob/", "alice": "/srv/alice"})


@pytest.fixture
def failing_lookup() -> FakeUserDirectory:
    return FakeUserDirectory({})


@pytest.fixture
def reload_config(monkeypatch):
    """Reload navpath.config on demand; restore env and settings afterwards."""
    import navpath.config as mod

    yield lambda: importlib.reload(mod)
    monkeypatch.undo()
    importlib.reload(mod)
