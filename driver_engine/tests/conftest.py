"""Shared fixtures for driver_engine tests."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Strip DRIVERS_* variables and run from an empty directory (no .env)."""
    for name in list(os.environ):
        if name.upper().startswith("DRIVERS_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
