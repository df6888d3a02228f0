"""Shared test fixtures for the hdpath test suite."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_hdpath_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``HDPATH_*`` variables from the host environment out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("HDPATH_"):
            monkeypatch.delenv(key)
