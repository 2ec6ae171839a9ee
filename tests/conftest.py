"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest

from pointer_patch.settings import reset_settings_cache


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Every test starts from default settings, whatever the environment holds."""
    monkeypatch.delenv("POINTER_PATCH_STRICT_OPERATIONS", raising=False)
    monkeypatch.delenv("POINTER_PATCH_STRICT_ARRAY_INDICES", raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def enable_setting(monkeypatch):
    """Turn a boolean setting on for the rest of the test."""

    def _enable(name: str) -> None:
        monkeypatch.setenv(f"POINTER_PATCH_{name}", "true")
        reset_settings_cache()

    return _enable


@pytest.fixture
def sample_doc():
    """Small document mixing objects, arrays and scalars."""
    return {
        "a": 1,
        "b": {"c": 2, "d": [3, 4]},
        "e": [5, 6],
    }


@pytest.fixture
def nested_doc():
    """Document with nested arrays and escaped-character keys."""
    return {
        "a": 1,
        "b": {"c": 2, "d": [3, 4]},
        "e": [5, {"x": "hello"}, [6, 7]],
        "slash/key": "secret",
        "tilde~key": 123,
        "": "empty key",
    }
