"""Tests for core.config.Settings."""

import pytest
from pydantic import ValidationError

from sqlfacade.core.config import Settings
from sqlfacade.models import ExtractionMode


def test_defaults(monkeypatch):
    monkeypatch.delenv("SQLFACADE_EXTRACTION_MODE", raising=False)
    s = Settings(_env_file=None)
    assert s.ROOT_TEMPLATE_NAME == "<root>"
    assert s.EXTRACTION_MODE == ExtractionMode.GUARD_ONLY


def test_env_override(monkeypatch):
    monkeypatch.setenv("SQLFACADE_EXTRACTION_MODE", "full")
    monkeypatch.setenv("SQLFACADE_LOG_LEVEL", "debug")
    s = Settings(_env_file=None)
    assert s.EXTRACTION_MODE == ExtractionMode.FULL
    assert s.LOG_LEVEL == "DEBUG"


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("SQLFACADE_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
