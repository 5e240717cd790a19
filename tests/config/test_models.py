"""Tests for config section models."""

import pytest

from boardgate.config.models import DatabaseConfig, ValidationConfig


def test_defaults() -> None:
    assert DatabaseConfig().path == ".boardgate/boardgate.db"
    assert ValidationConfig().log_violations is True


def test_sections_are_frozen() -> None:
    cfg = ValidationConfig()
    with pytest.raises(Exception):
        cfg.log_violations = False  # type: ignore[misc]
