"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, boardgate.toml only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    # Relative paths resolve against the project root.
    path: str = ".boardgate/boardgate.db"


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    log_violations: bool = True
