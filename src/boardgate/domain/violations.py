"""Field-level validation violations and their rendering."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel

INVALID_INPUT_PREFIX = "Invalid input: "


class Violation(BaseModel):
    """One field-level failure, located by its path from the input root."""

    model_config = {"frozen": True}

    path: tuple[str | int, ...] = ()
    message: str

    @property
    def dotted_path(self) -> str:
        return ".".join(str(segment) for segment in self.path)

    def render(self) -> str:
        return f"{self.dotted_path}: {self.message}"

    @classmethod
    def from_error(cls, error: dict[str, Any]) -> Violation:
        """Build from one entry of ``pydantic.ValidationError.errors()``."""
        return cls(path=tuple(error.get("loc", ())), message=str(error.get("msg", "")))


def join_violations(violations: Iterable[Violation]) -> str:
    """Render violations in order as ``path: message`` joined by ``", "``."""
    return ", ".join(v.render() for v in violations)


def invalid_input_message(violations: Sequence[Violation]) -> str:
    return f"{INVALID_INPUT_PREFIX}{join_violations(violations)}"
