"""Framework-neutral view of an incoming request."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from boardgate.services.validation import REQUEST_SECTIONS, assemble_input


@dataclass(frozen=True)
class Request:
    """The parts of a request the validator and the gate look at.

    ``user_id`` is the already-authenticated caller, if any.
    """

    body: Mapping[str, Any] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)
    params: Mapping[str, Any] = field(default_factory=dict)
    user_id: str | None = None

    def as_input(self) -> dict[str, Any]:
        return assemble_input(self.body, self.query, self.params)

    def with_normalized(self, normalized: Mapping[str, Any]) -> Request:
        """Copy with each section the schema produced swapped in."""
        changes = {s: normalized[s] for s in REQUEST_SECTIONS if s in normalized}
        return replace(self, **changes)
