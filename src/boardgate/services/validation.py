"""Schema-driven request validation.

A schema is anything pydantic can build a ``TypeAdapter`` for, normally a
model with ``body`` / ``query`` / ``params`` sections. The raw request is
assembled into one mapping first, so a single pass can check a path
parameter and a body field together and report every violation at once.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import TypeAdapter, ValidationError

from boardgate.domain.violations import Violation, invalid_input_message
from boardgate.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)

BAD_REQUEST = 400
GENERIC_FAILURE_MESSAGE = "Validation failed"

REQUEST_SECTIONS = ("body", "query", "params")


def assemble_input(
    body: Mapping[str, Any] | None = None,
    query: Mapping[str, Any] | None = None,
    params: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge the three request sources into the mapping schemas are written against.

    Missing sections become empty mappings and are validated like any other.
    """
    return {
        "body": dict(body) if body is not None else {},
        "query": dict(query) if query is not None else {},
        "params": dict(params) if params is not None else {},
    }


@functools.lru_cache(maxsize=128)
def _cached_adapter(schema: Any) -> TypeAdapter[Any]:
    return TypeAdapter(schema)


def _adapter(schema: Any) -> TypeAdapter[Any]:
    """Adapter for *schema*; unhashable schemas (e.g. ``Annotated`` with
    unhashable metadata) are built fresh instead of cached."""
    try:
        hash(schema)
    except TypeError:
        return TypeAdapter(schema)
    return _cached_adapter(schema)


def collect_violations(error: ValidationError) -> list[Violation]:
    """Violations in the order the engine reported them."""
    return [Violation.from_error(e) for e in error.errors(include_url=False)]


def validate(
    schema: Any,
    raw_input: Mapping[str, Any],
    *,
    log_violations: bool = True,
) -> ServiceResult:
    """Validate *raw_input* against *schema* in one pass.

    On success ``data`` holds the normalized output (coercions, trimming,
    defaults applied once). On failure the error message lists every
    violation as ``dotted.path: message`` joined by ``", "``.
    """
    op = "validate"
    try:
        adapter = _adapter(schema)
        value = adapter.validate_python(raw_input)
        normalized = adapter.dump_python(value, mode="python")
    except ValidationError as exc:
        violations = collect_violations(exc)
        if log_violations:
            log.info(
                "validation.rejected",
                schema=getattr(schema, "__name__", repr(schema)),
                violation_count=len(violations),
            )
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="INVALID_INPUT",
                message=invalid_input_message(violations),
                detail={
                    "status_code": BAD_REQUEST,
                    "violations": [v.model_dump(mode="json") for v in violations],
                },
            ),
        )
    except Exception:
        # Engine faults are logged here and never shown to the caller.
        log.error(
            "validation.engine_error",
            schema=getattr(schema, "__name__", repr(schema)),
            exc_info=True,
        )
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="VALIDATION_FAILED",
                message=GENERIC_FAILURE_MESSAGE,
                detail={"status_code": BAD_REQUEST},
            ),
        )

    if not isinstance(normalized, dict):
        normalized = {"value": normalized}
    return ServiceResult(ok=True, op=op, data=normalized)
