"""ServiceResponse: the JSON envelope every endpoint answers with."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from boardgate.services.result import ServiceResult

OK = 200
BAD_REQUEST = 400
FORBIDDEN = 403
INTERNAL_SERVER_ERROR = 500


class ServiceResponse(BaseModel):
    """``{success, message, responseObject, statusCode}`` on the wire."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    success: bool
    message: str
    response_object: Any = None
    status_code: int

    @classmethod
    def failure(cls, message: str, status_code: int) -> ServiceResponse:
        return cls(success=False, message=message, response_object=None, status_code=status_code)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def from_result(
    result: ServiceResult,
    *,
    success_message: str = "OK",
    default_error_status: int = BAD_REQUEST,
) -> ServiceResponse:
    """Translate a ServiceResult; ``error.detail["status_code"]`` wins when present."""
    if result.ok:
        return ServiceResponse(
            success=True,
            message=success_message,
            response_object=result.data,
            status_code=OK,
        )
    assert result.error is not None
    status = int(result.error.detail.get("status_code", default_error_status))
    return ServiceResponse.failure(result.error.message, status)
