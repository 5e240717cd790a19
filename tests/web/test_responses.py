"""Tests for ServiceResponse and the ServiceResult translation."""

from __future__ import annotations

from boardgate.services.result import ServiceError, ServiceResult
from boardgate.web.responses import FORBIDDEN, ServiceResponse, from_result


class TestServiceResponse:
    def test_wire_keys_are_camel_case(self) -> None:
        response = ServiceResponse(
            success=True, message="OK", response_object={"id": 1}, status_code=200
        )
        assert response.to_wire() == {
            "success": True,
            "message": "OK",
            "responseObject": {"id": 1},
            "statusCode": 200,
        }

    def test_failure(self) -> None:
        response = ServiceResponse.failure("Board not found", FORBIDDEN)
        assert response.success is False
        assert response.response_object is None
        assert response.status_code == 403


class TestFromResult:
    def test_success(self) -> None:
        result = ServiceResult(ok=True, op="validate", data={"body": {}})
        response = from_result(result, success_message="Validated")
        assert response.success is True
        assert response.message == "Validated"
        assert response.response_object == {"body": {}}
        assert response.status_code == 200

    def test_status_from_error_detail(self) -> None:
        result = ServiceResult(
            ok=False,
            op="validate",
            error=ServiceError(code="INVALID_INPUT", message="bad", detail={"status_code": 422}),
        )
        assert from_result(result).status_code == 422

    def test_default_error_status(self) -> None:
        result = ServiceResult(
            ok=False, op="x", error=ServiceError(code="STORAGE_ERROR", message="down")
        )
        assert from_result(result).status_code == 400
        assert from_result(result, default_error_status=500).status_code == 500
