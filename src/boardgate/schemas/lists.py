"""Request schemas for lists."""

from __future__ import annotations

from uuid import UUID

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from boardgate.schemas._base import RequestSchema, Section


class BoardRefParams(Section):
    board_id: UUID


class ListIdParams(Section):
    id: UUID


class NewListBody(Section):
    title: str = Field(max_length=255)

    @field_validator("title")
    @classmethod
    def _title_required(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("title_required", "Title is required")
        return value


class ListTitleBody(Section):
    title: str = Field(min_length=1, max_length=255)


class MoveListBody(Section):
    board_id: UUID
    position: int | None = Field(default=None, ge=0)


class CreateListRequest(RequestSchema):
    params: BoardRefParams
    body: NewListBody


class RenameListRequest(RequestSchema):
    params: ListIdParams
    body: ListTitleBody


class MoveListRequest(RequestSchema):
    params: ListIdParams
    body: MoveListBody
