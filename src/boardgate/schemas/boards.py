"""Request schemas for board settings.

Comment policy is checked here, at write time, so the evaluator's
invalid-configuration branch is only reachable through out-of-band writes.
"""

from __future__ import annotations

from typing import Any, Literal
from uuid import UUID

from pydantic import Field, StrictBool, ValidationInfo, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from boardgate.schemas._base import RequestSchema, Section

AssignableCommentPolicy = Literal["disabled", "anyone", "members", "workspace"]
BoardVisibility = Literal["private", "public", "workspace"]
MemberManagePolicy = Literal["admins_only", "all_members"]


class BoardIdParams(Section):
    id: UUID


class BoardSettingsBody(Section):
    """Partial update: every setting is optional, but a setting that is sent
    must carry a value. An explicit ``null`` is rejected, not treated as unset.
    """

    comment_policy: AssignableCommentPolicy | None = None
    visibility: BoardVisibility | None = None
    member_manage_policy: MemberManagePolicy | None = None
    cover_url: str | None = Field(default=None, min_length=1)
    workspace_members_can_edit_and_join: StrictBool | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            field = to_camel(info.field_name or "")
            raise PydanticCustomError(
                "invalid_setting", "Invalid {field} value", {"field": field}
            )
        return value

    @model_validator(mode="after")
    def _at_least_one_setting(self) -> BoardSettingsBody:
        if not self.model_fields_set:
            raise PydanticCustomError(
                "settings_required", "at least one setting must be provided"
            )
        return self


class UpdateBoardSettingsRequest(RequestSchema):
    params: BoardIdParams
    body: BoardSettingsBody
