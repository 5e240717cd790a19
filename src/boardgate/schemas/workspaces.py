"""Request schemas for workspaces."""

from __future__ import annotations

from typing import Literal
from uuid import UUID

from pydantic import Field

from boardgate.schemas._base import RequestSchema, Section


class WorkspaceBody(Section):
    title: str = Field(min_length=2, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    visibility: Literal["private", "public"] | None = None


class WorkspaceIdParams(Section):
    id: UUID


class NewMemberBody(Section):
    user_id: UUID
    role_id: UUID


class CreateWorkspaceRequest(RequestSchema):
    body: WorkspaceBody


class AddWorkspaceMemberRequest(RequestSchema):
    params: WorkspaceIdParams
    body: NewMemberBody
