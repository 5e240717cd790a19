"""Request schemas for the comment endpoints."""

from __future__ import annotations

from uuid import UUID

from pydantic import Field

from boardgate.schemas._base import RequestSchema, Section

MAX_COMMENT_LENGTH = 5000


class CommentBody(Section):
    content: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)


class NewCommentBody(CommentBody):
    card_id: UUID


class CommentIdParams(Section):
    id: UUID


class CardIdParams(Section):
    card_id: UUID


class CreateCommentRequest(RequestSchema):
    body: NewCommentBody


class UpdateCommentRequest(RequestSchema):
    params: CommentIdParams
    body: CommentBody


class CommentIdRequest(RequestSchema):
    params: CommentIdParams


class ListCommentsRequest(RequestSchema):
    params: CardIdParams
