"""Shared base models for request schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Section(BaseModel):
    """One of ``body`` / ``query`` / ``params``.

    Wire names are camelCase; normalized output uses the Python field names.
    Strings are trimmed before constraints apply.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        frozen=True,
    )


class RequestSchema(BaseModel):
    """Root of a request schema; subclasses declare the sections they need."""

    model_config = ConfigDict(frozen=True)
