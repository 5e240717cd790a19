"""Request schemas for registration and login."""

from __future__ import annotations

import re

from pydantic import EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError

from boardgate.schemas._base import RequestSchema, Section

# 8+ chars, upper and lower case, and a digit or a non-word character.
_PASSWORD_RE = re.compile(r"(?=^.{8,}$)((?=.*\d)|(?=.*\W+))(?![.\n])(?=.*[A-Z])(?=.*[a-z]).*$")
PASSWORD_RULE = (
    "Password must contain at least one uppercase letter, one lowercase letter, "
    "and one number or special character"
)


class RegisterBody(Section):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=8)

    @field_validator("password")
    @classmethod
    def _strong_password(cls, value: str) -> str:
        if not _PASSWORD_RE.match(value):
            raise PydanticCustomError("password_strength", PASSWORD_RULE)
        return value


class LoginBody(Section):
    email: EmailStr
    password: str = Field(min_length=1)


class RegisterRequest(RequestSchema):
    body: RegisterBody


class LoginRequest(RequestSchema):
    body: LoginBody
