from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from .resume import CamelModel, validate_email


class UserCreate(CamelModel):
    username: str = Field(min_length=3, max_length=64, pattern=r"^[A-Za-z0-9_.-]+$")
    email: str = Field(max_length=320)
    password: str = Field(min_length=8, max_length=256)

    @field_validator("email")
    @classmethod
    def _validate_email(cls, value: str) -> str:
        return validate_email(value)


class User(CamelModel):
    id: str
    username: str
    email: str
    created_at: datetime
