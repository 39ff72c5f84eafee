"""
Name: Auth Schemas

Responsibilities:
  - Request/response DTOs for register, login and /me
  - Normalize emails at the edge (trim + lowercase)
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from .....identity.users import UserRole


class RegisterReq(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=1, max_length=512)
    role: str | None = Field(
        default=None,
        max_length=32,
        description="Requested role (admin | employee); defaults to employee",
    )

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class RegisterRes(BaseModel):
    message: str


class LoginReq(BaseModel):
    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=1, max_length=512)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class UserRes(BaseModel):
    id: int
    name: str
    email: str
    role: UserRole
    created_at: datetime | None = None


class LoginRes(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserRes


class MeRes(BaseModel):
    id: int
    name: str
    role: UserRole
    issued_at: datetime | None = None
    expires_at: datetime | None = None
