"""
Pydantic models for user data.

Defines schemas for signing up, signing in and reading a user's
profile.  The stored password hash is never part of a response model.
"""

from typing import Optional

from pydantic import BaseModel, Field

from . import RequestModel


class SignupRequest(RequestModel):
    required_fields = ("email", "password", "name", "phone")

    email: Optional[str] = Field(None, examples=["user@example.com"])
    password: Optional[str] = Field(None, examples=["strongpassword"])
    name: Optional[str] = Field(None, examples=["Nguyen Van A"])
    phone: Optional[str] = Field(None, examples=["0901234567"])


class SigninRequest(RequestModel):
    required_fields = ("email", "password")

    email: Optional[str] = Field(None, examples=["user@example.com"])
    password: Optional[str] = Field(None, examples=["strongpassword"])


class SignupResponse(BaseModel):
    message: str
    user_id: int = Field(..., alias="userId")

    model_config = {"populate_by_name": True}


class SigninResponse(BaseModel):
    message: str
    user_id: int = Field(..., alias="userId")
    name: str

    model_config = {"populate_by_name": True}


class UserRead(BaseModel):
    """Public profile of a user."""

    id: int
    email: str
    name: str
    phone: str
