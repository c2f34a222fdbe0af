"""Pydantic schemas for auth API."""

from pydantic import BaseModel, EmailStr, Field


class Credentials(BaseModel):
    """Register/login request body."""

    email: EmailStr
    password: str = Field(..., min_length=6)


class UserOut(BaseModel):
    """Public user fields."""

    id: str
    email: str


class AuthResponse(BaseModel):
    """Session token plus the user it belongs to."""

    token: str
    user: UserOut
