"""
User and authentication Pydantic schemas.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from taskboard.schemas.base import CamelModel


def _lowercase(value: str) -> str:
    return value.strip().lower()


class RegisterRequest(CamelModel):
    """Schema for registering a new user."""
    
    email: EmailStr
    password: str = Field(min_length=8, max_length=100)
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    
    _email_lower = field_validator("email")(_lowercase)


class LoginRequest(CamelModel):
    """Schema for login request. No strength rules apply at login."""
    
    email: EmailStr
    password: str = Field(min_length=1)
    
    _email_lower = field_validator("email")(_lowercase)


class UserRead(CamelModel):
    """Schema for reading user data (API response)."""
    
    id: UUID
    email: str
    name: Optional[str] = None
    created_at: datetime


class CurrentUser(CamelModel):
    """
    The authenticated caller.
    
    Passed explicitly into every service call; `id` is the owner id that
    scopes all queries and mutations.
    """
    
    id: UUID
    email: str
    name: Optional[str] = None


class LoginResponse(CamelModel):
    """Schema for login and token refresh responses."""
    
    access_token: str
    token_type: str = "bearer"
    user: CurrentUser
