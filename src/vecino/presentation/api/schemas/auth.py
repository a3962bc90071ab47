"""Authentication schemas for request/response models.

Request fields are optional at the schema level so that missing values
reach the registration and login validators, which report them with
the API's own messages.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from vecino.domain.user import User
from vecino.presentation.api.schemas.common import CamelModel


class RegisterRequest(CamelModel):
    """Request schema for user registration."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None
    neighborhood: Optional[str] = Field(
        default=None,
        description="La Taona, Pocitos, Malvín or Otro (default La Taona)",
    )
    address: Optional[str] = None
    unit_number: Optional[str] = None
    role: Optional[str] = Field(default=None, description="'user' or 'provider'")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ana",
                "email": "ana@example.com",
                "password": "secret1",
                "neighborhood": "La Taona",
                "unitNumber": "Casa 8",
            },
        },
    )


class LoginRequest(CamelModel):
    """Request schema for user login."""

    email: Optional[str] = None
    password: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "ana@example.com", "password": "secret1"},
        },
    )


class UserResponse(CamelModel):
    """Public view of a user; never carries the password hash."""

    id: str
    name: str
    email: str
    phone: str
    role: str
    neighborhood: str
    address: str
    unit_number: str
    is_verified: bool
    profile_image: str
    favorites: list[str]
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            role=user.role.value,
            neighborhood=user.neighborhood.value,
            address=user.address,
            unit_number=user.unit_number,
            is_verified=user.is_verified,
            profile_image=user.profile_image,
            favorites=user.favorites,
            created_at=user.created_at,
        )


class AuthResponse(CamelModel):
    """Response for successful registration or login."""

    success: bool = True
    message: str
    token: str
    user: UserResponse


class ProfileResponse(CamelModel):
    success: bool = True
    user: UserResponse
