from pydantic import BaseModel, EmailStr, field_validator

from ...domain.models.user import NAME_MAX_LENGTH, normalize_email
from .user_dto import UserResponse


PASSWORD_MIN_LENGTH = 6
# bcrypt only hashes the first 72 bytes
PASSWORD_MAX_BYTES = 72


class UserRegistrationRequest(BaseModel):
    """DTO for user signup request"""
    name: str
    email: EmailStr
    password: str

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, value):
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Name is required")
        value = value.strip()
        if len(value) > NAME_MAX_LENGTH:
            raise ValueError(f"Name must be at most {NAME_MAX_LENGTH} characters")
        return value

    @field_validator("email", mode="after")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator("password", mode="before")
    @classmethod
    def validate_password(cls, value):
        if not isinstance(value, str) or len(value) < PASSWORD_MIN_LENGTH:
            raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
        if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes")
        return value


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: EmailStr
    password: str

    @field_validator("email", mode="after")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator("password", mode="before")
    @classmethod
    def validate_password(cls, value):
        if not isinstance(value, str) or not value:
            raise ValueError("Password is required")
        return value


class AuthResponse(BaseModel):
    """DTO returned by signup and login: the public user plus a bearer token"""
    user: UserResponse
    token: str
