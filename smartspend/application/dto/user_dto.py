from pydantic import BaseModel

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    name: str
    email: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(id=user.id or "", name=user.name, email=user.email)


class CurrentUserResponse(BaseModel):
    """DTO for GET /auth/me"""
    user: UserResponse
