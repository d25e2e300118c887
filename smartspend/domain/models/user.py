from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.exceptions import ValidationError


NAME_MAX_LENGTH = 50


def normalize_email(email: str) -> str:
    """Emails are compared case-insensitively, so they are stored lower-cased."""
    return (email or "").strip().lower()


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    name: str
    email: str
    # Only populated on the credential-check read path
    password_hash: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        self.name = (self.name or "").strip()
        self.email = normalize_email(self.email)
        if not self.name:
            raise ValidationError("Name is required", field="name")
        if len(self.name) > NAME_MAX_LENGTH:
            raise ValidationError(
                f"Name must be at most {NAME_MAX_LENGTH} characters", field="name"
            )
        if not self.email or "@" not in self.email:
            raise ValidationError("Please provide a valid email", field="email")

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r}, email={self.email!r})"
