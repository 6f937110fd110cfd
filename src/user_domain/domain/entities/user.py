"""User entity."""

from dataclasses import dataclass, field
from datetime import datetime

from src.user_domain.domain.entities.user_role import UserRole


@dataclass(frozen=True)
class User:
    """A warehouse staff account. ``password`` always holds a hash, never plain text."""

    id: int
    username: str
    password: str = field(repr=False)
    email: str
    full_name: str
    role: UserRole
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.username is None or not self.username.strip():
            raise ValueError("Username cannot be empty.")
        if not self.password:
            raise ValueError("Password hash is required.")
        if self.email is None or "@" not in self.email:
            raise ValueError("Invalid email.")
        if self.full_name is None or not self.full_name.strip():
            raise ValueError("Full name cannot be empty.")
        if not isinstance(self.role, UserRole):
            raise ValueError("Role cannot be null.")

    @classmethod
    def new(cls, username: str, password_hash: str, email: str, full_name: str, role: UserRole) -> "User":
        """Builds an unsaved user; the database assigns id and creation time."""
        return cls(
            id=0,
            username=username,
            password=password_hash,
            email=email,
            full_name=full_name,
            role=role,
            created_at=datetime.now(),
        )
