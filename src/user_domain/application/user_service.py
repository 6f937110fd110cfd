# src/user_domain/application/user_service.py
"""Application service for user accounts."""

import dataclasses
import logging
from typing import Optional

from src.common.exceptions.custom_exceptions import DatabaseError, DuplicateEntryError, ValidationError
from src.common.utils.input_validator import (
    validate_email,
    validate_full_name,
    validate_password,
    validate_username,
)
from src.common.utils.password_hasher import PasswordHasher
from src.user_domain.domain.entities.user import User
from src.user_domain.domain.entities.user_role import UserRole
from src.user_domain.domain.repositories.user_repository import IUserRepository

logger = logging.getLogger(__name__)


class UserApplicationService:
    """User accounts: creation with hashed passwords, lookups and password changes."""

    def __init__(self, user_repo: IUserRepository, password_hasher: Optional[PasswordHasher] = None) -> None:
        self.user_repo = user_repo
        self.password_hasher = password_hasher or PasswordHasher()

    def find_all(self) -> list[User]:
        return self.user_repo.find_all()

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.user_repo.find_by_id(user_id)

    def find_by_username(self, username: Optional[str]) -> Optional[User]:
        """Blank usernames find nothing without querying."""
        if username is None or not username.strip():
            return None
        return self.user_repo.find_by_username(username.strip())

    def find_by_role(self, role: UserRole) -> list[User]:
        if role is None:
            raise ValueError("Role cannot be null")
        return self.user_repo.find_by_role(role)

    def create(self, username: str, password: str, email: str, full_name: str, role: UserRole) -> bool:
        """Validates the account data, hashes the password and stores the user."""
        valid_username = validate_username(username)
        valid_password = validate_password(password)
        valid_email = validate_email(email)
        valid_full_name = validate_full_name(full_name)
        if role is None:
            raise ValidationError("Role cannot be null")

        user = User.new(
            valid_username,
            self.password_hasher.hash(valid_password),
            valid_email,
            valid_full_name,
            role,
        )

        try:
            created = self.user_repo.create(user)
        except DuplicateEntryError as e:
            raise DuplicateEntryError(f"Username {valid_username} or email {valid_email} already exists") from e

        if created:
            logger.info(f"User {valid_username} created with role {role.value}")
        return created

    def update(self, user: User) -> bool:
        if user is None:
            raise ValueError("User cannot be null")
        try:
            return self.user_repo.update(user)
        except DuplicateEntryError as e:
            raise DuplicateEntryError(f"Username {user.username} or email {user.email} already exists") from e

    def update_password(self, user_id: int, new_password: str) -> bool:
        """Replaces a user's password hash. Returns False when the user does not exist."""
        valid_password = validate_password(new_password)
        hashed = self.password_hasher.hash(valid_password)

        user = self.user_repo.find_by_id(user_id)
        if user is None:
            logger.warning(f"Cannot change password of user {user_id}: not found")
            return False

        updated = self.user_repo.update(dataclasses.replace(user, password=hashed))
        if updated:
            logger.info(f"Password changed for user {user.username}")
        return updated

    def delete(self, user_id: int) -> bool:
        return self.user_repo.delete(user_id)

    def authenticate(self, username: str, password: str) -> Optional[User]:
        """
        Returns the user when the credentials match, otherwise None.

        Hashes made with a lower cost than configured are upgraded on a
        successful login.
        """
        user = self.find_by_username(username)
        if user is None or not self.password_hasher.verify(password, user.password):
            logger.info(f"Authentication failed for {username!r}")
            return None

        if self.password_hasher.needs_rehash(user.password):
            upgraded = dataclasses.replace(user, password=self.password_hasher.hash(password))
            try:
                self.user_repo.update(upgraded)
            except DatabaseError as e:
                # The credentials are valid; the upgrade is retried on the next login
                logger.error(f"Could not store upgraded password hash of {user.username}: {e}")
                return user
            logger.info(f"Password hash of {user.username} upgraded to cost {self.password_hasher.rounds}")
            return upgraded

        return user
