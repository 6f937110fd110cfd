# src/user_domain/domain/repositories/user_repository.py
"""User repository interface."""
from abc import abstractmethod
from typing import Optional

from src.common.persistence.generic_repository import IGenericRepository
from src.user_domain.domain.entities.user import User
from src.user_domain.domain.entities.user_role import UserRole


class IUserRepository(IGenericRepository[User, int]):
    @abstractmethod
    def find_by_username(self, username: str) -> Optional[User]:
        """Retrieves a user by username."""
        pass

    @abstractmethod
    def find_by_role(self, role: UserRole) -> list[User]:
        """Retrieves the users holding a role ordered by username."""
        pass
