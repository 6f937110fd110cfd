# src/user_domain/infrastructure/persistence/mysql_user_repository.py
"""MySQL implementation of the User repository."""

import logging
from typing import Optional

from src.common.persistence.mysql_base_repository import MySQLBaseRepository
from src.common.utils.db_utils import parse_db_datetime
from src.user_domain.domain.entities.user import User
from src.user_domain.domain.entities.user_role import UserRole
from src.user_domain.domain.repositories.user_repository import IUserRepository

logger = logging.getLogger(__name__)

USER_COLUMNS = "id, username, password, email, full_name, role, created_at"


class MySQLUserRepository(MySQLBaseRepository[User, int], IUserRepository):
    """MySQL implementation of the User Repository."""

    TABLE_NAME = "users"

    def _map_row(self, row: dict) -> User:
        return User(
            id=row["id"],
            username=row["username"],
            password=row["password"],
            email=row["email"],
            full_name=row["full_name"],
            role=UserRole(row["role"]),
            created_at=parse_db_datetime(row["created_at"]),
        )

    def create_tables(self) -> None:
        create_users_table_query = """
        CREATE TABLE IF NOT EXISTS users (
            id INT UNSIGNED PRIMARY KEY AUTO_INCREMENT,
            username VARCHAR(20) NOT NULL,
            password VARCHAR(255) NOT NULL,
            email VARCHAR(100) NOT NULL,
            full_name VARCHAR(100) NOT NULL,
            role VARCHAR(20) NOT NULL,
            created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
            UNIQUE KEY uk_user_username (username),
            UNIQUE KEY uk_user_email (email),
            INDEX idx_user_role (role)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        self._execute_ddl(create_users_table_query, "Users")

    def create(self, user: User) -> bool:
        insert_query = """
        INSERT INTO users (username, password, email, full_name, role)
        VALUES (%s, %s, %s, %s, %s)
        """
        params = (user.username, user.password, user.email, user.full_name, user.role.value)
        return self._execute_update(insert_query, params, f"Error creating user {user.username}") == 1

    def update(self, user: User) -> bool:
        update_query = """
        UPDATE users
        SET username = %s, password = %s, email = %s, full_name = %s, role = %s
        WHERE id = %s
        """
        params = (user.username, user.password, user.email, user.full_name, user.role.value, user.id)
        return self._execute_update(update_query, params, f"Error updating user {user.id}") > 0

    def delete(self, user_id: int) -> bool:
        return self._execute_update("DELETE FROM users WHERE id = %s", (user_id,), f"Error deleting user {user_id}") > 0

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self._execute_query_for_one(
            f"SELECT {USER_COLUMNS} FROM users WHERE id = %s", (user_id,), f"Error fetching user {user_id}"
        )

    def find_all(self) -> list[User]:
        return self._execute_query_for_list(
            f"SELECT {USER_COLUMNS} FROM users ORDER BY id", error_message="Error fetching users"
        )

    def find_by_username(self, username: str) -> Optional[User]:
        return self._execute_query_for_one(
            f"SELECT {USER_COLUMNS} FROM users WHERE username = %s LIMIT 1",
            (username,),
            f"Error fetching user {username}",
        )

    def find_by_role(self, role: UserRole) -> list[User]:
        return self._execute_query_for_list(
            f"SELECT {USER_COLUMNS} FROM users WHERE role = %s ORDER BY username",
            (role.value,),
            f"Error fetching users with role {role.value}",
        )
