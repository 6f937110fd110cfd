# src/catalog_domain/infrastructure/persistence/mysql_category_repository.py
"""MySQL implementation of the Category repository."""

import logging
from typing import Optional

from src.catalog_domain.domain.entities.category import Category
from src.catalog_domain.domain.repositories.category_repository import ICategoryRepository
from src.common.persistence.mysql_base_repository import MySQLBaseRepository
from src.common.utils.db_utils import parse_db_bool, to_db_bool

logger = logging.getLogger(__name__)


class MySQLCategoryRepository(MySQLBaseRepository[Category, int], ICategoryRepository):
    """MySQL implementation of the Category Repository."""

    TABLE_NAME = "categories"

    def _map_row(self, row: dict) -> Category:
        return Category(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            active=parse_db_bool(row["active"]),
        )

    def create_tables(self) -> None:
        create_categories_table_query = """
        CREATE TABLE IF NOT EXISTS categories (
            id INT UNSIGNED PRIMARY KEY AUTO_INCREMENT,
            name VARCHAR(50) NOT NULL,
            description VARCHAR(255),
            active TINYINT(1) NOT NULL DEFAULT 1,
            UNIQUE KEY uk_category_name (name),
            INDEX idx_category_active (active)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        self._execute_ddl(create_categories_table_query, "Categories")

    def create(self, category: Category) -> bool:
        insert_query = """
        INSERT INTO categories (name, description, active)
        VALUES (%s, %s, %s)
        """
        params = (category.name, category.description, to_db_bool(category.active))
        affected = self._execute_update(insert_query, params, f"Error creating category {category.name}")
        logger.debug(f"Inserted category {category.name} ({affected} row(s))")
        return affected == 1

    def update(self, category: Category) -> bool:
        update_query = """
        UPDATE categories SET name = %s, description = %s, active = %s WHERE id = %s
        """
        params = (category.name, category.description, to_db_bool(category.active), category.id)
        return self._execute_update(update_query, params, f"Error updating category {category.id}") > 0

    def delete(self, category_id: int) -> bool:
        return (
            self._execute_update(
                "DELETE FROM categories WHERE id = %s", (category_id,), f"Error deleting category {category_id}"
            )
            > 0
        )

    def find_by_id(self, category_id: int) -> Optional[Category]:
        return self._execute_query_for_one(
            "SELECT id, name, description, active FROM categories WHERE id = %s",
            (category_id,),
            f"Error fetching category {category_id}",
        )

    def find_all(self) -> list[Category]:
        return self._execute_query_for_list(
            "SELECT id, name, description, active FROM categories ORDER BY name",
            error_message="Error fetching categories",
        )

    def find_all_active(self) -> list[Category]:
        return self._execute_query_for_list(
            "SELECT id, name, description, active FROM categories WHERE active = 1 ORDER BY name",
            error_message="Error fetching active categories",
        )
