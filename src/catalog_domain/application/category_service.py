# src/catalog_domain/application/category_service.py
"""Application service for categories."""

import dataclasses
import logging
from typing import Optional

from src.catalog_domain.domain.entities.category import Category
from src.catalog_domain.domain.repositories.category_repository import ICategoryRepository
from src.common.exceptions.custom_exceptions import DuplicateEntryError, ForeignKeyViolationError
from src.common.utils.input_validator import validate_string

logger = logging.getLogger(__name__)


class CategoryApplicationService:
    """Validates and persists categories."""

    def __init__(self, category_repo: ICategoryRepository) -> None:
        self.category_repo = category_repo

    def find_all(self) -> list[Category]:
        return self.category_repo.find_all()

    def find_all_active(self) -> list[Category]:
        return self.category_repo.find_all_active()

    def find_by_id(self, category_id: int) -> Optional[Category]:
        return self.category_repo.find_by_id(category_id)

    def create(self, name: str, description: Optional[str] = None) -> bool:
        """Creates an active category. Raises ValidationError on bad input."""
        valid_name = validate_string(name, "Category name", 2, 50, False)
        valid_description = validate_string(description or "", "Description", 0, 255, True)

        category = Category.new(valid_name, valid_description)
        try:
            created = self.category_repo.create(category)
        except DuplicateEntryError as e:
            raise DuplicateEntryError(f"Category '{valid_name}' already exists") from e

        if created:
            logger.info(f"Category '{valid_name}' created")
        return created

    def update(self, category: Category) -> bool:
        if category is None:
            raise ValueError("Category cannot be null")
        return self.category_repo.update(category)

    def delete(self, category_id: int) -> bool:
        try:
            return self.category_repo.delete(category_id)
        except ForeignKeyViolationError as e:
            raise ForeignKeyViolationError(
                f"Category {category_id} still has products and cannot be deleted", original_exception=e
            ) from e

    def toggle_active(self, category_id: int) -> bool:
        """Flips the active flag. Returns False when the category does not exist."""
        category = self.category_repo.find_by_id(category_id)
        if category is None:
            logger.warning(f"Cannot toggle category {category_id}: not found")
            return False

        toggled = dataclasses.replace(category, active=not category.active)
        updated = self.category_repo.update(toggled)
        if updated:
            logger.info(f"Category {category_id} is now {'active' if toggled.active else 'inactive'}")
        return updated
