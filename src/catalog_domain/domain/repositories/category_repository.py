# src/catalog_domain/domain/repositories/category_repository.py
"""Category repository interface."""
from abc import abstractmethod

from src.catalog_domain.domain.entities.category import Category
from src.common.persistence.generic_repository import IGenericRepository


class ICategoryRepository(IGenericRepository[Category, int]):
    @abstractmethod
    def find_all_active(self) -> list[Category]:
        """Retrieves active categories ordered by name."""
        pass
