# src/catalog_domain/domain/repositories/product_repository.py
"""Product repository interface."""
from abc import abstractmethod
from typing import Optional

from src.catalog_domain.domain.entities.product import Product
from src.common.persistence.generic_repository import IGenericRepository


class IProductRepository(IGenericRepository[Product, int]):
    @abstractmethod
    def find_by_sku(self, sku: str) -> Optional[Product]:
        """Retrieves a product by its SKU."""
        pass

    @abstractmethod
    def find_by_category(self, category_id: int) -> list[Product]:
        """Retrieves the products of a category ordered by name."""
        pass

    @abstractmethod
    def find_low_stock_products(self) -> list[Product]:
        """Retrieves products with stock at or below their minimum, lowest stock first."""
        pass

    @abstractmethod
    def update_stock(self, product_id: int, new_stock: int, expected_stock: Optional[int] = None) -> bool:
        """
        Sets the stock and recomputes the status in a single statement.

        When ``expected_stock`` is given the row is only written if its stock
        still equals that value.
        """
        pass
