# src/catalog_domain/application/product_service.py
"""Application service for products and their stock."""

import dataclasses
import logging
from decimal import Decimal
from typing import Optional

from src.catalog_domain.domain.entities.product import Product
from src.catalog_domain.domain.repositories.category_repository import ICategoryRepository
from src.catalog_domain.domain.repositories.product_repository import IProductRepository
from src.catalog_domain.domain.services.stock_status_service import derive_status
from src.common.exceptions.custom_exceptions import DuplicateEntryError, ValidationError
from src.common.utils.input_validator import (
    validate_price,
    validate_sku,
    validate_stock,
    validate_string,
)

logger = logging.getLogger(__name__)

CATEGORIES_TABLE = "categories"


class ProductApplicationService:
    """Product use cases: creation inside active categories, updates and stock changes."""

    def __init__(self, product_repo: IProductRepository, category_repo: ICategoryRepository) -> None:
        self.product_repo = product_repo
        self.category_repo = category_repo

    def find_all(self) -> list[Product]:
        return self.product_repo.find_all()

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return self.product_repo.find_by_id(product_id)

    def find_by_sku(self, sku: Optional[str]) -> Optional[Product]:
        """Looks up a product by SKU. Blank input finds nothing without querying."""
        if sku is None or not sku.strip():
            return None
        return self.product_repo.find_by_sku(validate_sku(sku))

    def find_by_category(self, category_id: int) -> list[Product]:
        return self.product_repo.find_by_category(category_id)

    def find_low_stock_products(self) -> list[Product]:
        return self.product_repo.find_low_stock_products()

    def get_low_stock_products(self) -> list[Product]:
        return self.find_low_stock_products()

    def create(
        self,
        sku: str,
        name: str,
        description: Optional[str],
        price: int | float | str | Decimal,
        stock: int,
        min_stock: int,
        location: Optional[str],
        category_id: int,
    ) -> bool:
        """
        Creates a product after validating its fields and its category.

        The category must exist and be active; otherwise ValidationError is
        raised and nothing is written. A taken SKU raises DuplicateEntryError.
        """
        valid_sku = validate_sku(sku)
        valid_name = validate_string(name, "Product name", 2, 100, False)
        valid_description = validate_string(description or "", "Description", 0, 255, True)
        valid_price = validate_price(price)
        valid_stock = validate_stock(stock)
        valid_min_stock = validate_stock(min_stock)
        valid_location = validate_string(location or "", "Location", 0, 20, True)

        self._require_active_category(category_id)

        product = Product.new(
            valid_sku,
            valid_name,
            valid_description,
            valid_price,
            valid_stock,
            valid_min_stock,
            valid_location,
            category_id,
        )

        try:
            created = self.product_repo.create(product)
        except DuplicateEntryError as e:
            raise DuplicateEntryError(f"Product with SKU {valid_sku} already exists") from e

        if created:
            logger.info(f"Product {valid_sku} created with status {product.status.value}")
        return created

    def update(self, product: Product) -> bool:
        """Replaces a product row. The status is recomputed from the stock fields first."""
        if product is None:
            raise ValueError("Product cannot be null")

        if not self.category_repo.exists(CATEGORIES_TABLE, product.category_id):
            raise ValidationError("Category does not exist")

        consistent = dataclasses.replace(product, status=derive_status(product.stock, product.min_stock))
        if consistent.status != product.status:
            logger.debug(f"Product {product.sku}: status corrected from {product.status.value} to {consistent.status.value}")

        try:
            return self.product_repo.update(consistent)
        except DuplicateEntryError as e:
            raise DuplicateEntryError(f"Product with SKU {product.sku} already exists") from e

    def update_stock(self, product_id: int, new_stock: int) -> bool:
        """
        Sets a product's stock and its status in one write.

        Returns False when the product does not exist, or when its stock was
        changed by someone else between the read and the write.
        """
        valid_stock = validate_stock(new_stock)

        product = self.product_repo.find_by_id(product_id)
        if product is None:
            logger.warning(f"Cannot update stock of product {product_id}: not found")
            return False

        updated = self.product_repo.update_stock(product_id, valid_stock, expected_stock=product.stock)
        if not updated:
            logger.warning(f"Stock of product {product.sku} changed concurrently; update skipped")
            return False

        logger.info(f"Stock of product {product.sku} updated: {product.stock} -> {valid_stock}")
        if valid_stock <= product.min_stock:
            logger.warning(f"Low stock alert: {product.sku} has {valid_stock} (minimum {product.min_stock})")
        return True

    def delete(self, product_id: int) -> bool:
        return self.product_repo.delete(product_id)

    def _require_active_category(self, category_id: int) -> None:
        category = self.category_repo.find_by_id(category_id)
        if category is None:
            raise ValidationError("Category does not exist")
        if not category.active:
            raise ValidationError("Category is inactive")
