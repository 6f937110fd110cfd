# src/catalog_domain/infrastructure/persistence/mysql_product_repository.py
"""MySQL implementation of the Product repository."""

import logging
from decimal import Decimal
from typing import Optional

from src.catalog_domain.domain.entities.product import Product
from src.catalog_domain.domain.entities.product_status import ProductStatus
from src.catalog_domain.domain.repositories.product_repository import IProductRepository
from src.common.persistence.mysql_base_repository import MySQLBaseRepository
from src.common.utils.db_utils import parse_db_datetime

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = (
    "id, sku, name, description, price, stock, reserved_stock, min_stock, "
    "location, status, category_id, last_update"
)


class MySQLProductRepository(MySQLBaseRepository[Product, int], IProductRepository):
    """MySQL implementation of the Product Repository."""

    TABLE_NAME = "products"

    def _map_row(self, row: dict) -> Product:
        return Product(
            id=row["id"],
            sku=row["sku"],
            name=row["name"],
            description=row["description"],
            price=Decimal(str(row["price"])),
            stock=int(row["stock"]),
            reserved_stock=int(row["reserved_stock"]),
            min_stock=int(row["min_stock"]),
            location=row["location"],
            status=ProductStatus(row["status"]),
            category_id=row["category_id"],
            last_update=parse_db_datetime(row["last_update"]),
        )

    def create_tables(self) -> None:
        """Creates the products table. Requires the categories table."""
        create_products_table_query = """
        CREATE TABLE IF NOT EXISTS products (
            id INT UNSIGNED PRIMARY KEY AUTO_INCREMENT,
            sku VARCHAR(50) NOT NULL,
            name VARCHAR(100) NOT NULL,
            description VARCHAR(255),
            price DECIMAL(10, 2) NOT NULL DEFAULT 0,
            stock INT UNSIGNED NOT NULL DEFAULT 0,
            reserved_stock INT UNSIGNED NOT NULL DEFAULT 0,
            min_stock INT UNSIGNED NOT NULL DEFAULT 0,
            location VARCHAR(20),
            status VARCHAR(20) NOT NULL,
            category_id INT UNSIGNED NOT NULL,
            last_update DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            UNIQUE KEY uk_product_sku (sku),
            INDEX idx_product_category (category_id),
            INDEX idx_product_stock (stock),
            CONSTRAINT fk_product_category FOREIGN KEY (category_id) REFERENCES categories (id)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        self._execute_ddl(create_products_table_query, "Products")

    def create(self, product: Product) -> bool:
        insert_query = """
        INSERT INTO products
        (sku, name, description, price, stock, reserved_stock, min_stock, location, status, category_id)
        VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
        """
        params = (
            product.sku,
            product.name,
            product.description,
            product.price,
            product.stock,
            product.reserved_stock,
            product.min_stock,
            product.location,
            product.status.value,
            product.category_id,
        )
        return self._execute_update(insert_query, params, f"Error creating product {product.sku}") == 1

    def update(self, product: Product) -> bool:
        update_query = """
        UPDATE products
        SET sku = %s, name = %s, description = %s, price = %s, stock = %s, reserved_stock = %s,
            min_stock = %s, location = %s, status = %s, category_id = %s, last_update = CURRENT_TIMESTAMP
        WHERE id = %s
        """
        params = (
            product.sku,
            product.name,
            product.description,
            product.price,
            product.stock,
            product.reserved_stock,
            product.min_stock,
            product.location,
            product.status.value,
            product.category_id,
            product.id,
        )
        return self._execute_update(update_query, params, f"Error updating product {product.id}") > 0

    def delete(self, product_id: int) -> bool:
        return (
            self._execute_update(
                "DELETE FROM products WHERE id = %s", (product_id,), f"Error deleting product {product_id}"
            )
            > 0
        )

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return self._execute_query_for_one(
            f"SELECT {PRODUCT_COLUMNS} FROM products WHERE id = %s",
            (product_id,),
            f"Error fetching product {product_id}",
        )

    def find_all(self) -> list[Product]:
        return self._execute_query_for_list(
            f"SELECT {PRODUCT_COLUMNS} FROM products ORDER BY name", error_message="Error fetching products"
        )

    def find_by_sku(self, sku: str) -> Optional[Product]:
        return self._execute_query_for_one(
            f"SELECT {PRODUCT_COLUMNS} FROM products WHERE sku = %s LIMIT 1",
            (sku,),
            f"Error fetching product by SKU {sku}",
        )

    def find_by_category(self, category_id: int) -> list[Product]:
        return self._execute_query_for_list(
            f"SELECT {PRODUCT_COLUMNS} FROM products WHERE category_id = %s ORDER BY name",
            (category_id,),
            f"Error fetching products for category {category_id}",
        )

    def find_low_stock_products(self) -> list[Product]:
        return self._execute_query_for_list(
            f"SELECT {PRODUCT_COLUMNS} FROM products WHERE stock <= min_stock ORDER BY stock ASC",
            error_message="Error fetching low stock products",
        )

    def update_stock(self, product_id: int, new_stock: int, expected_stock: Optional[int] = None) -> bool:
        """
        Sets the stock and recomputes the status in the same statement.

        The CASE mirrors ``derive_status``. With ``expected_stock`` the write
        is a compare-and-swap and returns False if another writer got there first.
        """
        update_query = """
        UPDATE products
        SET stock = %s,
            status = CASE
                WHEN %s = 0 THEN 'OUT_OF_STOCK'
                WHEN %s <= min_stock THEN 'LOW_STOCK'
                ELSE 'AVAILABLE'
            END,
            last_update = CURRENT_TIMESTAMP
        WHERE id = %s
        """
        params: tuple = (new_stock, new_stock, new_stock, product_id)
        if expected_stock is not None:
            update_query = update_query.rstrip() + " AND stock = %s\n"
            params += (expected_stock,)

        updated = self._execute_update(update_query, params, f"Error updating stock for product {product_id}") > 0
        if updated:
            logger.debug(f"Stock of product {product_id} set to {new_stock}")
        return updated
