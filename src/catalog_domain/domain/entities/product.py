"""Product entity."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.catalog_domain.domain.entities.product_status import ProductStatus
from src.catalog_domain.domain.services.stock_status_service import derive_status


@dataclass(frozen=True)
class Product:
    """Represents a stocked item and its storage location."""

    id: int
    sku: str
    name: str
    description: str | None
    price: Decimal
    stock: int
    reserved_stock: int
    min_stock: int
    location: str | None
    status: ProductStatus
    category_id: int
    last_update: datetime | None = None

    def __post_init__(self) -> None:
        """Post-initialization for validation."""
        if self.sku is None or not self.sku.strip():
            raise ValueError("SKU cannot be empty.")
        if self.name is None or not self.name.strip():
            raise ValueError("Product name cannot be empty.")
        if self.price is None or self.price < 0:
            raise ValueError("Price cannot be negative.")
        if self.stock is None or self.stock < 0:
            raise ValueError("Stock cannot be negative.")
        if self.reserved_stock is None or self.reserved_stock < 0:
            raise ValueError("Reserved stock cannot be negative.")
        if self.min_stock is None or self.min_stock < 0:
            raise ValueError("Minimum stock cannot be negative.")
        if not isinstance(self.status, ProductStatus):
            raise ValueError("Status cannot be null.")

    @classmethod
    def new(
        cls,
        sku: str,
        name: str,
        description: str | None,
        price: Decimal,
        stock: int,
        min_stock: int,
        location: str | None,
        category_id: int,
    ) -> "Product":
        """Builds an unsaved product with no reserved stock and a derived status."""
        return cls(
            id=0,
            sku=sku,
            name=name,
            description=description,
            price=price,
            stock=stock,
            reserved_stock=0,
            min_stock=min_stock,
            location=location,
            status=derive_status(stock, min_stock),
            category_id=category_id,
            last_update=datetime.now(),
        )

    def needs_restock(self) -> bool:
        return self.stock <= self.min_stock

    def available_stock(self) -> int:
        """On-hand stock minus reservations. Negative when over-reserved."""
        return self.stock - self.reserved_stock
