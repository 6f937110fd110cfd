"""Product stock status."""

from enum import Enum


class ProductStatus(str, Enum):
    """Stock level bucket stored alongside each product."""

    AVAILABLE = "AVAILABLE"
    LOW_STOCK = "LOW_STOCK"
    OUT_OF_STOCK = "OUT_OF_STOCK"
