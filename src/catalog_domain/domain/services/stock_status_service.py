# src/catalog_domain/domain/services/stock_status_service.py
"""Domain service deriving a product's stock status."""

from src.catalog_domain.domain.entities.product_status import ProductStatus


def derive_status(stock: int, min_stock: int) -> ProductStatus:
    """
    Maps stock quantities to a status bucket.

    0 is OUT_OF_STOCK, anything up to and including ``min_stock`` is
    LOW_STOCK, the rest is AVAILABLE. The same rule is written as a SQL
    ``CASE`` in the product repository's stock update.
    """
    if stock == 0:
        return ProductStatus.OUT_OF_STOCK
    if stock <= min_stock:
        return ProductStatus.LOW_STOCK
    return ProductStatus.AVAILABLE
