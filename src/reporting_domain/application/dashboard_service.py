# src/reporting_domain/application/dashboard_service.py
"""Application service for inventory statistics."""

import logging
from decimal import Decimal

from src.catalog_domain.domain.entities.product_status import ProductStatus
from src.catalog_domain.domain.repositories.category_repository import ICategoryRepository
from src.catalog_domain.domain.repositories.product_repository import IProductRepository
from src.user_domain.domain.repositories.user_repository import IUserRepository

logger = logging.getLogger(__name__)


class DashboardApplicationService:
    def __init__(
        self,
        product_repo: IProductRepository,
        category_repo: ICategoryRepository,
        user_repo: IUserRepository,
    ) -> None:
        self.product_repo = product_repo
        self.category_repo = category_repo
        self.user_repo = user_repo

    def get_inventory_statistics(self) -> dict:
        """Returns product counts per status, stock value and entity totals."""
        products = self.product_repo.find_all()
        low_stock = self.product_repo.find_low_stock_products()

        inventory_value = sum((product.price * product.stock for product in products), Decimal("0.00"))

        logger.debug(f"Computed statistics over {len(products)} products")
        return {
            "total_products": len(products),
            "available_products": sum(1 for p in products if p.status == ProductStatus.AVAILABLE),
            "out_of_stock_products": sum(1 for p in products if p.status == ProductStatus.OUT_OF_STOCK),
            "low_stock_products": len(low_stock),
            "inventory_value": inventory_value,
            "total_categories": len(self.category_repo.find_all()),
            "total_users": len(self.user_repo.find_all()),
        }
