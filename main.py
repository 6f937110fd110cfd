# main.py
"""Main application entry point: schema bootstrap and the daily low stock report."""

import logging
import time
from datetime import datetime

import pytz
import schedule

from src.catalog_domain.application.product_service import ProductApplicationService
from src.catalog_domain.infrastructure.persistence.mysql_category_repository import (
    MySQLCategoryRepository,
)
from src.catalog_domain.infrastructure.persistence.mysql_product_repository import (
    MySQLProductRepository,
)
from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import ApplicationError, DatabaseError
from src.common.logger_config import setup_logging
from src.reporting_domain.application.dashboard_service import DashboardApplicationService
from src.user_domain.infrastructure.persistence.mysql_user_repository import (
    MySQLUserRepository,
)

logger = logging.getLogger(__name__)


def create_db_tables() -> None:
    """Creates the warehouse tables. Categories first, products reference them."""
    try:
        MySQLCategoryRepository().create_tables()
        MySQLProductRepository().create_tables()
        MySQLUserRepository().create_tables()
        logger.info("✅ Database tables created/verified successfully")
    except DatabaseError as e:
        logger.error(f"❌ Error creating warehouse database tables: {e}")
        raise


def setup_dependencies() -> tuple[ProductApplicationService, DashboardApplicationService]:
    """Initializes and wires up the services used by the report."""
    category_repository = MySQLCategoryRepository()
    product_repository = MySQLProductRepository()
    user_repository = MySQLUserRepository()

    product_service = ProductApplicationService(product_repo=product_repository, category_repo=category_repository)
    dashboard_service = DashboardApplicationService(
        product_repo=product_repository, category_repo=category_repository, user_repo=user_repository
    )
    return product_service, dashboard_service


def run_low_stock_report() -> None:
    """Logs inventory statistics and every product at or below its minimum stock."""
    logger.info(f"\n{'='*80}")
    logger.info(f"📊 Inventory report at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    logger.info(f"{'='*80}")

    product_service, dashboard_service = setup_dependencies()

    try:
        stats = dashboard_service.get_inventory_statistics()
        logger.info(f"📦 Total products:  {stats['total_products']}")
        logger.info(f"✅ Available:       {stats['available_products']}")
        logger.info(f"❌ Out of stock:    {stats['out_of_stock_products']}")
        logger.info(f"💰 Inventory value: {stats['inventory_value']:.2f}")
        logger.info(f"🗂️  Categories: {stats['total_categories']}, Users: {stats['total_users']}")

        low_stock_products = product_service.find_low_stock_products()
        if not low_stock_products:
            logger.info("✅ No low stock products")
            return

        logger.warning(f"⚠️  {len(low_stock_products)} product(s) need restocking:")
        for product in low_stock_products:
            logger.warning(
                f"   {product.sku:<12} {product.name[:30]:<30} stock={product.stock:<6} "
                f"min={product.min_stock:<6} status={product.status.value}"
            )

    except ApplicationError as e:
        logger.error(f"An error occurred while building the inventory report: {e}")


if __name__ == "__main__":
    setup_logging()
    logger.info("🎯 Warehouse Inventory Service")

    create_db_tables()
    run_low_stock_report()

    report_tz = pytz.timezone(settings.REPORT_TIMEZONE)
    schedule.every().day.at(settings.LOW_STOCK_REPORT_TIME, report_tz).do(run_low_stock_report)

    logger.info(f"⏰ Low stock report scheduled daily at {settings.LOW_STOCK_REPORT_TIME} ({settings.REPORT_TIMEZONE})")
    while True:
        schedule.run_pending()
        time.sleep(30)
