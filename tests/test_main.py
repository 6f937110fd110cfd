"""Tests for the report entry point."""

from unittest.mock import Mock, patch

import pytest

import main
from src.catalog_domain.application.product_service import ProductApplicationService
from src.common.exceptions.custom_exceptions import DatabaseError
from src.reporting_domain.application.dashboard_service import DashboardApplicationService


@pytest.fixture
def report_services():
    product_service = Mock(spec=ProductApplicationService)
    dashboard_service = Mock(spec=DashboardApplicationService)
    dashboard_service.get_inventory_statistics.return_value = {
        "total_products": 1,
        "available_products": 0,
        "out_of_stock_products": 0,
        "low_stock_products": 1,
        "inventory_value": 12999.9,
        "total_categories": 1,
        "total_users": 1,
    }
    with patch.object(main, "setup_dependencies", return_value=(product_service, dashboard_service)):
        yield product_service, dashboard_service


def test_report_lists_low_stock_products(report_services, sample_product, caplog) -> None:
    product_service, _ = report_services
    product_service.find_low_stock_products.return_value = [sample_product]

    with caplog.at_level("INFO"):
        main.run_low_stock_report()

    assert "1 product(s) need restocking" in caplog.text
    assert "SKU-001" in caplog.text


def test_report_survives_database_errors(report_services, caplog) -> None:
    _, dashboard_service = report_services
    dashboard_service.get_inventory_statistics.side_effect = DatabaseError("connection refused")

    main.run_low_stock_report()

    assert "error occurred while building the inventory report" in caplog.text


@patch("main.MySQLUserRepository")
@patch("main.MySQLProductRepository")
@patch("main.MySQLCategoryRepository")
def test_tables_are_created_categories_first(mock_category_repo, mock_product_repo, mock_user_repo) -> None:
    calls = []
    mock_category_repo.return_value.create_tables.side_effect = lambda: calls.append("categories")
    mock_product_repo.return_value.create_tables.side_effect = lambda: calls.append("products")
    mock_user_repo.return_value.create_tables.side_effect = lambda: calls.append("users")

    main.create_db_tables()

    assert calls == ["categories", "products", "users"]
