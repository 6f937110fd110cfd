# tests/test_catalog_domain/test_infrastructure/test_mysql_category_repository.py
"""Tests for the MySQL Category Repository."""

import pytest

from src.catalog_domain.domain.entities.category import Category
from src.catalog_domain.infrastructure.persistence.mysql_category_repository import (
    MySQLCategoryRepository,
)


@pytest.fixture
def category_repository(connection_factory) -> MySQLCategoryRepository:
    return MySQLCategoryRepository(connection_factory=connection_factory)


@pytest.fixture
def category_row() -> dict:
    return {"id": 1, "name": "Electronics", "description": "Devices", "active": 1}


def test_create_then_find_by_id(category_repository, mock_cursor, category_row) -> None:
    mock_cursor.rowcount = 1
    mock_cursor.fetchone.return_value = category_row

    assert category_repository.create(Category.new("Electronics", "Devices")) is True
    found = category_repository.find_by_id(1)

    assert found == Category(id=1, name="Electronics", description="Devices", active=True)
    insert_params = mock_cursor.execute.call_args_list[0][0][1]
    assert insert_params == ("Electronics", "Devices", 1)
    select_query, select_params = mock_cursor.execute.call_args_list[1][0]
    assert "FROM categories WHERE id = %s" in select_query
    assert select_params == (1,)


def test_create_reports_false_when_nothing_inserted(category_repository, mock_cursor) -> None:
    mock_cursor.rowcount = 0

    assert category_repository.create(Category.new("Electronics")) is False


def test_find_by_id_not_found(category_repository, mock_cursor) -> None:
    mock_cursor.fetchone.return_value = None

    assert category_repository.find_by_id(999) is None


def test_find_all_maps_every_row(category_repository, mock_cursor, category_row) -> None:
    mock_cursor.fetchall.return_value = [category_row, {"id": 2, "name": "Tools", "description": None, "active": 0}]

    categories = category_repository.find_all()

    assert [c.name for c in categories] == ["Electronics", "Tools"]
    assert categories[1].active is False
    assert categories[1].description is None
    assert "ORDER BY name" in mock_cursor.execute.call_args[0][0]


def test_find_all_active_filters_on_flag(category_repository, mock_cursor, category_row) -> None:
    mock_cursor.fetchall.return_value = [category_row]

    assert len(category_repository.find_all_active()) == 1
    assert "WHERE active = 1" in mock_cursor.execute.call_args[0][0]


def test_update_writes_flag_as_integer(category_repository, mock_cursor) -> None:
    mock_cursor.rowcount = 1

    assert category_repository.update(Category(id=3, name="Tools", description="Hand tools", active=False)) is True
    assert mock_cursor.execute.call_args[0][1] == ("Tools", "Hand tools", 0, 3)


def test_update_missing_row_returns_false(category_repository, mock_cursor, sample_category) -> None:
    mock_cursor.rowcount = 0

    assert category_repository.update(sample_category) is False


def test_delete(category_repository, mock_cursor) -> None:
    mock_cursor.rowcount = 1

    assert category_repository.delete(1) is True
    query, params = mock_cursor.execute.call_args[0]
    assert query == "DELETE FROM categories WHERE id = %s"
    assert params == (1,)


def test_exists_uses_categories_table(category_repository, mock_cursor) -> None:
    mock_cursor.fetchone.return_value = (1,)

    assert category_repository.exists(MySQLCategoryRepository.TABLE_NAME, 1) is True
    assert mock_cursor.execute.call_args[0][0] == "SELECT COUNT(*) FROM categories WHERE id = %s"


def test_create_tables(category_repository, mock_connection, mock_cursor) -> None:
    category_repository.create_tables()

    assert "CREATE TABLE IF NOT EXISTS categories" in mock_cursor.execute.call_args[0][0]
    mock_connection.commit.assert_called_once()
