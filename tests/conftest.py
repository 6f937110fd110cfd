# tests/conftest.py
from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock, Mock

import pytest

from src.catalog_domain.application.category_service import CategoryApplicationService
from src.catalog_domain.application.product_service import ProductApplicationService
from src.catalog_domain.domain.entities.category import Category
from src.catalog_domain.domain.entities.product import Product
from src.catalog_domain.domain.entities.product_status import ProductStatus
from src.catalog_domain.infrastructure.persistence.mysql_category_repository import (
    MySQLCategoryRepository,
)
from src.catalog_domain.infrastructure.persistence.mysql_product_repository import (
    MySQLProductRepository,
)
from src.common.config.settings import settings
from src.common.utils.password_hasher import PasswordHasher
from src.user_domain.application.user_service import UserApplicationService
from src.user_domain.domain.entities.user import User
from src.user_domain.domain.entities.user_role import UserRole
from src.user_domain.infrastructure.persistence.mysql_user_repository import (
    MySQLUserRepository,
)


@pytest.fixture(autouse=True)
def mock_settings_db_info(mocker) -> None:
    """Keeps tests away from any real database configured in .env."""
    mocker.patch.object(settings, "DB_HOST", "localhost")
    mocker.patch.object(settings, "DB_DATABASE", "test_db")
    mocker.patch.object(settings, "DB_USER", "test_user")
    mocker.patch.object(settings, "DB_PASSWORD", "test_password")


@pytest.fixture
def mock_category_repository() -> Mock:
    """Mock for MySQLCategoryRepository."""
    return Mock(spec=MySQLCategoryRepository)


@pytest.fixture
def mock_product_repository() -> Mock:
    """Mock for MySQLProductRepository."""
    return Mock(spec=MySQLProductRepository)


@pytest.fixture
def mock_user_repository() -> Mock:
    """Mock for MySQLUserRepository."""
    return Mock(spec=MySQLUserRepository)


@pytest.fixture
def fast_password_hasher() -> PasswordHasher:
    """Lowest bcrypt cost, keeps hashing tests quick."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def category_service(mock_category_repository) -> CategoryApplicationService:
    return CategoryApplicationService(category_repo=mock_category_repository)


@pytest.fixture
def product_service(mock_product_repository, mock_category_repository) -> ProductApplicationService:
    return ProductApplicationService(product_repo=mock_product_repository, category_repo=mock_category_repository)


@pytest.fixture
def user_service(mock_user_repository, fast_password_hasher) -> UserApplicationService:
    return UserApplicationService(user_repo=mock_user_repository, password_hasher=fast_password_hasher)


@pytest.fixture
def mock_connection() -> MagicMock:
    """MySQL connection whose cursor() always returns the same mock cursor."""
    connection = MagicMock()
    connection.cursor.return_value = MagicMock()
    return connection


@pytest.fixture
def mock_cursor(mock_connection) -> MagicMock:
    return mock_connection.cursor.return_value


@pytest.fixture
def connection_factory(mock_connection) -> Mock:
    return Mock(return_value=mock_connection)


@pytest.fixture
def sample_category() -> Category:
    return Category(id=1, name="Electronics", description="Devices", active=True)


@pytest.fixture
def inactive_category() -> Category:
    return Category(id=2, name="Discontinued", description="Old stock", active=False)


@pytest.fixture
def sample_product() -> Product:
    return Product(
        id=1,
        sku="SKU-001",
        name="Laptop",
        description="Gaming laptop",
        price=Decimal("1299.99"),
        stock=10,
        reserved_stock=0,
        min_stock=5,
        location="A-01",
        status=ProductStatus.AVAILABLE,
        category_id=1,
        last_update=datetime(2024, 1, 1, 10, 0, 0),
    )


@pytest.fixture
def sample_product_row() -> dict:
    """Dictionary cursor row for sample_product."""
    return {
        "id": 1,
        "sku": "SKU-001",
        "name": "Laptop",
        "description": "Gaming laptop",
        "price": Decimal("1299.99"),
        "stock": 10,
        "reserved_stock": 0,
        "min_stock": 5,
        "location": "A-01",
        "status": "AVAILABLE",
        "category_id": 1,
        "last_update": datetime(2024, 1, 1, 10, 0, 0),
    }


@pytest.fixture
def sample_user() -> User:
    return User(
        id=1,
        username="admin",
        password="$2b$04$abcdefghijklmnopqrstuuN3bWg1m5s1XQ6M0pQk3q6VY7x2KQ5xS",
        email="admin@test.com",
        full_name="Admin User",
        role=UserRole.MANAGER,
        created_at=datetime(2024, 1, 1, 9, 0, 0),
    )


@pytest.fixture
def sample_user_row(sample_user) -> dict:
    return {
        "id": sample_user.id,
        "username": sample_user.username,
        "password": sample_user.password,
        "email": sample_user.email,
        "full_name": sample_user.full_name,
        "role": "MANAGER",
        "created_at": sample_user.created_at,
    }
