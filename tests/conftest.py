import os

#must be set before storefront.utils.settings is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "true"
os.environ["NOTIFICATION_CHANNEL"] = "email"

from collections.abc import Generator
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.data.database import Base, engine
from storefront.domain.entities import Cart, Category, Product, User
from storefront.main import app


@pytest.fixture(autouse=True)
def clean_db() -> Generator[None, None, None]:
    """Fresh schema for every test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def category() -> Category:
    return Category(name="Peripherals")


@pytest.fixture
def keyboard(category) -> Product:
    return Product(name="Keyboard", price=Decimal("199.99"), category=category)


@pytest.fixture
def mouse() -> Product:
    return Product(name="Mouse", price=Decimal("49.50"))


@pytest.fixture
def cart() -> Cart:
    return Cart()


@pytest.fixture
def user() -> User:
    return User(name="Rayhan", email="rayhan@example.com", password="secret-password")
