import os
import tempfile
import uuid

_DB_DIR = tempfile.mkdtemp(prefix="orders-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient
from app.core.database import SessionLocal, reset_db
from app.models.order import Order, OrderItem
from app.models.product import Product, ProductFeature, ProductImage
from app.models.user import User
from tests.helpers import count_rows


@pytest.fixture(autouse=True)
def clean_database():
    """Recreate every table before each test."""
    reset_db()
    yield


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_user(db):
    def _make(name="Ana Souza", email=None):
        user = User(
            name=name,
            email=email or f"{uuid.uuid4().hex[:10]}@example.com",
            password_hash="not-a-real-hash",
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture()
def make_product(db):
    def _make(price=1000, available_quantity=5, name="Widget", category="Tools"):
        product = Product(
            user_id=uuid.uuid4(),
            name=name,
            price=price,
            available_quantity=available_quantity,
            description=f"{name} description",
            category=category,
            features=[
                ProductFeature(position=i, name=f"feature-{i}", description="spec")
                for i in range(3)
            ],
            images=[
                ProductImage(position=0, url="https://example.com/p.png", description="front")
            ],
        )
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make


@pytest.fixture()
def order_tables(db):
    """Snapshot of the order tables, used to assert that nothing was written."""

    def _counts():
        return count_rows(db, Order), count_rows(db, OrderItem)

    return _counts
