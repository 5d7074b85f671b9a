import os

# must be set before storefront.* is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RAZORPAY_KEY_ID", "rzp_test_key")
os.environ.setdefault("RAZORPAY_KEY_SECRET", "rzp_test_secret")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.api import create_app
from storefront.data.database import Base, get_db
from storefront.data.models import CategoryModel, ProductModel, ProfileModel
from storefront.services.payment_client import PaymentClient

from fakes import FakeHTTPSession, FakeIdentity, FakeNotifier, OTHER_USER_ID, USER_ID


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def users(db):
    db.add_all(
        [
            ProfileModel(id=USER_ID, email="asha@example.com", full_name="Asha"),
            ProfileModel(id=OTHER_USER_ID, email="ravi@example.com", full_name="Ravi"),
        ]
    )
    db.commit()
    return USER_ID, OTHER_USER_ID


@pytest.fixture
def products(db):
    category = CategoryModel(name="Staples")
    rice = ProductModel(name="Basmati Rice", price=Decimal("20.00"), unit="kg", category=category)
    dal = ProductModel(name="Toor Dal", price=Decimal("15.00"), unit="500 g", category=category, image_url="/dal.png")
    db.add_all([category, rice, dal])
    db.commit()
    return {"rice": rice.id, "dal": dal.id}


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def identity():
    return FakeIdentity()


@pytest.fixture
def gateway_session():
    return FakeHTTPSession()


@pytest.fixture
def client(db, identity, gateway_session, notifier):
    payment_client = PaymentClient(
        key_id="rzp_test_key",
        key_secret="rzp_test_secret",
        base_url="https://gateway.test/v1",
        session=gateway_session,
    )
    app = create_app(
        identity_client=identity,
        payment_client=payment_client,
        notification_service=notifier,
    )

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth(identity, users):
    """Bearer headers for the two fixture users."""
    return {
        user_id: {"Authorization": f"Bearer {identity.issue_token(user_id)}"}
        for user_id in users
    }
