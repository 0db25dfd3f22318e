"""Shared test fixtures for all test modules."""

import contextlib

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import opencloset.models  # noqa: F401
from opencloset.core import database as db_module
from opencloset.core.database import Base, get_db

# Create an in-memory SQLite engine with StaticPool so all connections
# share the same database state and there are no file-locking issues.
_test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
_TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_test_engine)


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test and truncate all data after.

    Patches the module-level engine and SessionLocal so all application code
    uses the in-memory test database. Clears data after each test.
    """
    original_engine = db_module.engine
    original_session = db_module.SessionLocal
    db_module.engine = _test_engine
    db_module.SessionLocal = _TestSessionLocal

    db_module.init_db()

    yield
    with _test_engine.connect() as conn:
        conn.execute(text("PRAGMA foreign_keys = OFF"))
        for table in reversed(Base.metadata.sorted_tables):
            with contextlib.suppress(OperationalError):
                conn.execute(table.delete())
        conn.execute(text("PRAGMA foreign_keys = ON"))
        conn.commit()

    db_module.engine = original_engine
    db_module.SessionLocal = original_session


@pytest.fixture
def db_session():
    """Create a database session for direct repository testing."""
    gen = get_db()
    db = next(gen)
    try:
        yield db
    finally:
        for _ in gen:
            pass


def _add(session, obj):
    session.add(obj)
    session.commit()
    session.refresh(obj)
    return obj


@pytest.fixture
def make_coupon(db_session):
    """Factory for coupons stored with a raw code."""
    from opencloset.models.coupon import Coupon

    def _make(code="ABCT-123F-XYQV", **kwargs):
        kwargs.setdefault("type", "default")
        kwargs.setdefault("price", 0)
        return _add(db_session, Coupon(code=code, **kwargs))

    return _make


@pytest.fixture
def make_event(db_session):
    from opencloset.models.event import Event

    def _make(**kwargs):
        kwargs.setdefault("title", "Test Event")
        kwargs.setdefault("free_shipping", False)
        return _add(db_session, Event(**kwargs))

    return _make


@pytest.fixture
def make_user(db_session):
    from opencloset.models.user import User

    def _make(**kwargs):
        kwargs.setdefault("name", "Test User")
        return _add(db_session, User(**kwargs))

    return _make


@pytest.fixture
def make_clothes(db_session):
    from opencloset.models.clothes import Clothes

    def _make(code, price, category="jacket", **kwargs):
        return _add(db_session, Clothes(code=code, price=price, category=category, **kwargs))

    return _make


@pytest.fixture
def make_order(db_session):
    from opencloset.models.order import Order

    def _make(**kwargs):
        kwargs.setdefault("online", False)
        kwargs.setdefault("additional_day", 0)
        return _add(db_session, Order(**kwargs))

    return _make


@pytest.fixture
def make_detail(db_session):
    from opencloset.models.order import OrderDetail

    def _make(order, name, price, final_price=None, **kwargs):
        return _add(
            db_session,
            OrderDetail(
                order_id=order.id,
                name=name,
                price=price,
                final_price=price if final_price is None else final_price,
                **kwargs,
            ),
        )

    return _make
