"""Fixtures backing repository tests with an in-memory SQLite database."""

from collections.abc import AsyncGenerator
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import diamond_shop.infrastructure.persistence  # noqa: F401  (registers all mappers)
from diamond_shop.infrastructure.database import Base
from diamond_shop.infrastructure.persistence.models import Account, Bid, Diamond


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
async def account(session: AsyncSession) -> Account:
    row = Account(email="buyer@example.com", username="buyer", password_hash="x" * 32)
    session.add(row)
    await session.flush()
    return row


@pytest.fixture
async def diamond(session: AsyncSession) -> Diamond:
    row = Diamond(
        name="Round Brilliant",
        carat=1.02,
        color="E",
        clarity="VS1",
        cut="Excellent",
        price=Decimal("8400.00"),
    )
    session.add(row)
    await session.flush()
    return row


@pytest.fixture
async def bids(session: AsyncSession, account: Account, diamond: Diamond) -> list[Bid]:
    """Twenty-five committed bids with amounts 1..25, inserted out of order."""
    amounts = [13, 2, 25, 7, 19, 1, 11, 22, 4, 16, 9, 24, 3, 18, 6, 14, 21, 8, 12, 5, 17, 10, 23, 15, 20]
    rows = [Bid(account=account, diamond=diamond, amount=Decimal(a)) for a in amounts]
    session.add_all(rows)
    await session.commit()
    return rows
