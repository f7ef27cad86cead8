"""Concrete SQLAlchemy repository implementations.

Exports the generic SqlRepository, one thin repository per entity, and the
get_repositories() factory function for wiring at the application boundary
(FastAPI dependency injection).
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .accounts import SqlAccountRepository
from .base import SqlRepository
from .bids import SqlBidRepository
from .diamonds import SqlDiamondRepository
from .orders import SqlOrderRepository, SqlTransactionRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    accounts: SqlAccountRepository
    diamonds: SqlDiamondRepository
    bids: SqlBidRepository
    orders: SqlOrderRepository
    transactions: SqlTransactionRepository


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

    Intended for use as a FastAPI dependency:

        async def handler(
            session: AsyncSession = Depends(get_session),
        ) -> ...:
            repos = get_repositories(session)
            bid = await repos.bids.get_by_id(bid_id, "account")
    """
    return Repositories(
        accounts=SqlAccountRepository(session),
        diamonds=SqlDiamondRepository(session),
        bids=SqlBidRepository(session),
        orders=SqlOrderRepository(session),
        transactions=SqlTransactionRepository(session),
    )


__all__ = [
    "SqlRepository",
    "SqlAccountRepository",
    "SqlDiamondRepository",
    "SqlBidRepository",
    "SqlOrderRepository",
    "SqlTransactionRepository",
    "Repositories",
    "get_repositories",
]
