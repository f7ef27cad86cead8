"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for Alembic autogenerate and SQLAlchemy mapper configuration)
and exports all repository implementations and the DI factory.
"""

from diamond_shop.infrastructure.persistence.models import *  # noqa: F401, F403
from diamond_shop.infrastructure.persistence.models import __all__ as _orm_all
from diamond_shop.infrastructure.persistence.repositories import (
    Repositories,
    SqlAccountRepository,
    SqlBidRepository,
    SqlDiamondRepository,
    SqlOrderRepository,
    SqlRepository,
    SqlTransactionRepository,
    get_repositories,
)

__all__ = _orm_all + [
    "Repositories",
    "SqlRepository",
    "SqlAccountRepository",
    "SqlDiamondRepository",
    "SqlBidRepository",
    "SqlOrderRepository",
    "SqlTransactionRepository",
    "get_repositories",
]
