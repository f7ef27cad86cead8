"""ORM model registry: imports all layer modules so every mapper class is
registered with Base.metadata before Alembic or SQLAlchemy runs.

Import order follows the dependency graph (referenced tables first).
"""

from diamond_shop.infrastructure.persistence.models.base import SoftDeleteMixin
from diamond_shop.infrastructure.persistence.models.accounts import Account
from diamond_shop.infrastructure.persistence.models.catalog import Diamond
from diamond_shop.infrastructure.persistence.models.auctions import Bid
from diamond_shop.infrastructure.persistence.models.orders import Order, Transaction

__all__ = [
    "SoftDeleteMixin",
    # Accounts
    "Account",
    # Catalog
    "Diamond",
    # Auctions
    "Bid",
    # Orders
    "Order",
    "Transaction",
]
