"""SQLAlchemy repositories for Order and Transaction."""

from __future__ import annotations

from diamond_shop.infrastructure.persistence.models.orders import Order, Transaction

from .base import SqlRepository


class SqlOrderRepository(SqlRepository[Order]):
    model = Order


class SqlTransactionRepository(SqlRepository[Transaction]):
    """Transactions are append-only; soft_remove() raises NotSoftDeletableError."""

    model = Transaction
