"""SQLAlchemy repository for Account."""

from __future__ import annotations

from diamond_shop.infrastructure.persistence.models.accounts import Account

from .base import SqlRepository


class SqlAccountRepository(SqlRepository[Account]):
    model = Account
