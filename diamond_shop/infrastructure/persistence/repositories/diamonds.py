"""SQLAlchemy repository for Diamond."""

from __future__ import annotations

from diamond_shop.infrastructure.persistence.models.catalog import Diamond

from .base import SqlRepository


class SqlDiamondRepository(SqlRepository[Diamond]):
    model = Diamond
