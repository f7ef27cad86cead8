"""SQLAlchemy repository for Bid."""

from __future__ import annotations

from diamond_shop.infrastructure.persistence.models.auctions import Bid

from .base import SqlRepository


class SqlBidRepository(SqlRepository[Bid]):
    model = Bid
