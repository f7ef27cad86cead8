"""Auction layer ORM model: bids."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from diamond_shop.infrastructure.database import Base

from .base import SoftDeleteMixin


class Bid(SoftDeleteMixin, Base):
    """A customer's bid on a diamond."""

    __tablename__ = "bids"

    bid_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    account_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("accounts.account_id"), nullable=False
    )
    diamond_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("diamonds.diamond_id"), nullable=False, index=True
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    placed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    account: Mapped["Account"] = relationship(back_populates="bids")
    diamond: Mapped["Diamond"] = relationship(back_populates="bids")
