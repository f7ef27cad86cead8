"""Catalog layer ORM model: diamonds."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Double, Integer, Numeric, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from diamond_shop.infrastructure.database import Base

from .base import SoftDeleteMixin


class Diamond(SoftDeleteMixin, Base):
    """A diamond offered for sale or auction.

    color, clarity and cut follow the GIA grading vocabulary (e.g. "D", "VS1",
    "Excellent"); they are free text at this layer.
    """

    __tablename__ = "diamonds"

    diamond_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    carat: Mapped[float] = mapped_column(Double, nullable=False)
    color: Mapped[str] = mapped_column(Text, nullable=False)
    clarity: Mapped[str] = mapped_column(Text, nullable=False)
    cut: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    bids: Mapped[list["Bid"]] = relationship(back_populates="diamond")
