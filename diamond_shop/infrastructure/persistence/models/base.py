"""Column mixins shared by ORM models."""

from __future__ import annotations

from sqlalchemy import Boolean
from sqlalchemy.orm import Mapped, mapped_column


class SoftDeleteMixin:
    """Logical-delete flag.

    Rows carrying the flag are never physically removed by a soft delete;
    readers decide whether to filter them out.
    """

    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
