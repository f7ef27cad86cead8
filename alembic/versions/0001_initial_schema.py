"""Initial schema: accounts, diamonds, bids, orders, transactions.

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at(name: str = "created_at") -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.text("now()"),
        nullable=False,
    )


def _is_deleted() -> sa.Column:
    return sa.Column("is_deleted", sa.Boolean, nullable=False, server_default=sa.false())


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("account_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("email", sa.Text, nullable=False),
        sa.Column("username", sa.Text, nullable=False),
        sa.Column("password_hash", sa.Text, nullable=False),
        sa.Column("role", sa.Text, nullable=False, server_default="customer"),
        sa.Column("wallet_balance", sa.Numeric(18, 2), nullable=False, server_default="0"),
        sa.Column("refresh_token", sa.Text, nullable=True),
        _created_at(),
        _is_deleted(),
        sa.UniqueConstraint("email", name="uq_accounts_email"),
    )

    op.create_table(
        "diamonds",
        sa.Column("diamond_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("carat", sa.Double, nullable=False),
        sa.Column("color", sa.Text, nullable=False),
        sa.Column("clarity", sa.Text, nullable=False),
        sa.Column("cut", sa.Text, nullable=False),
        sa.Column("price", sa.Numeric(18, 2), nullable=False),
        _created_at(),
        _is_deleted(),
    )

    op.create_table(
        "bids",
        sa.Column("bid_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("account_id", sa.Integer, sa.ForeignKey("accounts.account_id"), nullable=False),
        sa.Column("diamond_id", sa.Integer, sa.ForeignKey("diamonds.diamond_id"), nullable=False),
        sa.Column("amount", sa.Numeric(18, 2), nullable=False),
        _created_at("placed_at"),
        _is_deleted(),
    )
    op.create_index("ix_bids_diamond_id", "bids", ["diamond_id"])

    op.create_table(
        "orders",
        sa.Column("order_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("account_id", sa.Integer, sa.ForeignKey("accounts.account_id"), nullable=False),
        sa.Column("total_price", sa.Numeric(18, 2), nullable=False),
        sa.Column("status", sa.Text, nullable=False, server_default="pending"),
        _created_at(),
        _is_deleted(),
    )

    op.create_table(
        "transactions",
        sa.Column("transaction_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("account_id", sa.Integer, sa.ForeignKey("accounts.account_id"), nullable=False),
        sa.Column("order_id", sa.Integer, sa.ForeignKey("orders.order_id"), nullable=True),
        sa.Column("amount", sa.Numeric(18, 2), nullable=False),
        sa.Column("payment_method", sa.Text, nullable=False),
        sa.Column("status", sa.Text, nullable=False, server_default="pending"),
        sa.Column("gateway_reference", sa.Text, nullable=True),
        _created_at(),
    )


def downgrade() -> None:
    op.drop_table("transactions")
    op.drop_table("orders")
    op.drop_index("ix_bids_diamond_id", table_name="bids")
    op.drop_table("bids")
    op.drop_table("diamonds")
    op.drop_table("accounts")
