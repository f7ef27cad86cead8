"""Tests for the get_repositories() DI factory."""

from unittest.mock import AsyncMock

from diamond_shop.infrastructure.persistence.repositories import (
    Repositories,
    SqlAccountRepository,
    SqlBidRepository,
    SqlDiamondRepository,
    SqlOrderRepository,
    SqlTransactionRepository,
    get_repositories,
)


def _repos():
    return get_repositories(AsyncMock())


def test_get_repositories_returns_repositories_instance():
    assert isinstance(_repos(), Repositories)


def test_repositories_accounts_is_correct_type():
    assert isinstance(_repos().accounts, SqlAccountRepository)


def test_repositories_diamonds_is_correct_type():
    assert isinstance(_repos().diamonds, SqlDiamondRepository)


def test_repositories_bids_is_correct_type():
    assert isinstance(_repos().bids, SqlBidRepository)


def test_repositories_orders_is_correct_type():
    assert isinstance(_repos().orders, SqlOrderRepository)


def test_repositories_transactions_is_correct_type():
    assert isinstance(_repos().transactions, SqlTransactionRepository)


def test_repositories_share_one_session():
    session = AsyncMock()
    repos = get_repositories(session)
    assert repos.accounts._session is session
    assert repos.transactions._session is session


def test_repositories_dataclass_has_five_fields():
    assert len(Repositories.__dataclass_fields__) == 5
