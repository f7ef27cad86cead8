"""Tests for the entity-specific repositories: model binding and session interaction."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from diamond_shop.infrastructure.persistence.models import (
    Account,
    Bid,
    Diamond,
    Order,
    Transaction,
)
from diamond_shop.infrastructure.persistence.repositories import (
    SqlAccountRepository,
    SqlBidRepository,
    SqlDiamondRepository,
    SqlOrderRepository,
    SqlRepository,
    SqlTransactionRepository,
)


def _mock_session(scalar_result=None):
    session = MagicMock()
    session.get = AsyncMock(return_value=scalar_result)
    session.merge = AsyncMock(side_effect=lambda entity: entity)
    session.commit = AsyncMock()
    session.delete = AsyncMock()
    session.execute = AsyncMock(
        return_value=MagicMock(scalar_one_or_none=MagicMock(return_value=scalar_result))
    )
    return session


@pytest.mark.parametrize(
    "repo_cls, model",
    [
        (SqlAccountRepository, Account),
        (SqlDiamondRepository, Diamond),
        (SqlBidRepository, Bid),
        (SqlOrderRepository, Order),
        (SqlTransactionRepository, Transaction),
    ],
)
def test_entity_repository_is_bound_to_its_model(repo_cls, model):
    repo = repo_cls(_mock_session())
    assert issubclass(repo_cls, SqlRepository)
    assert repo.model is model


async def test_get_by_id_returns_none_when_not_found():
    repo = SqlDiamondRepository(_mock_session(scalar_result=None))
    assert await repo.get_by_id(1) is None


async def test_get_by_id_delegates_to_session_get():
    row = SimpleNamespace(diamond_id=7)
    session = _mock_session(scalar_result=row)
    assert await SqlDiamondRepository(session).get_by_id(7) is row
    assert session.get.await_args.args == (Diamond, 7)


async def test_add_stages_without_committing():
    session = _mock_session()
    row = object()
    assert await SqlAccountRepository(session).add(row) is row
    session.add.assert_called_once_with(row)
    session.commit.assert_not_awaited()


async def test_stage_update_does_not_commit():
    session = _mock_session()
    await SqlOrderRepository(session).stage_update(object())
    session.merge.assert_awaited_once()
    session.commit.assert_not_awaited()


async def test_stage_update_and_commit_commits_once():
    session = _mock_session()
    await SqlOrderRepository(session).stage_update_and_commit(object())
    session.merge.assert_awaited_once()
    session.commit.assert_awaited_once()


async def test_persistence_errors_propagate_unchanged():
    session = _mock_session()
    session.commit.side_effect = RuntimeError("connection reset")
    with pytest.raises(RuntimeError, match="connection reset"):
        await SqlBidRepository(session).stage_update_and_commit(object())


async def test_find_single_returns_none_on_miss():
    repo = SqlAccountRepository(_mock_session(scalar_result=None))
    assert await repo.find_single(Account.email == "nobody@example.com") is None
