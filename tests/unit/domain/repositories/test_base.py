"""Tests for diamond_shop/domain/repositories/base.py."""

from abc import ABCMeta

import pytest

from diamond_shop.domain.repositories.base import Repository

_READS = ("get_all", "get_by_id", "find_single", "count", "to_list")
_VIEWS = ("find_all", "filter_all", "get_all_without_paging", "filter_by_expression", "get")
_WRITES = (
    "add",
    "add_range",
    "stage_update",
    "stage_update_and_commit",
    "stage_update_range",
    "soft_remove",
    "soft_remove_range",
    "remove",
)


def _stub(name):
    async def method(self, *args, **kwargs):
        return None

    method.__name__ = name
    return method


def test_repository_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        Repository()  # type: ignore[abstract]


def test_repository_declares_full_contract():
    assert Repository.__abstractmethods__ == frozenset(_READS + _VIEWS + _WRITES)


def test_repository_concrete_subclass_must_implement_all_methods():
    partial = ABCMeta("_Partial", (Repository,), {name: _stub(name) for name in _READS})
    with pytest.raises(TypeError):
        partial()


def test_repository_full_concrete_subclass_instantiates():
    full = ABCMeta(
        "_Full", (Repository,), {name: _stub(name) for name in _READS + _VIEWS + _WRITES}
    )
    assert full() is not None


def test_update_operations_are_distinctly_named():
    # Staging and staging-with-commit must never be confused by name.
    assert "update" not in Repository.__abstractmethods__
