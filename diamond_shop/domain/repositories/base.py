"""Generic repository base interface.

Repository[T] is the root abstraction for all data-access interfaces in this
domain layer.  Concrete implementations live in
diamond_shop/infrastructure/persistence/ and are wired at the application
boundary via dependency injection.

Design notes:
  - All I/O methods are async to accommodate async database drivers
    (asyncpg / SQLAlchemy async).  Query-composition methods are sync: they
    only build a view, the caller materialises it with to_list().
  - T is the persisted entity type.  The repository knows nothing about its
    attributes beyond an identity and, for soft deletes, an is_deleted flag.
  - Adds, updates and removes are staged on the shared persistence context.
    Committing is the caller's unit-of-work concern; the one exception is
    stage_update_and_commit(), whose name says so.
  - filter_all() is the canonical paging entry point (0-based page index).
    get() is the legacy 1-based entry point and is deprecated.
  - Nothing here catches persistence errors.  Misses return None; unknown
    field or relation names raise UnknownFieldError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")

# Implementation-defined query types: a boolean filter clause over T, a
# relation reference (attribute name or attribute), and an un-executed
# composable query yielding T.
Predicate = Any
Include = Union[str, Any]
QueryView = Any


class Repository(ABC, Generic[T]):
    """Abstract data-access contract for one entity collection."""

    # ------------------------------------------------------------------ #
    # Reads                                                                #
    # ------------------------------------------------------------------ #

    @abstractmethod
    async def get_all(self) -> list[T]:
        """Return every entity, soft-deleted ones included."""

    @abstractmethod
    async def get_by_id(self, id: Any, *includes: Include) -> T | None:
        """Return the entity with the given identity, or None if not found."""

    @abstractmethod
    async def find_single(
        self, predicate: Optional[Predicate] = None, *includes: Include
    ) -> T | None:
        """Return the only entity matching predicate, or None.

        More than one match is a caller error; implementations raise rather
        than pick one.
        """

    @abstractmethod
    async def count(self, predicate: Optional[Predicate] = None) -> int:
        """Return the number of entities matching predicate."""

    @abstractmethod
    async def to_list(self, view: QueryView) -> list[T]:
        """Execute a view built by this repository and return its entities."""

    # ------------------------------------------------------------------ #
    # Query composition                                                    #
    # ------------------------------------------------------------------ #

    @abstractmethod
    def find_all(self, *includes: Include) -> QueryView:
        """Unfiltered view with the given relations eagerly loaded."""

    @abstractmethod
    def filter_all(
        self,
        is_ascending: Optional[bool] = None,
        order_by: Optional[str] = None,
        predicate: Optional[Predicate] = None,
        includes: Optional[Sequence[Include]] = None,
        page_index: int = 0,
        page_size: int = 10,
    ) -> QueryView:
        """Includes, then predicate, then order by field name, then one page.

        page_index is 0-based.  page_size <= 0 returns the unpaged view.
        is_ascending defaults to True when None.
        """

    @abstractmethod
    def get_all_without_paging(
        self,
        is_ascending: Optional[bool] = None,
        order_by: Optional[str] = None,
        predicate: Optional[Predicate] = None,
        includes: Optional[Sequence[Include]] = None,
    ) -> QueryView:
        """Same composition as filter_all() without the paging step."""

    @abstractmethod
    def filter_by_expression(
        self, predicate: Predicate, includes: Optional[Sequence[Include]] = None
    ) -> QueryView:
        """Includes and predicate only; no ordering or paging."""

    @abstractmethod
    async def get(
        self,
        filter: Optional[Predicate] = None,
        order_by: Optional[Callable[[QueryView], QueryView]] = None,
        include_properties: str = "",
        page_index: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> list[T]:
        """Deprecated 1-based paging entry point; use filter_all()."""

    # ------------------------------------------------------------------ #
    # Writes                                                               #
    # ------------------------------------------------------------------ #

    @abstractmethod
    async def add(self, entity: T) -> T:
        """Stage a new entity for insertion and return it."""

    @abstractmethod
    async def add_range(self, entities: Sequence[T]) -> None:
        """Stage several new entities for insertion."""

    @abstractmethod
    async def stage_update(self, entity: T) -> T:
        """Stage changes to an existing entity without committing."""

    @abstractmethod
    async def stage_update_and_commit(self, entity: T) -> T:
        """Stage changes to an existing entity and commit immediately."""

    @abstractmethod
    async def stage_update_range(self, entities: Sequence[T]) -> list[T]:
        """Stage changes to several existing entities without committing."""

    @abstractmethod
    async def soft_remove(self, entity: T) -> T:
        """Flag the entity as deleted and stage the change."""

    @abstractmethod
    async def soft_remove_range(self, entities: Sequence[T]) -> list[T]:
        """Flag several entities as deleted and stage the changes."""

    @abstractmethod
    async def remove(self, entity: T) -> T:
        """Stage physical deletion of the entity and return it."""
