"""SQLAlchemy implementation of the generic Repository contract.

SqlRepository is bound to one ORM model and one AsyncSession.  Query
composition methods return un-executed Select statements (views) that callers
may refine further before materialising them with to_list().

Field and relation names are resolved against the model's mapper, so an
unknown name fails when the view is built rather than when it is executed.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Optional, TypeVar

from sqlalchemy import Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Load, selectinload

from diamond_shop.domain.exceptions import NotSoftDeletableError, UnknownFieldError
from diamond_shop.domain.repositories.base import Include, Predicate, Repository
from diamond_shop.infrastructure.database import Base, settings
from diamond_shop.infrastructure.persistence.models.base import SoftDeleteMixin

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class SqlRepository(Repository[ModelT]):
    """Generic repository over a single ORM model.

    Subclasses bind the model with a class attribute:

        class SqlBidRepository(SqlRepository[Bid]):
            model = Bid

    or an instance can be bound ad hoc with SqlRepository(session, Bid).
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession, model: type[ModelT] | None = None) -> None:
        if model is not None:
            self.model = model
        if getattr(self, "model", None) is None:
            raise TypeError(f"{type(self).__name__} is not bound to an ORM model")
        self._session = session

    # ------------------------------------------------------------------ #
    # Name resolution                                                      #
    # ------------------------------------------------------------------ #

    def _column(self, name: str) -> Any:
        """Return the mapped column attribute called name."""
        if name not in inspect(self.model).column_attrs:
            raise UnknownFieldError(self.model.__name__, name)
        return getattr(self.model, name)

    def _load_option(self, include: Include) -> Load:
        """Eager-load option for a relation name, dotted path, or attribute."""
        if not isinstance(include, str):
            return selectinload(include)
        option = None
        model = self.model
        for name in include.split("."):
            relationships = inspect(model).relationships
            if name not in relationships:
                raise UnknownFieldError(model.__name__, name, kind="relation")
            attr = getattr(model, name)
            option = selectinload(attr) if option is None else option.selectinload(attr)
            model = relationships[name].mapper.class_
        return option

    def _with_includes(self, stmt: Select, includes: Iterable[Include]) -> Select:
        options = [self._load_option(include) for include in includes]
        return stmt.options(*options) if options else stmt

    def _apply_order(self, stmt: Select, order_by: str, is_ascending: bool) -> Select:
        column = self._column(order_by)
        return stmt.order_by(column.asc() if is_ascending else column.desc())

    # ------------------------------------------------------------------ #
    # Reads                                                                #
    # ------------------------------------------------------------------ #

    async def to_list(self, view: Select) -> list[ModelT]:
        """Execute view and return its rows.

        Rows come back attached to the session: changes a caller makes to them
        are flushed on the next commit.  Copy or expunge them to keep them
        read-only.
        """
        result = await self._session.scalars(view)
        return list(result.all())

    async def get_all(self) -> list[ModelT]:
        return await self.to_list(select(self.model))

    async def get_by_id(self, id: Any, *includes: Include) -> ModelT | None:
        options = [self._load_option(include) for include in includes]
        return await self._session.get(self.model, id, options=options)

    async def find_single(
        self, predicate: Optional[Predicate] = None, *includes: Include
    ) -> ModelT | None:
        stmt = self.find_all(*includes)
        if predicate is not None:
            stmt = stmt.where(predicate)
        result = await self._session.execute(stmt)
        # Raises MultipleResultsFound when the predicate is not selective enough.
        return result.scalar_one_or_none()

    async def count(self, predicate: Optional[Predicate] = None) -> int:
        stmt = select(func.count()).select_from(self.model)
        if predicate is not None:
            stmt = stmt.where(predicate)
        return await self._session.scalar(stmt) or 0

    # ------------------------------------------------------------------ #
    # Query composition                                                    #
    # ------------------------------------------------------------------ #

    def find_all(self, *includes: Include) -> Select:
        """Unfiltered view with includes eagerly loaded.

        The view itself holds no session state; the rows to_list() returns
        from it are tracked by the session.
        """
        return self._with_includes(select(self.model), includes)

    def filter_all(
        self,
        is_ascending: Optional[bool] = None,
        order_by: Optional[str] = None,
        predicate: Optional[Predicate] = None,
        includes: Optional[Sequence[Include]] = None,
        page_index: int = 0,
        page_size: int = 10,
    ) -> Select:
        if page_index < 0:
            raise ValueError(f"page_index must be >= 0, got {page_index}")
        stmt = self.get_all_without_paging(is_ascending, order_by, predicate, includes)
        if page_size <= 0:
            return stmt
        return stmt.offset(page_index * page_size).limit(page_size)

    def get_all_without_paging(
        self,
        is_ascending: Optional[bool] = None,
        order_by: Optional[str] = None,
        predicate: Optional[Predicate] = None,
        includes: Optional[Sequence[Include]] = None,
    ) -> Select:
        stmt = self._with_includes(select(self.model), includes or ())
        if predicate is not None:
            stmt = stmt.where(predicate)
        if order_by:
            stmt = self._apply_order(stmt, order_by, True if is_ascending is None else is_ascending)
        return stmt

    def filter_by_expression(
        self, predicate: Predicate, includes: Optional[Sequence[Include]] = None
    ) -> Select:
        return self._with_includes(select(self.model), includes or ()).where(predicate)

    async def get(
        self,
        filter: Optional[Predicate] = None,
        order_by: Optional[Callable[[Select], Select]] = None,
        include_properties: str = "",
        page_index: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> list[ModelT]:
        """Legacy paging entry point.

        page_index is 1-based (values below 1 mean the first page) and an
        invalid page_size falls back to settings.default_page_size.  Paging
        only applies when both are given.  Prefer filter_all().
        """
        warnings.warn(
            "get() is deprecated; use filter_all() with a 0-based page_index",
            DeprecationWarning,
            stacklevel=2,
        )
        logger.warning("Deprecated get() paging used on %s repository", self.model.__name__)
        stmt = select(self.model)
        if filter is not None:
            stmt = stmt.where(filter)
        names = [name.strip() for name in include_properties.split(",") if name.strip()]
        stmt = self._with_includes(stmt, names)
        if order_by is not None:
            stmt = order_by(stmt)
        if page_index is not None and page_size is not None:
            index = page_index - 1 if page_index > 0 else 0
            size = page_size if page_size > 0 else settings.default_page_size
            stmt = stmt.offset(index * size).limit(size)
        return await self.to_list(stmt)

    # ------------------------------------------------------------------ #
    # Writes                                                               #
    # ------------------------------------------------------------------ #

    async def add(self, entity: ModelT) -> ModelT:
        self._session.add(entity)
        return entity

    async def add_range(self, entities: Sequence[ModelT]) -> None:
        self._session.add_all(entities)

    async def stage_update(self, entity: ModelT) -> ModelT:
        return await self._session.merge(entity)

    async def stage_update_and_commit(self, entity: ModelT) -> ModelT:
        merged = await self.stage_update(entity)
        await self._session.commit()
        logger.debug("Committed update of %s", self.model.__name__)
        return merged

    async def stage_update_range(self, entities: Sequence[ModelT]) -> list[ModelT]:
        return [await self._session.merge(entity) for entity in entities]

    async def soft_remove(self, entity: ModelT) -> ModelT:
        return (await self.soft_remove_range([entity]))[0]

    async def soft_remove_range(self, entities: Sequence[ModelT]) -> list[ModelT]:
        for entity in entities:
            if not isinstance(entity, SoftDeleteMixin):
                raise NotSoftDeletableError(type(entity).__name__)
        for entity in entities:
            entity.is_deleted = True
        logger.debug("Soft-deleting %d %s row(s)", len(entities), self.model.__name__)
        return await self.stage_update_range(entities)

    async def remove(self, entity: ModelT) -> ModelT:
        # Pending rows were never inserted; dropping them from the session is the delete.
        if entity in self._session.new:
            self._session.expunge(entity)
            return entity
        target = entity if entity in self._session else await self._session.merge(entity)
        await self._session.delete(target)
        return entity
