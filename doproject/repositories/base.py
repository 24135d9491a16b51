from __future__ import annotations
from typing import Any, Generic, TypeVar
from sqlalchemy import select, func, update as sa_update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.inspection import inspect as sa_inspect

from doproject.exceptions import NotFoundError, StorageError

T = TypeVar("T")  # SQLAlchemy model class (Declarative)

class BaseRepository(Generic[T]):
    """
    Shared async repository for a single SQLAlchemy model.
    - Accepts model instances only (no dicts / pydantic objects).
    - Never commits; the service owns the transaction.
    - SQLAlchemy errors surface as StorageError.
    """

    not_found_message = "Not found"

    def __init__(self, model: type[T]) -> None:
        self.model = model

    @property
    def pk_attr(self):
        """The mapped primary-key attribute, e.g. ``Project.id``."""
        mapper = sa_inspect(self.model)
        if len(mapper.primary_key) != 1:
            raise ValueError(f"{self.model.__name__}: composite primary key is not supported")
        return mapper.get_property_by_column(mapper.primary_key[0]).class_attribute

    async def _execute(self, session: AsyncSession, stmt):
        try:
            return await session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    # ------------------------ Read ------------------------

    async def get(self, session: AsyncSession, pk: Any) -> T | None:
        """Fetch one row by primary key."""
        try:
            return await session.get(self.model, pk)
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    async def exists(self, session: AsyncSession, **filters: Any) -> bool:
        """Equality filters only."""
        stmt = select(func.count()).select_from(self.model).filter_by(**filters)
        res = await self._execute(session, stmt)
        return int(res.scalar_one()) > 0

    async def list(self, session: AsyncSession, *, where: dict[str, Any] | None = None) -> list[T]:
        """All rows matching the equality filters, in primary-key order."""
        stmt = select(self.model)
        if where:
            stmt = stmt.filter_by(**where)
        res = await self._execute(session, stmt.order_by(self.pk_attr))
        return list(res.scalars().all())

    # ------------------------ Write ------------------------

    async def create(self, session: AsyncSession, obj: T) -> T:
        """
        Insert a new row. Only transient (never persisted) instances are accepted.
        The primary key is populated by the flush.
        """
        if not sa_inspect(obj).transient:
            raise ValueError("create(): expected a transient (new) SQLAlchemy model instance")
        session.add(obj)
        try:
            await session.flush()
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc
        return obj

    async def update(self, session: AsyncSession, pk: Any, fields: dict[str, Any]) -> None:
        """
        UPDATE ... WHERE pk = :pk with the given column values.
        Raises NotFoundError when no row matches.
        """
        if not fields:
            raise ValueError("update(): 'fields' must not be empty")
        stmt = (
            sa_update(self.model)
            .where(self.pk_attr == pk)
            .values(**fields)
            .execution_options(synchronize_session="evaluate")
        )
        res = await self._execute(session, stmt)
        if (res.rowcount or 0) == 0:
            raise NotFoundError(self.not_found_message)
