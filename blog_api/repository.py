"""
Storage gateway for the Article aggregate.

``BlogRepository`` is the persistence port the services depend on;
``SQLAlchemyBlogRepository`` implements it on top of an ``AsyncSession``.

Design notes
------------
- Writes happen inside ``transaction()``: the block commits when it exits
  cleanly and rolls back when anything inside it raises.  The commit runs
  before the service returns, so a failed commit still reaches the caller
  as ``StorageError`` rather than after a success response has gone out.
- Deleting an article issues two DELETE statements (its comments, then the
  article).  Run inside ``transaction()``, both land or neither does, so no
  partial cascade is ever visible.
- Comment counts come from one grouped query over the comments table; the
  query takes no id list, so its size does not grow with the article count.
- Any ``SQLAlchemyError`` is logged and re-raised as ``StorageError``;
  services let it propagate untouched.
"""
import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from contextlib import AbstractAsyncContextManager, asynccontextmanager, contextmanager
from typing import TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.exceptions import StorageError
from blog_api.models import Article, Comment

logger = logging.getLogger(__name__)

Entity = TypeVar("Entity", Article, Comment)


class BlogRepository(ABC):
    """Persistence port for articles and their comments."""

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Commit everything done in the block on exit, or roll it all back."""

    @abstractmethod
    async def save(self, entity: Entity) -> Entity:
        """Persist *entity*; the id is assigned on its first save."""

    @abstractmethod
    async def find_by_id(self, kind: type[Entity], entity_id: int) -> Entity | None:
        """Return the entity of *kind* with *entity_id*, or None."""

    @abstractmethod
    async def exists_by_id(self, kind: type[Entity], entity_id: int) -> bool:
        """Return True when an entity of *kind* with *entity_id* exists."""

    @abstractmethod
    async def find_all(self, kind: type[Entity]) -> list[Entity]:
        """Return every entity of *kind* in insertion order."""

    @abstractmethod
    async def find_by_parent_id(self, article_id: int) -> list[Comment]:
        """Return the comments of *article_id* in insertion order."""

    @abstractmethod
    async def count_by_parent_id(self, article_id: int) -> int:
        """Return the number of comments *article_id* currently has."""

    @abstractmethod
    async def comment_counts(self) -> dict[int, int]:
        """Return ``{article_id: comment count}``; articles without comments are omitted."""

    @abstractmethod
    async def delete(self, entity: Article | Comment) -> None:
        """Remove *entity*.  Removing an Article also removes its comments."""


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Storage operation %s failed: %s", operation, exc)
        raise StorageError(operation, str(exc)) from exc


class SQLAlchemyBlogRepository(BlogRepository):
    """Implements ``BlogRepository`` with a SQLAlchemy async session."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        try:
            yield
            with _storage_errors("commit"):
                await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise

    async def save(self, entity: Entity) -> Entity:
        with _storage_errors("save"):
            self._session.add(entity)
            await self._session.flush()
        return entity

    async def find_by_id(self, kind: type[Entity], entity_id: int) -> Entity | None:
        with _storage_errors("find_by_id"):
            return await self._session.get(kind, entity_id)

    async def exists_by_id(self, kind: type[Entity], entity_id: int) -> bool:
        q = select(kind.id).where(kind.id == entity_id).limit(1)
        with _storage_errors("exists_by_id"):
            result = await self._session.execute(q)
        return result.scalar_one_or_none() is not None

    async def find_all(self, kind: type[Entity]) -> list[Entity]:
        with _storage_errors("find_all"):
            result = await self._session.execute(select(kind).order_by(kind.id))
        return list(result.scalars().all())

    async def find_by_parent_id(self, article_id: int) -> list[Comment]:
        q = (
            select(Comment)
            .where(Comment.article_id == article_id)
            .order_by(Comment.id)
        )
        with _storage_errors("find_by_parent_id"):
            result = await self._session.execute(q)
        return list(result.scalars().all())

    async def count_by_parent_id(self, article_id: int) -> int:
        q = select(func.count(Comment.id)).where(Comment.article_id == article_id)
        with _storage_errors("count_by_parent_id"):
            result = await self._session.execute(q)
        return result.scalar_one()

    async def comment_counts(self) -> dict[int, int]:
        q = select(Comment.article_id, func.count(Comment.id)).group_by(Comment.article_id)
        with _storage_errors("comment_counts"):
            result = await self._session.execute(q)
        return {article_id: count for article_id, count in result.all()}

    async def delete(self, entity: Article | Comment) -> None:
        kind = type(entity)
        with _storage_errors("delete"):
            if isinstance(entity, Article):
                await self._session.execute(
                    delete(Comment).where(Comment.article_id == entity.id)
                )
            await self._session.execute(delete(kind).where(kind.id == entity.id))
