"""
Bloglist Backend - SQLAlchemy Blog Store
=========================================

What:  BlogStore backed by an async SQLAlchemy session.
How:   Every method runs inside the request's session; flush() makes inserts
       and updates visible (and assigns ids) while get_db_session commits.
Who:   Built per request by bloglist.dependencies.get_blog_store.

Identifier format:
    Blog ids are UUIDs. Anything uuid.UUID() refuses ("1", "abc", "")
    is malformed and raises MalformedIdError before a query is issued.

Error translation:
    DataError, IntegrityError          → ValidationError (400)
    OperationalError, InterfaceError   → StoreUnavailableError (503)
    any other SQLAlchemyError          → propagates (500)
    The original exception is chained and logged; the client only sees the
    generic message.
"""

import logging
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import DataError, IntegrityError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.exceptions import MalformedIdError, StoreUnavailableError, ValidationError
from bloglist.models.blog import Blog
from bloglist.stores.base import BlogStore

logger = logging.getLogger(__name__)


@contextmanager
def _translate_errors(operation: str, **context: Any) -> Iterator[None]:
    context = {"operation": operation, **context}
    try:
        yield
    except (DataError, IntegrityError) as e:
        logger.warning("Store rejected values during %s: %s", operation, str(e))
        raise ValidationError(
            message="Blog validation failed: a value was rejected by the store",
            context=context,
        ) from e
    except (OperationalError, InterfaceError) as e:
        logger.error("Database error during %s: %s", operation, str(e), exc_info=True)
        raise StoreUnavailableError(context=context) from e


class SQLBlogStore(BlogStore):
    """Blog persistence over one AsyncSession (session-per-request)."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def parse_id(self, raw_id: str) -> uuid.UUID:
        try:
            return uuid.UUID(str(raw_id))
        except ValueError:
            raise MalformedIdError(raw_id=raw_id)

    async def find_all(self) -> List[Blog]:
        with _translate_errors("find_all"):
            result = await self._session.execute(
                select(Blog).order_by(Blog.created_at, Blog.id)
            )
            return list(result.scalars().all())

    async def find_by_id(self, blog_id: uuid.UUID) -> Optional[Blog]:
        with _translate_errors("find_by_id", blog_id=str(blog_id)):
            return await self._session.get(Blog, blog_id)

    async def insert(self, fields: Dict[str, Any]) -> Blog:
        blog = Blog(**fields)
        with _translate_errors("insert"):
            self._session.add(blog)
            await self._session.flush()  # Assigns id and created_at
        logger.info("Blog inserted: %s", blog.id)
        return blog

    async def replace(self, blog_id: uuid.UUID, fields: Dict[str, Any]) -> Optional[Blog]:
        with _translate_errors("replace", blog_id=str(blog_id)):
            blog = await self._session.get(Blog, blog_id)
            if blog is None:
                return None
            for name, value in fields.items():
                setattr(blog, name, value)
            await self._session.flush()
        logger.info("Blog %s updated: %s", blog_id, sorted(fields))
        return blog

    async def delete(self, blog_id: uuid.UUID) -> None:
        with _translate_errors("delete", blog_id=str(blog_id)):
            result = await self._session.execute(delete(Blog).where(Blog.id == blog_id))
        logger.info("Blog delete %s: %d row(s) removed", blog_id, result.rowcount)
