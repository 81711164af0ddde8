"""
Bloglist Backend - FastAPI Dependencies
========================================

What:  Builds the BlogStore handed to route handlers.
How:   Wraps the per-request AsyncSession from get_db_session in an
       SQLBlogStore. Tests swap it with app.dependency_overrides.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.database import get_db_session
from bloglist.stores.base import BlogStore
from bloglist.stores.sql_store import SQLBlogStore


async def get_blog_store(db: AsyncSession = Depends(get_db_session)) -> BlogStore:
    return SQLBlogStore(db)
