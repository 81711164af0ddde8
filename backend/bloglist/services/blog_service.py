"""
Bloglist Backend - Blog Service (Resource Handler)
===================================================

What:  Request-level logic for the blog resource: field rules, defaulting,
       id checks and not-found detection.
How:   Each method receives the BlogStore for the current request and
       returns response schemas. It never sees HTTP objects; the global
       exception handlers turn its exceptions into status codes.
Who:   Called by the /api/blogs route handlers.

Order of checks (fail fast, no partial writes):
    1. Id format     → MalformedIdError (400)   [get, update, delete]
    2. Field rules   → ValidationError (400)    [create, update]
    3. Store call    → None means NotFoundError (404)  [get, update]

Field rules:
    title, url   required on create; when supplied, must be non-blank strings
    likes        defaults to 0 on create; when supplied, 0 <= likes <= 2**31 - 1
    author       optional, may be null
    title/author at most 255 characters (column width)
"""

import logging
from typing import Any, Dict, List

from bloglist.exceptions import NotFoundError, ValidationError
from bloglist.schemas.blog import (
    AuthorBlogCount,
    AuthorLikes,
    BlogCreate,
    BlogResponse,
    BlogStatsResponse,
    BlogUpdate,
    FavoriteBlog,
)
from bloglist.services import aggregator
from bloglist.stores.base import BlogStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "url")

# Column limits in models/blog.py
MAX_LIKES = 2**31 - 1
MAX_LENGTHS = {"title": 255, "author": 255}


class BlogService:
    """
    Stateless handler for blog CRUD and reporting.

    Responsibilities:
        - list_blogs(): every blog, insertion order
        - get_blog(): one blog by id
        - create_blog(): validate, default likes, insert
        - update_blog(): validate id and fields, replace
        - delete_blog(): validate id, delete (idempotent)
        - get_stats(): aggregator output over the full collection
    """

    async def list_blogs(self, store: BlogStore) -> List[BlogResponse]:
        blogs = await store.find_all()
        return [BlogResponse.model_validate(blog) for blog in blogs]

    async def get_blog(self, store: BlogStore, raw_id: str) -> BlogResponse:
        blog_id = store.parse_id(raw_id)
        blog = await store.find_by_id(blog_id)
        if blog is None:
            raise NotFoundError(resource="blog", resource_id=raw_id)
        return BlogResponse.model_validate(blog)

    async def create_blog(self, store: BlogStore, payload: BlogCreate) -> BlogResponse:
        """
        Validate a candidate blog and insert it.

        Raises:
            ValidationError: title or url missing/blank, or likes negative.
        """
        fields = payload.model_dump()
        for name in REQUIRED_FIELDS:
            if fields[name] is None:
                raise ValidationError(
                    message=f"Blog validation failed: {name} is required",
                    field=name,
                )
        if fields["likes"] is None:
            fields["likes"] = 0
        self._check_fields(fields)

        blog = await store.insert(fields)
        logger.info("Blog created: %s (%s)", blog.id, blog.title)
        return BlogResponse.model_validate(blog)

    async def update_blog(
        self, store: BlogStore, raw_id: str, payload: BlogUpdate
    ) -> BlogResponse:
        """
        Overwrite the supplied fields of an existing blog.

        Raises:
            MalformedIdError: raw_id is not a well-formed store id.
            ValidationError: a supplied field breaks a field rule.
            NotFoundError: no blog has this id.
        """
        blog_id = store.parse_id(raw_id)

        fields = payload.model_dump(exclude_unset=True)
        self._check_fields(fields)

        blog = await store.replace(blog_id, fields)
        if blog is None:
            raise NotFoundError(resource="blog", resource_id=raw_id)
        return BlogResponse.model_validate(blog)

    async def delete_blog(self, store: BlogStore, raw_id: str) -> None:
        blog_id = store.parse_id(raw_id)
        await store.delete(blog_id)

    async def get_stats(self, store: BlogStore) -> BlogStatsResponse:
        blogs = [blog.model_dump() for blog in await self.list_blogs(store)]
        if not blogs:
            return BlogStatsResponse(total_likes=0)

        return BlogStatsResponse(
            total_likes=aggregator.total_likes(blogs),
            favorite_blog=FavoriteBlog(**aggregator.favorite_blog(blogs)),
            most_blogs=AuthorBlogCount(**aggregator.most_blogs(blogs)),
            most_likes=AuthorLikes(**aggregator.most_likes(blogs)),
        )

    # ── Field rules ───────────────────────────────────────────────────────

    @staticmethod
    def _check_fields(fields: Dict[str, Any]) -> None:
        """Checks every field present in `fields`; absent keys are skipped."""
        for name in REQUIRED_FIELDS:
            if name in fields:
                value = fields[name]
                if value is None or not value.strip():
                    raise ValidationError(
                        message=f"Blog validation failed: {name} must not be empty",
                        field=name,
                    )

        for name, limit in MAX_LENGTHS.items():
            value = fields.get(name)
            if value is not None and len(value) > limit:
                raise ValidationError(
                    message=f"Blog validation failed: {name} must be at most {limit} characters",
                    field=name,
                )

        if "likes" in fields:
            likes = fields["likes"]
            if likes is None or likes < 0:
                raise ValidationError(
                    message="Blog validation failed: likes must be a non-negative integer",
                    field="likes",
                )
            if likes > MAX_LIKES:
                raise ValidationError(
                    message=f"Blog validation failed: likes must be at most {MAX_LIKES}",
                    field="likes",
                )


# Stateless, shared by all requests
blog_service = BlogService()
