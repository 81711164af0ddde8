"""
Bloglist Backend - Pydantic Request/Response Schemas
=====================================================

What:  Pydantic models defining the API contract.
How:   FastAPI uses these to parse request bodies, serialize responses and
       generate the OpenAPI document.

Request bodies declare every field Optional. Required-field and
non-negative rules are business rules enforced by BlogService, which
answers 400 (ValidationError) instead of FastAPI's schema-level 422.
Unknown keys such as a client-sent `_id` or `__v` are ignored.
`likes` is a StrictInt: `true` or `"12"` is a 422, never coerced.
"""

import uuid
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class BlogCreate(BaseModel):
    """Candidate blog sent to POST /api/blogs."""
    title: Optional[str] = Field(default=None, description="Blog title (required)")
    author: Optional[str] = Field(default=None, description="Author name")
    url: Optional[str] = Field(default=None, description="Blog URL (required)")
    likes: Optional[StrictInt] = Field(default=None, description="Like count, defaults to 0")

    model_config = ConfigDict(extra="ignore")


class BlogUpdate(BaseModel):
    """
    Replacement fields sent to PUT /api/blogs/{id}.

    Only fields present in the body are written; use
    `model_dump(exclude_unset=True)` to tell "absent" from "null".
    """
    title: Optional[str] = Field(default=None)
    author: Optional[str] = Field(default=None)
    url: Optional[str] = Field(default=None)
    likes: Optional[StrictInt] = Field(default=None)

    model_config = ConfigDict(extra="ignore")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class BlogResponse(BaseModel):
    """A stored blog as returned by every blog endpoint."""
    id: uuid.UUID = Field(description="Store-assigned identifier")
    title: str
    author: Optional[str] = None
    url: str
    likes: int

    model_config = ConfigDict(from_attributes=True)


class FavoriteBlog(BaseModel):
    title: str
    author: Optional[str] = None
    likes: int


class AuthorBlogCount(BaseModel):
    author: Optional[str] = None
    blogs: int


class AuthorLikes(BaseModel):
    author: Optional[str] = None
    likes: int


class BlogStatsResponse(BaseModel):
    """
    What:  Aggregates over the whole collection, returned by GET /api/blogs/stats.
    The three record-valued fields are null when there are no blogs.
    """
    total_likes: int = Field(description="Sum of likes across all blogs")
    favorite_blog: Optional[FavoriteBlog] = Field(default=None)
    most_blogs: Optional[AuthorBlogCount] = Field(default=None)
    most_likes: Optional[AuthorLikes] = Field(default=None)


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error envelope for all API errors.

    Example:
        {
            "error": "malformed_id",
            "message": "malformatted id",
            "details": {"id": "1"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


BlogList = List[BlogResponse]
