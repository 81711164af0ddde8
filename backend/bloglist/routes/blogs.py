"""
Bloglist Backend - Blog Route Handlers
=======================================

What:  The /api/blogs resource.
How:   Each handler receives the request's BlogStore, delegates to
       BlogService and picks the success status code. Errors are raised as
       application exceptions and mapped by the handlers in main.py.

Endpoints:
    GET    /api/blogs          200  all blogs
    POST   /api/blogs          201  created blog        (400 missing title/url)
    GET    /api/blogs/stats    200  aggregate report
    GET    /api/blogs/{id}     200  one blog            (400 malformed, 404 absent)
    PUT    /api/blogs/{id}     200  updated blog        (400 malformed, 404 absent)
    DELETE /api/blogs/{id}     204  no body             (400 malformed)

The {id} path parameter is a plain string so that the store, not FastAPI,
decides what a malformed id is.
"""

import logging

from fastapi import APIRouter, Depends, Response

from bloglist.dependencies import get_blog_store
from bloglist.schemas.blog import (
    BlogCreate,
    BlogList,
    BlogResponse,
    BlogStatsResponse,
    BlogUpdate,
    ErrorResponse,
)
from bloglist.services.blog_service import blog_service
from bloglist.stores.base import BlogStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Blogs"])

_MALFORMED_ID = {"description": "Malformed id", "model": ErrorResponse}
_NOT_FOUND = {"description": "Blog not found", "model": ErrorResponse}


@router.get(
    "/blogs",
    response_model=BlogList,
    summary="List all blogs",
)
async def list_blogs(store: BlogStore = Depends(get_blog_store)) -> BlogList:
    return await blog_service.list_blogs(store)


@router.post(
    "/blogs",
    status_code=201,
    response_model=BlogResponse,
    responses={400: {"description": "Missing title or url", "model": ErrorResponse}},
    summary="Create a blog",
    description="Creates a blog. `title` and `url` are required; `likes` defaults to 0.",
)
async def create_blog(
    payload: BlogCreate,
    store: BlogStore = Depends(get_blog_store),
) -> BlogResponse:
    return await blog_service.create_blog(store, payload)


@router.get(
    "/blogs/stats",
    response_model=BlogStatsResponse,
    summary="Aggregate statistics over all blogs",
    description=(
        "Total likes, the most liked blog, the author with the most blogs and "
        "the author with the most likes. Ties go to the first blog or author "
        "in list order."
    ),
)
async def blog_stats(store: BlogStore = Depends(get_blog_store)) -> BlogStatsResponse:
    return await blog_service.get_stats(store)


@router.get(
    "/blogs/{blog_id}",
    response_model=BlogResponse,
    responses={400: _MALFORMED_ID, 404: _NOT_FOUND},
    summary="Get a blog by id",
)
async def get_blog(
    blog_id: str,
    store: BlogStore = Depends(get_blog_store),
) -> BlogResponse:
    return await blog_service.get_blog(store, blog_id)


@router.put(
    "/blogs/{blog_id}",
    response_model=BlogResponse,
    responses={400: _MALFORMED_ID, 404: _NOT_FOUND},
    summary="Update a blog",
    description="Overwrites the fields present in the body; absent fields are kept.",
)
async def update_blog(
    blog_id: str,
    payload: BlogUpdate,
    store: BlogStore = Depends(get_blog_store),
) -> BlogResponse:
    return await blog_service.update_blog(store, blog_id, payload)


@router.delete(
    "/blogs/{blog_id}",
    status_code=204,
    response_class=Response,
    responses={400: _MALFORMED_ID},
    summary="Delete a blog",
    description="Deleting an id that matches no blog still answers 204.",
)
async def delete_blog(
    blog_id: str,
    store: BlogStore = Depends(get_blog_store),
) -> Response:
    await blog_service.delete_blog(store, blog_id)
    return Response(status_code=204)
