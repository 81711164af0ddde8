"""
Bloglist Backend - Blog Aggregator
===================================

What:  Pure statistics over an in-memory sequence of blogs.
How:   One pass builds an author → accumulator dict, then a linear scan
       picks the maximum. No I/O, and the input is never mutated.
Who:   BlogService.get_stats (GET /api/blogs/stats) and any reporting code
       holding a list of blogs.

Input:
    Any sequence of mappings with `title`, `author`, `url` and `likes` keys,
    e.g. literal dicts or `BlogResponse.model_dump()` output. Extra keys are
    ignored. A blog without `author` is grouped under None.

Tie-breaking:
    Every maximum is "first encountered wins": a later record replaces the
    current best only when strictly greater. Authors are visited in the
    order they first appear in the input.

Empty input:
    total_likes([]) is 0. The other three have nothing to return and raise
    EmptyInputError.

Example:
    >>> blogs = [
    ...     {"title": "A", "author": "Ann", "url": "u1", "likes": 3},
    ...     {"title": "B", "author": "Bob", "url": "u2", "likes": 5},
    ...     {"title": "C", "author": "Ann", "url": "u3", "likes": 4},
    ... ]
    >>> total_likes(blogs)
    12
    >>> most_blogs(blogs)
    {'author': 'Ann', 'blogs': 2}
    >>> most_likes(blogs)
    {'author': 'Ann', 'likes': 7}
"""

from typing import Any, Dict, Mapping, Optional, Sequence

from bloglist.exceptions import EmptyInputError

BlogRecord = Mapping[str, Any]


def total_likes(blogs: Sequence[BlogRecord]) -> int:
    """Sum of likes across all blogs; 0 for an empty sequence."""
    return sum(blog["likes"] for blog in blogs)


def favorite_blog(blogs: Sequence[BlogRecord]) -> Dict[str, Any]:
    """
    The blog with the most likes, as {title, author, likes}.

    Raises:
        EmptyInputError: blogs is empty.
    """
    if not blogs:
        raise EmptyInputError("favorite_blog")

    best = blogs[0]
    for blog in blogs[1:]:
        if blog["likes"] > best["likes"]:
            best = blog

    return {
        "title": best["title"],
        "author": best.get("author"),
        "likes": best["likes"],
    }


def most_blogs(blogs: Sequence[BlogRecord]) -> Dict[str, Any]:
    """
    The author with the most blogs, as {author, blogs}.

    Raises:
        EmptyInputError: blogs is empty.
    """
    if not blogs:
        raise EmptyInputError("most_blogs")

    counts: Dict[Optional[str], int] = {}
    for blog in blogs:
        author = blog.get("author")
        counts[author] = counts.get(author, 0) + 1

    author, count = _first_max(counts)
    return {"author": author, "blogs": count}


def most_likes(blogs: Sequence[BlogRecord]) -> Dict[str, Any]:
    """
    The author whose blogs have the most likes in total, as {author, likes}.

    Raises:
        EmptyInputError: blogs is empty.
    """
    if not blogs:
        raise EmptyInputError("most_likes")

    likes_by_author: Dict[Optional[str], int] = {}
    for blog in blogs:
        author = blog.get("author")
        likes_by_author[author] = likes_by_author.get(author, 0) + blog["likes"]

    author, likes = _first_max(likes_by_author)
    return {"author": author, "likes": likes}


def _first_max(totals: Dict[Optional[str], int]):
    # dicts keep insertion order, so the first author seen wins ties
    best_author = None
    best_total = None
    for author, total in totals.items():
        if best_total is None or total > best_total:
            best_author, best_total = author, total
    return best_author, best_total
