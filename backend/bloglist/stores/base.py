"""
Bloglist Backend - Abstract Blog Store Interface
=================================================

What:  Abstract base class defining the contract for blog persistence.
How:   Concrete stores inherit from BlogStore and implement every method.
Who:   Called by BlogService; constructed per request by
       bloglist.dependencies.get_blog_store.

Contract:
    - parse_id() is the store's own identifier-format check. It raises
      MalformedIdError for ids the store could never have issued, so callers
      can tell "malformed" apart from "well-formed but absent".
    - Lookups by a well-formed id that matches nothing return None; they
      never raise NotFoundError (that is the service's call).
    - delete() of an absent record is a no-op.
    - Driver or transport failures surface as StoreUnavailableError.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, List, Optional

from bloglist.models.blog import Blog


class BlogStore(ABC):
    """
    Abstract persistence for Blog records.

    Implementations:
        - SQLBlogStore: async SQLAlchemy session, UUID identifiers
        - Unit tests pass an AsyncMock with this spec
    """

    @abstractmethod
    def parse_id(self, raw_id: str) -> Hashable:
        """
        Convert a raw path id into the store's identifier type.

        Raises:
            MalformedIdError: raw_id is not a well-formed identifier.
        """
        ...

    @abstractmethod
    async def find_all(self) -> List[Blog]:
        """All blogs, in insertion order."""
        ...

    @abstractmethod
    async def find_by_id(self, blog_id: Hashable) -> Optional[Blog]:
        ...

    @abstractmethod
    async def insert(self, fields: Dict[str, Any]) -> Blog:
        """
        Persist a new blog and return it with its assigned id.

        Args:
            fields: Already validated and defaulted by BlogService.
        """
        ...

    @abstractmethod
    async def replace(self, blog_id: Hashable, fields: Dict[str, Any]) -> Optional[Blog]:
        """
        Overwrite the given fields of an existing blog.

        Returns:
            The updated blog, or None if no blog has this id.
        """
        ...

    @abstractmethod
    async def delete(self, blog_id: Hashable) -> None:
        ...
