# Stores package init
"""
Bloglist Backend - Blog Store Package
======================================

What:  The persistence collaborator behind BlogService.

Store Inventory:
    - BlogStore (abstract): CRUD-by-identifier contract plus the id-format check
    - SQLBlogStore: async SQLAlchemy implementation, UUID identifiers
"""
