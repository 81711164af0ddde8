# Routes package init
"""
Bloglist Backend - API Routes Package
======================================

Route Inventory:
    - blogs.py:   /api/blogs, /api/blogs/stats, /api/blogs/{id}
    - health.py:  GET /health

Routes handle HTTP concerns only; business rules live in services.
"""
