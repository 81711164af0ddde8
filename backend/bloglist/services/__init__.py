# Services package init
"""
Bloglist Backend - Services Layer
==================================

What:  Business logic between routes (HTTP) and stores (persistence).

Service Inventory:
    - aggregator: pure statistics over a list of blogs (no I/O)
    - BlogService: field rules, likes defaulting, id checks, not-found detection

Routes stay thin: they parse the request, call a service with the request's
BlogStore, and pick the success status code.
"""
