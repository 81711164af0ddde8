# Middleware package init
"""
Bloglist Backend - Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: correlation id for every log line of the request
    2. Logging: method, path, status and duration, tagged with the request ID
    3. CORS: FastAPI's CORSMiddleware (handles preflight)
"""
