"""
Bloglist Backend - Application Package Initializer
===================================================

What: Marks the `bloglist` directory as a Python package.
Who:  Imported by uvicorn (`bloglist.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Validation, Aggregates) │  ← Business rules, no HTTP
    ├─────────────────────────────────────┤
    │      Stores (Persistence Contract)  │  ← BlogStore ABC + SQL store
    ├─────────────────────────────────────┤
    │   Models & Schemas / Database       │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘

    Routes never touch the session directly; they receive a BlogStore via
    FastAPI's dependency injection and hand it to the service.
"""

__version__ = "1.0.0"
