"""
Bookmarks Backend: Application Package
======================================

What: Personal bookmark manager API (public listing, admin CRUD, ordering).
Who:  Imported by uvicorn (`bookmarks.main:app`), Alembic and pytest.

Layering:

    ┌─────────────────────────────────────┐
    │      Routes (HTTP + auth gate)      │  ← status codes, headers, bearer tokens
    ├─────────────────────────────────────┤
    │     Services (ordering, settings)   │  ← order maintenance, validation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
