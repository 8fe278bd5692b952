"""
Mobile API Backend — Application Package Initializer
=====================================================

What: Marks the `mobile_api` directory as a Python package.
Who:  Imported by uvicorn (`mobile_api.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Account lifecycle, inbox, feedback
    ├─────────────────────────────────────┤
    │      Repositories (Credential Store)│  ← Account lookups and writes
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Dependencies only point downward: routes call services, services call
    repositories and the security primitives, nothing calls back up.
"""

__version__ = "1.0.0"
