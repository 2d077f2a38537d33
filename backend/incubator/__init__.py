"""
Incubator Backend — Application Package Initializer
=====================================================

What: Marks the `incubator` directory as a Python package.
Why:  Enables module imports like `from incubator.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend serves the content and intake workflow of an incubation centre
    (announcements, blogs, events, programs, mentors, contact forms, admin
    users and two application forms). It follows a layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, access gate
    ├─────────────────────────────────────┤
    │     Services (generic resources)    │  ← List/filter/paginate, stats, hooks
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │     Database handle (Persistence)   │  ← Engine + session lifecycle
    └─────────────────────────────────────┘

    Every resource is one ResourceConfig instance fed to the same service and
    router factory; per-resource modules only add what differs.
"""

__version__ = "1.0.0"
