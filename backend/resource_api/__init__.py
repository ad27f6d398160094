"""
Resource API - Application Package
===================================

What: A small CRUD service over a single `resources` table.
Who:  Imported by uvicorn (`resource_api.main:app`), Alembic and pytest.

Layers:

    ┌─────────────────────────────────────┐
    │     Routes (HTTP adaptation)        │  ← status codes, rendering
    ├─────────────────────────────────────┤
    │     Validation + Schemas            │  ← input shape checks
    ├─────────────────────────────────────┤
    │     Services (business rules)       │  ← get/create/update/delete/list
    ├─────────────────────────────────────┤
    │     Store (persistence mapping)     │  ← SQLAlchemy queries
    ├─────────────────────────────────────┤
    │     Database (store handle)         │  ← engine + session lifecycle
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
