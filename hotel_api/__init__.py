"""
Hotel API - Application Package Initializer
=============================================

Layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services                    │  ← seam for business rules
    ├─────────────────────────────────────┤
    │       Repositories                  │  ← queries, soft-delete transition
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

Cross-cutting: a per-request correlation id (hotel_api.context) that every
log line carries.
"""

__version__ = "1.0.0"
