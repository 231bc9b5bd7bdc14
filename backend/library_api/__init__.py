"""
Library API — Application Package Initializer
==============================================

What: Marks the `library_api` directory as a Python package.
Who:  Used by uvicorn (`library_api.main:app`), pytest, and the `library-api` script.

Architecture Note:
    The backend follows the same layering in every module:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Dependencies (DI providers)    │  ← hands services to routes
    ├─────────────────────────────────────┤
    │   Services (Catalog, ActivityLog)   │  ← abstract contract + implementations
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Book entity + Pydantic wire models
    └─────────────────────────────────────┘

    There is no persistence layer: the catalog lives in memory for the
    lifetime of the application instance.
"""

__version__ = "1.0.0"
