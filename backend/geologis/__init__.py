"""
Geologis Backend — Application Package Initializer
====================================================

What: Read-only geographic data API (countries, continents, cities).
Who:  Imported by uvicorn (geologis.main:app), pytest and the route modules.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Lookup, search, pagination
    ├─────────────────────────────────────┤
    │    Data tables & upstream provider  │  ← Frozen tables, Maersk API
    └─────────────────────────────────────┘
"""

__version__ = "1.1.0"
