"""
Items API — Package Initializer
================================

What: Marks the `items_api` directory as a Python package.
Who:  Used by uvicorn (`items_api.main:app`), pytest, and the console scripts.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        ItemStore (in-memory)        │  ← ordered list of records
    ├─────────────────────────────────────┤
    │   Database probe (startup only)     │  ← reachability check, no storage
    └─────────────────────────────────────┘

    The `release` subpackage is independent of the web layers: it holds the
    version-bump utility used by release automation.
"""

__version__ = "0.1.0"
