"""
Mock Location API — Application Package Initializer
=====================================================

What: Marks the `mock_locations` directory as a Python package.
Why:  Enables module imports like `from mock_locations.config import settings`.
Who:  Used by uvicorn (`mock_locations.main:app`), pytest, and the `run()` entry point.

Architecture Note:
    The service is small but keeps the same layering as a larger backend:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Generation)       │  ← Fake corpus + pagination
    ├─────────────────────────────────────┤
    │            Schemas (Data)           │  ← Pydantic wire contracts
    └─────────────────────────────────────┘

    There is no persistence layer. Every request builds its own corpus
    and throws it away once the response is serialized.
"""

__version__ = "1.0.0"
