"""
Mock Location API — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the few things that can go wrong.
Why:   Bad query parameters are never an error here (they are coerced), so
       the only failures left are internal ones. Custom exceptions let the
       global handlers log the detail and return a generic 500 body.
How:   Each exception carries a message and an optional context dict.
       Handlers registered in main.py turn them into JSON error responses.

Exception Hierarchy:
    MockLocationsError (base)       → 500 Internal Server Error
    └── RecordGenerationError       → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class MockLocationsError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class RecordGenerationError(MockLocationsError):
    """
    Raised when the fake-data engine fails while building a corpus.

    When:    Faker raised mid-generation (bad locale provider, broken seed, etc.).
    HTTP:    500 Internal Server Error

    The original exception is chained (`raise ... from exc`) and its type
    name goes into `context` for the server log.
    """

    def __init__(
        self,
        message: str = "Failed to generate location records",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
