# -*- coding: utf-8 -*-
"""
Common exceptions for the business objects layer.
"""


class SchemaError(ValueError):
    """Raised when the armor database file cannot be read."""


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""


class SearchSpaceError(ValueError):
    """Raised when an exhaustive search is asked to enumerate too many items."""
