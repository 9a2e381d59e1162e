# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import SchemaError, StateValidationError, SearchSpaceError
from .items import ArmorItem

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    "SearchSpaceError",
    # core models
    "ArmorItem",
]
