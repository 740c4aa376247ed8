# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import SchemaError, StateValidationError
from .items import Item, build_catalog
from .knapsacks import KnapsackSpec, build_knapsacks

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    # core models
    "Item",
    "KnapsackSpec",
    # constructors
    "build_catalog",
    "build_knapsacks",
]
