# Inventory module
"""
Inventory module

This module handles CRUD for the single `inventory` table:
- schemas: request/response models
- repo: parameterized SQL, one connection per call
- service: required-field validation, defaults, not-found mapping
- api: the /inventory router
"""

from .api import router

__all__ = ["router"]
