"""
Standards Resolution Package

Hierarchical curriculum standards: national -> state -> state overrides
-> district custom standards -> school overrides.
"""

from src.standards.admin import StandardsAdmin
from src.standards.catalog import CatalogProvider
from src.standards.engine import StandardsResolutionEngine, filter_standards
from src.standards.errors import StandardsError, StandardsValidationError, StoreUnavailableError
from src.standards.frameworks import framework_for, list_jurisdictions

__all__ = [
    "StandardsAdmin",
    "CatalogProvider",
    "StandardsResolutionEngine",
    "filter_standards",
    "StandardsError",
    "StandardsValidationError",
    "StoreUnavailableError",
    "framework_for",
    "list_jurisdictions",
]
