"""
AdCloner - AI marketplace listing extraction and optimization.

Paste a product URL, let an LLM extract the listing, then optimize its copy
for marketplace SEO while keeping the factual fields intact.
"""

__version__ = "1.0.0"
__author__ = "AdCloner"

from .models import ListingRecord, Specification, PRESERVED_FIELDS, merge_preserving
from .exceptions import (
    AdClonerError,
    ConfigurationError,
    ExtractionError,
    OptimizationError,
)
from .services import ListingAIClient, ListingService

__all__ = [
    "ListingRecord",
    "Specification",
    "PRESERVED_FIELDS",
    "merge_preserving",
    "AdClonerError",
    "ConfigurationError",
    "ExtractionError",
    "OptimizationError",
    "ListingAIClient",
    "ListingService",
]
