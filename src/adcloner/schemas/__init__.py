"""
Pydantic schemas for API validation and data contracts.
"""

from .listing import (
    SpecificationSchema,
    ListingSchema,
    ExtractRequest,
    OptimizeRequest,
)

__all__ = [
    'SpecificationSchema',
    'ListingSchema',
    'ExtractRequest',
    'OptimizeRequest',
]
