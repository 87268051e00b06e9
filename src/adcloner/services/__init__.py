"""
Business logic services for listing extraction and optimization.

Provides modular components for:
- The structured OpenAI call shared by both operations
- Response decoding and listing validation
- URL extraction and SEO optimization
"""

from .ai_client import ListingAIClient
from .listing_schema import (
    LISTING_OUTPUT_SCHEMA,
    decode_listing_payload,
    validate_listing,
    parse_listing_response,
)
from .extractor import ListingExtractor
from .optimizer import ListingOptimizer
from .listing_service import ListingService

__all__ = [
    'ListingAIClient',
    'LISTING_OUTPUT_SCHEMA',
    'decode_listing_payload',
    'validate_listing',
    'parse_listing_response',
    'ListingExtractor',
    'ListingOptimizer',
    'ListingService',
]
