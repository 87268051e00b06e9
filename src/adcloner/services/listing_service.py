"""
The two operations offered to the presentation layer.
"""
from __future__ import annotations

from typing import Optional

from ..models import ListingRecord
from .ai_client import ListingAIClient
from .extractor import ListingExtractor
from .optimizer import ListingOptimizer


class ListingService:
    """Facade over extraction and optimization sharing one AI client."""

    def __init__(self, ai_client: ListingAIClient):
        self.extractor = ListingExtractor(ai_client)
        self.optimizer = ListingOptimizer(ai_client)

    @classmethod
    def from_config(cls) -> ListingService:
        """Build the service from Config (raises ConfigurationError without a key)."""
        return cls(ListingAIClient.from_config())

    async def extract(self, url: Optional[str]) -> ListingRecord:
        """Extract a listing from a product URL."""
        return await self.extractor.extract(url)

    async def optimize(self, record: ListingRecord) -> ListingRecord:
        """Optimize a listing's copy, keeping its factual fields."""
        return await self.optimizer.optimize(record)
