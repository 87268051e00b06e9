"""
SEO optimization of an extracted listing.

Rewrites title, description and tags. Factual fields are re-applied from the
input record after the model responds, whatever the model returned for them.
"""
from __future__ import annotations

from ..exceptions import (
    MalformedResponseError,
    OptimizationError,
    RemoteCallError,
    SchemaValidationError,
)
from ..logger import get_logger
from ..models import ListingRecord, PRESERVED_FIELDS, merge_preserving
from .ai_client import ListingAIClient
from .listing_schema import LISTING_OUTPUT_SCHEMA, LISTING_SCHEMA_NAME, parse_listing_response

logger = get_logger(__name__)


OPTIMIZATION_PROMPT_TEMPLATE = """You are an expert in e-commerce SEO and marketing copywriting, specializing in marketplace platforms.
Your task is to take the following product information and optimize it for maximum visibility, engagement, and conversion.

Current Content:
Title: {title}
Brand: {brand}
Price: {price}
Category: {category}
Condition: {condition}
SKU: {sku}
Availability: {availability}
Description: {description}
Specifications: {specifications}
Tags: {tags}

Optimization goals:
1.  **Title**: Rewrite the title to be more catchy, descriptive, and keyword-rich. Put the brand name and primary keywords at the beginning. Keep it around 60-80 characters.
2.  **Description**: Rewrite the description to be more persuasive and structured. Use bullet points for key features and benefits. Start with a strong opening sentence. Use the category and specifications to enrich the text.
3.  **Tags**: Generate a new, comprehensive list of 10-15 highly relevant and popular tags. Include the brand, model, category, and key specifications as tags.

**CRITICAL**: Preserve the original values for the following fields as they are factual data: 'imageUrls', 'price', 'brand', 'category', 'condition', 'sku', 'availability', and the 'specifications' array structure.

Return the optimized content as a JSON object that conforms to the provided schema."""

NOT_AVAILABLE = "N/A"


class ListingOptimizer:
    """Rewrite a listing's marketing copy while keeping its factual fields."""

    ERROR_MESSAGE = "Failed to optimize the content with the AI provider."

    def __init__(self, ai_client: ListingAIClient):
        self.ai_client = ai_client

    def build_prompt(self, record: ListingRecord) -> str:
        """Build the rewrite instruction with the record's fields as context."""
        return OPTIMIZATION_PROMPT_TEMPLATE.format(
            title=record.title,
            brand=record.brand or NOT_AVAILABLE,
            price=record.price or NOT_AVAILABLE,
            category=record.category or NOT_AVAILABLE,
            condition=record.condition or NOT_AVAILABLE,
            sku=record.sku or NOT_AVAILABLE,
            availability=record.availability or NOT_AVAILABLE,
            description=record.description,
            specifications=record.specifications_text() or NOT_AVAILABLE,
            tags=", ".join(record.tags),
        )

    async def optimize(self, record: ListingRecord) -> ListingRecord:
        """
        Optimize title, description and tags of a listing.

        Args:
            record: Current listing (must not be None)

        Returns:
            New record with rewritten copy and the input's factual fields

        Raises:
            OptimizationError: If the call, parse or validation fails
        """
        logger.info(f"Optimizing listing: {record.title[:60]}")

        try:
            raw = await self.ai_client.generate_json(
                self.build_prompt(record),
                LISTING_OUTPUT_SCHEMA,
                LISTING_SCHEMA_NAME,
            )
            model_output = parse_listing_response(raw)
        except (RemoteCallError, MalformedResponseError, SchemaValidationError) as e:
            logger.error(f"Error optimizing listing: {e}", exc_info=True)
            raise OptimizationError(self.ERROR_MESSAGE) from e

        optimized = merge_preserving(record, model_output, PRESERVED_FIELDS)

        logger.info(
            f"Optimization complete: title {len(record.title)} -> {len(optimized.title)} chars, "
            f"{len(optimized.tags)} tags"
        )
        return optimized
