"""
LLM-powered listing extraction.

Page understanding is delegated entirely to the model: the URL goes into the
prompt and the model returns a listing conforming to LISTING_OUTPUT_SCHEMA.
"""
from __future__ import annotations

from typing import Optional

from ..exceptions import (
    ExtractionError,
    MalformedResponseError,
    RemoteCallError,
    SchemaValidationError,
)
from ..logger import get_logger
from ..models import ListingRecord
from .ai_client import ListingAIClient
from .listing_schema import LISTING_OUTPUT_SCHEMA, LISTING_SCHEMA_NAME, parse_listing_response

logger = get_logger(__name__)


EXTRACTION_PROMPT_TEMPLATE = """You are a universal e-commerce data extraction engine. Your mission is to analyze any product page from any popular marketplace (like Mercado Livre, Amazon, Magazine Luiza, eBay, AliExpress, etc.) and extract ALL key information with extreme accuracy.

Analyze the HTML structure and content of the product page at the following URL: {url}

Your task is to extract every piece of relevant information and return it as a single JSON object that conforms to the provided schema. Be adaptive, meticulous, and thorough.

1.  **Product Title**: The main, official title of the product.
2.  **Brand**: The brand or manufacturer name. Find it near the title or in the product details.
3.  **Price**: The main, most prominent display price. Include the currency symbol and all numbers (e.g., "R$ 4.999,00", "$1,299.99").
4.  **Category**: The product's category path, usually in breadcrumb navigation. Combine it into a single string (e.g., "Electronics > Phones > Smartphones").
5.  **Condition**: The product's condition (New, Used, Refurbished). Often displayed near the price or title.
6.  **Availability / Stock**: The stock status (e.g., 'In Stock', 'Out of Stock', 'Last units').
7.  **SKU / Model Number**: The unique identifier, often labeled as SKU, Model, Part Number, or similar.
8.  **Product Description**: The full, detailed marketing description. Combine information from all relevant sections into a complete overview.
9.  **Specifications**: Scour the page for technical specifications in tables, lists, or a "details" section. Extract every single specification and format it as an array of key-value pairs (e.g., [{{"key": "Weight", "value": "250g"}}, {{"key": "Color", "value": "Black"}}]). Do not miss any.
10. **Tags/Keywords**: A list of relevant search tags. If the page provides keywords, use those. Otherwise, generate 8-12 highly relevant tags based on all the information gathered.
11. **Image URLs**:
    *   Focus exclusively on the main product image gallery.
    *   Prioritize the highest-resolution images available.
    *   IGNORE thumbnails, logos, icons, site branding, "related products" images, customer review images, and banner ads.
    *   Return only the official, high-quality product photos.

Your extraction must be exhaustive and compatible with any e-commerce site structure. Output ONLY a valid JSON object, with no additional text, comments, or markdown formatting."""


class ListingExtractor:
    """Extract a ListingRecord from a product URL via the AI client."""

    ERROR_MESSAGE = "Failed to process the URL with the AI provider."

    def __init__(self, ai_client: ListingAIClient):
        self.ai_client = ai_client

    def build_prompt(self, url: str) -> str:
        """Build the extraction instruction for a URL."""
        return EXTRACTION_PROMPT_TEMPLATE.format(url=url)

    async def extract(self, url: Optional[str]) -> ListingRecord:
        """
        Extract listing data from a product page URL.

        Args:
            url: Product page URL

        Returns:
            Validated ListingRecord, including any optional fields the model supplied

        Raises:
            ExtractionError: If the URL is empty or the call, parse or validation fails
        """
        if not url or not url.strip():
            logger.error("No URL provided for extraction")
            raise ExtractionError("A product URL is required.")

        url = url.strip()
        logger.info(f"Extracting listing from URL: {url}")

        try:
            raw = await self.ai_client.generate_json(
                self.build_prompt(url),
                LISTING_OUTPUT_SCHEMA,
                LISTING_SCHEMA_NAME,
            )
            record = parse_listing_response(raw)
        except (RemoteCallError, MalformedResponseError, SchemaValidationError) as e:
            logger.error(f"Error extracting listing from {url}: {e}", exc_info=True)
            raise ExtractionError(self.ERROR_MESSAGE) from e

        logger.info(
            f"Extraction complete for {url}: "
            f"{len(record.image_urls)} images, {len(record.tags)} tags, "
            f"{len(record.specifications or [])} specifications"
        )
        return record
