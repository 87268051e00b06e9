"""
Structured-output schema and response validation shared by the extractor
and the optimizer.
"""
from __future__ import annotations

import json
from typing import Any, Dict

from pydantic import ValidationError

from ..exceptions import MalformedResponseError, SchemaValidationError
from ..logger import get_logger
from ..models import ListingRecord
from ..schemas.listing import ListingSchema

logger = get_logger(__name__)


# =============================================================================
# JSON Schema sent to the model
# =============================================================================

LISTING_SCHEMA_NAME = "marketplace_listing"

LISTING_OUTPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {
            "type": "string",
            "description": "The catchy and concise title of the product listing."
        },
        "description": {
            "type": "string",
            "description": "A detailed and persuasive description of the product."
        },
        "tags": {
            "type": "array",
            "description": "An array of relevant keywords (tags) for the product to improve searchability.",
            "items": {
                "type": "string",
                "description": "A relevant keyword or tag for the product."
            }
        },
        "imageUrls": {
            "type": "array",
            "description": "An array of direct, public URLs for the product images found on the page.",
            "items": {
                "type": "string",
                "description": "A direct URL to a product image."
            }
        },
        "brand": {
            "type": "string",
            "description": "The brand or manufacturer of the product. If not explicitly found, this can be omitted."
        },
        "price": {
            "type": "string",
            "description": "The product's price, including currency symbol (e.g., '$99.99', 'R$ 1.200,00')."
        },
        "category": {
            "type": "string",
            "description": "The product category, often found in breadcrumbs (e.g., 'Electronics > Laptops')."
        },
        "specifications": {
            "type": "array",
            "description": "An array of objects, where each object represents a technical specification with a 'key' and a 'value'.",
            "items": {
                "type": "object",
                "properties": {
                    "key": {
                        "type": "string",
                        "description": "The name of the specification (e.g., 'Dimensions', 'Weight')."
                    },
                    "value": {
                        "type": "string",
                        "description": "The value of the specification (e.g., '10x5x2 cm', '200g')."
                    }
                },
                "required": ["key", "value"]
            }
        },
        "condition": {
            "type": "string",
            "description": "The condition of the product (e.g., 'New', 'Used', 'Refurbished')."
        },
        "sku": {
            "type": "string",
            "description": "The product's SKU, Model Number, or other unique identifier, if available."
        },
        "availability": {
            "type": "string",
            "description": "The stock status of the product (e.g., 'In stock', 'Out of stock', 'Pre-order')."
        }
    },
    "required": ["title", "description", "tags", "imageUrls"]
}


# =============================================================================
# Response parsing
# =============================================================================

def decode_listing_payload(text: str) -> Dict[str, Any]:
    """
    Parse the raw model response into a JSON object.

    Raises:
        MalformedResponseError: If the text is not valid JSON
        SchemaValidationError: If the JSON value is not an object
    """
    try:
        data = json.loads(text.strip())
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise SchemaValidationError(
            f"Response is not a JSON object (got {type(data).__name__})"
        )
    return data


def validate_listing(data: Dict[str, Any]) -> ListingRecord:
    """
    Check a decoded response against the listing rules.

    Requires non-empty ``title`` and ``description`` strings and ``tags`` /
    ``imageUrls`` arrays of strings. Optional fields must have the declared
    types when present; unknown keys are dropped.

    Raises:
        SchemaValidationError: If any rule fails
    """
    try:
        return ListingSchema.model_validate(data).to_record()
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise SchemaValidationError(f"Invalid listing fields: {fields}") from e


def parse_listing_response(text: str) -> ListingRecord:
    """Decode and validate a model response in one step."""
    data = decode_listing_payload(text)
    logger.debug(f"Decoded listing payload keys: {sorted(data)}")
    return validate_listing(data)
