"""
Pytest configuration and fixtures for AdCloner tests.
"""
import json
import sys
from pathlib import Path

# Add src to path for imports
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

import pytest
from adcloner.models import ListingRecord, Specification


class FakeAIClient:
    """
    In-memory stand-in for ListingAIClient.

    Returns queued responses in order (dicts are JSON-encoded, strings are
    returned as-is) or raises ``error`` on every call.
    """

    def __init__(self, responses=(), error=None):
        self.responses = list(responses)
        self.error = error
        self.calls = []

    async def generate_json(self, prompt, schema, schema_name):
        self.calls.append({"prompt": prompt, "schema": schema, "schema_name": schema_name})
        if self.error is not None:
            raise self.error
        response = self.responses.pop(0)
        if isinstance(response, str):
            return response
        return json.dumps(response)


@pytest.fixture
def fake_ai_client():
    """Factory for fake AI clients: fake_ai_client(resp1, resp2, error=None)."""
    def _make(*responses, error=None):
        return FakeAIClient(responses, error=error)
    return _make


@pytest.fixture
def sample_url():
    """Sample product URL for testing."""
    return "https://shop.example/item/123"


@pytest.fixture
def minimal_response():
    """Model response with only the required fields."""
    return {
        "title": "Widget",
        "description": "A widget.",
        "tags": ["widget"],
        "imageUrls": ["https://img/1.jpg"],
    }


@pytest.fixture
def full_response():
    """Model response with every field populated."""
    return {
        "title": "Acme Widget Pro 3000",
        "description": "The best widget on the market.",
        "tags": ["widget", "acme", "tools"],
        "imageUrls": ["https://img/1.jpg", "https://img/2.jpg"],
        "brand": "Acme",
        "price": "$10",
        "category": "Tools > Widgets",
        "condition": "New",
        "sku": "AC-3000",
        "availability": "In stock",
        "specifications": [
            {"key": "Color", "value": "Red"},
            {"key": "Weight", "value": "250g"},
        ],
    }


@pytest.fixture
def sample_record():
    """A fully populated listing record."""
    return ListingRecord(
        title="Widget",
        description="A widget.",
        tags=["widget"],
        image_urls=["https://img/1.jpg"],
        brand="Acme",
        price="$10",
        category="Tools > Widgets",
        condition="New",
        sku="AC-3000",
        availability="In stock",
        specifications=[Specification(key="Color", value="Red")],
    )
