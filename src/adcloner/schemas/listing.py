"""
Pydantic schemas for listing validation.

The same ListingSchema checks model responses (extraction and optimization)
and listing bodies posted to the API.
"""
from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import ListingRecord, Specification


class SpecificationSchema(BaseModel):
    """A technical specification entry; both parts are required."""
    model_config = ConfigDict(extra="ignore")

    key: str = Field(..., description="Specification name, e.g. 'Weight'")
    value: str = Field(..., description="Specification value, e.g. '250g'")


class ListingSchema(BaseModel):
    """Listing in its camelCase wire shape."""
    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1, description="Listing title")
    description: str = Field(..., min_length=1, description="Listing description")
    tags: List[str] = Field(..., description="Search tags")
    image_urls: List[str] = Field(..., alias="imageUrls", description="Product image URLs")
    brand: Optional[str] = None
    price: Optional[str] = None
    category: Optional[str] = None
    condition: Optional[str] = None
    sku: Optional[str] = None
    availability: Optional[str] = None
    specifications: Optional[List[SpecificationSchema]] = None

    def to_record(self) -> ListingRecord:
        """Convert to the immutable domain record."""
        return ListingRecord(
            title=self.title,
            description=self.description,
            tags=list(self.tags),
            image_urls=list(self.image_urls),
            brand=self.brand,
            price=self.price,
            category=self.category,
            condition=self.condition,
            sku=self.sku,
            availability=self.availability,
            specifications=(
                [Specification(key=s.key, value=s.value) for s in self.specifications]
                if self.specifications is not None else None
            ),
        )


class ExtractRequest(BaseModel):
    """Request body for POST /api/extract."""
    url: str = Field(..., description="Product page URL")

    @field_validator('url')
    @classmethod
    def strip_url(cls, v: str) -> str:
        return v.strip()


class OptimizeRequest(BaseModel):
    """Request body for POST /api/optimize."""
    listing: ListingSchema = Field(..., description="Listing to optimize")
