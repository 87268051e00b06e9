"""
Data models for AdCloner listings.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, List, Dict, Any, Iterable


@dataclass(frozen=True, slots=True)
class Specification:
    """A single technical specification (keys are not unique)."""

    key: str
    value: str

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {"key": self.key, "value": self.value}


@dataclass(frozen=True, slots=True)
class ListingRecord:
    """
    Structured representation of a marketplace product page.

    Records are immutable: edits and optimizations produce a new record via
    whole-field replacement. Optional fields left as None were not supplied
    and are omitted from the serialized form.

    Attributes:
        title: Listing title (non-empty)
        description: Listing description (non-empty)
        tags: Search tags in display order
        image_urls: Product image URLs, possibly empty
        brand: Brand or manufacturer
        price: Display price including currency symbol
        category: Category path, e.g. "Electronics > Laptops"
        condition: New, Used, Refurbished...
        sku: SKU, model number or other identifier
        availability: Stock status
        specifications: Technical specifications as key/value pairs
    """

    title: str
    description: str
    tags: List[str] = field(default_factory=list)
    image_urls: List[str] = field(default_factory=list)
    brand: Optional[str] = None
    price: Optional[str] = None
    category: Optional[str] = None
    condition: Optional[str] = None
    sku: Optional[str] = None
    availability: Optional[str] = None
    specifications: Optional[List[Specification]] = None

    def to_dict(self) -> dict:
        """Convert to the camelCase wire shape, skipping unset optional fields."""
        data: Dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "tags": list(self.tags),
            "imageUrls": list(self.image_urls),
        }
        for name in ("brand", "price", "category", "condition", "sku", "availability"):
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        if self.specifications is not None:
            data["specifications"] = [s.to_dict() for s in self.specifications]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ListingRecord:
        """Build a record from the camelCase wire shape (no validation)."""
        specs = data.get("specifications")
        return cls(
            title=data["title"],
            description=data["description"],
            tags=list(data.get("tags") or []),
            image_urls=list(data.get("imageUrls") or []),
            brand=data.get("brand"),
            price=data.get("price"),
            category=data.get("category"),
            condition=data.get("condition"),
            sku=data.get("sku"),
            availability=data.get("availability"),
            specifications=(
                [Specification(key=s["key"], value=s["value"]) for s in specs]
                if specs is not None else None
            ),
        )

    def specifications_text(self, separator: str = ", ") -> str:
        """Render specifications as "key: value" entries."""
        return separator.join(f"{s.key}: {s.value}" for s in self.specifications or [])


# Factual fields an optimization must never change
PRESERVED_FIELDS = (
    "image_urls",
    "price",
    "brand",
    "category",
    "condition",
    "sku",
    "availability",
    "specifications",
)


def merge_preserving(
    original: ListingRecord,
    model_output: ListingRecord,
    preserved_fields: Iterable[str] = PRESERVED_FIELDS,
) -> ListingRecord:
    """
    Overlay preserved fields from ``original`` onto ``model_output``.

    The model's values for the named fields are discarded unconditionally,
    including when the original value is None.

    Args:
        original: Record before optimization
        model_output: Record returned by the model
        preserved_fields: Attribute names to copy from ``original``

    Returns:
        New record; neither input is modified
    """
    overrides = {name: getattr(original, name) for name in preserved_fields}
    return replace(model_output, **overrides)
