"""
Input validation utilities.
"""
from urllib.parse import urlparse


def is_valid_url(url: str) -> bool:
    """
    Check if a string is a valid HTTP/HTTPS URL.

    Args:
        url: URL string to validate

    Returns:
        True if URL is valid, False otherwise

    Examples:
        >>> is_valid_url("https://shop.example/item/123")
        True
        >>> is_valid_url("shop.example/item/123")
        False
    """
    if not url or not isinstance(url, str):
        return False

    try:
        result = urlparse(url.strip())
    except ValueError:
        return False

    return result.scheme in ("http", "https") and bool(result.netloc)
