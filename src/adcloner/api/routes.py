"""
API routes for AdCloner application.
"""

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from ..exceptions import ExtractionError, OptimizationError
from ..logger import get_logger
from ..schemas.listing import ExtractRequest, OptimizeRequest
from ..services import ListingService
from ..utils.validators import is_valid_url

logger = get_logger(__name__)

SERVICE_EXTENSION_KEY = "listing_service"

EXTRACT_FAILED_MESSAGE = (
    "Could not extract the listing content. Check the URL and try again. "
    "This works best with popular, publicly indexed products."
)
OPTIMIZE_FAILED_MESSAGE = "An error occurred while optimizing the listing."

# Create blueprint
api_bp = Blueprint('api', __name__, url_prefix='/api')


def get_service() -> ListingService:
    """Get the listing service registered on the current app."""
    return current_app.extensions[SERVICE_EXTENSION_KEY]


def error_response(message: str, status_code: int):
    return jsonify({
        'status': 'error',
        'message': message
    }), status_code


@api_bp.route('/extract', methods=['POST'])
async def extract_listing():
    """
    Extract listing data from a product URL.

    Expected JSON:
    {
        "url": "https://example.com/product"
    }

    Returns:
    {
        "status": "success",
        "data": {"title": ..., "description": ..., "tags": [...], "imageUrls": [...], ...}
    }
    """
    data = request.get_json(silent=True) or {}

    try:
        payload = ExtractRequest.model_validate(data)
    except ValidationError:
        return error_response('URL is required', 400)

    if not payload.url:
        return error_response('URL is required', 400)

    if not is_valid_url(payload.url):
        return error_response('Please enter a valid http(s) URL', 400)

    try:
        record = await get_service().extract(payload.url)
    except ExtractionError as e:
        logger.error(f"Extraction failed for {payload.url}: {e}")
        return error_response(EXTRACT_FAILED_MESSAGE, 502)

    return jsonify({
        'status': 'success',
        'data': record.to_dict()
    }), 200


@api_bp.route('/optimize', methods=['POST'])
async def optimize_listing():
    """
    Optimize the copy of an extracted (and possibly user-edited) listing.

    Expected JSON:
    {
        "listing": {"title": ..., "description": ..., "tags": [...], "imageUrls": [...], ...}
    }

    Returns:
    {
        "status": "success",
        "data": {...}
    }
    """
    data = request.get_json(silent=True) or {}

    if not isinstance(data, dict) or not data.get('listing'):
        return error_response('Listing is required', 400)

    try:
        payload = OptimizeRequest.model_validate(data)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"][1:]) for err in e.errors()})
        return error_response(f"Invalid listing fields: {', '.join(fields)}", 400)

    try:
        record = await get_service().optimize(payload.listing.to_record())
    except OptimizationError as e:
        logger.error(f"Optimization failed: {e}")
        return error_response(OPTIMIZE_FAILED_MESSAGE, 502)

    return jsonify({
        'status': 'success',
        'data': record.to_dict()
    }), 200
