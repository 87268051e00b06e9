"""
Flask application factory for AdCloner.
"""
from typing import Optional

from flask import Flask, render_template
from flask_cors import CORS

from ..config import Config
from ..logger import get_logger
from ..services import ListingService
from .routes import api_bp, SERVICE_EXTENSION_KEY

logger = get_logger(__name__)


def create_app(service: Optional[ListingService] = None) -> Flask:
    """
    Create and configure Flask application.

    Args:
        service: Listing service to use; built from Config when omitted

    Returns:
        Configured Flask app instance

    Raises:
        ConfigurationError: If no service is given and OPENAI_API_KEY is missing
    """
    if service is None:
        service = ListingService.from_config()

    app = Flask(
        __name__,
        template_folder=str(Config.TEMPLATES_DIR),
        static_folder=str(Config.STATIC_DIR) if Config.STATIC_DIR.exists() else None
    )

    app.config['SECRET_KEY'] = Config.SECRET_KEY
    app.config['ENV'] = Config.FLASK_ENV
    app.extensions[SERVICE_EXTENSION_KEY] = service

    cors_origins = Config.get_cors_origins()
    if cors_origins == ["*"]:
        CORS(app)
    else:
        CORS(app, origins=cors_origins)

    app.register_blueprint(api_bp)

    @app.route('/')
    def index():
        """Serve the main application page."""
        return render_template('index.html')

    @app.route('/health')
    def health():
        """Health check endpoint."""
        return {'status': 'healthy', 'version': '1.0.0'}

    logger.info("Flask app created")
    logger.info(f"Configuration: {Config.get_summary()}")

    errors = Config.validate()
    if errors:
        logger.warning(f"Configuration warnings: {errors}")

    return app
