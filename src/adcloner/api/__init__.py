"""
Flask web application for AdCloner.
"""
from .app import create_app

__all__ = ["create_app"]
