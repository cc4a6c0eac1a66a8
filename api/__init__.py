"""
API Package - HTTP Endpoints
"""

from api.routes import api_bp

__all__ = ['api_bp']
