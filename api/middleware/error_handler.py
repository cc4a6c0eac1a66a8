"""
Centralized Error Handling Middleware for Flask

Provides consistent error responses and logging across all endpoints.
"""

from flask import Flask, jsonify, request
import logging
import traceback
from typing import Tuple, Dict

from app.errors import AppError

logger = logging.getLogger(__name__)


def setup_error_handlers(app: Flask):
    """
    Register error handlers with Flask app

    Usage:
        from api.middleware.error_handler import setup_error_handlers

        app = Flask(__name__)
        setup_error_handlers(app)
    """

    @app.errorhandler(AppError)
    def handle_app_error(error: AppError) -> Tuple[Dict, int]:
        """Handle custom application errors; status comes from the error class"""
        if error.status_code >= 500:
            logger.error(f"App Error [{error.code}]: {error.message}")
        elif error.status_code == 401:
            logger.info(f"App Error [{error.code}]: {error.message}")
        else:
            logger.warning(f"App Error [{error.code}]: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def handle_flask_not_found(error) -> Tuple[Dict, int]:
        """Handle Flask 404 errors"""
        return jsonify({
            'success': False,
            'code': 'ENDPOINT_NOT_FOUND',
            'message': f"Endpoint not found: {request.path}",
            'details': {'method': request.method, 'path': request.path}
        }), 404

    @app.errorhandler(405)
    def handle_method_not_allowed(error) -> Tuple[Dict, int]:
        """Handle method not allowed errors"""
        return jsonify({
            'success': False,
            'code': 'METHOD_NOT_ALLOWED',
            'message': f"Method {request.method} not allowed for {request.path}",
            'details': None
        }), 405

    @app.errorhandler(500)
    def handle_server_error(error) -> Tuple[Dict, int]:
        """Handle internal server errors"""
        logger.error(f"Server Error: {error}")
        logger.error(traceback.format_exc())
        return jsonify({
            'success': False,
            'code': 'INTERNAL_ERROR',
            'message': 'Server error',
            'details': None
        }), 500

    @app.errorhandler(Exception)
    def handle_unexpected_error(error) -> Tuple[Dict, int]:
        """Handle all unexpected exceptions"""
        logger.error(f"Unexpected Error: {type(error).__name__}: {error}")
        logger.error(traceback.format_exc())
        return jsonify({
            'success': False,
            'code': 'UNEXPECTED_ERROR',
            'message': 'Server error',
            'details': {'type': type(error).__name__} if app.debug else None
        }), 500


def log_request():
    """Log incoming request details"""
    logger.debug(f"Request: {request.method} {request.path}")
    if request.content_length:
        logger.debug(f"Content-Length: {request.content_length}")


def log_response(response):
    """Log response details"""
    logger.debug(f"Response: {response.status_code}")
    return response


def setup_request_logging(app: Flask):
    """
    Setup request/response logging

    Usage:
        setup_request_logging(app)
    """
    app.before_request(log_request)
    app.after_request(log_response)
