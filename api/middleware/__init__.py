"""
API Middleware Package
"""

from api.middleware.error_handler import (
    setup_error_handlers,
    setup_request_logging
)

__all__ = [
    'setup_error_handlers',
    'setup_request_logging'
]
