"""
Utility Functions Package
"""

from utils.forward_fill import FILL_DOWN_COLUMNS, forward_fill, iter_forward_filled
from utils.validators import (
    get_json_payload,
    get_filter,
    validate_status_update,
    validate_credentials
)

__all__ = [
    'FILL_DOWN_COLUMNS',
    'forward_fill',
    'iter_forward_filled',
    'get_json_payload',
    'get_filter',
    'validate_status_update',
    'validate_credentials'
]
