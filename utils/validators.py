"""
Input Validation Utilities

Provides validation functions for API request payloads.
"""

from typing import Any, Dict, Optional, Tuple


def get_json_payload(request) -> Dict[str, Any]:
    """Request body as a dict; missing or non-object bodies read as {}"""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return {}
    return payload


def get_filter(payload: Dict[str, Any], name: str) -> Optional[str]:
    """
    Read an optional search filter

    Args:
        payload: Request body
        name: Filter field ('aircraft' or 'system')

    Returns:
        Trimmed filter text, or None when the filter is absent or falsy
    """
    value = payload.get(name)
    if not value:
        return None
    return str(value).strip()


def validate_status_update(payload: Dict[str, Any]) -> Tuple[bool, Optional[str], Optional[str], Any]:
    """
    Validate an update-status request

    Args:
        payload: Request body with 'ajl' and 'status'

    Returns:
        Tuple of (is_valid, error_message, ajl, status)
    """
    ajl = payload.get('ajl')
    if not ajl:
        return False, "Missing AJL", None, None

    # status is stored as given; only the group key is required
    return True, None, str(ajl), payload.get('status')


def validate_credentials(payload: Dict[str, Any]) -> Tuple[Any, Any]:
    """Login id and password exactly as sent"""
    return payload.get('id'), payload.get('password')
