"""
Custom Application Exceptions

Defines structured exception hierarchy for consistent error handling.
"""

from typing import Any, Optional


class AppError(Exception):
    """Base application exception"""

    status_code = 500

    def __init__(
        self,
        message: str,
        code: str = "APP_ERROR",
        details: Any = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    def to_dict(self) -> dict:
        """Convert exception to dictionary for API responses"""
        return {
            'success': False,
            'code': self.code,
            'message': self.message,
            'details': self.details
        }


class ValidationError(AppError):
    """Input validation failed"""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None, details: Any = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details={'field': field, **({'info': details} if details else {})}
        )
        self.field = field


class AuthenticationError(AppError):
    """Credential check failed"""

    status_code = 401

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message=message, code="AUTH_FAILED")


class ConfigurationError(AppError):
    """Application configuration error"""

    status_code = 500

    def __init__(self, message: str, setting: Optional[str] = None, reason: Optional[str] = None):
        super().__init__(
            message=message,
            code="CONFIG_ERROR",
            details={'setting': setting, 'reason': reason}
        )
