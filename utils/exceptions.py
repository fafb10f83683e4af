"""
Custom exception hierarchy for the pattern catalog.
"""
from typing import Any, Dict, Optional


class PatternCatalogError(Exception):
    """Base exception for all pattern catalog errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


# Configuration Exceptions
class ConfigurationError(PatternCatalogError):
    """Raised when configuration is invalid."""
    pass


# Pattern Exceptions
class FactoryError(PatternCatalogError):
    """Raised when a discriminant has no registered implementation."""
    pass


class BuilderError(PatternCatalogError):
    """Raised when a builder is misused or its draft is incomplete."""
    pass


class DecoratorError(PatternCatalogError):
    """Raised when a decorator is given nothing valid to wrap."""
    pass


# Data Exceptions
class ValidationError(PatternCatalogError):
    """Raised when an input value has the wrong type or shape."""
    pass
