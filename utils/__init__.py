"""
Utility modules for the pattern catalog.
"""
from .logging_config import get_logger, LoggerFactory, LogContext, StructuredFormatter
from .exceptions import (
    PatternCatalogError,
    ConfigurationError,
    FactoryError,
    BuilderError,
    DecoratorError,
    ValidationError
)
from .error_handlers import ErrorContext

__all__ = [
    'get_logger',
    'LoggerFactory',
    'LogContext',
    'StructuredFormatter',
    'PatternCatalogError',
    'ConfigurationError',
    'FactoryError',
    'BuilderError',
    'DecoratorError',
    'ValidationError',
    'ErrorContext',
]
