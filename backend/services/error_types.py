"""
Custom Error Types for the HVAC Intake System

Provides categorized exceptions to distinguish between critical errors
that should stop processing and non-critical errors that can be logged
but shouldn't prevent an intake from completing.
"""

import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class HVACIntakeError(Exception):
    """Base exception for all intake and load estimate errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class CriticalError(HVACIntakeError):
    """
    Critical errors that should stop processing.

    Examples:
    - Load estimate requested with impossible inputs
    - Vision service not configured
    """
    pass


class NonCriticalError(HVACIntakeError):
    """
    Non-critical errors that can be logged but shouldn't stop processing.

    Examples:
    - Vision model returned prose instead of JSON
    - Vision API call failed for one photo set
    """
    pass


class VisionResponseError(NonCriticalError):
    """
    The vision model's output could not be turned into a record.

    Never escapes normalization: the record is treated as absent and the
    validator asks for a clearer photo instead.
    """
    pass


class ConfigurationError(CriticalError):
    """
    Configuration errors that prevent proper operation.

    Examples:
    - Missing OPENAI_API_KEY
    - Unreadable AFUE lookup file
    """
    pass


class ValidationError(CriticalError):
    """
    Input validation errors surfaced to the caller.
    """
    pass


class InvalidLoadInputError(ValidationError):
    """Load estimate input outside its domain (conditioned area <= 0)."""

    def __init__(self, field: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.field = field


def log_error_with_context(error: HVACIntakeError, context: Dict[str, Any]):
    """
    Log error with additional context information.

    Args:
        error: Error to log
        context: Additional context (address, stage, etc.)
    """
    log_data = {
        'error_type': type(error).__name__,
        'error_message': error.message,
        'details': error.details,
        'context': context
    }

    if isinstance(error, CriticalError):
        logger.error(f"CRITICAL ERROR: {error.message}", extra=log_data)
    else:
        logger.warning(f"Non-critical error: {error.message}", extra=log_data)
