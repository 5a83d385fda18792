"""Adapter-specific exceptions.

Errors raised by the engine client itself (connection failures, rejected
requests) are not wrapped here; they reach the caller unchanged.
"""


class AdapterError(Exception):
    """Base exception for adapter errors."""


class ConfigurationError(AdapterError):
    """Raised when adapter configuration is invalid."""


class PaginationError(AdapterError, ValueError):
    """Raised when a pagination window cannot be computed."""
