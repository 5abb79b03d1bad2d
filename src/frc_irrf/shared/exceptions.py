"""Custom exceptions for FRC IRRF."""


class FRCError(Exception):
    """Base exception for all FRC IRRF errors."""

    pass


class DataLoadError(FRCError):
    """Error loading a data store snapshot."""

    pass


class ValidationError(FRCError):
    """Data validation error."""

    pass


class StatusTransitionError(ValidationError):
    """Invalid payment status change."""

    pass


class AccessDeniedError(FRCError):
    """User profile unknown or without permission."""

    pass
