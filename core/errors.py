"""Custom errors with tracking IDs."""

from utils.timestamp import format_timestamp
from utils.ksuid import generate_ksuid


class BaseSimError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = generate_ksuid()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"


class ConstructionError(BaseSimError):
    """An engine could not be built from the given input."""


class InvalidDimensionsError(ConstructionError):
    """Grid width or height is not a positive integer."""

    def __init__(self, width, height, **kwargs):
        context = kwargs.pop("context", {})
        context.update(width=width, height=height)
        super().__init__(f"invalid grid dimensions {width}x{height}", context=context, **kwargs)
        self.width = width
        self.height = height


class InvalidPatternError(ConstructionError):
    """Pattern rows are not all the same length."""

    def __init__(self, message, row=None, expected=None, actual=None, **kwargs):
        context = kwargs.pop("context", {})
        if row is not None:
            context.update(row=row, expected=expected, actual=actual)
        super().__init__(message, context=context, **kwargs)


class ConfigError(BaseSimError):
    """A configuration value cannot be used."""

    def __init__(self, message, key=None, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if key:
            context["key"] = key
            context["value"] = value
        super().__init__(message, context=context, **kwargs)
