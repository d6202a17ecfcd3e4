"""Custom exceptions for realsave."""

from __future__ import annotations


class RealsaveError(Exception):
    """Base exception for realsave."""


class ConfigError(RealsaveError):
    """Invalid configuration."""


class InvalidParameterError(ConfigError, ValueError):
    """A projection parameter is out of range.

    Attributes:
        fields: Names of the offending parameters, in the order reported.
    """

    def __init__(self, message: str, fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.fields = fields


class ProjectionError(RealsaveError):
    """Error while building or reading a projection."""


class ExportError(RealsaveError):
    """Failure writing a projection to CSV, JSON or PDF."""
