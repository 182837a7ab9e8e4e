"""Exceptions raised by rudate."""

from __future__ import annotations


class RudateError(ValueError):
    """Base class for every rudate error."""


class InvalidDateError(RudateError):
    """Raised when an instant or a civil date cannot be resolved."""


class InvalidPeriodError(RudateError):
    """Raised when a period starts after it ends."""


class ConfigError(RudateError):
    """Raised when the configuration file or environment is invalid."""
