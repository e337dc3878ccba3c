"""Custom exception hierarchy for Alveo."""

from __future__ import annotations


class AlveoError(Exception):
    """Base exception for all Alveo errors."""


class CostDataError(AlveoError):
    """Raised when the static cost tables are internally inconsistent."""


class EstimationError(AlveoError):
    """Raised when an estimate cannot be produced for a request."""
