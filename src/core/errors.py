"""Laurel exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Per-list and per-publisher failures are absorbed by the pipeline;
only the types below ever reach the caller.
"""

from __future__ import annotations


class LaurelError(Exception):
    """Base exception for all Laurel failures."""


class LaurelConfigError(LaurelError):
    """Raised for invalid runtime configuration."""


class LaurelTransportError(LaurelError):
    """Raised when a publisher endpoint cannot be fetched."""


class LaurelStoreError(LaurelError):
    """Raised for snapshot read and write failures."""


class LaurelEncodingError(LaurelError):
    """Raised when a row references a value missing from its lookup table."""


class LaurelNoDataError(LaurelError):
    """Raised when no publisher produced any record for the run."""
