"""Engine exceptions."""

from __future__ import annotations


class EngineError(Exception):
    """Base for settlement engine errors."""


class ValidationError(EngineError, ValueError):
    """Primitive input is invalid (negative or NaN amount, fee out of range)."""


class InconsistentInputError(EngineError):
    """Snapshot data contradicts itself (two-sided bet in strict mode, misaligned feed)."""
