"""Validation modules for conversion fidelity."""

from .round_trip_validator import RoundTripValidator, RoundTripIssue

__all__ = ["RoundTripValidator", "RoundTripIssue"]
