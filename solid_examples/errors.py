"""
Exception types for SOLID Examples.

This module provides:
- SolidExamplesError as the common base
- UnknownExampleError for catalog lookups that match nothing
- CapabilityError for roles asked to do something they cannot do
"""

from __future__ import annotations

from typing import Optional


class SolidExamplesError(Exception):
    """Base exception for all package errors."""


class UnknownExampleError(SolidExamplesError):
    """Raised when a principle/variant pair is not in the catalog."""

    def __init__(
        self,
        message: str,
        principle: Optional[str] = None,
        variant: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.principle = principle
        self.variant = variant


class CapabilityError(SolidExamplesError):
    """
    Raised when an object is asked for a capability it does not have.

    The bad examples raise this where a subtype cannot honour the contract
    it inherited (a penguin asked to fly, a robot asked to eat).
    """

    def __init__(self, role: str, capability: str) -> None:
        super().__init__(f"{role} cannot {capability}")
        self.role = role
        self.capability = capability
