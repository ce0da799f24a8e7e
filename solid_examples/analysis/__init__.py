"""Static detection of SOLID principle violations in Python source."""

from .models import (
    # Enums
    Severity,
    Priority,
    # Results
    Finding,
    CheckReport,
)
from .solid_checker import SOLIDChecker

__all__ = [
    # Enums
    "Severity",
    "Priority",
    # Results
    "Finding",
    "CheckReport",
    # Detector
    "SOLIDChecker",
]
