"""
SOLID Examples - paired bad/good illustrations of the SOLID design principles.

Each principle ships a "bad" and a "good" module with a no-argument ``main()``.
The ``solid-examples`` CLI lists, runs and checks them.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
