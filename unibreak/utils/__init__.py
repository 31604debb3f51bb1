"""
Utility functions for the line breaking library.
"""

from unibreak.utils.validation import TokenValidator, ValidationError

__all__ = [
    "TokenValidator",
    "ValidationError",
]
