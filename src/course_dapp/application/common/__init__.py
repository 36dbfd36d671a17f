"""
Application common module.

Contains the Result type returned by use cases.
"""

from .result import Failure, Result, Success

__all__ = [
    "Failure",
    "Result",
    "Success",
]
