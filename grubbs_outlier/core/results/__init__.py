"""
Result data structures for the Grubbs outlier test.
"""

from .grubbs_result import GrubbsTestResult

__all__ = [
    "GrubbsTestResult",
]
