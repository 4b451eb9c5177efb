"""
Data models for the Grubbs outlier test.
"""

from .options import GrubbsOptions, GrubbsTestType

__all__ = [
    "GrubbsOptions",
    "GrubbsTestType",
]
