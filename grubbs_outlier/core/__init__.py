"""
Core module for the Grubbs outlier test.

This module contains pure Python implementations built on numpy only.
"""

from .errors import (
    GrubbsError,
    InvalidParameterError,
    InvalidSampleError,
    DegenerateSampleError,
)

from .models import GrubbsOptions, GrubbsTestType

from .results import GrubbsTestResult

from .statistics import (
    mean,
    standard_deviation,
    normal_ppf,
    student_t_cdf,
    student_t_ppf,
    StudentT,
    grubbs_statistic,
    critical_grubbs,
    grubbs_test,
)

__all__ = [
    # Errors
    "GrubbsError",
    "InvalidParameterError",
    "InvalidSampleError",
    "DegenerateSampleError",

    # Models
    "GrubbsOptions",
    "GrubbsTestType",

    # Results
    "GrubbsTestResult",

    # Statistics
    "mean",
    "standard_deviation",
    "normal_ppf",
    "student_t_cdf",
    "student_t_ppf",
    "StudentT",

    # Grubbs test
    "grubbs_statistic",
    "critical_grubbs",
    "grubbs_test",
]
