"""
Grubbs Outlier Test

Grubbs' statistic and critical value for detecting a single outlier in an
approximately normally distributed sample.

Conventions:
- Standard deviation: sample estimate (n - 1 denominator)
- Test types: two-sided (largest absolute residual), lower (minimum), upper (maximum)
- Tails: 2 for the two-sided test, 1 for the one-sided tests
- t quantiles: left-tail, i.e. P(T <= t) = p
"""

import logging

__version__ = "1.0.0"
__author__ = "Grubbs Outlier Test"

from .core.errors import (
    GrubbsError,
    InvalidParameterError,
    InvalidSampleError,
    DegenerateSampleError,
)
from .core.models import GrubbsOptions, GrubbsTestType
from .core.results import GrubbsTestResult
from .core.statistics import (
    mean,
    standard_deviation,
    StudentT,
    student_t_cdf,
    student_t_ppf,
    normal_ppf,
    grubbs_statistic,
    critical_grubbs,
    grubbs_test,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",

    # Grubbs test
    "grubbs_statistic",
    "critical_grubbs",
    "grubbs_test",

    # Models
    "GrubbsOptions",
    "GrubbsTestType",

    # Results
    "GrubbsTestResult",

    # Errors
    "GrubbsError",
    "InvalidParameterError",
    "InvalidSampleError",
    "DegenerateSampleError",

    # Collaborators
    "mean",
    "standard_deviation",
    "StudentT",
    "student_t_cdf",
    "student_t_ppf",
    "normal_ppf",
]
