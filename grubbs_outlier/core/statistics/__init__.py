"""Statistics for the Grubbs outlier test.

This package contains small, dependency-light statistical helpers:
- Descriptive statistics (mean, sample standard deviation)
- Distribution functions (normal, Student's t)
- Grubbs statistic, critical value and test

No SciPy dependency is required.
"""

from .descriptive import mean, standard_deviation
from .distributions import normal_ppf, student_t_cdf, student_t_pdf, student_t_ppf, StudentT
from .grubbs import grubbs_statistic, critical_grubbs, grubbs_test

__all__ = [
    "mean",
    "standard_deviation",
    "normal_ppf",
    "student_t_cdf",
    "student_t_pdf",
    "student_t_ppf",
    "StudentT",
    "grubbs_statistic",
    "critical_grubbs",
    "grubbs_test",
]
