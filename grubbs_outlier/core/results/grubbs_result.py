"""
Result classes for the Grubbs outlier test.

This module defines the output of ``grubbs_test``: the statistic, the
critical value it is compared against, and the observation under test.
"""

import json
import math
from dataclasses import dataclass
from typing import Any, Dict

from ..models.options import GrubbsTestType


def _json_safe_value(value: Any) -> Any:
    """Convert non-JSON-safe floats (nan/inf) to None."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
    return value


@dataclass
class GrubbsTestResult:
    """
    Result of a single Grubbs outlier test.

    Only the most extreme observation (for the chosen variant) is tested.

    Attributes:
        test_type: Variant used (two-sided, lower, upper)
        statistic: Grubbs G statistic
        critical_value: Critical G at the given significance level
        alpha: Significance level
        sample_size: Number of observations (n)
        mean: Sample mean
        standard_deviation: Sample standard deviation (n - 1 denominator)
        suspect_index: Index of the tested observation in the input sample
        suspect_value: Value of the tested observation
        is_outlier: True if statistic > critical_value
    """

    test_type: GrubbsTestType
    statistic: float
    critical_value: float
    alpha: float
    sample_size: int
    mean: float
    standard_deviation: float
    suspect_index: int
    suspect_value: float
    is_outlier: bool

    @property
    def degrees_of_freedom(self) -> int:
        """Degrees of freedom of the t distribution (n - 2)."""
        return self.sample_size - 2

    @property
    def tails(self) -> int:
        return self.test_type.tails

    @property
    def confidence_level(self) -> float:
        return 1.0 - self.alpha

    def to_dict(self) -> Dict[str, Any]:
        """Serialize Grubbs test result to dictionary."""
        return {
            "test_name": "grubbs",
            "test_type": self.test_type.value,
            "statistic": _json_safe_value(self.statistic),
            "critical_value": _json_safe_value(self.critical_value),
            "alpha": self.alpha,
            "tails": self.tails,
            "sample_size": self.sample_size,
            "degrees_of_freedom": self.degrees_of_freedom,
            "mean": _json_safe_value(self.mean),
            "standard_deviation": _json_safe_value(self.standard_deviation),
            "suspect_index": self.suspect_index,
            "suspect_value": _json_safe_value(self.suspect_value),
            "is_outlier": self.is_outlier,
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize Grubbs test result to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GrubbsTestResult':
        """Create GrubbsTestResult from dictionary."""
        return cls(
            test_type=GrubbsTestType.coerce(data["test_type"]),
            statistic=data["statistic"],
            critical_value=data["critical_value"],
            alpha=data["alpha"],
            sample_size=data["sample_size"],
            mean=data["mean"],
            standard_deviation=data["standard_deviation"],
            suspect_index=data["suspect_index"],
            suspect_value=data["suspect_value"],
            is_outlier=data["is_outlier"],
        )
