"""
Options for the Grubbs outlier test.

This module defines the test-type enumeration and the configuration used by
``grubbs_test``: significance level and which extreme is tested.
"""

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from ..errors import InvalidParameterError


class GrubbsTestType(Enum):
    """
    Grubbs test variants.

    Supported variants:
    - TWO_SIDED: the observation with the largest absolute deviation
    - LOWER: the minimum is tested as a low outlier
    - UPPER: the maximum is tested as a high outlier
    """
    TWO_SIDED = "two-sided"
    LOWER = "lower"
    UPPER = "upper"

    @classmethod
    def from_string(cls, s: str) -> "GrubbsTestType":
        """Create GrubbsTestType from string (case-insensitive)."""
        if not isinstance(s, str):
            raise InvalidParameterError(f"{s!r} is not a valid Grubbs test")
        s_lower = s.lower().strip()
        s_lower = _ALIASES.get(s_lower, s_lower)
        for test_type in cls:
            if test_type.value == s_lower:
                return test_type
        raise InvalidParameterError(f"{s!r} is not a valid Grubbs test")

    @classmethod
    def coerce(cls, value: Union["GrubbsTestType", str]) -> "GrubbsTestType":
        """Accept either an enum member or its text form."""
        if isinstance(value, cls):
            return value
        return cls.from_string(value)

    @property
    def tails(self) -> int:
        """Number of tails used for the critical value."""
        return 2 if self is GrubbsTestType.TWO_SIDED else 1


_ALIASES = {
    "two": "two-sided",
    "two_sided": "two-sided",
    "twosided": "two-sided",
    "min": "lower",
    "max": "upper",
}


@dataclass
class GrubbsOptions:
    """
    Configuration for a Grubbs outlier test.

    Attributes:
        alpha: Significance level in (0, 1) (default: 0.05)
        test_type: Which extreme is tested (default: two-sided). A string
            such as "lower" is converted to the enum.
    """

    alpha: float = 0.05
    test_type: GrubbsTestType = GrubbsTestType.TWO_SIDED

    def __post_init__(self):
        """Validate options after initialization."""
        if isinstance(self.alpha, bool) or not isinstance(self.alpha, numbers.Real):
            raise InvalidParameterError("alpha must be a number")

        if not 0 < self.alpha < 1:
            raise InvalidParameterError("alpha must be between 0 and 1")

        # Convert string to enum if needed
        self.test_type = GrubbsTestType.coerce(self.test_type)

    @property
    def tails(self) -> int:
        """Tail count matching the test type."""
        return self.test_type.tails

    @property
    def confidence_level(self) -> float:
        """Confidence level (complement of alpha)."""
        return 1.0 - self.alpha

    def to_dict(self) -> Dict[str, Any]:
        """Serialize options to dictionary."""
        return {
            "alpha": self.alpha,
            "test_type": self.test_type.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GrubbsOptions":
        """Create options from dictionary."""
        return cls(
            alpha=data.get("alpha", 0.05),
            test_type=data.get("test_type", GrubbsTestType.TWO_SIDED.value),
        )
