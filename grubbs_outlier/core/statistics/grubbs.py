"""grubbs_outlier.core.statistics.grubbs

Grubbs' test for a single outlier in an approximately normal sample.

Includes:
- Grubbs statistic G (two-sided, lower, upper)
- Critical Grubbs value from alpha, n and tail count
- ``grubbs_test`` combining both into a decision for the most extreme point

Test statistics:

    two-sided:  G = max|y_i - mean| / s
    lower:      G = (mean - y_min) / s
    upper:      G = (y_max - mean) / s

with s the sample standard deviation (n - 1 denominator).

Critical value (NIST/SEMATECH e-Handbook, section 1.3.5.17.1):

              (n - 1)            T^2
    G_crit = ------- * sqrt( ----------- )
              sqrt(n)         n - 2 + T^2

T is the t quantile with n - 2 degrees of freedom at probability alpha/(2n)
(two-sided) or alpha/n (one-sided).
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Callable, Optional, Union

import numpy as np

from .descriptive import SampleLike, as_sample, mean, standard_deviation
from .distributions import StudentT
from ..errors import DegenerateSampleError, InvalidParameterError, InvalidSampleError
from ..models.options import GrubbsOptions, GrubbsTestType
from ..results.grubbs_result import GrubbsTestResult

logger = logging.getLogger(__name__)

MIN_SAMPLE_SIZE = 3

# (degrees_of_freedom, probability) -> t quantile
TInverse = Callable[[int, float], float]


def _default_t_inverse(df: int, p: float) -> float:
    return StudentT(df).inverse(p)


def _location_scale(data: np.ndarray) -> tuple[float, float]:
    """Mean and sample standard deviation, rejecting zero spread."""
    if data.max() == data.min():
        raise DegenerateSampleError(
            "sample has zero variance; Grubbs statistic is undefined"
        )
    with np.errstate(over="ignore", invalid="ignore"):
        mu = mean(data)
        sigma = standard_deviation(data, ddof=1)
    if not (math.isfinite(mu) and math.isfinite(sigma)):
        raise InvalidSampleError(
            "sample mean or standard deviation overflows; rescale the data"
        )
    if sigma == 0.0:
        raise DegenerateSampleError(
            "sample has zero variance; Grubbs statistic is undefined"
        )
    return mu, sigma


def grubbs_statistic(
    sample: SampleLike,
    test_type: Union[GrubbsTestType, str] = GrubbsTestType.TWO_SIDED,
) -> float:
    """Compute the Grubbs statistic G.

    G is the largest z-score of the sample, looking at the observation with
    the largest absolute residual (two-sided), the minimum (lower) or the
    maximum (upper). The one-sided values are negative when the tested
    extreme lies on the other side of the mean.

    Args:
        sample: sequence of at least 3 finite real numbers
        test_type: GrubbsTestType or its text form ("two-sided", "lower", "upper")

    Returns:
        G statistic

    Raises:
        InvalidParameterError: unknown test type
        InvalidSampleError: fewer than 3 observations, non-finite values, or
            a mean/standard deviation that overflows
        DegenerateSampleError: all observations equal
    """
    test_type = GrubbsTestType.coerce(test_type)
    data = as_sample(sample, min_size=MIN_SAMPLE_SIZE)
    mu, sigma = _location_scale(data)

    if test_type is GrubbsTestType.TWO_SIDED:
        return float(np.max(np.abs(data - mu)) / sigma)
    if test_type is GrubbsTestType.LOWER:
        return float((mu - data.min()) / sigma)
    return float((data.max() - mu) / sigma)


def critical_grubbs(
    alpha: float,
    n: int,
    tails: int = 2,
    t_inverse: Optional[TInverse] = None,
) -> float:
    """Critical Grubbs value.

    An observation is a significant outlier at level alpha when its G
    statistic exceeds this value.

    Args:
        alpha: significance level in (0, 1)
        n: sample size (>= 3)
        tails: 1 (one-sided test) or 2 (two-sided test)
        t_inverse: quantile function of Student's t taking
            (degrees_of_freedom, probability); defaults to StudentT.inverse.
            Either tail convention works since only T^2 is used.

    Returns:
        critical G (> 0)

    Raises:
        InvalidParameterError: tails not 1 or 2, n < 3, alpha outside (0, 1)
    """
    if isinstance(tails, bool) or tails not in (1, 2):
        raise InvalidParameterError("tails must be 1 or 2")
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidParameterError(f"n must be an integer, got {n!r}")
    n = int(n)
    if n < MIN_SAMPLE_SIZE:
        raise InvalidParameterError(
            f"n must be at least {MIN_SAMPLE_SIZE} (degrees of freedom n-2 > 0), got {n}"
        )
    if isinstance(alpha, bool) or not isinstance(alpha, numbers.Real) or not (0.0 < alpha < 1.0):
        raise InvalidParameterError(f"alpha must be in (0,1), got {alpha!r}")
    alpha = float(alpha)

    if t_inverse is None:
        t_inverse = _default_t_inverse

    dof = n - 2
    p = alpha / n if tails == 1 else alpha / (2.0 * n)
    t = float(t_inverse(dof, p))
    if not math.isfinite(t):
        raise InvalidParameterError(f"t quantile is not finite for df={dof}, p={p}")

    t2 = t * t
    return (n - 1) / math.sqrt(n) * math.sqrt(t2 / (dof + t2))


def _suspect_index(data: np.ndarray, mu: float, test_type: GrubbsTestType) -> int:
    if test_type is GrubbsTestType.TWO_SIDED:
        return int(np.argmax(np.abs(data - mu)))
    if test_type is GrubbsTestType.LOWER:
        return int(np.argmin(data))
    return int(np.argmax(data))


def grubbs_test(
    sample: SampleLike,
    options: Optional[GrubbsOptions] = None,
    t_inverse: Optional[TInverse] = None,
) -> GrubbsTestResult:
    """Run Grubbs' test on the most extreme observation of a sample.

    Decision:
        outlier  <=>  G > G_crit(alpha, n, tails)

    with tails = 2 for the two-sided test and 1 for the one-sided tests.

    Args:
        sample: sequence of at least 3 finite real numbers
        options: GrubbsOptions (default: alpha=0.05, two-sided)
        t_inverse: optional Student's t quantile function, see critical_grubbs

    Returns:
        GrubbsTestResult
    """
    if options is None:
        options = GrubbsOptions()

    data = as_sample(sample, min_size=MIN_SAMPLE_SIZE)
    test_type = options.test_type
    mu, sigma = _location_scale(data)

    statistic = grubbs_statistic(data, test_type)
    critical = critical_grubbs(options.alpha, int(data.size), options.tails, t_inverse)
    idx = _suspect_index(data, mu, test_type)
    is_outlier = bool(statistic > critical)

    logger.debug(
        "Grubbs %s test: n=%d G=%.6g G_crit=%.6g alpha=%g suspect=%d outlier=%s",
        test_type.value, data.size, statistic, critical, options.alpha, idx, is_outlier,
    )

    return GrubbsTestResult(
        test_type=test_type,
        statistic=statistic,
        critical_value=critical,
        alpha=float(options.alpha),
        sample_size=int(data.size),
        mean=mu,
        standard_deviation=sigma,
        suspect_index=idx,
        suspect_value=float(data[idx]),
        is_outlier=is_outlier,
    )
