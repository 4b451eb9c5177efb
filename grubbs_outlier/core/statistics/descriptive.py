"""grubbs_outlier.core.statistics.descriptive

Descriptive statistics over a one-dimensional sample.

Conventions:
- Standard deviation uses the sample (n - 1) denominator by default,
  matching the tabulated Grubbs critical values.
- Input is copied into a float ``numpy.ndarray``; the caller's object is
  never modified.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from ..errors import InvalidParameterError, InvalidSampleError

SampleLike = Union[Sequence[float], np.ndarray]


def as_sample(sample: SampleLike, min_size: int = 1) -> np.ndarray:
    """Validate a sample and return it as a 1-D float array.

    Args:
        sample: sequence of real numbers
        min_size: minimum number of observations required

    Returns:
        float64 array (a copy)

    Raises:
        InvalidSampleError: if the sample is not 1-D, is too small, or has
            NaN/inf values
    """
    try:
        data = np.array(sample, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidSampleError(f"sample must contain real numbers: {exc}") from exc

    if data.ndim != 1:
        raise InvalidSampleError(f"sample must be one-dimensional, got shape {data.shape}")
    if data.size < min_size:
        raise InvalidSampleError(
            f"sample must contain at least {min_size} observations, got {data.size}"
        )
    if not np.all(np.isfinite(data)):
        raise InvalidSampleError("sample contains non-finite values")
    return data


def mean(sample: SampleLike) -> float:
    """Arithmetic mean of a sample."""
    data = as_sample(sample, min_size=1)
    return float(np.mean(data))


def standard_deviation(sample: SampleLike, ddof: int = 1) -> float:
    """Standard deviation of a sample.

    Args:
        sample: sequence of real numbers
        ddof: delta degrees of freedom; 1 gives the sample (n - 1) estimate,
            0 the population estimate

    Returns:
        standard deviation (>= 0)
    """
    if ddof < 0:
        raise InvalidParameterError(f"ddof must be non-negative, got {ddof}")
    data = as_sample(sample, min_size=ddof + 1)
    return float(np.std(data, ddof=ddof))
