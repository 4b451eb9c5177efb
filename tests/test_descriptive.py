import math

import numpy as np
import pytest

from grubbs_outlier.core.errors import InvalidParameterError, InvalidSampleError
from grubbs_outlier.core.statistics.descriptive import as_sample, mean, standard_deviation


def test_mean_and_sample_standard_deviation():
    data = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
    assert mean(data) == pytest.approx(5.0)
    # population sd is 2.0; sample sd uses n - 1
    assert standard_deviation(data, ddof=0) == pytest.approx(2.0)
    assert standard_deviation(data) == pytest.approx(math.sqrt(32.0 / 7.0))


def test_as_sample_copies_input():
    original = np.array([1.0, 2.0, 3.0])
    data = as_sample(original)
    data[0] = 100.0
    assert original[0] == 1.0


def test_as_sample_accepts_tuples_and_ints():
    data = as_sample((1, 2, 3), min_size=3)
    assert data.dtype == float
    assert data.tolist() == [1.0, 2.0, 3.0]


def test_mean_rejects_empty_sample():
    with pytest.raises(InvalidSampleError):
        mean([])


def test_standard_deviation_requires_two_observations():
    with pytest.raises(InvalidSampleError):
        standard_deviation([1.0])
    assert standard_deviation([1.0], ddof=0) == 0.0


@pytest.mark.parametrize(
    "bad",
    [
        [1.0, math.nan, 2.0],
        [1.0, math.inf, 2.0],
        [[1.0, 2.0], [3.0, 4.0]],
        ["a", "b", "c"],
    ],
)
def test_as_sample_rejects_invalid_input(bad):
    with pytest.raises(InvalidSampleError):
        as_sample(bad)


def test_invalid_sample_error_is_value_error():
    with pytest.raises(ValueError):
        mean([])


def test_standard_deviation_rejects_negative_ddof():
    with pytest.raises(InvalidParameterError, match="ddof"):
        standard_deviation([1.0, 2.0, 3.0], ddof=-1)
