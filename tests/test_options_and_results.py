import json
import math

import numpy as np
import pytest

from grubbs_outlier import GrubbsOptions, GrubbsTestResult, GrubbsTestType, critical_grubbs, grubbs_test
from grubbs_outlier.core.errors import GrubbsError, InvalidParameterError


# -----------------------------------------------------------------------------
# GrubbsTestType
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "text, expected",
    [
        ("two-sided", GrubbsTestType.TWO_SIDED),
        ("two", GrubbsTestType.TWO_SIDED),
        ("Two_Sided", GrubbsTestType.TWO_SIDED),
        ("  lower ", GrubbsTestType.LOWER),
        ("min", GrubbsTestType.LOWER),
        ("UPPER", GrubbsTestType.UPPER),
        ("max", GrubbsTestType.UPPER),
    ],
)
def test_test_type_from_string(text, expected):
    assert GrubbsTestType.from_string(text) is expected


def test_test_type_from_string_rejects_unknown():
    with pytest.raises(InvalidParameterError, match="middle"):
        GrubbsTestType.from_string("middle")


def test_test_type_tails():
    assert GrubbsTestType.TWO_SIDED.tails == 2
    assert GrubbsTestType.LOWER.tails == 1
    assert GrubbsTestType.UPPER.tails == 1


def test_test_type_coerce_passes_members_through():
    assert GrubbsTestType.coerce(GrubbsTestType.LOWER) is GrubbsTestType.LOWER


# -----------------------------------------------------------------------------
# GrubbsOptions
# -----------------------------------------------------------------------------

def test_options_defaults():
    opts = GrubbsOptions()
    assert opts.alpha == 0.05
    assert opts.test_type is GrubbsTestType.TWO_SIDED
    assert opts.tails == 2
    assert opts.confidence_level == pytest.approx(0.95)


def test_options_convert_string_test_type():
    opts = GrubbsOptions(alpha=0.01, test_type="upper")
    assert opts.test_type is GrubbsTestType.UPPER
    assert opts.tails == 1


@pytest.mark.parametrize("alpha", [0.0, 1.0, -0.1, 2.0, "0.05", True])
def test_options_reject_bad_alpha(alpha):
    with pytest.raises(InvalidParameterError):
        GrubbsOptions(alpha=alpha)


def test_options_reject_bad_test_type():
    with pytest.raises(InvalidParameterError):
        GrubbsOptions(test_type="sideways")


def test_options_dict_roundtrip():
    opts = GrubbsOptions(alpha=0.1, test_type=GrubbsTestType.LOWER)
    data = opts.to_dict()
    assert data == {"alpha": 0.1, "test_type": "lower"}
    assert GrubbsOptions.from_dict(data) == opts
    assert GrubbsOptions.from_dict({}) == GrubbsOptions()


# -----------------------------------------------------------------------------
# GrubbsTestResult
# -----------------------------------------------------------------------------

def _result(**overrides) -> GrubbsTestResult:
    fields = dict(
        test_type=GrubbsTestType.UPPER,
        statistic=2.5,
        critical_value=2.0,
        alpha=0.05,
        sample_size=10,
        mean=1.0,
        standard_deviation=0.5,
        suspect_index=3,
        suspect_value=2.25,
        is_outlier=True,
    )
    fields.update(overrides)
    return GrubbsTestResult(**fields)


def test_result_properties():
    res = _result()
    assert res.degrees_of_freedom == 8
    assert res.tails == 1
    assert res.confidence_level == pytest.approx(0.95)


def test_result_to_dict_and_back():
    res = _result()
    data = res.to_dict()
    assert data["test_name"] == "grubbs"
    assert data["test_type"] == "upper"
    assert data["tails"] == 1
    assert data["degrees_of_freedom"] == 8
    assert GrubbsTestResult.from_dict(data) == res


def test_result_to_dict_replaces_non_finite_values():
    data = _result(statistic=math.nan, critical_value=math.inf).to_dict()
    assert data["statistic"] is None
    assert data["critical_value"] is None


def test_result_to_json_is_valid_json():
    res = grubbs_test([199.31, 199.53, 200.19, 200.82, 201.92, 201.95, 202.18, 245.57])
    parsed = json.loads(res.to_json())
    assert parsed["is_outlier"] is True
    assert parsed["suspect_index"] == 7
    assert parsed["test_type"] == "two-sided"


def test_errors_share_value_error_base():
    assert issubclass(InvalidParameterError, GrubbsError)
    assert issubclass(GrubbsError, ValueError)


def test_options_accept_numpy_alpha():
    opts = GrubbsOptions(alpha=np.float32(0.05))
    assert opts.alpha == pytest.approx(0.05)
    res = grubbs_test([1.0, 1.1, 0.9, 1.05, 5.0], opts)
    assert res.critical_value == pytest.approx(critical_grubbs(0.05, 5, 2), rel=1e-6)
