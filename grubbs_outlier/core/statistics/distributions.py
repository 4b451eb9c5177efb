"""grubbs_outlier.core.statistics.distributions

Distribution helpers (no SciPy).

Implemented:
- Standard normal PPF via stdlib ``statistics.NormalDist``
- Student's t CDF/PDF/PPF via regularized incomplete beta + safeguarded Newton

Student's t:
  For T ~ t(df) and t >= 0,
      P(T > t) = 0.5 * I_x(df/2, 1/2),   x = df / (df + t^2)
  where I_x(a, b) is the regularized incomplete beta function. The
  distribution is symmetric, so the lower tail follows directly.

Quantile convention:
  ``student_t_ppf`` and ``StudentT.inverse`` return the LEFT-tail quantile,
  i.e. t such that P(T <= t) = p. Small p therefore gives a negative t.

References (algorithms):
- Numerical Recipes style continued fraction for the incomplete beta
  (modified Lentz's method).
"""

from __future__ import annotations

import math
import numbers
from statistics import NormalDist

from ..errors import InvalidParameterError


# ----------------------------
# Normal
# ----------------------------

_NORMAL = NormalDist()


def normal_ppf(p: float) -> float:
    """Standard normal quantile (inverse CDF).

    Args:
        p: probability in (0, 1)

    Returns:
        z such that P(Z <= z) = p
    """
    _check_probability(p)
    return float(_NORMAL.inv_cdf(p))


# ----------------------------
# Incomplete beta (regularized)
# ----------------------------

_DEF_EPS = 1e-15
_DEF_MAX_IT = 2000
_TINY = 1e-300


def _betacf(a: float, b: float, x: float, eps: float = _DEF_EPS, max_it: int = _DEF_MAX_IT) -> float:
    """Continued fraction for the incomplete beta function (modified Lentz)."""
    qab = a + b
    qap = a + 1.0
    qam = a - 1.0
    c = 1.0
    d = 1.0 - qab * x / qap
    if abs(d) < _TINY:
        d = _TINY
    d = 1.0 / d
    h = d

    for m in range(1, max_it + 1):
        m2 = 2 * m
        # Even step
        aa = m * (b - m) * x / ((qam + m2) * (a + m2))
        d = 1.0 + aa * d
        if abs(d) < _TINY:
            d = _TINY
        c = 1.0 + aa / c
        if abs(c) < _TINY:
            c = _TINY
        d = 1.0 / d
        h *= d * c
        # Odd step
        aa = -(a + m) * (qab + m) * x / ((a + m2) * (qap + m2))
        d = 1.0 + aa * d
        if abs(d) < _TINY:
            d = _TINY
        c = 1.0 + aa / c
        if abs(c) < _TINY:
            c = _TINY
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) < eps:
            break

    return h


def _betainc_reg(a: float, b: float, x: float) -> float:
    """Regularized incomplete beta I_x(a, b).

    Args:
        a, b: shape parameters (>0)
        x: integration limit in [0, 1]

    Returns:
        I_x(a, b) in [0, 1]
    """
    if a <= 0.0 or b <= 0.0:
        raise ValueError("a and b must be positive")
    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0

    # Common factor x^a (1-x)^b / B(a, b), via logs for stability
    log_front = (
        math.lgamma(a + b) - math.lgamma(a) - math.lgamma(b)
        + a * math.log(x) + b * math.log1p(-x)
    )
    front = math.exp(log_front)

    # The continued fraction converges fastest for x < (a+1)/(a+b+2)
    if x < (a + 1.0) / (a + b + 2.0):
        return front * _betacf(a, b, x) / a
    return 1.0 - front * _betacf(b, a, 1.0 - x) / b


# ----------------------------
# Student's t
# ----------------------------


def _check_df(df: float) -> None:
    if not (isinstance(df, numbers.Real) and math.isfinite(df)) or df <= 0:
        raise InvalidParameterError(f"degrees of freedom must be positive, got {df}")


def _check_probability(p: float) -> None:
    if not (0.0 < p < 1.0):
        raise InvalidParameterError(f"p must be in (0,1), got {p}")


def _upper_tail(t: float, df: float) -> float:
    """P(T > |t|) for T ~ t(df)."""
    x = df / (df + t * t)
    return 0.5 * _betainc_reg(0.5 * df, 0.5, x)


def student_t_cdf(t: float, df: float) -> float:
    """CDF of Student's t distribution.

    Args:
        t: value
        df: degrees of freedom (>0)

    Returns:
        P(T <= t)
    """
    _check_df(df)
    if math.isinf(t):
        return 1.0 if t > 0 else 0.0
    tail = _upper_tail(t, float(df))
    return 1.0 - tail if t > 0.0 else tail


def student_t_pdf(t: float, df: float) -> float:
    """PDF of Student's t distribution."""
    _check_df(df)
    v = float(df)
    # log(pdf) = lgamma((v+1)/2) - lgamma(v/2) - 0.5 log(v pi) - (v+1)/2 log(1 + t^2/v)
    log_pdf = (
        math.lgamma(0.5 * (v + 1.0)) - math.lgamma(0.5 * v)
        - 0.5 * math.log(v * math.pi)
        - 0.5 * (v + 1.0) * math.log1p(t * t / v)
    )
    return math.exp(log_pdf)


def student_t_ppf(p: float, df: float) -> float:
    """Quantile (inverse CDF) of Student's t distribution.

    Solves for the upper-tail probability min(p, 1 - p) with a safeguarded
    Newton method that maintains a bracket, then mirrors for p < 0.5.

    Args:
        p: probability in (0,1)
        df: degrees of freedom (>0)

    Returns:
        t such that student_t_cdf(t, df) = p
    """
    _check_df(df)
    _check_probability(p)

    if p == 0.5:
        return 0.0
    if p < 0.5:
        return -_upper_quantile(p, df)
    return _upper_quantile(1.0 - p, df)


def _upper_quantile(q: float, df: float) -> float:
    """t > 0 such that P(T > t) = q, for q in (0, 0.5).

    Takes the tail probability directly so tiny q keeps full precision.
    """
    # Bracket [lo, hi] with P(T > lo) >= q >= P(T > hi)
    lo = 0.0
    hi = max(-normal_ppf(q), 1.0)
    for _ in range(200):
        if _upper_tail(hi, df) <= q:
            break
        lo = hi
        hi *= 2.0
    else:
        # If we didn't break, the quantile is beyond double range
        return float(hi)

    x = 0.5 * (lo + hi)

    tol = 1e-13
    for _ in range(200):
        tail = _upper_tail(x, df)
        if tail > q:
            lo = x
        else:
            hi = x

        pdf = student_t_pdf(x, df)
        if pdf > 0.0:
            # d/dx of the upper tail is -pdf
            x_new = x + (tail - q) / pdf
        else:
            x_new = float('nan')

        # Safeguard: keep inside bracket
        if (not math.isfinite(x_new)) or x_new <= lo or x_new >= hi:
            x_new = 0.5 * (lo + hi)

        if abs(x_new - x) <= tol * max(1.0, abs(x)):
            return float(x_new)
        x = x_new

    return float(x)


class StudentT:
    """Student's t distribution with ``df`` degrees of freedom.

    ``inverse`` is the left-tail quantile function (same as ``ppf``).
    """

    def __init__(self, df: float):
        _check_df(df)
        self.df = df

    def cdf(self, t: float) -> float:
        return student_t_cdf(t, self.df)

    def pdf(self, t: float) -> float:
        return student_t_pdf(t, self.df)

    def inverse(self, p: float) -> float:
        return student_t_ppf(p, self.df)

    ppf = inverse

    def __repr__(self) -> str:
        return f"StudentT(df={self.df})"
