from __future__ import annotations

import math

import numpy as np
from scipy.special import erf

from ..typing import ArrayLike, FloatArray

_SQRT2 = math.sqrt(2.0)


def norm_cdf(x: ArrayLike) -> float | FloatArray:
    """
    Standard normal CDF via the error function, Phi(x) = 0.5 + 0.5 * erf(x / sqrt(2)).

    Scalars in give a Python float out; sequences and arrays are evaluated
    element-wise.
    """
    if np.ndim(x) == 0:
        return float(0.5 + 0.5 * erf(float(x) / _SQRT2))
    return 0.5 + 0.5 * erf(np.asarray(x, dtype=np.float64) / _SQRT2)


def norm_cdf_scalar(x: float) -> float:
    # same identity on math.erf; cheaper than a ufunc call inside a Python loop
    return 0.5 + 0.5 * math.erf(x / _SQRT2)


def discount_factor(rate: float, tau: float) -> float:
    return math.exp(-rate * tau)


def d1_d2(
    *,
    spot: float,
    strike: ArrayLike,
    rate: float,
    sigma: float,
    tau: float,
) -> tuple[FloatArray, FloatArray]:
    strike = np.asarray(strike, dtype=np.float64)
    vol_sqrt_t = sigma * math.sqrt(tau)
    num = np.log(spot / strike) + (rate + 0.5 * sigma * sigma) * tau
    d1 = num / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    return d1, d2


def call_price(
    *, spot: float, strike: ArrayLike, rate: float, sigma: float, tau: float
) -> FloatArray:
    """
    Black–Scholes European call (no dividends), element-wise over strikes.
    """
    d1, d2 = d1_d2(spot=spot, strike=strike, rate=rate, sigma=sigma, tau=tau)
    df = discount_factor(rate, tau)
    return spot * norm_cdf(d1) - np.asarray(strike, dtype=np.float64) * df * norm_cdf(
        d2
    )


def put_price(
    *, spot: float, strike: ArrayLike, rate: float, sigma: float, tau: float
) -> FloatArray:
    """
    Black–Scholes European put (no dividends), element-wise over strikes.

    Satisfies put-call parity ``C - P = S - K e^{-r tau}`` exactly in closed form.
    """
    d1, d2 = d1_d2(spot=spot, strike=strike, rate=rate, sigma=sigma, tau=tau)
    df = discount_factor(rate, tau)
    return np.asarray(strike, dtype=np.float64) * df * norm_cdf(
        -d2
    ) - spot * norm_cdf(-d1)
