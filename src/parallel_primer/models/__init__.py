"""Closed-form model helpers (normal CDF, Black-Scholes terms and prices)."""

from .bs import (
    call_price,
    d1_d2,
    discount_factor,
    norm_cdf,
    norm_cdf_scalar,
    put_price,
)

__all__ = [
    "norm_cdf",
    "norm_cdf_scalar",
    "discount_factor",
    "d1_d2",
    "call_price",
    "put_price",
]
