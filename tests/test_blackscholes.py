import math

import numpy as np
import pytest

from parallel_primer.config import ParallelConfig
from parallel_primer.kernels.blackscholes import (
    blackscholes,
    blackscholes_parallel,
    blackscholes_vec,
    checksum,
)
from parallel_primer.models.bs import put_price


def test_three_strike_scenario_serial_equals_parallel(bs_params):
    strikes = [40.0, 42.0, 44.0]
    p = bs_params

    serial = blackscholes(p["spot"], strikes, p["rate"], p["sigma"], p["tau"])
    par = blackscholes_parallel(
        p["spot"], strikes, p["rate"], p["sigma"], p["tau"], n_workers=2
    )

    assert serial.shape == (3,)
    assert np.all(np.isfinite(serial))
    assert np.all(serial > 0.0)
    np.testing.assert_allclose(par, serial, rtol=1e-9, atol=0.0)


def test_kernel_combination_step(bs_params):
    """put = call - futureValue + spot, i.e. the textbook put plus 2*(S - K e^{-r tau})."""
    p = bs_params
    strikes = np.array([38.0, 40.0, 42.0, 44.0, 46.0])

    got = blackscholes(p["spot"], strikes, p["rate"], p["sigma"], p["tau"])

    future_value = strikes * math.exp(-p["rate"] * p["tau"])
    textbook = put_price(
        spot=p["spot"], strike=strikes, rate=p["rate"], sigma=p["sigma"], tau=p["tau"]
    )
    np.testing.assert_allclose(
        got, textbook + 2.0 * (p["spot"] - future_value), rtol=1e-12
    )


def test_vectorized_matches_loop(bs_params, make_strikes):
    p = bs_params
    strikes = make_strikes(1_000)

    loop = blackscholes(p["spot"], strikes, p["rate"], p["sigma"], p["tau"])
    vec = blackscholes_vec(p["spot"], strikes, p["rate"], p["sigma"], p["tau"])

    np.testing.assert_allclose(vec, loop, rtol=1e-9)


@pytest.mark.parametrize("backend", ["thread", "process"])
@pytest.mark.parametrize("chunks", [None, 1, 3, 7])
def test_parallel_matches_serial(bs_params, make_strikes, backend, chunks):
    p = bs_params
    strikes = make_strikes(1_001)

    serial = blackscholes(p["spot"], strikes, p["rate"], p["sigma"], p["tau"])
    par = blackscholes_parallel(
        p["spot"],
        strikes,
        p["rate"],
        p["sigma"],
        p["tau"],
        n_workers=2,
        backend=backend,
        chunks=chunks,
    )

    assert par.shape == serial.shape
    np.testing.assert_allclose(par, serial, rtol=1e-9)


def test_more_chunks_than_strikes(bs_params):
    p = bs_params
    strikes = [40.0, 41.0]
    par = blackscholes_parallel(
        p["spot"], strikes, p["rate"], p["sigma"], p["tau"], n_workers=1, chunks=8
    )
    np.testing.assert_allclose(
        par, blackscholes(p["spot"], strikes, p["rate"], p["sigma"], p["tau"])
    )


def test_config_supplies_defaults(bs_params, make_strikes):
    p = bs_params
    strikes = make_strikes(50)
    cfg = ParallelConfig(n_workers=2, backend="thread", chunks=5)

    par = blackscholes_parallel(
        p["spot"], strikes, p["rate"], p["sigma"], p["tau"], cfg=cfg
    )
    np.testing.assert_allclose(
        par, blackscholes_vec(p["spot"], strikes, p["rate"], p["sigma"], p["tau"])
    )


@pytest.mark.parametrize("fn", [blackscholes, blackscholes_vec, blackscholes_parallel])
def test_empty_strikes_give_empty_result(bs_params, fn):
    p = bs_params
    out = fn(p["spot"], np.empty(0), p["rate"], p["sigma"], p["tau"])
    assert out.shape == (0,)
    assert out.dtype == np.float64


def test_input_is_not_modified(bs_params, make_strikes):
    p = bs_params
    strikes = make_strikes(100)
    before = strikes.copy()
    blackscholes_parallel(p["spot"], strikes, p["rate"], p["sigma"], p["tau"], n_workers=2)
    np.testing.assert_array_equal(strikes, before)


def test_zero_time_propagates_domain_error(bs_params):
    p = bs_params
    with pytest.raises(ZeroDivisionError):
        blackscholes(p["spot"], [40.0], p["rate"], p["sigma"], 0.0)


def test_checksum_is_sum(bs_params, make_strikes):
    p = bs_params
    prices = blackscholes_vec(p["spot"], make_strikes(10), p["rate"], p["sigma"], p["tau"])
    assert checksum(prices) == pytest.approx(float(prices.sum()), rel=1e-12)
    assert checksum([]) == 0.0
