import numpy as np
import pytest

from windrain.catch import global_catch_ratio, specific_catch_ratio


def test_specific_catch_ratio_invariant():
    vel = np.array([0.5, 2.0, 0.0])
    alpha = np.array([1e-6, 3e-6, 5e-6])
    scr = specific_catch_ratio(vel, alpha, 10.0, 0.25)
    assert scr * 10.0 * 0.25 / 3.6e6 == pytest.approx(vel * alpha)
    assert scr[2] == 0.0


def test_specific_catch_ratio_scalar():
    scr = specific_catch_ratio(1.0, 1.0, 3600.0, 1.0)
    assert scr == pytest.approx(1000.0)


@pytest.mark.parametrize("rh,fraction", [(0.0, 0.5), (10.0, 0.0), (-1.0, 0.5)])
def test_specific_catch_ratio_rejects_nonpositive(rh, fraction):
    with pytest.raises(ValueError):
        specific_catch_ratio(1.0, 1.0, rh, fraction)


def test_global_catch_ratio_single_phase():
    scr = np.array([0.2, 0.4])
    assert global_catch_ratio([scr], [0.5]) == pytest.approx(scr * 0.5)


def test_global_catch_ratio_full_rainfall_constant():
    scrs = [np.full(3, 0.8), np.full(3, 0.8)]
    assert global_catch_ratio(scrs, [0.3, 0.7]) == pytest.approx(np.full(3, 0.8))


def test_global_catch_ratio_is_linear():
    a = np.array([1.0, 2.0])
    b = np.array([3.0, 0.5])
    combined = global_catch_ratio([a, b], [0.4, 0.6])
    assert combined == pytest.approx(
        global_catch_ratio([a], [0.4]) + global_catch_ratio([b], [0.6])
    )


def test_global_catch_ratio_errors():
    with pytest.raises(ValueError):
        global_catch_ratio([], [])
    with pytest.raises(ValueError):
        global_catch_ratio([np.ones(2)], [0.5, 0.5])