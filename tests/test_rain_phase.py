import numpy as np
import pytest

from windrain.rain_phase import RainPhase, TurbulentDispersion, drag_cd_re


@pytest.fixture
def phase():
    return RainPhase(index=0, diameter=0.001, volume_fraction=0.25)


def test_stokes_regime_is_constant():
    values = drag_cd_re(np.array([0.0, 0.01, 0.05, 0.099]))
    assert np.allclose(values, 24.0)


def test_high_reynolds_constant_drag_coefficient():
    re = np.array([260.0, 1000.0, 5000.0])
    assert np.allclose(drag_cd_re(re) / re, 0.44)


def test_drag_scalar_returns_float():
    value = drag_cd_re(0.05)
    assert isinstance(value, float)
    assert value == 24.0


@pytest.mark.parametrize("lo,hi", [(0.1, 2.0), (2.0, 20.0), (20.0, 260.0)])
def test_drag_increasing_within_segment(lo, hi):
    re = np.linspace(lo, hi, 50, endpoint=False)
    values = drag_cd_re(re).tolist()
    assert len(values) == 50
    assert values == sorted(values)
    assert len(set(values)) == len(values)
    assert values[0] < values[-1]


def test_default_name_and_field_names(phase):
    assert phase.name == "1"
    assert phase.field_names["U"] == "U1"
    assert phase.field_names["alpha"] == "alpha1"


def test_invalid_diameter():
    with pytest.raises(ValueError):
        RainPhase(index=0, diameter=0.0, volume_fraction=0.5)


def test_invalid_volume_fraction():
    with pytest.raises(ValueError):
        RainPhase(index=0, diameter=0.001, volume_fraction=-1.0)


def test_reynolds_zero_relative_velocity(phase):
    u = np.array([[1.0, 2.0, 3.0], [4.0, 0.0, -1.0]])
    assert np.allclose(phase.reynolds(u, u, 1.2, 1.8e-5), 0.0)


def test_reynolds_scales_with_diameter():
    small = RainPhase(index=0, diameter=0.001, volume_fraction=0.5)
    large = RainPhase(index=1, diameter=0.002, volume_fraction=0.5)
    wind = np.array([5.0, 0.0, 0.0])
    rain = np.array([0.0, 0.0, -4.0])
    assert large.reynolds(wind, rain, 1.2, 1.8e-5) == pytest.approx(
        2.0 * small.reynolds(wind, rain, 1.2, 1.8e-5)
    )


def test_update_properties_consistent(phase):
    wind = np.array([[3.0, 0.0, 0.0], [10.0, 0.0, 0.0]])
    rain = np.zeros((2, 3))
    re, cd = phase.update_properties(wind, rain, 1.2, 1.8e-5)
    assert np.allclose(re, phase.reynolds(wind, rain, 1.2, 1.8e-5))
    assert np.allclose(cd, drag_cd_re(re))


def test_dispersion_invariants(phase):
    k = np.array([0.5, 1.0, 2.0])
    eps = np.array([0.1, 0.2, 0.05])
    nut = np.array([0.01, 0.02, 0.03])
    cd = np.array([100.0, 200.0, 300.0])
    result = phase.dispersion(k, eps, nut, 1000.0, 1.8e-5, cd)
    assert np.all((result.ct > 0) & (result.ct < 1))
    assert np.allclose(result.nutrain, nut * result.ct ** 2)
    assert np.allclose(result.ct ** 2, result.tfl / (result.tfl + result.tp))


def test_relaxation_time_inverse_of_drag_factor(phase):
    cd = np.array([50.0, 250.0])
    disp = phase.dispersion(np.ones(2), np.ones(2), np.ones(2), 1000.0, 1.8e-5, cd)
    factor = phase.drag_factor(1000.0, 1.8e-5, cd)
    assert np.allclose(disp.tp * factor, 1.0)


def test_no_turbulence_gives_zero_viscosity(phase):
    result = phase.dispersion(None, None, None, 1000.0, 1.8e-5, np.array([250.0, 250.0]))
    assert isinstance(result, TurbulentDispersion)
    assert np.allclose(result.nutrain, 0.0)


def test_specific_catch_ratio_scaling(phase):
    vel = np.array([1.0, 2.0, 3.0])
    alpha = np.array([1e-7, 2e-7, 3e-7])
    base = phase.specific_catch_ratio(vel, alpha, 10.0)
    assert np.allclose(phase.specific_catch_ratio(vel, 2 * alpha, 10.0), 2 * base)
    assert np.allclose(phase.specific_catch_ratio(vel, alpha, 20.0), base / 2)


def test_specific_catch_ratio_zero_without_rain(phase):
    assert phase.specific_catch_ratio(5.0, 0.0, 1.0) == 0.0