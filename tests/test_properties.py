import numpy as np
import pytest

from windrain.properties import (
    FluidProperties,
    air_properties,
    cd_re,
    fluid_properties,
    water_density,
)


def test_air_properties_at_table_point():
    rhoa, mua = air_properties(273.15 + 15.6)
    assert rhoa == pytest.approx(1.22)
    assert mua == pytest.approx(0.0179e-3)


def test_air_properties_at_freezing():
    rhoa, mua = air_properties(273.15)
    assert rhoa == pytest.approx(1.293)
    assert mua == pytest.approx(0.0171e-3)


def test_air_properties_between_points_is_bounded():
    rhoa, mua = air_properties(273.15 + 10.0)
    assert 1.22 < rhoa < 1.27
    assert 0.0173e-3 < mua < 0.0179e-3


def test_air_properties_lower_limit_inclusive():
    rhoa, _ = air_properties(273.15 - 18.0)
    assert rhoa == pytest.approx(1.38)


@pytest.mark.parametrize("celsius", [-18.5, 37.8, 50.0])
def test_air_properties_out_of_range(celsius):
    with pytest.raises(ValueError):
        air_properties(273.15 + celsius)


def test_water_density_at_table_point():
    assert water_density(273.15 + 20.0) == pytest.approx(998.23)


def test_water_density_between_points_is_bounded():
    value = water_density(273.15 + 37.0)
    assert 992.00 < value < 994.00


@pytest.mark.parametrize("celsius", [0.0, -5.0, 40.0])
def test_water_density_out_of_range(celsius):
    with pytest.raises(ValueError):
        water_density(273.15 + celsius)


def test_fluid_properties_combines_both():
    t = 273.15 + 20.0
    props = fluid_properties(t)
    assert isinstance(props, FluidProperties)
    assert props.temperature == t
    assert (props.rhoa, props.mua) == air_properties(t)
    assert props.rhop == water_density(t)


def test_fluid_properties_rejects_cold_water():
    with pytest.raises(ValueError):
        fluid_properties(273.15 - 5.0)


@pytest.mark.parametrize("re, cd", [(1.80, 15.0), (9.61, 4.2), (603.0, 0.545), (3423.0, 0.727)])
def test_cd_re_at_table_points(re, cd):
    assert cd_re(re) / re == pytest.approx(cd)


def test_cd_re_array_matches_scalar():
    values = np.array([0.5, 5.0, 500.0, 4000.0])
    result = cd_re(values)
    assert result.shape == values.shape
    for v, r in zip(values, result):
        assert r == pytest.approx(cd_re(float(v)))


def test_cd_re_continuous_at_segment_boundary():
    assert cd_re(98.9 - 1e-9) == pytest.approx(cd_re(98.9), rel=1e-6)


def test_cd_re_extrapolates_beyond_table():
    assert cd_re(3549.0) / 3549.0 == pytest.approx(0.751)
    assert cd_re(4000.0) / 4000.0 > 0.751


def test_cd_re_zero_reynolds():
    assert cd_re(0.0) == 0.0