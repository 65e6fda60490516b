"""Air and water properties and the Gunn-Kinzer drag law for raindrops."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

KELVIN_OFFSET = 273.15

# Air properties against temperature in degrees Celsius.
_AIR_T = np.array([-18.0, -6.7, 0.0, 4.4, 15.6, 26.7, 37.8])
_AIR_RHO = np.array([1.38, 1.32, 1.293, 1.27, 1.22, 1.18, 1.13])
_AIR_MU = np.array(
    [0.0157e-3, 0.0168e-3, 0.0171e-3, 0.0173e-3, 0.0179e-3, 0.0184e-3, 0.0190e-3]
)

# Water density against temperature in degrees Celsius.
_WATER_T = np.array(
    [0.0, 2.0, 4.0, 6.0, 8.0, 10.0, 12.0, 14.0, 16.0, 18.0,
     20.0, 22.0, 24.0, 26.0, 28.0, 30.0, 35.0, 40.0]
)
_WATER_RHO = np.array(
    [999.87, 999.97, 1000.00, 999.97, 999.88, 999.73, 999.52, 999.27, 998.97,
     998.62, 998.23, 997.80, 997.33, 996.81, 996.26, 995.68, 994.00, 992.00]
)

# Reynolds numbers and drag coefficients after Gunn & Kinzer.
_RE = np.array(
    [1.80, 9.61, 23.4, 43.2, 68.7, 98.9, 134.0, 175.0, 220.0, 269.0,
     372.0, 483.0, 603.0, 731.0, 866.0, 1013.0, 1164.0, 1313.0, 1461.0, 1613.0,
     1764.0, 1915.0, 2066.0, 2211.0, 2357.0, 2500.0, 2636.0, 2772.0, 2905.0, 3033.0,
     3164.0, 3293.0, 3423.0, 3549.0]
)
_CD = np.array(
    [15.0, 4.2, 2.4, 1.66, 1.28, 1.07, 0.926, 0.815, 0.729, 0.671,
     0.607, 0.570, 0.545, 0.528, 0.517, 0.504, 0.495, 0.494, 0.498, 0.503,
     0.511, 0.520, 0.529, 0.544, 0.559, 0.575, 0.594, 0.615, 0.635, 0.660,
     0.681, 0.700, 0.727, 0.751]
)


@dataclass(frozen=True)
class FluidProperties:
    """Air density, air dynamic viscosity and water density at a temperature."""

    temperature: float
    rhoa: float
    mua: float
    rhop: float


def _segment_interp(x: float, xs: np.ndarray, ys: np.ndarray) -> float:
    i = int(np.searchsorted(xs, x, side="right")) - 1
    i = min(max(i, 0), len(xs) - 2)
    slope = (ys[i + 1] - ys[i]) / (xs[i + 1] - xs[i])
    return float(ys[i] + slope * (x - xs[i]))


def air_properties(temperature: float) -> tuple[float, float]:
    """Return (density, dynamic viscosity) of air at a temperature in kelvin.

    Raises ValueError outside -18 <= T < 37.8 degrees Celsius.
    """
    celsius = temperature - KELVIN_OFFSET
    if celsius < _AIR_T[0]:
        raise ValueError("Air temperature is too low!")
    if celsius >= _AIR_T[-1]:
        raise ValueError("Air temperature is too high!")
    return (
        _segment_interp(celsius, _AIR_T, _AIR_RHO),
        _segment_interp(celsius, _AIR_T, _AIR_MU),
    )


def water_density(temperature: float) -> float:
    """Return water density at a temperature in kelvin.

    Raises ValueError outside 0 < T < 40 degrees Celsius.
    """
    celsius = temperature - KELVIN_OFFSET
    if celsius <= _WATER_T[0]:
        raise ValueError("Air temperature is too low!")
    if celsius >= _WATER_T[-1]:
        raise ValueError("Air temperature is too high!")
    return _segment_interp(celsius, _WATER_T, _WATER_RHO)


def fluid_properties(temperature: float) -> FluidProperties:
    """Return all fluid properties at a temperature in kelvin."""
    rhoa, mua = air_properties(temperature)
    return FluidProperties(
        temperature=temperature, rhoa=rhoa, mua=mua, rhop=water_density(temperature)
    )


def cd_re(reynolds):
    """Return Cd*Re for a Reynolds number or an array of them.

    The drag coefficient is interpolated linearly in the Gunn & Kinzer table
    and extrapolated from the end segments outside it.
    """
    re = np.asarray(reynolds, dtype=float)
    idx = np.clip(np.searchsorted(_RE, re, side="right") - 1, 0, len(_RE) - 2)
    slope = (_CD[idx + 1] - _CD[idx]) / (_RE[idx + 1] - _RE[idx])
    result = (_CD[idx] + slope * (re - _RE[idx])) * re
    if result.ndim == 0:
        return float(result)
    return result