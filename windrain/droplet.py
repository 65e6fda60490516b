"""Raindrop physics: evaporation, breakup, deformation, collision, coalescence."""

from __future__ import annotations

import math

import numpy as np

GREAT = 1.0e15

_AIR_DENSITY = 1.2
_AIR_VISCOSITY = 1.8e-5
_SCHMIDT = 0.6
_VAPOUR_DIFFUSIVITY = 2.5e-5
_WATER_MOLAR_MASS = 0.018
_GAS_CONSTANT = 8.314


def _result(value):
    arr = np.asarray(value, dtype=float)
    return float(arr) if arr.ndim == 0 else arr


def _magnitude(vectors):
    arr = np.asarray(vectors, dtype=float)
    if arr.ndim == 0:
        return np.abs(arr)
    return np.linalg.norm(arr, axis=-1)


def weber_number(diameter, urel, rhoa, sigma):
    """Return the Weber number rhoa*urel^2*d/sigma."""
    d = np.asarray(diameter, dtype=float)
    u = np.asarray(urel, dtype=float)
    return _result(np.asarray(rhoa, dtype=float) * u * u * d / np.asarray(sigma, dtype=float))


def ohnesorge_number(diameter, mup, rhop, sigma):
    """Return the Ohnesorge number mup/sqrt(rhop*sigma*d)."""
    return _result(
        np.asarray(mup, dtype=float)
        / np.sqrt(np.asarray(rhop, dtype=float) * np.asarray(sigma, dtype=float)
                  * np.asarray(diameter, dtype=float))
    )


def critical_weber(ohnesorge: float) -> float:
    """Return the critical Weber number for breakup at an Ohnesorge number."""
    if ohnesorge < 0.1:
        return 12.0 * (1.0 + 1.077 * ohnesorge ** 1.6)
    return 12.0 * (1.0 + 3.35 * ohnesorge)


def terminal_velocity(diameter: float) -> float:
    """Return the terminal fall velocity [m/s] of a drop of diameter [m]."""
    d_mm = diameter * 1000.0
    if d_mm < 0.1:
        return 0.27 * d_mm
    if d_mm < 1.0:
        return 4.03 * d_mm ** 0.67
    if d_mm < 5.0:
        return 9.17 - 0.99 * d_mm + 0.106 * d_mm * d_mm
    return 9.58


def breakup_time_scale(diameter, urel, rhoa, rhop, sigma):
    """Return the breakup time scale, scaled by the breakup regime of the Weber number."""
    d = np.asarray(diameter, dtype=float)
    u = np.asarray(urel, dtype=float)
    ra = np.asarray(rhoa, dtype=float)
    rp = np.asarray(rhop, dtype=float)
    we = np.asarray(weber_number(d, u, ra, sigma), dtype=float)
    base = d * np.sqrt(rp / ra) / np.abs(u)
    with np.errstate(invalid="ignore", divide="ignore"):
        excess = we - 12.0
        factor = np.select(
            [we < 12.0, we < 18.0, we < 45.0, we < 100.0],
            [
                np.full_like(we, GREAT),
                np.full_like(we, 6.0),
                2.45 * np.sqrt(excess),
                14.1 * np.power(excess, -0.25),
            ],
            default=0.766 * np.power(excess, 0.25),
        )
    return _result(base * factor)


def deformation_drag_factor(weber):
    """Return the drag enhancement factor due to drop deformation."""
    we = np.asarray(weber, dtype=float)
    return _result(np.where(we > 8.0, 1.0 + 0.15 * np.power(np.abs(we), 0.687), 1.0 + 0.045 * we))


def collision_efficiency(d1: float, d2: float, u1: float, u2: float) -> float:
    """Return the collision efficiency of two drops (d2 the smaller)."""
    p = d2 / d1
    stokes = 2.0 * p * p * abs(u1 - u2) * d2 / (9.0 * _AIR_VISCOSITY * d1)
    if stokes < 0.083:
        return 0.0
    if stokes < 1.0:
        return 4.5 * stokes * stokes
    critical = 1.0 + 0.75 * math.log(2.0 * p)
    if stokes > critical:
        return (stokes - critical + 1.0) ** -2.0
    return 1.0


def coalescence_efficiency(d1: float, d2: float, weber: float) -> float:
    """Return the coalescence efficiency of two colliding drops."""
    if weber < 1.0:
        return 1.0
    if weber < 7.0:
        return math.exp(-0.5 * ((weber - 1.0) / 3.0) ** 2)
    return 0.0


def evaporation_rate(diameter, temperature, relative_humidity, pressure, urel):
    """Return the evaporation rate [kg/m3/s] from the Ranz-Marshall correlation.

    ``urel`` is a relative velocity vector (last axis of length 3) or a speed.
    ``pressure`` is accepted for interface completeness and not used.
    """
    d = np.asarray(diameter, dtype=float)
    t = np.asarray(temperature, dtype=float)
    rh = np.asarray(relative_humidity, dtype=float)
    re = _magnitude(urel) * d * _AIR_DENSITY / _AIR_VISCOSITY
    sherwood = 2.0 + 0.6 * np.sqrt(re) * _SCHMIDT ** 0.333
    psat = 610.78 * np.exp(17.27 * (t - 273.15) / (t - 35.85))
    pvap = rh * psat
    km = sherwood * _VAPOUR_DIFFUSIVITY / d
    return _result(km * _WATER_MOLAR_MASS * (psat - pvap) / (_GAS_CONSTANT * t))


def evaporation_heat_source(evap_rate, temperature):
    """Return the heat source [W/m3] due to evaporation, using the mean temperature."""
    latent = 2.5e6 - 2370.0 * (float(np.mean(temperature)) - 273.15)
    return _result(-np.asarray(evap_rate, dtype=float) * latent)