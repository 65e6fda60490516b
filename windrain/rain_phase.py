"""A single raindrop-size phase of an Eulerian wind-driven rain model."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def _result(value):
    arr = np.asarray(value, dtype=float)
    return float(arr) if arr.ndim == 0 else arr


def drag_cd_re(reynolds):
    """Return Cd*Re for a Reynolds number or an array of them.

    Uses the piecewise correlation for spheres:
    Re < 0.1 Stokes drag, then two corrected Stokes ranges, an intermediate
    power law and a constant drag coefficient of 0.44 above Re = 260.
    """
    re = np.asarray(reynolds, dtype=float)
    with np.errstate(invalid="ignore", divide="ignore"):
        safe = np.where(re > 0.0, re, 1.0)
        low = 24.0 * (1.0 + 0.1315 * np.power(safe, 0.82 - 0.05 * np.log10(safe)))
        mid = 24.0 * (1.0 + 0.1935 * np.power(safe, 0.6305))
        high = 10.0 * np.power(safe, 0.45)
    value = np.select(
        [re < 0.1, re < 2.0, re < 20.0, re < 260.0],
        [np.full_like(re, 24.0), low, mid, high],
        default=0.44 * re,
    )
    return _result(value)


@dataclass(frozen=True)
class TurbulentDispersion:
    """Time scales and dispersion coefficient of one rain phase.

    ``tfl`` is the fluid (eddy) time scale, ``tp`` the particle relaxation
    time, ``ct`` the dispersion coefficient and ``nutrain`` the turbulent
    viscosity felt by the drops.
    """

    tfl: object
    tp: object
    ct: object
    nutrain: object


@dataclass(frozen=True)
class RainPhase:
    """One rain phase: drops of a single diameter carrying a share of the rainfall."""

    index: int
    diameter: float
    volume_fraction: float
    name: str = ""

    def __post_init__(self) -> None:
        if self.diameter <= 0.0:
            raise ValueError(f"diameter must be positive, got {self.diameter}")
        if self.volume_fraction <= 0.0:
            raise ValueError(
                f"volume fraction must be positive, got {self.volume_fraction}"
            )
        if not self.name:
            object.__setattr__(self, "name", str(self.index + 1))

    @property
    def field_names(self) -> dict[str, str]:
        """Names of the per-phase fields, suffixed with the phase name."""
        return {
            base: f"{base}{self.name}"
            for base in ("U", "phi", "alpha", "Ct", "Re", "CdRe", "scr", "tp", "tfl", "nutrain")
        }

    def reynolds(self, u_wind, u_rain, rhoa, mua):
        """Return the drop Reynolds number |U - Urain|*d*rhoa/mua.

        Velocities are vectors along the last axis.
        """
        rel = np.asarray(u_wind, dtype=float) - np.asarray(u_rain, dtype=float)
        mag = np.linalg.norm(rel, axis=-1) if rel.ndim else np.abs(rel)
        return _result(mag * self.diameter * rhoa / mua)

    def update_properties(self, u_wind, u_rain, rhoa, mua):
        """Return (Re, Cd*Re) for the current wind and rain velocities."""
        re = self.reynolds(u_wind, u_rain, rhoa, mua)
        return re, drag_cd_re(re)

    def dispersion(self, k, epsilon, nut, rhop, mua, cd_re):
        """Return the turbulent dispersion of this phase.

        With no turbulence (``k``, ``epsilon`` or ``nut`` is None) the drops
        feel no turbulent viscosity and every quantity is zero.
        """
        if k is None or epsilon is None or nut is None:
            zero = _result(np.zeros_like(np.asarray(cd_re, dtype=float)))
            return TurbulentDispersion(tfl=zero, tp=zero, ct=zero, nutrain=zero)
        tfl = 0.2 * (np.asarray(k, dtype=float) / np.asarray(epsilon, dtype=float))
        tp = (4.0 * rhop * self.diameter ** 2) / (3.0 * mua * np.asarray(cd_re, dtype=float))
        ct = np.sqrt(tfl / (tfl + tp))
        nutrain = np.asarray(nut, dtype=float) * ct ** 2
        return TurbulentDispersion(
            tfl=_result(tfl), tp=_result(tp), ct=_result(ct), nutrain=_result(nutrain)
        )

    def drag_factor(self, rhop, mua, cd_re):
        """Return the implicit drag coefficient 3*mua*CdRe/(4*rhop*d^2) [1/s]."""
        return _result(
            (3.0 * mua * np.asarray(cd_re, dtype=float)) / (4.0 * rhop * self.diameter ** 2)
        )

    def specific_catch_ratio(self, normal_velocity, alpha, rh):
        """Return the specific catch ratio from the cell-averaged normal velocity.

        ``rh`` is the horizontal rainfall intensity in mm/h.
        """
        return _result(
            np.asarray(normal_velocity, dtype=float)
            * np.asarray(alpha, dtype=float)
            * ((3600 * 1e3) / (rh * self.volume_fraction))
        )