"""Patch conditions for rain simulations: catch ratio and rain inlet velocity."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping

import numpy as np

SMALL = 1.0e-15

_VERTICAL = np.array([0.0, 0.0, 1.0])


def _result(value):
    arr = np.asarray(value, dtype=float)
    return float(arr) if arr.ndim == 0 else arr


def catch_ratio(flux, face_areas, rh):
    """Return the catch ratio |flux| / (Rh * area) on each face.

    ``rh`` is the horizontal rainfall intensity in mm/h; it is converted to
    m/s before use. A vanishing intensity gives a catch ratio of zero.
    """
    phi = np.asarray(flux, dtype=float)
    areas = np.asarray(face_areas, dtype=float)
    rh_si = rh * 1e-3 / 3600.0
    if rh_si > SMALL:
        return _result(np.abs(phi) / (rh_si * areas))
    return _result(np.zeros(np.broadcast(phi, areas).shape))


def rain_inlet_velocity(u_wind, normals, terminal_velocity, wind_angle=0.0):
    """Return the rain velocity on inlet faces.

    The wind velocity loses its component along the face normal, the drops
    fall at ``terminal_velocity`` in -z, and a non-zero ``wind_angle`` in
    degrees turns the result about the normal. Vectors lie along the last axis.
    """
    u = np.asarray(u_wind, dtype=float)
    n = np.asarray(normals, dtype=float)
    normal_part = np.sum(u * n, axis=-1, keepdims=True)
    horizontal = u - normal_part * n
    urain = horizontal - terminal_velocity * _VERTICAL
    if abs(wind_angle) > SMALL:
        angle = math.radians(wind_angle)
        urain = math.cos(angle) * urain + math.sin(angle) * np.cross(n, urain)
    return urain


def _require(entries: Mapping[str, Any], key: str, patch_type: str) -> Any:
    try:
        return entries[key]
    except KeyError:
        raise ValueError(f"{patch_type}: required entry '{key}' is missing") from None


def _check_type(entries: Mapping[str, Any], expected: str) -> None:
    given = entries.get("type", expected)
    if given != expected:
        raise ValueError(f"patch type '{given}' is not '{expected}'")


@dataclass
class CatchRatioPatch:
    """Catch ratio condition for building surfaces."""

    TYPE = "catchRatio"

    rh: float = 0.0
    phi_name: str = "phi"
    value: np.ndarray | None = field(default=None, compare=False)

    @classmethod
    def from_dict(cls, entries: Mapping[str, Any]) -> "CatchRatioPatch":
        """Build from patch dictionary entries: Rh (required), phi, value."""
        _check_type(entries, cls.TYPE)
        rh = float(_require(entries, "Rh", cls.TYPE))
        value = entries.get("value")
        return cls(
            rh=rh,
            phi_name=str(entries.get("phi", "phi")),
            value=None if value is None else np.asarray(value, dtype=float),
        )

    def update(self, flux, face_areas):
        """Recompute and store the catch ratio from face fluxes and areas."""
        self.value = np.asarray(catch_ratio(flux, face_areas, self.rh), dtype=float)
        return self.value

    def to_dict(self) -> dict[str, Any]:
        """Return the patch entries, leaving out defaults."""
        entries: dict[str, Any] = {"type": self.TYPE, "Rh": self.rh}
        if self.phi_name != "phi":
            entries["phi"] = self.phi_name
        if self.value is not None:
            entries["value"] = np.asarray(self.value).tolist()
        return entries


@dataclass
class RainInletPatch:
    """Rain velocity inlet driven by the wind velocity on the patch."""

    TYPE = "windDrivenRainInlet"

    terminal_velocity: float = 0.0
    u_wind_name: str = "U"
    wind_angle: float = 0.0
    value: np.ndarray | None = field(default=None, compare=False)

    @classmethod
    def from_dict(cls, entries: Mapping[str, Any]) -> "RainInletPatch":
        """Build from patch entries: terminalVelocity (required), Uwind, windAngle, value."""
        _check_type(entries, cls.TYPE)
        terminal = float(_require(entries, "terminalVelocity", cls.TYPE))
        value = entries.get("value")
        return cls(
            terminal_velocity=terminal,
            u_wind_name=str(entries.get("Uwind", "U")),
            wind_angle=float(entries.get("windAngle", 0.0)),
            value=None if value is None else np.asarray(value, dtype=float),
        )

    def update(self, u_wind, normals):
        """Recompute and store the rain velocity from the wind on the patch."""
        self.value = rain_inlet_velocity(
            u_wind, normals, self.terminal_velocity, self.wind_angle
        )
        return self.value

    def to_dict(self) -> dict[str, Any]:
        """Return the patch entries, leaving out defaults."""
        entries: dict[str, Any] = {"type": self.TYPE}
        if self.u_wind_name != "U":
            entries["Uwind"] = self.u_wind_name
        entries["terminalVelocity"] = self.terminal_velocity
        if self.wind_angle != 0.0:
            entries["windAngle"] = self.wind_angle
        if self.value is not None:
            entries["value"] = np.asarray(self.value).tolist()
        return entries