"""Specific and global catch ratios of rain phases."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def _result(value):
    arr = np.asarray(value, dtype=float)
    return float(arr) if arr.ndim == 0 else arr


def specific_catch_ratio(normal_velocity, alpha, rh: float, fraction: float):
    """Return the specific catch ratio of one phase.

    ``normal_velocity`` is the cell-averaged normal rain speed, ``alpha`` the
    phase volume fraction, ``rh`` the horizontal rainfall intensity in mm/h
    and ``fraction`` the share of the rainfall carried by the phase.
    """
    if rh <= 0.0:
        raise ValueError(f"rainfall intensity must be positive, got {rh}")
    if fraction <= 0.0:
        raise ValueError(f"phase fraction must be positive, got {fraction}")
    return _result(
        np.asarray(normal_velocity, dtype=float)
        * np.asarray(alpha, dtype=float)
        * ((3600 * 1e3) / (rh * fraction))
    )


def global_catch_ratio(scrs: Sequence, fractions: Sequence[float]):
    """Return the catch ratio: the specific ratios weighted by phase fractions."""
    if len(scrs) != len(fractions):
        raise ValueError("need one fraction for every specific catch ratio")
    if not scrs:
        raise ValueError("no rain phases given")
    total = sum(
        np.asarray(scr, dtype=float) * fraction for scr, fraction in zip(scrs, fractions)
    )
    return _result(total)