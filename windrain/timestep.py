"""Adaptive time stepping driven by the rain-phase Courant numbers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

SMALL = 1.0e-15
GREAT = 1.0e15


def courant_number(flux_sums, volumes, delta_t: float) -> float:
    """Return 0.5 * max(sum|phi| / V) * delta_t over all cells."""
    sums = np.asarray(flux_sums, dtype=float)
    vols = np.asarray(volumes, dtype=float)
    return float(0.5 * np.max(sums / vols) * delta_t)


@dataclass(frozen=True)
class TimeStepControl:
    """Controls for adjusting the time step from the rain Courant numbers."""

    adjust_time_step: bool = False
    max_co_rain: float = 0.5
    max_delta_t: float = GREAT

    def next_delta_t(
        self,
        delta_t: float,
        alpha_courants: Iterable[float],
        velocity_courants: Iterable[float],
    ) -> float:
        """Return the next time step given the Courant numbers of every phase.

        The step grows by at most 20 % and never exceeds ``max_delta_t``.
        Without adjustment the step is returned unchanged.
        """
        if not self.adjust_time_step:
            return delta_t
        max_alpha = max(alpha_courants, default=0.0)
        max_velocity = max(velocity_courants, default=0.0)
        max_co = max(0.0, max_alpha, max_velocity)
        max_factor = self.max_co_rain / max_co if max_co > SMALL else 2.0
        factor = min(min(max_factor, 1.0 + 0.1 * max_factor), 1.2)
        return min(factor * delta_t, self.max_delta_t)