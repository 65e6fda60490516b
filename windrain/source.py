"""Semi-implicit cell-set source scaled by a time-dependent table.

The explicit part of the source is multiplied by a value looked up in an
interpolation table at the current time, so that a heat release rate curve
can drive the source. The implicit part is left unscaled.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

import numpy as np


class VolumeMode(Enum):
    """How injection rates relate to the volume of the cell set."""

    ABSOLUTE = "absolute"
    SPECIFIC = "specific"


_MODES = list(VolumeMode)


def volume_mode_from_word(name: str) -> VolumeMode:
    """Return the volume mode called ``name``.

    Raises ValueError for an unknown name.
    """
    try:
        return VolumeMode(name)
    except ValueError:
        valid = ", ".join(mode.value for mode in _MODES)
        raise ValueError(
            f"Unknown volumeMode type {name}. Valid volumeMode types are: {valid}"
        ) from None


def volume_mode_to_word(mode: VolumeMode | int) -> str:
    """Return the name of a volume mode, or "UNKNOWN" for an invalid index."""
    if isinstance(mode, VolumeMode):
        return mode.value
    if isinstance(mode, int) and 0 <= mode < len(_MODES):
        return _MODES[mode].value
    return "UNKNOWN"


_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_PAIR = re.compile(rf"\(\s*({_NUMBER})\s+({_NUMBER})\s*\)")


class InterpolationTable:
    """Piecewise-linear table y(x), held at its end values outside its range."""

    def __init__(self, points: Iterable[Sequence[float]]) -> None:
        pairs = [(float(x), float(y)) for x, y in points]
        if not pairs:
            raise ValueError("interpolation table is empty")
        xs = np.array([x for x, _ in pairs])
        if np.any(np.diff(xs) <= 0.0):
            raise ValueError("interpolation table x values must be strictly increasing")
        self._x = xs
        self._y = np.array([y for _, y in pairs])

    @classmethod
    def load(cls, path: str | Path) -> "InterpolationTable":
        """Read a table written as a list of ``(x y)`` pairs."""
        text = Path(path).read_text()
        pairs = [(float(a), float(b)) for a, b in _PAIR.findall(text)]
        return cls(pairs)

    @property
    def points(self) -> list[tuple[float, float]]:
        """The table as (x, y) pairs."""
        return list(zip(self._x.tolist(), self._y.tolist()))

    def __call__(self, x: float) -> float:
        """Return the interpolated value at ``x``."""
        return float(np.interp(float(x), self._x, self._y))


def _require(entries: Mapping[str, Any], key: str) -> Any:
    try:
        return entries[key]
    except KeyError:
        raise ValueError(f"required entry '{key}' is missing") from None


class SemiImplicitTimeDependentSource:
    """Source S(x) = f(t)*Su + Sp*x applied to a set of cells.

    ``cells`` are the indices of the cells the source acts on, ``volume``
    their total volume and ``time_dependence`` the table f(t). ``coeffs``
    holds ``volumeMode`` and ``injectionRateSuSp``, a mapping from field name
    to an (Su, Sp) pair.
    """

    def __init__(
        self,
        name: str,
        cells: Iterable[int],
        volume: float,
        coeffs: Mapping[str, Any],
        time_dependence: InterpolationTable,
    ) -> None:
        self.name = name
        self.cells = np.asarray(list(cells), dtype=int)
        self.volume = float(volume)
        self.time_dependence = time_dependence
        self.volume_mode = VolumeMode.ABSOLUTE
        self.v_dash = 1.0
        self.field_names: list[str] = []
        self.injection_rate: list[tuple[Any, float]] = []
        self.applied: list[bool] = []
        self.read(coeffs)

    def _set_field_data(self, rates: Mapping[str, Any]) -> None:
        names: list[str] = []
        injection: list[tuple[Any, float]] = []
        for field_name, pair in rates.items():
            try:
                su, sp = pair
            except (TypeError, ValueError):
                raise ValueError(
                    f"injection rate for '{field_name}' must be an (Su, Sp) pair"
                ) from None
            su_value = np.asarray(su, dtype=float)
            injection.append((float(su_value) if su_value.ndim == 0 else su_value, float(sp)))
            names.append(field_name)
        self.field_names = names
        self.injection_rate = injection
        self.applied = [False] * len(names)
        if self.volume_mode is VolumeMode.ABSOLUTE:
            self.v_dash = self.volume

    def read(self, coeffs: Mapping[str, Any]) -> bool:
        """Read the volume mode and injection rates; return True on success."""
        self.volume_mode = volume_mode_from_word(str(_require(coeffs, "volumeMode")))
        rates = _require(coeffs, "injectionRateSuSp")
        if not isinstance(rates, Mapping):
            raise ValueError("'injectionRateSuSp' must be a dictionary")
        self._set_field_data(rates)
        return True

    def add_sup(self, field_index: int, time: float, n_cells: int):
        """Return the (Su, Sp) cell arrays of the source for one field.

        Su is the explicit source scaled by the table at ``time``; Sp is the
        implicit coefficient. Both are zero outside the cell set.
        """
        su, sp = self.injection_rate[field_index]
        su_arr = np.asarray(su, dtype=float)
        su_field = np.zeros((n_cells,) + su_arr.shape)
        sp_field = np.zeros(n_cells)
        factor = self.time_dependence(time)
        su_field[self.cells] = factor * su_arr / self.v_dash
        sp_field[self.cells] = sp / self.v_dash
        return su_field, sp_field