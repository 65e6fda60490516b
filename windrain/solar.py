"""Sun position and solar load models for radiation boundary conditions."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Mapping

import numpy as np

TWO_PI = 2.0 * math.pi
ROOTVSMALL = 1.0e-150
_MIN_ALTITUDE = 1.0e-3


class SunDirectionModel(Enum):
    """How the direction of the Sun is obtained."""

    CONSTANT = "sunDirConstant"
    TRACKING = "sunDirTraking"


class SunLoadModel(Enum):
    """How the direct solar load is obtained."""

    CONSTANT = "sunLoadConstant"
    FAIR_WEATHER = "sunLoadFairWeatherConditions"
    THEORETICAL_MAXIMUM = "sunLoadTheoreticalMaximum"


def correct_angle(angle: float) -> float:
    """Fold an angle in radians back towards [0, 2*pi].

    Angles above 2*pi lose their whole turns. Negative angles are reflected:
    the result is 2*pi - angle less their whole turns.
    """
    if angle < 0:
        turns = int(abs(angle) / TWO_PI)
        return TWO_PI - angle - turns * TWO_PI
    if angle > TWO_PI:
        turns = int(angle / TWO_PI)
        return angle - turns * TWO_PI
    return angle


def sun_angles(
    start_day: float,
    start_month: float,
    start_year: float,
    start_time: float,
    longitude: float,
    latitude: float,
    run_time: float = 0.0,
) -> tuple[float, float]:
    """Return (altitude, azimuth) of the Sun in radians.

    ``start_time`` is in decimal hours, ``longitude`` and ``latitude`` in
    degrees and ``run_time`` in seconds since the start. The altitude is
    never below 1e-3; the azimuth lies in [0, 2*pi).
    """
    day = start_day + run_time / 86400.0
    local_time = start_time + run_time / 3600.0

    julian_date = (
        367.0 * start_year
        - (7.0 / 4.0) * (start_year + (start_month + 9.0) / 12.0)
        + (275.0 * start_month) / 9.0
        + day
        - 730531.5
    )
    julian_centuries = julian_date / 36525.0

    sidereal_hours = 6.697374558 + 2400.051336 * julian_centuries
    sidereal_ut = sidereal_hours + (366.242190402 / 365.242190402) * local_time
    sidereal_time = sidereal_ut * 15.0 + longitude

    julian_date += local_time / 24.0
    julian_centuries = julian_date / 36525.0

    mean_longitude = correct_angle(math.radians(280.466 + 36000.77 * julian_centuries))
    mean_anomaly = correct_angle(math.radians(357.529 + 35999.05 * julian_centuries))
    equation_of_center = math.radians(
        (1.915 - 0.005 * julian_centuries) * math.sin(mean_anomaly)
        + 0.02 * math.sin(2.0 * mean_anomaly)
    )
    elliptical_longitude = correct_angle(mean_longitude + equation_of_center)
    obliquity = math.radians(23.439 - 0.013 * julian_centuries)

    right_ascension = math.atan2(
        math.cos(obliquity) * math.sin(elliptical_longitude),
        math.cos(elliptical_longitude),
    )
    declination = math.asin(math.sin(right_ascension) * math.sin(obliquity))

    hour_angle = correct_angle(math.radians(sidereal_time)) - right_ascension
    if hour_angle > math.pi:
        hour_angle -= TWO_PI

    lat = math.radians(latitude)
    altitude = max(
        math.asin(
            math.sin(lat) * math.sin(declination)
            + math.cos(lat) * math.cos(declination) * math.cos(hour_angle)
        ),
        _MIN_ALTITUDE,
    )

    nominator = -math.sin(hour_angle)
    denominator = math.tan(declination) * math.cos(lat) - math.sin(lat) * math.cos(hour_angle)
    if denominator == 0.0:
        azimuth = math.copysign(math.pi / 2.0, nominator)
    else:
        azimuth = math.atan(nominator / denominator)

    if denominator < 0:
        azimuth += math.pi
    elif nominator < 0:
        azimuth += TWO_PI

    return altitude, azimuth


def _grid_rotation(up, east) -> np.ndarray:
    """Return the rotation whose columns are the grid east, north and up axes."""
    e3 = np.asarray(up, dtype=float)
    e1 = np.asarray(east, dtype=float)
    up_norm = np.linalg.norm(e3)
    if up_norm == 0.0:
        raise ValueError("grid up direction has zero length")
    e3 = e3 / up_norm
    if np.linalg.norm(e1) == 0.0:
        raise ValueError("grid east direction has zero length")
    e1 = e1 - np.dot(e1, e3) * e3
    east_norm = np.linalg.norm(e1)
    if east_norm < 1e-12:
        raise ValueError("grid east direction is parallel to the up direction")
    e1 = e1 / east_norm
    e2 = np.cross(e3, e1)
    return np.column_stack((e1, e2, e3))


def grid_transform(direction, up, east) -> np.ndarray:
    """Express a direction given in (east, north, up) axes in grid coordinates."""
    return _grid_rotation(up, east) @ np.asarray(direction, dtype=float)


def _local_direction(altitude: float, azimuth: float) -> np.ndarray:
    vec = np.array(
        [
            math.cos(altitude) * math.sin(azimuth),
            math.cos(altitude) * math.cos(azimuth),
            -math.sin(altitude),
        ]
    )
    return vec / np.linalg.norm(vec)


def _safe_exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


class SolarCalculator:
    """Sun direction and direct/diffuse solar load from a settings dictionary.

    ``time`` is the current simulation time in seconds, used by the tracking
    model; ``steady`` marks a steady-state case, in which tracking is refused.
    """

    def __init__(
        self, entries: Mapping[str, Any], time: float = 0.0, steady: bool = False
    ) -> None:
        self._entries = dict(entries)
        self.time = float(time)
        self.steady = steady

        self.direction = np.zeros(3)
        self.direct_solar_rad = 0.0
        self.diffuse_solar_rad = 0.0
        self.ground_reflectivity = 0.0
        self.a = 0.0
        self.b = 0.0
        self.beta = 0.0
        self.tetha = 0.0
        self.setrn = 0.0
        self.sun_prime = 0.0
        self.rotation: np.ndarray | None = None
        self.grid_up: np.ndarray | None = None
        self.east_dir: np.ndarray | None = None
        self.sun_tracking_update_interval = 0.0
        self.start_time = 0.0

        self.c = self._scalar("C")
        self.sun_direction_model = self._model(SunDirectionModel, "sunDirectionModel")
        self.sun_load_model = self._model(SunLoadModel, "sunLoadModel")

        self._init()

    # -- reading ---------------------------------------------------------

    def _require(self, key: str) -> Any:
        try:
            return self._entries[key]
        except KeyError:
            raise ValueError(f"solar calculator: required entry '{key}' is missing") from None

    def _scalar(self, key: str) -> float:
        return float(self._require(key))

    def _vector(self, key: str) -> np.ndarray:
        vec = np.asarray(self._require(key), dtype=float)
        if vec.shape != (3,):
            raise ValueError(f"solar calculator: entry '{key}' is not a 3-vector")
        return vec

    def _model(self, enum_type, key: str):
        name = self._require(key)
        try:
            return enum_type(name)
        except ValueError:
            valid = ", ".join(member.value for member in enum_type)
            raise ValueError(
                f"Unknown {key} '{name}'. Valid names are: {valid}"
            ) from None

    # -- calculation -----------------------------------------------------

    def _run_time(self) -> float:
        if self.sun_direction_model is SunDirectionModel.TRACKING:
            return self.time
        return 0.0

    def _calculate_angles(self) -> None:
        self.start_time = self._scalar("startTime")
        self.beta, self.tetha = sun_angles(
            self._scalar("startDay"),
            self._scalar("startMonth"),
            self._scalar("startYear"),
            self.start_time,
            self._scalar("longitude"),
            self._scalar("latitude"),
            self._run_time(),
        )

    def _calculate_direction(self) -> None:
        up = self._vector("gridUp")
        east = self._vector("gridEast")
        self.grid_up = up / np.linalg.norm(up) if np.linalg.norm(up) else up
        self.east_dir = east / np.linalg.norm(east) if np.linalg.norm(east) else east
        self.rotation = _grid_rotation(up, east)
        self.direction = self.rotation @ _local_direction(self.beta, self.tetha)

    def _init(self) -> None:
        if self.sun_direction_model is SunDirectionModel.CONSTANT:
            if "sunDirection" in self._entries:
                direction = self._vector("sunDirection")
                self.direction = direction / np.linalg.norm(direction)
            else:
                self._calculate_angles()
                self._calculate_direction()
        else:
            if self.steady:
                raise ValueError(
                    "Sun direction model can not be sunDirTraking if the case is steady"
                )
            self.sun_tracking_update_interval = self._scalar("sunTrackingUpdateInterval")
            self._calculate_angles()
            self._calculate_direction()

        if self.sun_load_model is SunLoadModel.CONSTANT:
            self.direct_solar_rad = self._scalar("directSolarRad")
            self.diffuse_solar_rad = self._scalar("diffuseSolarRad")
        elif self.sun_load_model is SunLoadModel.FAIR_WEATHER:
            self.a = self._scalar("A")
            self.b = self._scalar("B")
            if "beta" in self._entries:
                self.beta = self._scalar("beta")
            else:
                self._calculate_angles()
            self.direct_solar_rad = self.a / _safe_exp(self.b / math.sin(self.beta))
            self.ground_reflectivity = self._scalar("groundReflectivity")
        else:
            self.setrn = self._scalar("Setrn")
            self.sun_prime = self._scalar("SunPrime")
            self.direct_solar_rad = self.setrn * self.sun_prime
            self.ground_reflectivity = self._scalar("groundReflectivity")

    def correct_sun_direction(self, time: float) -> None:
        """Recalculate the Sun position and direct load at a new time.

        Only the tracking model moves the Sun; the constant model is left alone.
        """
        self.time = float(time)
        if self.sun_direction_model is SunDirectionModel.CONSTANT:
            return
        self._calculate_angles()
        self._calculate_direction()
        self.direct_solar_rad = self.a / _safe_exp(
            self.b / math.sin(max(self.beta, ROOTVSMALL))
        )