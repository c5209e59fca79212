from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """Latitude/longitude pair in degrees."""

    lat: float
    lng: float


@dataclass(frozen=True)
class AreaConfig:
    """Authorized work area: a circle around `center` with `radius_km`."""

    center: Coordinate
    radius_km: float


@dataclass(frozen=True)
class GeoTag:
    """Location stamped on an attendance record.

    `inside` is always computed by the geo policy, never supplied by callers.
    """

    lat: float
    lng: float
    inside: bool
