"""
Solar geometry and surface light module for the Podostemum biomass model

Day length and photosynthetically active radiation (PAR) at the water
surface are derived from Julian day and latitude following the daily
radiation integrals of Goudriaan & van Laar. PAR is
reported at three representative times of day chosen by 3-point Gaussian
quadrature over the afternoon, assuming morning and afternoon are symmetric.
"""

import logging
import math
from typing import NamedTuple

from podostemum.configs.constants import (
    ATMOSPHERIC_TRANSMISSION,
    DAYS_PER_YEAR,
    DECLINATION_DAY_OFFSET,
    DEGREE_TO_RAD,
    GAUSS_ABSCISSAE,
    GAUSS_WEIGHTS,
    HOURS_PER_DAY,
    MAX_LATITUDE,
    OBLIQUITY_DEG,
    PAR_FRACTION,
    PAR_TO_MICROEINSTEIN,
    SECONDS_PER_HOUR,
    SOLAR_CONSTANT,
    SOLAR_CONSTANT_ECCENTRICITY,
)
from podostemum.errors import DomainError
from podostemum.utils.function import validate_number, warn_if_invalid_julian_day

logger = logging.getLogger(__name__)


class SolarGeometry(NamedTuple):
    """Solar declination and day length for one (day, latitude) pair."""

    declination: float  # radians
    daylength: float  # hours between sunrise and sunset
    sinld: float  # sin(latitude) * sin(declination)
    cosld: float  # cos(latitude) * cos(declination)
    aob: float  # sinld / cosld, clamped to [-1, 1]


class PARProfile(NamedTuple):
    """
    PAR (µE) at the three Gaussian sampling times of the day.

    Iterating yields the values in time order; ``weights`` pairs each value
    with its quadrature weight.
    """

    noon: float
    mid_afternoon: float
    late_afternoon: float

    @property
    def weights(self):
        return GAUSS_WEIGHTS

    def weighted(self):
        """Return (PAR, weight) pairs in time order."""
        return list(zip(self, GAUSS_WEIGHTS))


def _validate_location(day, lat):
    day = validate_number("day", day)
    lat = validate_number("lat", lat)
    if abs(lat) > MAX_LATITUDE:
        logger.error(f"Invalid input: latitude must be between -90 and 90 degrees, got {lat}")
        raise DomainError("Latitude must be between -90 and 90 degrees", "lat", lat)
    warn_if_invalid_julian_day(day)
    return day, lat


def compute_declination_and_daylength(day, lat):
    """
    Calculate solar declination and day length

    Args:
        day (float): Julian day (1-365)
        lat (float): Latitude in decimal degrees

    Returns:
        SolarGeometry: declination, day length (h) and the intermediate
            sinld, cosld and aob terms used by the radiation integrals

    Raises:
        DomainError: If latitude is outside [-90, 90]
    """
    day, lat = _validate_location(day, lat)

    declination = -math.asin(
        math.sin(OBLIQUITY_DEG * DEGREE_TO_RAD)
        * math.cos(2 * math.pi * (day + DECLINATION_DAY_OFFSET) / DAYS_PER_YEAR)
    )

    sinld = math.sin(lat * DEGREE_TO_RAD) * math.sin(declination)
    cosld = math.cos(lat * DEGREE_TO_RAD) * math.cos(declination)

    # Polar day or night: the sun never sets (aob > 1) or never rises (aob < -1)
    if cosld == 0:
        aob = math.copysign(1.0, sinld) if sinld != 0 else 0.0
    else:
        aob = sinld / cosld
    if abs(aob) > 1:
        logger.warning(
            f"Polar {'day' if aob > 0 else 'night'} at day {day}, latitude {lat}: "
            f"day length clamped to {HOURS_PER_DAY if aob > 0 else 0.0} hours"
        )
        aob = max(-1.0, min(1.0, aob))

    daylength = 12 * (1 + 2 * math.asin(aob) / math.pi)

    logger.debug(
        f"Solar geometry day={day} lat={lat}: declination={declination:.4f} rad, "
        f"daylength={daylength:.3f} h"
    )
    return SolarGeometry(declination, daylength, sinld, cosld, aob)


def daylength(day, lat):
    """
    Calculate day length in hours based on latitude and Julian day

    Args:
        day (float): Julian day
        lat (float): Latitude in decimal degrees

    Returns:
        float: Number of hours between sunrise and sunset
    """
    return compute_declination_and_daylength(day, lat).daylength


def daily_radiation_integrals(day, geometry):
    """
    Daily integrals of solar elevation used to scale instantaneous PAR

    Args:
        day (float): Julian day
        geometry (SolarGeometry): Output of compute_declination_and_daylength

    Returns:
        tuple: (dsinB, dsinBE, dso) where dso is the daily extraterrestrial
            radiation (J m^-2)
    """
    sinld, cosld, aob = geometry.sinld, geometry.cosld, geometry.aob
    dl = geometry.daylength
    root = math.sqrt(max(0.0, 1 - aob * aob))

    dsinB = SECONDS_PER_HOUR * (dl * sinld + 24 * cosld * root / math.pi)
    dsinBE = SECONDS_PER_HOUR * (
        dl * (sinld + ATMOSPHERIC_TRANSMISSION * (sinld * sinld + cosld * cosld * 0.5))
        + 12 * cosld * (2 + 3 * ATMOSPHERIC_TRANSMISSION * sinld) * root / math.pi
    )

    sc = SOLAR_CONSTANT * (
        1 + SOLAR_CONSTANT_ECCENTRICITY * math.cos(2 * math.pi * day / DAYS_PER_YEAR)
    )
    dso = sc * dsinB
    return dsinB, dsinBE, dso


def compute_surface_par(day, lat, geometry=None):
    """
    Calculate PAR at the water surface at three times of day

    Args:
        day (float): Julian day
        lat (float): Latitude in decimal degrees
        geometry (SolarGeometry): Precomputed output of
            compute_declination_and_daylength for the same day and latitude

    Returns:
        PARProfile: PAR in µE near noon, mid-afternoon and late afternoon

    Raises:
        DomainError: If latitude is outside [-90, 90]
    """
    if geometry is None:
        geometry = compute_declination_and_daylength(day, lat)
    day = validate_number("day", day)
    dsinB, dsinBE, dso = daily_radiation_integrals(day, geometry)

    if dsinBE <= 0:
        # Polar night: no radiation reaches the surface
        return PARProfile(0.0, 0.0, 0.0)

    values = []
    for x in GAUSS_ABSCISSAE:
        hour = 12 + geometry.daylength * 0.5 * x
        sinB = max(
            0.0, geometry.sinld + geometry.cosld * math.cos(2 * math.pi * (hour + 12) / 24)
        )
        par = PAR_FRACTION * dso * sinB * (1 + ATMOSPHERIC_TRANSMISSION * sinB) / dsinBE
        values.append(par * PAR_TO_MICROEINSTEIN)

    profile = PARProfile(*values)
    logger.debug(f"Surface PAR day={day} lat={lat}: {profile}")
    return profile


def light(day, lat):
    """Alias of compute_surface_par returning a plain list of three PAR values."""
    return list(compute_surface_par(day, lat))
