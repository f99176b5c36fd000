"""
Photosynthesis calculation module for the Podostemum biomass model

Gross daily assimilation follows the Charisma model (van Nes et al. 2003):
a maximum rate limited by Monod terms for light,
depth, carbonate and a nutrient and by a Hill term for temperature,
integrated over the day by 3-point Gaussian quadrature.
"""

import logging

from podostemum.configs.constants import (
    CO2_TO_GLUCOSE,
    GAUSS_WEIGHTS,
    HOURS_PER_DAY,
    TEMP_HILL,
)
from podostemum.errors import DomainError
from podostemum.utils.function import (
    hill,
    monod,
    require_non_negative,
    validate_number,
    warn_if_implausible_temperature,
)

logger = logging.getLogger(__name__)


def light_limitation(par: float, hi) -> float:
    """Monod light response; 1 (not limiting) when hi is None."""
    if hi is None:
        return 1.0
    return monod(par, hi)


def temperature_limitation(temp) -> float:
    """
    Hill temperature response of order 3 with half-saturation at 14°C

    Returns 1 (not limiting) when temp is None. At or below 0°C the response
    is 0: the Hill form is negative there and singular at -14°C.
    """
    if temp is None:
        return 1.0
    if temp <= 0:
        return 0.0
    return hill(temp, TEMP_HILL["half_saturation"], TEMP_HILL["order"], TEMP_HILL["scale"])


def resource_limitation(value, half_saturation) -> float:
    """Monod response for depth, carbonate or nutrients; 1 unless both are given."""
    if value is None or half_saturation is None:
        return 1.0
    return monod(value, half_saturation)


def _validate_profile(par):
    try:
        values = [validate_number("PAR", v) for v in par]
    except TypeError:
        logger.error(f"Invalid input: PAR must be a sequence of three values, got {par!r}")
        raise DomainError("PAR must be a sequence of three values", "par", par)
    if len(values) != len(GAUSS_WEIGHTS):
        logger.error(f"Invalid input: PAR must have exactly three values, got {len(values)}")
        raise DomainError("PAR must have exactly three values", "par", par)
    if any(v < 0 for v in values):
        logger.error(f"Invalid input: PAR cannot be negative, got {values}")
        raise DomainError("PAR cannot be negative", "par", par)
    return values


def _optional_non_negative(name, value, message):
    if value is None:
        return None
    value = validate_number(name, value)
    if value < 0:
        logger.error(f"Invalid input: {message}, got {name}={value}")
        raise DomainError(message, name, value)
    return value


def gross_assimilation(
    par,
    pbiomass,
    pmax,
    daylength,
    glucose_req,
    hi=None,
    temp=None,
    depth=None,
    hd=None,
    carbonate=None,
    hc=None,
    nutrient=None,
    hn=None,
):
    """
    Calculate daily biomass gain due to gross photosynthetic assimilation

    Applies to a single organ or tissue; call once per organ with its own
    parameters. Any limiting factor whose inputs are left as None is treated
    as not limiting.

    Args:
        par: Three PAR values (µE) reaching the tissue, e.g. a PARProfile
        pbiomass (float): Biomass of photosynthetic tissue (g)
        pmax (float): Maximum photosynthetic rate (g CO2 g^-1 h^-1)
        daylength (float): Hours from sunrise to sunset
        glucose_req (float): Glucose requirement for growth (g glucose g^-1)
        hi (float): Half-saturation constant for light (µE)
        temp (float): Average daily water temperature (°C)
        depth (float): Depth of the tissue below the surface, same units as hd
        hd (float): Half-saturation constant for depth
        carbonate (float): Ambient carbonate concentration, same units as hc
        hc (float): Half-saturation constant for carbonate
        nutrient (float): Limiting nutrient concentration, same units as hn
        hn (float): Half-saturation constant for the nutrient

    Returns:
        float: Gross biomass gain (g day^-1)

    Raises:
        DomainError: On negative PAR, biomass, rates, constants or covariates,
            day length outside [0, 24] or a non-positive glucose requirement
    """
    values = _validate_profile(par)
    pbiomass = require_non_negative("pbiomass", pbiomass)
    pmax = require_non_negative("pmax", pmax)
    daylength = validate_number("daylength", daylength)
    if daylength < 0 or daylength > HOURS_PER_DAY:
        logger.error(f"Invalid input: day length must be between 0 and 24 hours, got {daylength}")
        raise DomainError("Day length must be between 0 and 24 hours", "daylength", daylength)
    glucose_req = validate_number("glucose_req", glucose_req)
    if glucose_req <= 0:
        logger.error(f"Invalid input: glucose requirement must be positive, got {glucose_req}")
        raise DomainError("Glucose requirement must be positive", "glucose_req", glucose_req)

    half_sat_msg = "Half-saturation constants cannot be negative"
    hi = _optional_non_negative("hi", hi, half_sat_msg)
    hd = _optional_non_negative("hd", hd, half_sat_msg)
    hc = _optional_non_negative("hc", hc, half_sat_msg)
    hn = _optional_non_negative("hn", hn, half_sat_msg)
    factor_msg = "Limiting factor values cannot be negative"
    depth = _optional_non_negative("depth", depth, factor_msg)
    carbonate = _optional_non_negative("carbonate", carbonate, factor_msg)
    nutrient = _optional_non_negative("nutrient", nutrient, factor_msg)

    if temp is not None:
        temp = validate_number("temp", temp)
        warn_if_implausible_temperature(temp)

    # Factors that do not vary over the day
    temp_factor = temperature_limitation(temp)
    depth_factor = resource_limitation(depth, hd)
    carbonate_factor = resource_limitation(carbonate, hc)
    nutrient_factor = resource_limitation(nutrient, hn)
    constant_factor = temp_factor * depth_factor * carbonate_factor * nutrient_factor

    weighted_rate = 0.0
    for intensity, weight in zip(values, GAUSS_WEIGHTS):
        rate = pmax * light_limitation(intensity, hi) * constant_factor
        weighted_rate += rate * weight

    total_per_biomass = weighted_rate * pbiomass
    assimilated_ch2o = total_per_biomass * daylength
    gross_glucose = assimilated_ch2o * CO2_TO_GLUCOSE
    gross_biomass = gross_glucose / glucose_req

    logger.debug(
        f"Gross assimilation: temp_factor={temp_factor:.3f}, depth_factor={depth_factor:.3f}, "
        f"carbonate_factor={carbonate_factor:.3f}, nutrient_factor={nutrient_factor:.3f}, "
        f"weighted_rate={weighted_rate:.4f} -> {gross_biomass:.4f} g"
    )
    return gross_biomass
