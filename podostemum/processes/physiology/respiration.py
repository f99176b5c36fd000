"""
Maintenance respiration module for the Podostemum biomass model
"""

import logging

from podostemum.configs.constants import TEMP_MAINT_RESP
from podostemum.errors import DomainError
from podostemum.utils.function import (
    require_non_negative,
    validate_number,
    warn_if_implausible_temperature,
)

logger = logging.getLogger(__name__)


def maintenance_coefficient(km_prime: float, temp: float) -> float:
    """Scale the 25°C maintenance coefficient to temp with a Q10 of 2 (Teh 2006, p. 134)."""
    return km_prime * TEMP_MAINT_RESP["Q10"] ** (
        (temp - TEMP_MAINT_RESP["reference_temp"]) / 10
    )


def daily_respiration(km_prime, temp, live_weight, total_weight, glucose_req):
    """
    Calculate biomass lost to maintenance respiration in one day

    Older tissue carries more dead biomass and needs less maintenance, so
    respiration is scaled by the live proportion of the tissue. Positive
    values are losses: net assimilation = gross assimilation - respiration.

    Args:
        km_prime (float): Maintenance respiration coefficient at 25°C
            (0.03 for leaves, 0.015 for stems and roots)
        temp (float): Average daily temperature (°C)
        live_weight (float): Live biomass of the organ or tissue (g)
        total_weight (float): Live plus dead biomass of the organ or tissue (g)
        glucose_req (float): Glucose requirement for growth (g glucose g^-1)

    Returns:
        float: Biomass lost to respiration (g day^-1)

    Raises:
        DomainError: If total_weight < live_weight, weights are negative,
            glucose_req is not positive or km_prime is negative
    """
    live_weight = validate_number("live_weight", live_weight)
    total_weight = validate_number("total_weight", total_weight)
    if total_weight < live_weight:
        logger.error(
            f"Invalid input: total_weight ({total_weight}) is less than live_weight ({live_weight})"
        )
        raise DomainError(
            "total_weight must be greater than or equal to live_weight", "total_weight", total_weight
        )
    if total_weight < 0 or live_weight < 0:
        logger.error(f"Invalid input: biomass cannot be negative, got {live_weight}, {total_weight}")
        raise DomainError("Biomass cannot be negative", "live_weight", live_weight)
    glucose_req = validate_number("glucose_req", glucose_req)
    if glucose_req <= 0:
        logger.error(f"Invalid input: glucose requirement must be positive, got {glucose_req}")
        raise DomainError("Glucose requirement must be positive", "glucose_req", glucose_req)
    km_prime = require_non_negative("km_prime", km_prime)
    temp = validate_number("temp", temp)
    warn_if_implausible_temperature(temp)

    if total_weight == 0:
        return 0.0

    km = maintenance_coefficient(km_prime, temp)
    rm_prime = km * live_weight  # g glucose day^-1
    prop_live = live_weight / total_weight
    resp_maint = rm_prime * prop_live
    resp_biomass = resp_maint / glucose_req

    logger.debug(
        f"Maintenance respiration: km={km:.5f}, prop_live={prop_live:.3f} -> {resp_biomass:.5f} g"
    )
    return resp_biomass


def net_assimilation(gross: float, respiration: float) -> float:
    """Net daily biomass change of one organ: gross assimilation minus respiration."""
    return gross - respiration
