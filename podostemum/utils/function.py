"""
Common utility functions for the Podostemum biomass model
"""

import logging
import math
import numbers

from podostemum.configs.constants import EARTH_TEMPERATURE_RANGE, JULIAN_DAY_RANGE
from podostemum.errors import DomainError

logger = logging.getLogger(__name__)


def monod(x, half_saturation):
    """
    Monod (Michaelis-Menten) saturating response

    Args:
        x (float): Resource level
        half_saturation (float): Level at which the response is one half

    Returns:
        float: x / (x + half_saturation), or 0 when both are zero
    """
    denominator = x + half_saturation
    if denominator == 0:
        return 0.0
    return x / denominator


def hill(x, half_saturation, order, scale=1.0):
    """
    Hill (sigmoidal) saturating response

    Args:
        x (float): Driver value (must be positive for a meaningful response)
        half_saturation (float): Value at which the response is scale / 2
        order (int): Hill coefficient
        scale (float): Asymptotic maximum

    Returns:
        float: scale * x**order / (x**order + half_saturation**order)
    """
    x_n = x**order
    return scale * x_n / (x_n + half_saturation**order)


def validate_number(name, value):
    """
    Reject booleans, None, non-numeric and non-finite values.

    Raises:
        DomainError: If value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        logger.error(f"Invalid input: {name} must be a real number, got {value!r}")
        raise DomainError(f"Invalid input: {name} must be a real number", name, value)
    if not math.isfinite(value):
        logger.error(f"Invalid input: {name} must be finite, got {value!r}")
        raise DomainError(f"Invalid input: {name} must be finite", name, value)
    return float(value)


def require_non_negative(name, value):
    """Validate that value is a real number >= 0 and return it as float."""
    value = validate_number(name, value)
    if value < 0:
        logger.error(f"Invalid input: {name} cannot be negative, got {value}")
        raise DomainError(f"{name} cannot be negative", name, value)
    return value


def require_proportion(name, value):
    """Validate that value is a real number in [0, 1] and return it as float."""
    value = validate_number(name, value)
    if value < 0 or value > 1:
        logger.error(f"Invalid input: {name} must be between 0 and 1, got {value}")
        raise DomainError(f"{name} must be between 0 and 1", name, value)
    return value


def warn_if_implausible_temperature(temp):
    """Log a warning for temperatures never recorded in nature on Earth."""
    low, high = EARTH_TEMPERATURE_RANGE
    if temp < low or temp > high:
        logger.warning(
            f"Specified temperature ({temp}°C) has not been recorded in nature on Earth"
        )
        return True
    return False


def warn_if_invalid_julian_day(day):
    """Log a warning when day is not a whole number in the Julian day range."""
    first, last = JULIAN_DAY_RANGE
    if not (float(day).is_integer() and first <= day <= last):
        logger.warning(f"day ({day}) is not a whole number between {first} and {last}")
        return True
    return False
