"""
Empirical size gain for macrophytes

Growth is expressed directly as a size increment (biomass or stem length)
rather than through photosynthesis, for use where an empirical growth rate
is known.
"""

import logging

from podostemum.errors import DomainError, ModelSpecificationError
from podostemum.utils.function import require_non_negative

logger = logging.getLogger(__name__)

EXPONENTIAL = 1
LOGISTIC = 2
GROWTH_MODEL_TYPES = (EXPONENTIAL, LOGISTIC)


def growth_empirical(old_size, growth_rate, max_size=1e40, model_type=EXPONENTIAL):
    """
    Calculate the size increment over one time step

    Args:
        old_size (float): Size at the prior time step
        growth_rate (float): Intrinsic growth rate per time step
        max_size (float): Carrying capacity, used by the logistic model
        model_type (int): 1 = exponential, 2 = logistic

    Returns:
        float: Size increment (negative for logistic growth above max_size)

    Raises:
        ModelSpecificationError: If model_type is not 1 or 2
        DomainError: On negative sizes or growth rate
    """
    if isinstance(model_type, bool) or model_type not in GROWTH_MODEL_TYPES:
        logger.error(f"Invalid model specification: type={model_type!r}")
        raise ModelSpecificationError(model_type, GROWTH_MODEL_TYPES)
    old_size = require_non_negative("old_size", old_size)
    growth_rate = require_non_negative("growth_rate", growth_rate)

    if model_type == EXPONENTIAL:
        return growth_rate * old_size

    max_size = require_non_negative("max_size", max_size)
    if max_size == 0:
        logger.error("Invalid input: max_size must be positive for logistic growth")
        raise DomainError("max_size must be positive for logistic growth", "max_size", max_size)
    return growth_rate * ((max_size - old_size) / max_size) * old_size
