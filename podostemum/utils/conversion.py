"""
Stem length and biomass conversions for Podostemum ceratophyllum

Ash-free dry mass (AFDM, g) is related to stem length (cm) by one of six
empirical regressions, AFDM = a * L ** b (types 1-3 are linear).
"""

import logging

import numpy as np

from podostemum.configs.params import (
    REALISTIC_STEM_BIOMASS_G,
    REALISTIC_STEM_LENGTH_CM,
    STEM_BIOMASS_REGRESSIONS,
)
from podostemum.errors import ModelSpecificationError
from podostemum.utils.function import validate_number

logger = logging.getLogger(__name__)


def _regression(model_type):
    if isinstance(model_type, bool) or model_type not in STEM_BIOMASS_REGRESSIONS:
        logger.error(f"Invalid model specification: type={model_type!r}")
        raise ModelSpecificationError(model_type, STEM_BIOMASS_REGRESSIONS)
    coefficients = STEM_BIOMASS_REGRESSIONS[model_type]
    return coefficients["a"], coefficients["b"]


def _as_values(name, values):
    if np.ndim(values) == 0:
        return validate_number(name, values)
    return np.asarray(values, dtype=float)


def _out_of_range(values, bounds):
    low, high = bounds
    values = np.asarray(values)
    return bool(np.any(values < low) or np.any(values > high))


def stemlength_to_biomass(stem_cm, model_type):
    """
    Convert stem length to ash-free dry mass

    Args:
        stem_cm: Stem length in cm (scalar or array)
        model_type (int): Regression to use (1-6)

    Returns:
        AFDM in g, same shape as stem_cm

    Raises:
        ModelSpecificationError: If model_type is not 1-6
    """
    a, b = _regression(model_type)
    stem_cm = _as_values("stem_cm", stem_cm)
    if _out_of_range(stem_cm, REALISTIC_STEM_LENGTH_CM):
        logger.warning(f"Unrealistic stem lengths: {stem_cm}")
    return a * np.power(stem_cm, b) if b != 1.0 else a * stem_cm


def biomass_to_stemlength(afdm_g, model_type):
    """
    Convert ash-free dry mass to stem length

    Args:
        afdm_g: AFDM in g (scalar or array)
        model_type (int): Regression to use (1-6)

    Returns:
        Stem length in cm, same shape as afdm_g

    Raises:
        ModelSpecificationError: If model_type is not 1-6
    """
    a, b = _regression(model_type)
    afdm_g = _as_values("afdm_g", afdm_g)
    if _out_of_range(afdm_g, REALISTIC_STEM_BIOMASS_G):
        logger.warning(f"Unrealistic biomasses: {afdm_g}")
    return np.power(afdm_g / a, 1 / b) if b != 1.0 else afdm_g / a
