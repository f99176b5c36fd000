"""
Size losses for Podostemum ceratophyllum

Scour and herbivory are driven by flow velocity (Wood et al. 2019): scour
increases and herbivory decreases with velocity. Desiccation applies when
the plant has been in shallow water for too long (Wood & Freeman 2017).
All functions return the size lost in one time step as a positive number,
in the same units as old_size (biomass or stem length).
"""

import logging

import numpy as np

from podostemum.errors import DomainError, ModelSpecificationError
from podostemum.utils.function import require_non_negative, require_proportion

logger = logging.getLogger(__name__)

CONSTANT = 1
THRESHOLD = 2
RAMP = 3
VELOCITY_MODEL_TYPES = (CONSTANT, THRESHOLD, RAMP)


def _check_model_type(model_type):
    if isinstance(model_type, bool) or model_type not in VELOCITY_MODEL_TYPES:
        logger.error(f"Invalid model specification: type={model_type!r}")
        raise ModelSpecificationError(model_type, VELOCITY_MODEL_TYPES)


def _check_velocities(v_low, v_high, v):
    v_low = require_non_negative("v_low", v_low)
    v_high = require_non_negative("v_high", v_high)
    v = require_non_negative("v", v)
    if v_low > v_high:
        logger.error(f"Invalid input: v_low ({v_low}) is greater than v_high ({v_high})")
        raise DomainError("v_low must be less than or equal to v_high", "v_low", v_low)
    return v_low, v_high, v


def scour(old_size, size_min, S, v_low, v_high, v, model_type):
    """
    Calculate size lost to scour

    Type 1: constant proportion S of size is lost.
    Type 2: proportion S is lost when v exceeds v_high, otherwise nothing.
    Type 3: nothing below v_low, S above v_high, linear in between.

    Args:
        old_size (float): Size at the prior time step
        size_min (float): Minimum size susceptible to scour
        S (float): Maximum scour rate (proportion lost per day)
        v_low (float): Velocity below which scour is 0 (m/s)
        v_high (float): Velocity above which scour is at its maximum (m/s)
        v (float): Flow velocity (m/s)
        model_type (int): 1, 2 or 3

    Returns:
        float: Size lost to scour
    """
    _check_model_type(model_type)
    S = require_proportion("S", S)
    old_size = require_non_negative("old_size", old_size)
    require_non_negative("size_min", size_min)
    v_low, v_high, v = _check_velocities(v_low, v_high, v)

    if model_type == CONSTANT:
        return S * old_size
    if model_type == THRESHOLD:
        return S * old_size if v > v_high else 0.0
    if v < v_low:
        return 0.0
    if v < v_high:
        return (S / (v_high - v_low)) * (v - v_low) * old_size
    return S * old_size


def herbivory(old_size, H, v_low, v_high, v, model_type):
    """
    Calculate size lost to herbivory

    Type 1: constant proportion H of size is lost.
    Type 2: proportion H is lost when v is below v_high, otherwise nothing.
    Type 3: H below v_low, declining linearly to 0 at v_high.

    Args:
        old_size (float): Size at the prior time step
        H (float): Maximum herbivory rate (proportion lost per day)
        v_low (float): Velocity below which herbivory is at its maximum (m/s)
        v_high (float): Velocity above which herbivory is 0 (m/s)
        v (float): Flow velocity (m/s)
        model_type (int): 1, 2 or 3

    Returns:
        float: Size lost to herbivory
    """
    _check_model_type(model_type)
    H = require_proportion("H", H)
    old_size = require_non_negative("old_size", old_size)
    v_low, v_high, v = _check_velocities(v_low, v_high, v)

    if model_type == CONSTANT:
        rate = H
    elif model_type == THRESHOLD:
        rate = H if v < v_high else 0.0
    elif v < v_low:
        rate = H
    elif v < v_high:
        rate = H * (v_high - v) / (v_high - v_low)
    else:
        rate = 0.0
    return rate * old_size


def desiccation(old_size, depth, depth_limit, dry_time, dry_time_limit, D):
    """
    Calculate size lost to desiccation

    Size is lost at rate D once the water has been shallower than
    depth_limit for dry_time_limit or longer.

    Args:
        old_size (float): Size at the prior time step
        depth (float): Water depth at the current time step
        depth_limit (float): Shallowest depth tolerated without desiccation
        dry_time (float): Time already spent shallower than depth_limit
        dry_time_limit (float): Time tolerated in shallow water
        D (float): Desiccation rate (proportion lost per day)

    Returns:
        float: Size lost to desiccation
    """
    D = require_proportion("D", D)
    old_size = require_non_negative("old_size", old_size)
    depth = require_non_negative("depth", depth)
    depth_limit = require_non_negative("depth_limit", depth_limit)
    dry_time = require_non_negative("dry_time", dry_time)
    dry_time_limit = require_non_negative("dry_time_limit", dry_time_limit)

    if depth < depth_limit and dry_time >= dry_time_limit:
        return D * old_size
    return 0.0


def mortality(old_size, mort_rate):
    """Size lost to background mortality at a proportional daily rate."""
    old_size = require_non_negative("old_size", old_size)
    mort_rate = require_proportion("mort_rate", mort_rate)
    return old_size * mort_rate


def breakage(stem_cm, max_stem_cm):
    """
    Stem length after breakage

    Stems longer than max_stem_cm break off at that length. Works element
    by element on arrays; a scalar stem_cm gives a float.
    """
    capped = np.minimum(stem_cm, max_stem_cm)
    if np.ndim(capped) == 0:
        return float(capped)
    return capped
