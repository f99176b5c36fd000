"""
Light attenuation in the water column

PAR reaching the plant is reduced by reflection at the water surface,
Beer-Lambert attenuation by water and, optionally, self-shading by plant
biomass above the tissue (van Nes et al. 2003, Charisma).
"""

import logging

import numpy as np

from podostemum.environment.solar import PARProfile
from podostemum.errors import DomainError
from podostemum.utils.function import require_non_negative, require_proportion

logger = logging.getLogger(__name__)


def attenuate(par, z, prop_reflect, K, Kp=0.0, Bz=0.0, self_shading=False):
    """
    Calculate PAR available at depth z

    Iz = (1 - prop_reflect) * PAR * exp(-K * z - Kp * Bz)

    The self-shading term only applies when self_shading is True. Kp and Bz
    default to zero, so self_shading=True has no effect unless both are given.

    Args:
        par: PAR at the water surface (µE); a scalar, a PARProfile or an array
        z (float): Water depth above the tissue (m)
        prop_reflect (float): Proportion of light reflected by the water surface
        K (float): Light attenuation coefficient of water (m^-1)
        Kp (float): Light attenuation coefficient of plant material (m^2 g^-1)
        Bz (float): Plant biomass above depth z (g)
        self_shading (bool): Whether the plant shades itself

    Returns:
        PAR at depth with the same shape as the input (float, PARProfile or ndarray)

    Raises:
        DomainError: On negative PAR, depth, coefficients or biomass, or a
            reflection proportion outside [0, 1]
    """
    if par is None or isinstance(par, bool) or np.asarray(par).dtype.kind not in "iuf":
        logger.error(f"Invalid input: PAR must be a number or a sequence of numbers, got {par!r}")
        raise DomainError("PAR must be a number or a sequence of numbers", "par", par)
    values = np.asarray(par, dtype=float)
    if not np.all(np.isfinite(values)):
        logger.error(f"Invalid input: PAR must be finite, got {par}")
        raise DomainError("PAR must be finite", "par", par)
    if np.any(values < 0):
        logger.error(f"Invalid input: PAR cannot be negative, got {par}")
        raise DomainError("PAR cannot be negative", "par", par)
    z = require_non_negative("z", z)
    prop_reflect = require_proportion("prop_reflect", prop_reflect)
    K = require_non_negative("K", K)
    Kp = require_non_negative("Kp", Kp)
    Bz = require_non_negative("Bz", Bz)

    exponent = -K * z
    if self_shading:
        exponent -= Kp * Bz

    Iz = (1 - prop_reflect) * values * np.exp(exponent)

    logger.debug(
        f"Attenuation z={z} K={K} reflect={prop_reflect} shading={bool(self_shading)}: "
        f"factor={(1 - prop_reflect) * np.exp(exponent):.4f}"
    )

    if isinstance(par, PARProfile):
        return PARProfile(*(float(v) for v in Iz))
    if Iz.ndim == 0:
        return float(Iz)
    return Iz
