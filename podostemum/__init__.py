"""
Daily biomass budget model for the river macrophyte Podostemum ceratophyllum
"""

from podostemum.environment.attenuation import attenuate
from podostemum.environment.solar import (
    PARProfile,
    compute_declination_and_daylength,
    compute_surface_par,
    daylength,
)
from podostemum.errors import DomainError, ModelSpecificationError
from podostemum.processes.physiology.photosynthesis import gross_assimilation
from podostemum.processes.physiology.respiration import daily_respiration, net_assimilation

__all__ = [
    "DomainError",
    "ModelSpecificationError",
    "PARProfile",
    "attenuate",
    "compute_declination_and_daylength",
    "compute_surface_par",
    "daily_respiration",
    "daylength",
    "gross_assimilation",
    "net_assimilation",
]
