"""
Physiology modules for the Podostemum biomass model
"""

from podostemum.processes.physiology.photosynthesis import gross_assimilation
from podostemum.processes.physiology.respiration import daily_respiration, net_assimilation

__all__ = ["daily_respiration", "gross_assimilation", "net_assimilation"]
