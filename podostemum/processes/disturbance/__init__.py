"""
Disturbance (size loss) modules for the Podostemum biomass model
"""

from podostemum.processes.disturbance.losses import breakage, desiccation, herbivory, mortality, scour

__all__ = ["breakage", "desiccation", "herbivory", "mortality", "scour"]
