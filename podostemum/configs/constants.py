"""
Physical and numerical constants for the Podostemum biomass model
"""

import math

# Angle conversion
DEGREE_TO_RAD = math.pi / 180

# Solar geometry
OBLIQUITY_DEG = 23.45  # degrees, tilt of Earth's axis
DECLINATION_DAY_OFFSET = 10  # days, shift between Jan 1 and the winter solstice
DAYS_PER_YEAR = 365
SECONDS_PER_HOUR = 3600

# Solar radiation
SOLAR_CONSTANT = 1370  # W m^-2
SOLAR_CONSTANT_ECCENTRICITY = 0.033  # Annual variation of the solar constant
ATMOSPHERIC_TRANSMISSION = 0.4  # Empirical sinB correction in the daily integral
PAR_FRACTION = 0.5  # Fraction of global radiation that is photosynthetically active
PAR_TO_MICROEINSTEIN = 868 / 208.32  # W m^-2 PAR to µE

# 3-point Gaussian quadrature over the half day (noon to sunset)
GAUSS_ABSCISSAE = (0.1127, 0.5, 0.8873)
GAUSS_WEIGHTS = (0.2778, 0.4444, 0.2778)

# Carbon conversion
CO2_TO_GLUCOSE = 30 / 44  # g CH2O per g CO2 (MOL_MASS_CH2O / MOL_MASS_CO2)

# Temperature response of photosynthesis (Hill function)
TEMP_HILL = {
    "scale": 1.35,  # Maximum multiplier
    "half_saturation": 14.0,  # °C
    "order": 3,
}

# Temperature dependency for maintenance respiration
TEMP_MAINT_RESP = {
    "Q10": 2.0,
    "reference_temp": 25.0,  # °C
}

# Plausibility ranges (outside these a warning is logged, not an error)
EARTH_TEMPERATURE_RANGE = (-90.0, 60.0)  # °C, recorded extremes
JULIAN_DAY_RANGE = (1, 365)
MAX_LATITUDE = 90.0
HOURS_PER_DAY = 24.0
