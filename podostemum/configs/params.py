"""
Model parameters for Podostemum biomass simulation
"""

# Default settings for the model
DEFAULT_SETTINGS = {
    "file_path": None,  # Path with site forcing data (Excel or CSV); None uses constant forcing
    "sheet_name": "Sheet1",  # Sheet name of site forcing data
    "latitude": 34.0,  # Decimal degrees (Etowah River, GA)
    "start_day": 1,  # Julian day of first evaluated day
    "end_day": 365,  # Julian day of last evaluated day
    "temperature": 20.0,  # °C, used when no forcing file is given
    "depth": 0.5,  # m, depth of the plant below the water surface
    "prop_reflect": 0.1,  # Proportion of PAR reflected by the water surface
    "K": 0.12,  # m^-1, light attenuation coefficient of water
    "Kp": 0.0235,  # m^2 g^-1, light attenuation coefficient of plant material (Vallisneria)
    "Bz": 0.0,  # g, plant biomass above the leaves
    "self_shading": False,
    "organs": ["leaves", "stems"],
    # Output storage settings
    "storage_format": "excel",  # Storage format: 'excel', 'csv', 'hdf5'
    "output_dir": "results",  # Directory to save results
    "compress_output": False,  # Whether to compress output files
    "create_summary": True,  # Whether to create a summary file
}

# Per-organ photosynthesis and respiration parameters
# Glucose requirements and km' after Teh (2006) Tables 7.1 and 7.4.
# Hi values: 14 (C. aspera) to 52 (P. pectinatus) µE; 30 used here.
ORGAN_PARAMETERS = {
    "leaves": {
        "Pmax": 0.2,  # g CO2 g^-1 tissue h^-1
        "Hi": 30.0,  # µE, half-saturation constant for light
        "Hd": None,  # m, half-saturation constant for depth
        "Hc": None,  # half-saturation constant for carbonate
        "Hn": None,  # half-saturation constant for a limiting nutrient
        "glucose_req": 1.436,  # g glucose g^-1 biomass
        "km_prime": 0.03,  # maintenance respiration coefficient at 25°C
        "biomass": 1.0,  # g, live photosynthetic biomass
        "dead_biomass": 0.0,  # g
    },
    "stems": {
        "Pmax": 0.05,
        "Hi": 30.0,
        "Hd": None,
        "Hc": None,
        "Hn": None,
        "glucose_req": 1.513,
        "km_prime": 0.015,
        "biomass": 0.5,
        "dead_biomass": 0.0,
    },
    "roots": {
        "Pmax": 0.0,  # Holdfasts do not photosynthesise
        "Hi": None,
        "Hd": None,
        "Hc": None,
        "Hn": None,
        "glucose_req": 1.444,
        "km_prime": 0.015,
        "biomass": 0.1,
        "dead_biomass": 0.0,
    },
}

# Stem length (cm) to ash-free dry mass (g) regressions for P. ceratophyllum
# AFDM = a * L ** b
STEM_BIOMASS_REGRESSIONS = {
    1: {"a": 0.0048452, "b": 1.0},
    2: {"a": 0.0023196, "b": 1.0},
    3: {"a": 0.0067453, "b": 1.0},
    4: {"a": 0.003102984, "b": 1.020115},
    5: {"a": 0.004178842, "b": 0.752031},
    6: {"a": 0.001903129, "b": 1.363027},
}

# Realistic ranges for P. ceratophyllum stems
REALISTIC_STEM_LENGTH_CM = (0.0, 50.0)
REALISTIC_STEM_BIOMASS_G = (0.0, 0.4)

# Storage format configurations
STORAGE_FORMATS = {
    "excel": {
        "extension": ".xlsx",
        "description": "Microsoft Excel file format",
        "single_file": True,
    },
    "csv": {
        "extension": ".csv",
        "description": "Comma-separated values text file",
        "single_file": False,
    },
    "hdf5": {
        "extension": ".h5",
        "description": "Hierarchical Data Format version 5",
        "single_file": True,
    },
}

# Output data categories
OUTPUT_CATEGORIES = {
    "daily": ["daily_budget"],
    "light": ["light_profile"],
    "summary": [],
}
