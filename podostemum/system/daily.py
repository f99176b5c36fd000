"""
Daily biomass budget for Podostemum ceratophyllum

Composes solar geometry, surface light, light attenuation, gross
assimilation and maintenance respiration into per-organ and whole-plant
daily budgets. Each evaluation is independent: no state is carried from
one day to the next.
"""

import logging

import pandas as pd

from podostemum.configs.params import DEFAULT_SETTINGS, ORGAN_PARAMETERS
from podostemum.environment.attenuation import attenuate
from podostemum.environment.solar import compute_declination_and_daylength, compute_surface_par
from podostemum.processes.disturbance.losses import desiccation, herbivory, mortality, scour
from podostemum.processes.physiology.photosynthesis import gross_assimilation
from podostemum.processes.physiology.respiration import daily_respiration, net_assimilation
from podostemum.utils.function import require_non_negative

logger = logging.getLogger(__name__)


def resolve_organs(organs=None):
    """
    Return a {name: parameters} mapping for the requested organs

    Args:
        organs: None (default organs), a list of names from ORGAN_PARAMETERS,
            or a dict of custom parameter sets

    Returns:
        dict: Organ name to parameter dict
    """
    if organs is None:
        organs = DEFAULT_SETTINGS["organs"]
    if isinstance(organs, dict):
        return organs
    unknown = [name for name in organs if name not in ORGAN_PARAMETERS]
    if unknown:
        raise KeyError(f"Unknown organs {unknown}; available: {list(ORGAN_PARAMETERS)}")
    return {name: ORGAN_PARAMETERS[name] for name in organs}


def calculate_organ_budget(
    par_at_depth, daylength, organ_params, temp, depth=None, carbonate=None, nutrient=None
):
    """
    Calculate gross assimilation, respiration and net growth of one organ

    Args:
        par_at_depth (PARProfile): PAR reaching the organ (µE)
        daylength (float): Day length (h)
        organ_params (dict): Pmax, Hi, Hd, Hc, Hn, glucose_req, km_prime,
            biomass and dead_biomass for the organ
        temp (float): Water temperature (°C)
        depth (float): Depth of the organ, used only when Hd is set
        carbonate (float): Carbonate concentration, used only when Hc is set
        nutrient (float): Nutrient concentration, used only when Hn is set

    Returns:
        dict: gross, respiration and net biomass change (g day^-1)
    """
    live = organ_params["biomass"]
    total = live + organ_params.get("dead_biomass", 0.0)

    gross = gross_assimilation(
        par_at_depth,
        pbiomass=live,
        pmax=organ_params["Pmax"],
        daylength=daylength,
        glucose_req=organ_params["glucose_req"],
        hi=organ_params.get("Hi"),
        temp=temp,
        depth=depth,
        hd=organ_params.get("Hd"),
        carbonate=carbonate,
        hc=organ_params.get("Hc"),
        nutrient=nutrient,
        hn=organ_params.get("Hn"),
    )
    respiration = daily_respiration(
        organ_params["km_prime"], temp, live, total, organ_params["glucose_req"]
    )
    return {
        "gross": gross,
        "respiration": respiration,
        "net": net_assimilation(gross, respiration),
    }


def calculate_daily_budget(
    day,
    lat,
    temp,
    depth,
    organs=None,
    prop_reflect=None,
    K=None,
    Kp=None,
    Bz=None,
    self_shading=None,
    carbonate=None,
    nutrient=None,
):
    """
    Calculate the daily biomass budget of a plant at one site

    Surface light is computed once per (day, latitude) and attenuated once
    for the plant's depth; every organ then shares that light.

    Args:
        day (int): Julian day
        lat (float): Latitude in decimal degrees
        temp (float): Water temperature (°C)
        depth (float): Depth of the plant below the surface (m)
        organs: Organ selection, see resolve_organs
        prop_reflect, K, Kp, Bz, self_shading: Attenuation parameters,
            defaulting to DEFAULT_SETTINGS
        carbonate (float): Carbonate concentration
        nutrient (float): Limiting nutrient concentration

    Returns:
        dict: Day, day length, surface and attenuated PAR, per-organ and
            total gross/respiration/net (g day^-1)
    """
    prop_reflect = DEFAULT_SETTINGS["prop_reflect"] if prop_reflect is None else prop_reflect
    K = DEFAULT_SETTINGS["K"] if K is None else K
    Kp = DEFAULT_SETTINGS["Kp"] if Kp is None else Kp
    Bz = DEFAULT_SETTINGS["Bz"] if Bz is None else Bz
    self_shading = DEFAULT_SETTINGS["self_shading"] if self_shading is None else self_shading

    geometry = compute_declination_and_daylength(day, lat)
    surface_par = compute_surface_par(day, lat, geometry=geometry)
    par_at_depth = attenuate(surface_par, depth, prop_reflect, K, Kp, Bz, self_shading)

    row = {
        "Day": day,
        "Daylength (h)": geometry.daylength,
        "Temperature": temp,
        "Depth": depth,
    }
    for name, value in surface_par._asdict().items():
        row[f"Surface PAR {name} (uE)"] = value
    for name, value in par_at_depth._asdict().items():
        row[f"PAR at depth {name} (uE)"] = value

    totals = {"gross": 0.0, "respiration": 0.0, "net": 0.0}
    for organ, params in resolve_organs(organs).items():
        budget = calculate_organ_budget(
            par_at_depth,
            geometry.daylength,
            params,
            temp,
            depth=depth,
            carbonate=carbonate,
            nutrient=nutrient,
        )
        for key, value in budget.items():
            row[f"{organ}_{key} (g/d)"] = value
            totals[key] += value

    row["Gross Assimilation (g/d)"] = totals["gross"]
    row["Respiration (g/d)"] = totals["respiration"]
    row["Net Growth (g/d)"] = totals["net"]

    logger.debug(
        f"Day {day}: gross={totals['gross']:.4f} g, respiration={totals['respiration']:.4f} g, "
        f"net={totals['net']:.4f} g"
    )
    return row


def update_plant_size(
    old_size, net_growth, scour_loss=0.0, herbivory_loss=0.0, desiccation_loss=0.0, mortality_loss=0.0
):
    """
    Size after one day of net growth and losses, floored at zero

    All arguments must be in the same units (e.g., g AFDM).
    """
    old_size = require_non_negative("old_size", old_size)
    losses = sum(
        require_non_negative(name, value)
        for name, value in (
            ("scour_loss", scour_loss),
            ("herbivory_loss", herbivory_loss),
            ("desiccation_loss", desiccation_loss),
            ("mortality_loss", mortality_loss),
        )
    )
    new_size = old_size + net_growth - losses
    if new_size < 0:
        logger.info(f"Plant lost all biomass (computed size {new_size:.4f}); setting size to 0")
        return 0.0
    return new_size


def calculate_loss_terms(size, velocity, loss_params, depth=None):
    """
    Evaluate the velocity-driven, desiccation and background losses for one day

    Args:
        size (float): Plant size (same units as the returned losses)
        velocity (float): Flow velocity (m/s), or None to skip scour and herbivory
        loss_params (dict): Optional "scour" and "herbivory" keyword dicts
            (without old_size and v), an optional "desiccation" keyword dict
            (without old_size and depth) and an optional "mortality_rate"
        depth (float): Water depth (m), or None to skip desiccation

    Returns:
        dict: scour_loss, herbivory_loss, desiccation_loss and mortality_loss
    """
    losses = {"scour_loss": 0.0, "herbivory_loss": 0.0, "desiccation_loss": 0.0, "mortality_loss": 0.0}
    if velocity is not None and "scour" in loss_params:
        losses["scour_loss"] = scour(size, v=velocity, **loss_params["scour"])
    if velocity is not None and "herbivory" in loss_params:
        losses["herbivory_loss"] = herbivory(size, v=velocity, **loss_params["herbivory"])
    if depth is not None and "desiccation" in loss_params:
        losses["desiccation_loss"] = desiccation(size, depth=depth, **loss_params["desiccation"])
    if "mortality_rate" in loss_params:
        losses["mortality_loss"] = mortality(size, loss_params["mortality_rate"])
    return losses


def _optional(row, column):
    if column not in row or pd.isna(row[column]):
        return None
    return float(row[column])


def calculate_site_table(forcing, lat, organs=None, loss_params=None, **attenuation_params):
    """
    Evaluate the daily budget for every row of a forcing table

    Rows are independent: the plant is taken at its configured organ
    biomasses on every day, so the table reports the potential daily change
    for each set of conditions.

    Args:
        forcing (DataFrame): Day, Temperature and Depth columns, optionally
            Carbonate, Nutrient, Velocity and K
        lat (float): Latitude in decimal degrees
        organs: Organ selection, see resolve_organs
        loss_params (dict): Loss settings for calculate_loss_terms
        **attenuation_params: prop_reflect, Kp, Bz, self_shading (and K when
            the forcing has no K column)

    Returns:
        tuple: (budget DataFrame, light DataFrame)
    """
    organ_set = resolve_organs(organs)
    plant_size = sum(p["biomass"] for p in organ_set.values())

    rows = []
    for _, forcing_row in forcing.iterrows():
        params = dict(attenuation_params)
        k_row = _optional(forcing_row, "K")
        if k_row is not None:
            params["K"] = k_row

        row = calculate_daily_budget(
            int(forcing_row["Day"]),
            lat,
            float(forcing_row["Temperature"]),
            float(forcing_row["Depth"]),
            organs=organ_set,
            carbonate=_optional(forcing_row, "Carbonate"),
            nutrient=_optional(forcing_row, "Nutrient"),
            **params,
        )

        if loss_params:
            losses = calculate_loss_terms(
                plant_size,
                _optional(forcing_row, "Velocity"),
                loss_params,
                depth=float(forcing_row["Depth"]),
            )
            row.update({f"{key} (g/d)": value for key, value in losses.items()})
            row["Plant Size After (g)"] = update_plant_size(
                plant_size, row["Net Growth (g/d)"], **losses
            )
        rows.append(row)

    budget_df = pd.DataFrame(rows)
    light_columns = ["Day", "Daylength (h)"] + [c for c in budget_df.columns if "PAR" in c]
    light_df = budget_df[light_columns].copy() if not budget_df.empty else pd.DataFrame()

    logger.info(f"Evaluated {len(budget_df)} days at latitude {lat}")
    return budget_df, light_df
