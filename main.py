"""
Main script for running the Podostemum daily biomass budget
"""

import argparse
import logging
import os
import sys

from podostemum.configs.params import DEFAULT_SETTINGS, ORGAN_PARAMETERS, STORAGE_FORMATS
from podostemum.environment.site import SiteForcingLoader, constant_forcing
from podostemum.errors import DomainError
from podostemum.system.daily import calculate_site_table
from podostemum.utils.storage import DataStorage

logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
logger = logging.getLogger("podostemum")


def create_parser():
    """
    Create argument parser for command line options

    Returns:
        ArgumentParser: Configured argument parser
    """
    parser = argparse.ArgumentParser(description="Podostemum Daily Biomass Budget")

    # Site and forcing
    parser.add_argument("--file-path", type=str, help="Path to site forcing file (.xlsx or .csv)")
    parser.add_argument("--sheet-name", type=str, help="Sheet name in an Excel forcing file")
    parser.add_argument("--latitude", type=float, help="Site latitude in decimal degrees")
    parser.add_argument("--start-day", type=int, help="First Julian day to evaluate")
    parser.add_argument("--end-day", type=int, help="Last Julian day to evaluate")
    parser.add_argument(
        "--temperature", type=float, help="Water temperature (°C) when no forcing file is given"
    )
    parser.add_argument("--depth", type=float, help="Plant depth (m) when no forcing file is given")

    # Light attenuation
    parser.add_argument("--prop-reflect", type=float, help="Proportion of PAR reflected at the surface")
    parser.add_argument("--k", type=float, dest="K", help="Light attenuation coefficient of water (1/m)")
    parser.add_argument("--kp", type=float, dest="Kp", help="Light attenuation coefficient of plants (m2/g)")
    parser.add_argument("--bz", type=float, dest="Bz", help="Plant biomass above the leaves (g)")
    parser.add_argument("--self-shading", action="store_true", help="Apply plant self-shading")

    # Organs
    parser.add_argument(
        "--organs",
        nargs="+",
        choices=list(ORGAN_PARAMETERS.keys()),
        help="Organs to include in the budget",
    )

    # Storage options
    parser.add_argument(
        "--storage-format",
        type=str,
        choices=list(STORAGE_FORMATS.keys()),
        help="Format for storing results",
    )
    parser.add_argument("--output-dir", type=str, help="Directory to save results")
    parser.add_argument("--compress", action="store_true", help="Compress output files")
    parser.add_argument("--no-summary", action="store_true", help="Do not create summary file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug messages")

    return parser


def settings_from_args(args):
    """Merge parsed arguments over DEFAULT_SETTINGS."""
    settings = dict(DEFAULT_SETTINGS)
    overrides = {
        "file_path": args.file_path,
        "sheet_name": args.sheet_name,
        "latitude": args.latitude,
        "start_day": args.start_day,
        "end_day": args.end_day,
        "temperature": args.temperature,
        "depth": args.depth,
        "prop_reflect": args.prop_reflect,
        "K": args.K,
        "Kp": args.Kp,
        "Bz": args.Bz,
        "organs": args.organs,
        "storage_format": args.storage_format,
        "output_dir": args.output_dir,
    }
    settings.update({key: value for key, value in overrides.items() if value is not None})
    if args.self_shading:
        settings["self_shading"] = True
    if args.compress:
        settings["compress_output"] = True
    if args.no_summary:
        settings["create_summary"] = False
    return settings


def run_site_budget(settings):
    """
    Evaluate the daily budget for a site and save the results

    Args:
        settings (dict): Settings with the keys of DEFAULT_SETTINGS

    Returns:
        dict: Paths to saved files
    """
    if settings["file_path"]:
        if not os.path.isfile(settings["file_path"]):
            logger.error(f"Site forcing file not found: {settings['file_path']}")
            return None
        forcing = SiteForcingLoader(
            settings["file_path"],
            sheet_name=settings["sheet_name"],
            start_day=settings["start_day"],
            end_day=settings["end_day"],
        ).load()
    else:
        forcing = constant_forcing(
            settings["start_day"], settings["end_day"], settings["temperature"], settings["depth"]
        )

    if forcing.empty:
        logger.error(
            f"No forcing days between day {settings['start_day']} and day {settings['end_day']}"
        )
        raise DomainError("No forcing days in the requested window", "forcing", settings["file_path"])

    print("Running daily budget with:")
    print(f"  - Forcing: {settings['file_path'] or 'constant conditions'}")
    print(f"  - Latitude: {settings['latitude']}")
    print(f"  - Days: {settings['start_day']} to {settings['end_day']} ({len(forcing)} rows)")
    print(f"  - Organs: {', '.join(settings['organs'])}")
    print(f"  - Self-shading: {settings['self_shading']}")
    print(f"  - Storage format: {settings['storage_format']}")

    budget_df, light_df = calculate_site_table(
        forcing,
        settings["latitude"],
        organs=settings["organs"],
        prop_reflect=settings["prop_reflect"],
        K=settings["K"],
        Kp=settings["Kp"],
        Bz=settings["Bz"],
        self_shading=settings["self_shading"],
    )

    storage = DataStorage(
        output_dir=settings["output_dir"],
        storage_format=settings["storage_format"],
        compress_output=settings["compress_output"],
        create_summary=settings["create_summary"],
    )
    result_files = storage.save_data(
        {"daily_budget": budget_df, "light_profile": light_df},
        base_name=f"budget_lat{settings['latitude']:g}_days{settings['start_day']}-{settings['end_day']}",
        simulation_params=settings,
    )

    print(f"Total net growth: {budget_df['Net Growth (g/d)'].sum():.4f} g")
    print("Daily budget completed successfully!")
    return result_files


def main(argv=None):
    parser = create_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    settings = settings_from_args(args)
    try:
        return run_site_budget(settings)
    except DomainError as e:
        logger.error(f"Invalid model input: {e}")
        sys.exit(2)


if __name__ == "__main__":
    main()
