"""
Data storage utilities for saving daily budget results
"""

import json
import logging
import os
import zipfile
from datetime import datetime

import pandas as pd

from podostemum.configs.params import OUTPUT_CATEGORIES, STORAGE_FORMATS

logger = logging.getLogger(__name__)


class DataStorage:
    """
    Class for handling data storage operations with various formats
    """

    def __init__(
        self,
        output_dir="results",
        storage_format="excel",
        compress_output=False,
        create_summary=True,
    ):
        """
        Initialize the DataStorage

        Args:
            output_dir (str): Directory to save results
            storage_format (str): Storage format ('excel', 'csv', or 'hdf5')
            compress_output (bool): Whether to compress output files
            create_summary (bool): Whether to create a summary file
        """
        self.output_dir = output_dir
        self.storage_format = storage_format.lower()
        self.compress_output = compress_output
        self.create_summary = create_summary

        if self.storage_format not in STORAGE_FORMATS:
            logger.warning(f"Unknown storage format: {storage_format}, defaulting to Excel")
            self.storage_format = "excel"
        format_info = STORAGE_FORMATS[self.storage_format]
        self.extension = format_info["extension"]
        self.single_file = format_info["single_file"]

        # Create output directory if it doesn't exist
        os.makedirs(output_dir, exist_ok=True)

        self.metadata = {
            "simulation_timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "storage_format": self.storage_format,
        }

    def generate_file_path(self, base_name, category=None):
        """
        Generate file path based on storage format

        Args:
            base_name (str): Base name for the file
            category (str): Data category ('daily', 'light' or 'summary')

        Returns:
            str: Generated file path
        """
        if category:
            file_name = f"{base_name}_{category}{self.extension}"
        else:
            file_name = f"{base_name}{self.extension}"
        return os.path.join(self.output_dir, file_name)

    def save_data(self, data_dict, base_name=None, simulation_params=None):
        """
        Save all result tables

        Args:
            data_dict (dict): Table name to DataFrame ('daily_budget', 'light_profile')
            base_name (str): Base name for the output files
            simulation_params (dict): Parameters to include in metadata

        Returns:
            dict: Paths to saved files
        """
        if simulation_params:
            self.metadata["simulation_parameters"] = simulation_params

        if base_name is None:
            base_name = f"budget_{datetime.now().strftime('%Y%m%d_%H%M%S')}"

        if self.storage_format == "csv":
            result_files = self._save_to_csv(data_dict, base_name)
        elif self.storage_format == "hdf5":
            result_files = self._save_to_hdf5(data_dict, base_name)
        else:
            result_files = self._save_to_excel(data_dict, base_name)

        metadata_path = os.path.join(self.output_dir, f"{base_name}_metadata.json")
        with open(metadata_path, "w") as f:
            json.dump(self.metadata, f, indent=2, default=str)
        result_files["metadata"] = metadata_path

        if self.compress_output:
            zip_path = os.path.join(self.output_dir, f"{base_name}_all_files.zip")
            with zipfile.ZipFile(zip_path, "w", zipfile.ZIP_DEFLATED) as zipf:
                for file_path in _flatten_paths(result_files):
                    if os.path.exists(file_path):
                        zipf.write(file_path, os.path.basename(file_path))
            result_files["compressed"] = zip_path

        logger.info(f"Saved results to {self.output_dir} ({self.storage_format})")
        return result_files

    def _tables(self, data_dict):
        for category in ("daily", "light"):
            for name in OUTPUT_CATEGORIES[category]:
                if name in data_dict and not data_dict[name].empty:
                    yield category, name, data_dict[name]
        if self.create_summary:
            for name, df in create_summary_data(data_dict).items():
                yield "summary", name, df

    def _save_to_excel(self, data_dict, base_name):
        path = self.generate_file_path(base_name)
        with pd.ExcelWriter(path) as writer:
            for _, name, df in self._tables(data_dict):
                df.to_excel(writer, sheet_name=name, index=False)
        return {"excel": path}

    def _save_to_csv(self, data_dict, base_name):
        result_files = {}
        sim_dir = os.path.join(self.output_dir, base_name)
        for category, name, df in self._tables(data_dict):
            category_dir = os.path.join(sim_dir, category)
            os.makedirs(category_dir, exist_ok=True)
            file_path = os.path.join(category_dir, f"{name}.csv")
            df.to_csv(file_path, index=False)
            result_files.setdefault(category, {})[name] = file_path
        return result_files

    def _save_to_hdf5(self, data_dict, base_name):
        path = self.generate_file_path(base_name)
        with pd.HDFStore(path, mode="w") as store:
            for category, name, df in self._tables(data_dict):
                store.put(f"{category}/{name}", df, format="table")
        return {"hdf5": path}


def _flatten_paths(result_files):
    for value in result_files.values():
        if isinstance(value, dict):
            yield from _flatten_paths(value)
        else:
            yield value


def create_summary_data(data_dict):
    """
    Create summary tables from the daily budget

    Args:
        data_dict (dict): Dictionary containing all data frames

    Returns:
        dict: Dictionary of summary DataFrames
    """
    summary_data = {}
    daily_df = data_dict.get("daily_budget")
    if daily_df is None or daily_df.empty:
        return summary_data

    summary_data["Overall_Summary"] = pd.DataFrame(
        {
            "Metric": [
                "Evaluated Days",
                "Mean Daylength (h)",
                "Avg Daily Gross Assimilation (g)",
                "Max Daily Gross Assimilation (g)",
                "Total Gross Assimilation (g)",
                "Total Respiration (g)",
                "Total Net Growth (g)",
                "Days With Net Loss",
            ],
            "Value": [
                len(daily_df),
                daily_df["Daylength (h)"].mean(),
                daily_df["Gross Assimilation (g/d)"].mean(),
                daily_df["Gross Assimilation (g/d)"].max(),
                daily_df["Gross Assimilation (g/d)"].sum(),
                daily_df["Respiration (g/d)"].sum(),
                daily_df["Net Growth (g/d)"].sum(),
                int((daily_df["Net Growth (g/d)"] < 0).sum()),
            ],
        }
    )
    return summary_data
