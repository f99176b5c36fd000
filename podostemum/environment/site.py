"""
Site forcing data management for daily evaluation
"""

import logging
import os

import numpy as np
import pandas as pd

from podostemum.errors import DomainError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["Day", "Temperature", "Depth"]
OPTIONAL_COLUMNS = ["Carbonate", "Nutrient", "Velocity", "K"]

COLUMN_ALIASES = {
    "day": "Day",
    "JulianDay": "Day",
    "julian_day": "Day",
    "DOY": "Day",
    "temperature": "Temperature",
    "Temp": "Temperature",
    "Water temperature": "Temperature",
    "depth": "Depth",
    "carbonate": "Carbonate",
    "nutrient": "Nutrient",
    "velocity": "Velocity",
    "k": "K",
}


class SiteForcingLoader:
    """
    Load daily site forcing (temperature, depth and optional covariates)
    """

    def __init__(self, file_path, sheet_name=None, start_day=None, end_day=None):
        """
        Initialize the SiteForcingLoader class

        Args:
            file_path (str): Path to forcing data file (.xlsx, .xls or .csv)
            sheet_name (str): Sheet name in an Excel forcing file
            start_day (int): First Julian day to keep
            end_day (int): Last Julian day to keep
        """
        self.file_path = file_path
        self.sheet_name = sheet_name
        self.start_day = start_day
        self.end_day = end_day

    def _read(self):
        extension = os.path.splitext(self.file_path)[1].lower()
        if extension == ".csv":
            return pd.read_csv(self.file_path)
        if extension in (".xlsx", ".xls"):
            return pd.read_excel(self.file_path, sheet_name=self.sheet_name or 0)
        raise DomainError(f"Unsupported forcing file type: {extension}", "file_path", self.file_path)

    def load(self):
        """
        Read and normalise the forcing table

        Returns:
            pandas.DataFrame: One row per day with at least Day, Temperature
                and Depth columns, sorted by Day

        Raises:
            DomainError: If required columns are missing or the file type is unsupported
        """
        df = self._read()
        df = df.rename(columns={k: v for k, v in COLUMN_ALIASES.items() if k in df.columns})

        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            logger.error(f"Forcing file {self.file_path} is missing columns: {missing}")
            raise DomainError(f"Forcing data is missing required columns: {missing}", "columns", missing)

        for col in REQUIRED_COLUMNS + OPTIONAL_COLUMNS:
            if col in df.columns:
                # Convert to numeric, coercing errors to NaN
                df[col] = pd.to_numeric(df[col], errors="coerce")

        n_before = len(df)
        df = df.dropna(subset=REQUIRED_COLUMNS)
        if len(df) < n_before:
            logger.warning(f"Dropped {n_before - len(df)} forcing rows with non-numeric values")

        if self.start_day is not None:
            df = df[df["Day"] >= self.start_day]
        if self.end_day is not None:
            df = df[df["Day"] <= self.end_day]

        logger.info(f"Loaded {len(df)} forcing days from {self.file_path}")
        return df.sort_values("Day").reset_index(drop=True)


def constant_forcing(start_day, end_day, temperature, depth):
    """
    Build a forcing table with the same temperature and depth every day

    Args:
        start_day (int): First Julian day
        end_day (int): Last Julian day (inclusive)
        temperature (float): Water temperature (°C)
        depth (float): Depth of the plant (m)

    Returns:
        pandas.DataFrame: Columns Day, Temperature, Depth
    """
    if end_day < start_day:
        raise DomainError("end_day must not precede start_day", "end_day", end_day)
    days = np.arange(int(start_day), int(end_day) + 1)
    return pd.DataFrame(
        {
            "Day": days,
            "Temperature": np.full(len(days), float(temperature)),
            "Depth": np.full(len(days), float(depth)),
        }
    )
