"""
Body composition: splits total weight into fat mass and lean mass.

Pure column transforms over the validated record DataFrame, plus the
scalar decomposition used for the analysis endpoints.
"""

from typing import Tuple

import pandas as pd


def decompose(weight: float, body_fat: float) -> Tuple[float, float]:
    """Return (fat_mass, lean_mass) in kg for a weight and body-fat percent."""
    fat_mass = weight * body_fat / 100
    return fat_mass, weight - fat_mass


def compute_composition(df: pd.DataFrame) -> pd.DataFrame:
    """Add per-record fat_mass and lean_mass columns."""
    df["fat_mass"] = df["weight"] * df["body_fat"] / 100
    df["lean_mass"] = df["weight"] - df["fat_mass"]
    return df


def trend_window(df: pd.DataFrame, count: int) -> pd.DataFrame:
    """Most recent `count` records in time order; all records if count <= 0."""
    if count <= 0:
        return df
    return df.tail(count).reset_index(drop=True)
