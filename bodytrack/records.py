"""
Biometric records: the typed record, validation, and DataFrame construction.

This is the only module that touches the file system (JSON loading).
Everything downstream operates on the validated, date-sorted DataFrame
produced here.
"""

import datetime as dt
import json
from dataclasses import asdict, dataclass, is_dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

import numpy as np
import pandas as pd
from loguru import logger


REQUIRED_COLUMNS = {"date", "weight", "body_fat"}

OPTIONAL_COLUMNS = (
    "bmi",
    "visceral_fat",
    "water_rate",
    "muscle_mass",
    "bone_mineral",
    "bmr",
)


@dataclass(frozen=True)
class BiometricRecord:
    """One dated measurement snapshot from a body-composition scale."""

    date: dt.date
    weight: float
    body_fat: float
    bmi: Optional[float] = None
    visceral_fat: Optional[float] = None
    water_rate: Optional[float] = None
    muscle_mass: Optional[float] = None
    bone_mineral: Optional[float] = None
    bmr: Optional[float] = None


RecordsInput = Union[pd.DataFrame, Iterable[Union[BiometricRecord, dict]]]


# ---------------------------------------------------------------------------
# Frame construction
# ---------------------------------------------------------------------------

def _as_row(record: Union[BiometricRecord, dict]) -> dict:
    if is_dataclass(record):
        return asdict(record)
    return dict(record)


def build_frame(records: RecordsInput) -> pd.DataFrame:
    """
    Validate records and return a new DataFrame sorted ascending by date.

    The sort is stable, so records sharing a date keep their input order.
    The caller's data is never modified.
    """
    if isinstance(records, pd.DataFrame):
        df = records.copy()
    else:
        df = pd.DataFrame([_as_row(r) for r in records])

    if df.empty:
        return pd.DataFrame(columns=sorted(REQUIRED_COLUMNS) + list(OPTIONAL_COLUMNS))

    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    for col in OPTIONAL_COLUMNS:
        if col not in df.columns:
            df[col] = np.nan

    # Calendar dates only: any time-of-day component is dropped
    df["date"] = pd.to_datetime(df["date"].map(pd.Timestamp)).dt.normalize()

    for col in ("weight", "body_fat") + OPTIONAL_COLUMNS:
        df[col] = pd.to_numeric(df[col]).astype(np.float64)

    _validate(df)

    df = df.sort_values("date", kind="mergesort").reset_index(drop=True)
    return df


def _validate(df: pd.DataFrame) -> None:
    """Enforce the record invariants: weight > 0, body fat within [0, 100]."""
    for col in ("weight", "body_fat"):
        if df[col].isna().any():
            raise ValueError(f"Column '{col}' contains missing values")

    bad_weight = df.loc[df["weight"] <= 0, "date"]
    if not bad_weight.empty:
        dates = [d.date().isoformat() for d in bad_weight]
        raise ValueError(f"Weight must be positive; invalid records on {dates}")

    bad_fat = df.loc[(df["body_fat"] < 0) | (df["body_fat"] > 100), "date"]
    if not bad_fat.empty:
        dates = [d.date().isoformat() for d in bad_fat]
        raise ValueError(f"Body fat must lie in [0, 100]; invalid records on {dates}")


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------

def filter_since(df: pd.DataFrame, start_date: Optional[dt.date]) -> pd.DataFrame:
    """Keep records dated on or after `start_date`; all records when None."""
    if start_date is None:
        return df
    cutoff = pd.Timestamp(start_date).normalize()
    return df[df["date"] >= cutoff].reset_index(drop=True)


# ---------------------------------------------------------------------------
# Data loading
# ---------------------------------------------------------------------------

def load_records(filepath: Union[str, Path]) -> pd.DataFrame:
    """Load and validate biometric records from a JSON file."""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    if not data:
        raise ValueError("Data file is empty")

    logger.debug(f"Loaded {len(data)} records from {path}")
    return build_frame(data)
