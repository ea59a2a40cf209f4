"""
Pipeline orchestration: load → sort → filter → endpoints → derive → score → report.

The core (_analyze_df) is a pure function of the record frame and a
resolved start date. File loading and range resolution happen at the
public entry points; report formatting is kept at the bottom.
"""

import datetime as dt
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Union

import pandas as pd
from loguru import logger

from bodytrack.composition import compute_composition, decompose, trend_window
from bodytrack.config import BodyTrackConfig
from bodytrack.constitution import (
    CONSTITUTION_TYPES,
    TYPE_LABELS,
    constitution_changes,
    constitution_history,
    dominant_type,
    rank_types,
)
from bodytrack.interpret import interpret
from bodytrack.ranges import RangeFilter
from bodytrack.records import RecordsInput, build_frame, filter_since, load_records
from bodytrack.scoring import compute_success_rate, round_metric


# ---------------------------------------------------------------------------
# Result type
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisResult:
    """
    Progress summary between the first and last record of a window.

    Sign conventions: weight, body fat, BMI and visceral fat changes are
    first - last (positive means a decrease). Muscle mass and water rate
    changes are last - first (positive means an increase). Optional metrics
    missing from either endpoint are None.
    """

    start_date: dt.date
    end_date: dt.date
    days_between: int
    start_weight: float
    end_weight: float
    weight_change: float
    start_body_fat: float
    end_body_fat: float
    body_fat_change: float
    average_weight_loss_per_week: float
    bmi_change: Optional[float]
    visceral_fat_change: Optional[float]
    muscle_mass_change: Optional[float]
    fat_mass_lost: float
    lean_mass_change: float
    water_rate_change: Optional[float]
    weight_loss_rate: float
    body_fat_loss_rate: Optional[float]
    success_rate: float

    def to_dict(self) -> Dict:
        d = asdict(self)
        d["start_date"] = self.start_date.isoformat()
        d["end_date"] = self.end_date.isoformat()
        return d


def _delta(a: float, b: float, digits: int) -> Optional[float]:
    """Rounded a - b, or None when either side was not recorded."""
    if pd.isna(a) or pd.isna(b):
        return None
    return round_metric(float(a) - float(b), digits)


# ---------------------------------------------------------------------------
# Core analysis (PURE FUNCTION — NO FILE I/O, NO CLOCK)
# ---------------------------------------------------------------------------

def _analyze_df(
    df: pd.DataFrame,
    start_date: Optional[dt.date],
    cfg: BodyTrackConfig,
) -> Optional[AnalysisResult]:
    """
    Core analysis over a validated, date-sorted frame.

    Returns None when no records fall inside the window.
    """
    window = filter_since(df, start_date)
    logger.debug(f"Analyzing {len(window)} of {len(df)} records since {start_date}")

    if window.empty:
        return None

    first = window.iloc[0]
    last = window.iloc[-1]
    digits = cfg.rounding.default

    # Stage 1: Time span
    days_between = int((last["date"] - first["date"]).days)
    weeks_between = days_between / 7 or 1
    w0 = float(first["weight"])
    w1 = float(last["weight"])
    bf0 = float(first["body_fat"])
    bf1 = float(last["body_fat"])
    weekly_loss = (w0 - w1) / weeks_between

    # Stage 2: Body composition
    fat_start, lean_start = decompose(w0, bf0)
    fat_end, lean_end = decompose(w1, bf1)
    fat_mass_lost = fat_start - fat_end
    lean_mass_change = lean_end - lean_start

    # Stage 3: Success score (unrounded inputs)
    success_rate = compute_success_rate(weekly_loss, fat_mass_lost, lean_mass_change, cfg)

    # Stage 4: Relative rates
    weight_loss_rate = round_metric((w0 - w1) / w0 * 100, digits)
    if bf0 == 0:
        logger.warning(f"Body-fat loss rate undefined: zero body fat on {first['date'].date()}")
        body_fat_loss_rate = None
    else:
        body_fat_loss_rate = round_metric((bf0 - bf1) / bf0 * 100, digits)

    return AnalysisResult(
        start_date=first["date"].date(),
        end_date=last["date"].date(),
        days_between=days_between,
        start_weight=w0,
        end_weight=w1,
        weight_change=round_metric(w0 - w1, digits),
        start_body_fat=bf0,
        end_body_fat=bf1,
        body_fat_change=round_metric(bf0 - bf1, digits),
        average_weight_loss_per_week=round_metric(weekly_loss, cfg.rounding.weekly_loss),
        bmi_change=_delta(first["bmi"], last["bmi"], digits),
        visceral_fat_change=_delta(first["visceral_fat"], last["visceral_fat"], digits),
        muscle_mass_change=_delta(last["muscle_mass"], first["muscle_mass"], digits),
        fat_mass_lost=round_metric(fat_mass_lost, digits),
        lean_mass_change=round_metric(lean_mass_change, digits),
        water_rate_change=_delta(last["water_rate"], first["water_rate"], digits),
        weight_loss_rate=weight_loss_rate,
        body_fat_loss_rate=body_fat_loss_rate,
        success_rate=success_rate,
    )


# ---------------------------------------------------------------------------
# Public Entry Points
# ---------------------------------------------------------------------------

def analyze_records(
    records: RecordsInput,
    start_date: Optional[dt.date] = None,
    cfg: BodyTrackConfig | None = None,
) -> Optional[AnalysisResult]:
    """
    Backend / UI integration entry point.

    Accepts BiometricRecord objects, dicts, or a DataFrame. Input order
    does not matter and the input is never modified.
    """
    if cfg is None:
        cfg = BodyTrackConfig()

    df = build_frame(records)
    if df.empty:
        return None
    return _analyze_df(df, start_date, cfg)


def analyze_range(
    records: RecordsInput,
    range_filter: RangeFilter,
    today: dt.date,
    cfg: BodyTrackConfig | None = None,
) -> Optional[AnalysisResult]:
    """Resolve a range filter against an explicit `today`, then analyze."""
    return analyze_records(records, range_filter.resolve(today), cfg)


def analyze(
    filepath: Union[str, Path],
    start_date: Optional[dt.date] = None,
    cfg: BodyTrackConfig | None = None,
) -> Optional[AnalysisResult]:
    """
    CLI-compatible entry point.
    Reads JSON file and runs analysis.
    """
    if cfg is None:
        cfg = BodyTrackConfig()

    df = load_records(filepath)
    return _analyze_df(df, start_date, cfg)


def composition_trend(
    records: RecordsInput,
    start_date: Optional[dt.date] = None,
    count: int = 0,
) -> pd.DataFrame:
    """
    Per-record fat and lean mass for the most recent `count` records
    in the window (all of them when count <= 0).
    """
    df = build_frame(records)
    if df.empty:
        return compute_composition(df)
    window = filter_since(df, start_date)
    return trend_window(compute_composition(window), count)


# ---------------------------------------------------------------------------
# Report generation
# ---------------------------------------------------------------------------

def _signed(value: Optional[float], unit: str = "") -> str:
    if value is None:
        return "n/a"
    return f"{value:+.1f}{unit}"


def _constitution_lines(assessments: Sequence[Mapping]) -> List[str]:
    history = constitution_history(assessments)
    latest = history.iloc[-1]
    scores = {name: latest[name] for name in CONSTITUTION_TYPES}

    lines = [
        "",
        f"  Constitution ({latest['date'].date()}):",
        f"    Dominant          : {TYPE_LABELS[dominant_type(scores)]}",
    ]
    if len(history) > 1:
        changes = constitution_changes(assessments)
        for name, score in rank_types(scores):
            lines.append(f"    {TYPE_LABELS[name]:34s}: {score:g} ({changes[name]:+g})")
    else:
        for name, score in rank_types(scores):
            lines.append(f"    {TYPE_LABELS[name]:34s}: {score:g}")
    return lines


def _trend_lines(trend: pd.DataFrame) -> List[str]:
    lines = ["", "  Recent Composition (weight / fat / lean kg):"]
    for _, row in trend.iterrows():
        lines.append(
            f"    {row['date'].date()}  {row['weight']:6.1f}  "
            f"{row['fat_mass']:6.1f}  {row['lean_mass']:6.1f}"
        )
    return lines


def generate_report(
    result: Optional[AnalysisResult],
    cfg: BodyTrackConfig | None = None,
    trend: Optional[pd.DataFrame] = None,
    assessments: Optional[Sequence[Mapping]] = None,
) -> str:
    """
    Format an analysis result as a human-readable text report.

    `trend` (from composition_trend) and `assessments` (constitution
    history) add their sections when given.
    """
    if cfg is None:
        cfg = BodyTrackConfig()

    lines = [
        "BODYTRACK PROGRESS REPORT",
        "=" * 58,
        "",
    ]

    if result is None:
        lines.append("  No records found in the selected range.")
        lines.append("")
        lines.append("=" * 58)
        return "\n".join(lines)

    view = interpret(result, cfg)

    lines += [
        f"  Period              : {result.start_date} → {result.end_date} ({result.days_between}d)",
        f"  Weight              : {result.start_weight} → {result.end_weight} kg",
        f"  Weight Change       : {_signed(result.weight_change, ' kg')} ({result.weight_loss_rate}%)",
        f"  Weekly Loss         : {result.average_weight_loss_per_week:.2f} kg/week ({view.pace_band})",
        f"  Body Fat            : {result.start_body_fat} → {result.end_body_fat} %",
        f"  Body Fat Loss Rate  : {'n/a' if result.body_fat_loss_rate is None else result.body_fat_loss_rate}% ({view.body_fat_band})",
        f"  Fat Mass Lost       : {result.fat_mass_lost} kg",
        f"  Lean Mass Change    : {_signed(result.lean_mass_change, ' kg')}",
        f"  Muscle Mass Change  : {_signed(result.muscle_mass_change, ' kg')}",
        f"  BMI Change          : {_signed(result.bmi_change)}",
        f"  Visceral Fat Change : {_signed(result.visceral_fat_change)}",
        f"  Water Rate Change   : {_signed(result.water_rate_change, '%')}",
        f"  Success Rate        : {result.success_rate}% ({view.success_band})",
        f"                        {view.success_message}",
    ]

    if view.show_pace_breakdown:
        lines.append("")
        lines.append("  Pace Analysis:")
        lines.append(f"    {view.pace_message}")
        lines.append(f"    {view.body_fat_message}")
        lines.append(f"    Muscle retention: {'good' if view.muscle_retained else 'losing'}")

    lines.append("")
    lines.append("  Recommendations:")
    for rec in view.recommendations:
        lines.append(f"    - {rec}")

    if trend is not None and not trend.empty:
        lines += _trend_lines(trend)

    if assessments:
        lines += _constitution_lines(assessments)

    lines.append("")
    lines.append("=" * 58)
    return "\n".join(lines)
