"""
Success-rate scoring: three independently capped sub-criteria summed to [0, 100].

    pace      — weekly loss inside the ideal band, linear penalty outside
    fat loss  — binary, fat mass must have dropped
    muscle    — binary, lean mass must not have dropped

All inputs are the unrounded intermediates; only the final sum is rounded.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict

from bodytrack.config import BodyTrackConfig


def round_metric(value: float, digits: int) -> float:
    """
    Round half away from zero on the exact binary value of `value`.

    Matches the dashboard's fixed-point formatting, which differs from
    Python's round() on exact ties (2.25 -> 2.3, not 2.2).
    """
    quantum = Decimal(1).scaleb(-digits)
    # + 0.0 folds a rounded negative zero into 0.0
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)) + 0.0


def compute_pace_score(weekly_loss: float, cfg: BodyTrackConfig) -> float:
    """Full points inside the ideal band, otherwise a floored linear penalty."""
    p = cfg.pace
    full = cfg.weights.pace

    if p.ideal_min <= weekly_loss <= p.ideal_max:
        return full
    return max(0.0, full - abs(weekly_loss - p.center) * p.penalty_per_kg)


def compute_success_breakdown(
    weekly_loss: float,
    fat_mass_lost: float,
    lean_mass_change: float,
    cfg: BodyTrackConfig,
) -> Dict[str, float]:
    """Unrounded points per sub-criterion."""
    w = cfg.weights
    return {
        "pace": compute_pace_score(weekly_loss, cfg),
        "fat_loss": w.fat_loss if fat_mass_lost > 0 else 0.0,
        "muscle": w.muscle if lean_mass_change >= 0 else 0.0,
    }


def compute_success_rate(
    weekly_loss: float,
    fat_mass_lost: float,
    lean_mass_change: float,
    cfg: BodyTrackConfig,
) -> float:
    """Composite success rate in [0, 100], rounded to the default precision."""
    parts = compute_success_breakdown(weekly_loss, fat_mass_lost, lean_mass_change, cfg)
    total = sum([parts["pace"], parts["fat_loss"], parts["muscle"]])
    return round_metric(total, cfg.rounding.default)
