"""
Centralized configuration for all thresholds, weights, and bands.

Every tunable constant lives here. The defaults reproduce the dashboard's
hard-coded values exactly; callers may inject a different config but the
engine never reads globals.
"""

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Pace (weekly weight loss)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PaceParams:
    """Healthy weekly weight-loss band and the penalty applied outside it."""

    # Clinically "ideal" band, kg/week, inclusive on both ends
    ideal_min: float = 0.5
    ideal_max: float = 1.0

    # Linear penalty centred on the middle of the band
    center: float = 0.75
    penalty_per_kg: float = 10.0

    def __post_init__(self):
        if self.ideal_min > self.ideal_max:
            raise ValueError(
                f"Pace band is inverted: {self.ideal_min} > {self.ideal_max}"
            )


# ---------------------------------------------------------------------------
# Success-rate weights
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SuccessWeights:
    """Maximum points awarded by each success sub-criterion."""

    pace: float = 33.3
    fat_loss: float = 33.3
    muscle: float = 33.4

    def __post_init__(self):
        total = self.pace + self.fat_loss + self.muscle
        if abs(total - 100.0) > 1e-9:
            raise ValueError(f"Success weights must sum to 100, got {total}")


# ---------------------------------------------------------------------------
# Qualitative bands
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SuccessBands:
    """Strict lower bounds for the success-rate labels."""

    excellent: float = 80.0
    good: float = 60.0
    fair: float = 40.0


@dataclass(frozen=True)
class BodyFatLossBands:
    """Strict lower bounds (percent) for the body-fat loss labels."""

    significant: float = 10.0
    effective: float = 5.0
    slight: float = 0.0


# ---------------------------------------------------------------------------
# Output formatting
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RoundingParams:
    """Decimal places used when reporting derived metrics."""

    default: int = 1
    weekly_loss: int = 2


@dataclass(frozen=True)
class ReportParams:
    """Display rules the dashboard applies to a result."""

    # Weekly-rate breakdown is only meaningful over four weeks or more
    pace_breakdown_min_days: int = 28


# ---------------------------------------------------------------------------
# Recommendation rules (declarative)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RecommendationRule:
    """
    A single advice rule: fires when `metric` compares true against `threshold`.

    `requires_loss` additionally demands a positive weight change, which is
    how the slow-pace rule avoids firing for members who are gaining.
    """

    key: str
    metric: str
    op: str
    threshold: float
    message: str
    requires_loss: bool = False


DEFAULT_RECOMMENDATION_RULES: tuple = (
    RecommendationRule(
        key="slow_pace",
        metric="average_weight_loss_per_week",
        op="lt",
        threshold=0.5,
        requires_loss=True,
        message="Add moderate aerobic exercise and tighten calorie intake to raise the loss rate",
    ),
    RecommendationRule(
        key="fast_pace",
        metric="average_weight_loss_per_week",
        op="gt",
        threshold=1.0,
        message="Losing weight quickly: increase protein intake to protect muscle",
    ),
    RecommendationRule(
        key="muscle_loss",
        metric="lean_mass_change",
        op="lt",
        threshold=0.0,
        message="Lean mass is dropping: add resistance training and raise protein intake",
    ),
    RecommendationRule(
        key="fat_not_falling",
        metric="body_fat_loss_rate",
        op="le",
        threshold=0.0,
        message="Body fat is not falling: rework the diet and add high-intensity interval training",
    ),
    RecommendationRule(
        key="hydration",
        metric="water_rate_change",
        op="lt",
        threshold=0.0,
        message="Water rate fell: drink enough every day to support metabolism",
    ),
)

DEFAULT_ON_TRACK_MESSAGES: tuple = (
    "The plan is working well: keep the current diet and exercise habits",
    "Consider more resistance training to build muscle and raise basal metabolic rate",
)


# ---------------------------------------------------------------------------
# Top-level config aggregate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BodyTrackConfig:
    """Complete engine configuration. Pass to the pipeline to override defaults."""

    pace: PaceParams = field(default_factory=PaceParams)
    weights: SuccessWeights = field(default_factory=SuccessWeights)
    success_bands: SuccessBands = field(default_factory=SuccessBands)
    body_fat_bands: BodyFatLossBands = field(default_factory=BodyFatLossBands)
    rounding: RoundingParams = field(default_factory=RoundingParams)
    report: ReportParams = field(default_factory=ReportParams)
    recommendation_rules: tuple = DEFAULT_RECOMMENDATION_RULES
    on_track_messages: tuple = DEFAULT_ON_TRACK_MESSAGES
