"""
Qualitative interpretation of an analysis result.

These bands are the contract between the engine's numbers and what the
dashboard shows: labels, messages, and the advice list. All functions
read the rounded result fields, exactly as they are displayed.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from bodytrack.config import BodyTrackConfig
from bodytrack.recommendations import generate_recommendations

if TYPE_CHECKING:
    from bodytrack.pipeline import AnalysisResult


SUCCESS_MESSAGES = {
    "excellent": "Excellent weight-loss results, keep up the trend",
    "good": "Good progress with efficient body-fat reduction",
    "fair": "Losing weight; consider optimising diet and exercise",
    "poor": "Results are below target; consider reworking the plan",
}

PACE_MESSAGES = {
    "ideal": "Ideal weight-loss rate",
    "slow": "Weight-loss rate is a little slow",
    "fast": "Losing weight fast; watch for muscle loss",
    "none": "No weight loss, or weight gained",
}

BODY_FAT_MESSAGES = {
    "significant": "Body fat dropped significantly",
    "effective": "Body fat is falling effectively",
    "slight": "Body fat fell slightly",
    "none": "No body-fat reduction, or body fat increased",
    "undefined": "Body-fat loss rate is undefined for a zero starting reading",
}


# ---------------------------------------------------------------------------
# Band classifiers
# ---------------------------------------------------------------------------

def classify_success(rate: float, cfg: BodyTrackConfig) -> str:
    """Map a success rate to excellent / good / fair / poor."""
    b = cfg.success_bands
    if rate > b.excellent:
        return "excellent"
    if rate > b.good:
        return "good"
    if rate > b.fair:
        return "fair"
    return "poor"


def classify_pace(weekly_loss: float, cfg: BodyTrackConfig) -> str:
    """Map average weekly loss (kg) to ideal / slow / fast / none."""
    p = cfg.pace
    if p.ideal_min <= weekly_loss <= p.ideal_max:
        return "ideal"
    if 0 < weekly_loss < p.ideal_min:
        return "slow"
    if weekly_loss > p.ideal_max:
        return "fast"
    return "none"


def classify_body_fat_loss(rate: Optional[float], cfg: BodyTrackConfig) -> str:
    """Map body-fat loss rate (%) to significant / effective / slight / none."""
    if rate is None:
        return "undefined"
    b = cfg.body_fat_bands
    if rate > b.significant:
        return "significant"
    if rate > b.effective:
        return "effective"
    if rate > b.slight:
        return "slight"
    return "none"


# ---------------------------------------------------------------------------
# Bundle
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Interpretation:
    success_band: str
    pace_band: str
    body_fat_band: str
    muscle_retained: bool
    show_pace_breakdown: bool
    recommendations: List[str] = field(default_factory=list)

    @property
    def success_message(self) -> str:
        return SUCCESS_MESSAGES[self.success_band]

    @property
    def pace_message(self) -> str:
        return PACE_MESSAGES[self.pace_band]

    @property
    def body_fat_message(self) -> str:
        return BODY_FAT_MESSAGES[self.body_fat_band]


def interpret(
    result: "AnalysisResult",
    cfg: BodyTrackConfig | None = None,
) -> Interpretation:
    """Derive every display band and the advice list from an AnalysisResult."""
    if cfg is None:
        cfg = BodyTrackConfig()

    return Interpretation(
        success_band=classify_success(result.success_rate, cfg),
        pace_band=classify_pace(result.average_weight_loss_per_week, cfg),
        body_fat_band=classify_body_fat_loss(result.body_fat_loss_rate, cfg),
        muscle_retained=result.lean_mass_change >= 0,
        show_pace_breakdown=result.days_between >= cfg.report.pace_breakdown_min_days,
        recommendations=generate_recommendations(result.to_dict(), cfg),
    )
