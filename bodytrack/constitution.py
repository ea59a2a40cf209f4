"""
Five-type body-constitution profile.

A member's constitution assessment scores five types; the highest score
is the dominant type. Historical assessments are tracked as a dated
DataFrame so per-type movement can be read off the endpoints.
"""

from typing import Dict, List, Mapping, Sequence, Tuple

import pandas as pd


# Canonical order, also used to break score ties
CONSTITUTION_TYPES = (
    "liver_qi_stagnation",
    "spleen_deficiency_dampness",
    "qi_blood_deficiency",
    "stomach_heat_dampness",
    "kidney_yang_deficiency_phlegm",
)

TYPE_LABELS = {
    "liver_qi_stagnation": "Liver-qi stagnation",
    "spleen_deficiency_dampness": "Spleen deficiency with dampness",
    "qi_blood_deficiency": "Qi and blood deficiency",
    "stomach_heat_dampness": "Stomach heat with dampness",
    "kidney_yang_deficiency_phlegm": "Kidney-yang deficiency with phlegm",
}


def _check_scores(scores: Mapping[str, float]) -> None:
    unknown = set(scores) - set(CONSTITUTION_TYPES)
    if unknown:
        raise ValueError(f"Unknown constitution types: {unknown}")
    missing = set(CONSTITUTION_TYPES) - set(scores)
    if missing:
        raise ValueError(f"Missing constitution types: {missing}")


def rank_types(scores: Mapping[str, float]) -> List[Tuple[str, float]]:
    """All five types, highest score first; ties keep canonical order."""
    _check_scores(scores)
    ordered = [(name, float(scores[name])) for name in CONSTITUTION_TYPES]
    return sorted(ordered, key=lambda item: -item[1])


def dominant_type(scores: Mapping[str, float]) -> str:
    return rank_types(scores)[0][0]


def constitution_history(assessments: Sequence[Mapping]) -> pd.DataFrame:
    """Dated assessments as a DataFrame, stably sorted by date."""
    if not assessments:
        raise ValueError("At least one constitution assessment is required")

    for a in assessments:
        _check_scores({k: v for k, v in a.items() if k != "date"})

    df = pd.DataFrame(list(assessments), columns=["date"] + list(CONSTITUTION_TYPES))
    df["date"] = pd.to_datetime(df["date"].map(pd.Timestamp)).dt.normalize()
    df = df.sort_values("date", kind="mergesort").reset_index(drop=True)
    return df


def constitution_changes(assessments: Sequence[Mapping]) -> Dict[str, float]:
    """Per-type score movement between the earliest and latest assessment."""
    df = constitution_history(assessments)
    first = df.iloc[0]
    last = df.iloc[-1]
    return {name: float(last[name] - first[name]) for name in CONSTITUTION_TYPES}
