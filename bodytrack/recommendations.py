"""
Personalised advice derived from an analysis result.

A small declarative rule engine: rules live in config.recommendation_rules,
so new advice is added without touching this module.
"""

import operator
from typing import List, Mapping, Optional

from bodytrack.config import BodyTrackConfig, RecommendationRule


_OPS = {
    "lt": operator.lt,
    "le": operator.le,
    "gt": operator.gt,
    "ge": operator.ge,
}


def rule_fires(rule: RecommendationRule, metrics: Mapping[str, Optional[float]]) -> bool:
    """
    Evaluate one rule against a flat metric mapping.

    An undefined metric (None) never fires a rule.
    """
    value = metrics.get(rule.metric)
    if value is None:
        return False
    if rule.requires_loss and not (metrics.get("weight_change") or 0) > 0:
        return False
    return _OPS[rule.op](value, rule.threshold)


def generate_recommendations(
    metrics: Mapping[str, Optional[float]],
    cfg: BodyTrackConfig,
) -> List[str]:
    """
    Scan all configured rules in order and collect the messages that fire.

    Falls back to the on-track messages when nothing fires.
    """
    advice = [
        rule.message
        for rule in cfg.recommendation_rules
        if rule_fires(rule, metrics)
    ]
    if not advice:
        advice = list(cfg.on_track_messages)
    return advice
