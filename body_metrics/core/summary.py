"""Narrative summary of derived body metrics.

The summary is an ordered list of sentence rules.  Each rule looks at the
input profile and its ``DerivedMetrics`` and either contributes a sentence
(a template name plus the values to fill in) or nothing.  Deciding which
sentences appear and with which numbers happens in :func:`select_sentences`;
turning them into text or markup is left to :func:`render_summary`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .logic import compute_metrics, days_to_reach_weight
from .schema import DerivedMetrics, InputProfile, WeightCategory
from .templates import get_template

logger = logging.getLogger(__name__)

__all__ = ["Sentence", "SUMMARY_RULES", "select_sentences", "render_summary", "compose_summary"]


@dataclass(frozen=True)
class Sentence:
    template: str
    values: Dict[str, Any] = field(default_factory=dict)


Rule = Callable[[InputProfile, DerivedMetrics], Optional[Sentence]]


def _weight_category(profile: InputProfile, metrics: DerivedMetrics) -> Optional[Sentence]:
    return Sentence(
        "weight_category",
        {
            "category": metrics.weight_category.value,
            "normal_min": metrics.normal_weight_min,
            "normal_max": metrics.normal_weight_max,
            "ideal_weight": metrics.ideal_body_weight,
            "difference": metrics.weight_difference,
        },
    )


def _maintenance_calories(profile: InputProfile, metrics: DerivedMetrics) -> Optional[Sentence]:
    if metrics.weight_category is not WeightCategory.NORMAL:
        return None
    return Sentence("maintenance_calories", {"daily_calorie_need": metrics.daily_calorie_need})


def _ideal_weight_reduction(profile: InputProfile, metrics: DerivedMetrics) -> Optional[Sentence]:
    if metrics.weight_category is not WeightCategory.NORMAL:
        return None
    if profile.weight_kg <= metrics.ideal_body_weight:
        return None
    days = days_to_reach_weight(
        profile.weight_kg, metrics.ideal_body_weight, profile.calorie_deficit
    )
    return Sentence(
        "ideal_weight_reduction",
        {
            "activity_description": metrics.activity_description,
            "calorie_deficit": profile.calorie_deficit,
            "days": days,
            "reduction": abs(profile.weight_kg - metrics.ideal_body_weight),
        },
    )


def _target_weight_reduction(profile: InputProfile, metrics: DerivedMetrics) -> Optional[Sentence]:
    target = profile.target_weight_kg
    if target is None:
        return None
    if not metrics.normal_weight_min <= target <= metrics.normal_weight_max:
        return None
    if profile.weight_kg <= target:
        return None
    days = days_to_reach_weight(profile.weight_kg, target, profile.calorie_deficit)
    return Sentence(
        "target_weight_reduction",
        {
            "target_weight": target,
            "calorie_deficit": profile.calorie_deficit,
            "days": days,
        },
    )


# Order matters: sentences are rendered in this sequence.
SUMMARY_RULES: tuple[Rule, ...] = (
    _weight_category,
    _maintenance_calories,
    _ideal_weight_reduction,
    _target_weight_reduction,
)


def select_sentences(
    profile: InputProfile, metrics: DerivedMetrics | None = None
) -> List[Sentence]:
    """Evaluate every summary rule and return the contributed sentences.

    Args:
        profile: The validated input profile.
        metrics: Metrics computed for ``profile``; computed here if omitted.

    Returns:
        Sentences in display order.

    Raises:
        ZeroCalorieDeficitError: if a projection is needed but the profile's
            calorie deficit is zero.
    """
    if metrics is None:
        metrics = compute_metrics(profile)
    sentences = []
    for rule in SUMMARY_RULES:
        sentence = rule(profile, metrics)
        if sentence is not None:
            sentences.append(sentence)
    logger.debug("select_sentences: %s", [s.template for s in sentences])
    return sentences


def render_summary(sentences: List[Sentence], fmt: str = "text") -> str:
    """Render ``sentences`` as plain text or HTML markup."""
    return " ".join(get_template(s.template, fmt).render(**s.values) for s in sentences)


def compose_summary(
    profile: InputProfile,
    metrics: DerivedMetrics | None = None,
    *,
    fmt: str = "text",
) -> str:
    """Return the full narrative summary for ``profile``."""
    return render_summary(select_sentences(profile, metrics), fmt)
