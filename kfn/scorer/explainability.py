#!/usr/bin/env python3
"""
Explainability Module - Render a stored MatchResult as readable text.

Works purely from a previously computed result, so it can be used on cached
or persisted scores without the source profiles.
"""

from typing import Dict, Optional

from kfn.config_loader import ScorerConfig
from kfn.scorer.models import MatchExplanation, MatchResult

_DIMENSION_LABELS = (
    ("skills", "Skills Match"),
    ("experience", "Experience"),
    ("location", "Location"),
    ("availability", "Availability"),
    ("education", "Education"),
    ("cultural", "Cultural Fit"),
)


def _fmt(value: float) -> str:
    return f"{value:g}"


def get_component_feedback(score: float, max_score: float) -> str:
    """Short verdict for a sub-score as a share of its max."""
    percentage = (score / max_score) * 100 if max_score else 0.0
    if percentage >= 90:
        return "Excellent match"
    if percentage >= 75:
        return "Strong match"
    if percentage >= 60:
        return "Good match"
    if percentage >= 40:
        return "Fair match"
    return "Needs improvement"


def explain(result: MatchResult, config: Optional[ScorerConfig] = None) -> MatchExplanation:
    """
    Generate a human-readable explanation of a match result.

    Args:
        result: Previously computed MatchResult
        config: Scorer config supplying the dimension ceilings (defaults used if omitted)

    Returns:
        MatchExplanation with summary, per-dimension breakdown, strengths,
        areas to improve and a confidence label
    """
    max_scores = (config or ScorerConfig()).max_scores()
    sub_scores = result.sub_scores

    breakdown: Dict[str, str] = {}
    for dimension, label in _DIMENSION_LABELS:
        score = sub_scores[dimension]
        max_score = max_scores[dimension]
        breakdown[dimension] = (
            f"{label}: {_fmt(score)}/{_fmt(max_score)} - "
            f"{get_component_feedback(score, max_score)}"
        )

    return MatchExplanation(
        summary=f"Overall KFN Score: {_fmt(result.overall_score)}/100 ({result.recommendation.value})",
        breakdown=breakdown,
        strengths=tuple(result.strengths),
        areas_to_improve=tuple(result.areas_to_improve),
        confidence_label=f"Confidence Level: {int(result.confidence * 100 + 0.5)}%"
    )
