#!/usr/bin/env python3
"""
Feedback - Strengths and areas to improve derived from sub-scores.
"""

from typing import Dict, List, Sequence, Tuple

from kfn.config_loader import FeedbackConfig
from kfn.matcher.models import MatchLevel, SkillMatch

# dimension -> (strength message, improvement message)
DIMENSION_MESSAGES: Dict[str, Tuple[str, str]] = {
    "skills": (
        "Strong skills match with job requirements",
        "Develop skills matching job requirements",
    ),
    "experience": (
        "Relevant experience for the role",
        "Gain more relevant experience",
    ),
    "location": (
        "Good location compatibility",
        "Consider location flexibility",
    ),
    "availability": (
        "Good availability match",
        "Improve availability alignment",
    ),
    "education": (
        "Education meets or exceeds requirements",
        "Consider additional education or certifications",
    ),
    "cultural": (
        "Good cultural fit with company",
        "Research company culture for better alignment",
    ),
}


def identify_strengths_and_areas(
    sub_scores: Dict[str, float],
    max_scores: Dict[str, float],
    skill_matches: Sequence[SkillMatch],
    config: FeedbackConfig
) -> Tuple[List[str], List[str]]:
    """
    Compare each sub-score against fractions of its max.

    Returns: (strengths, areas_to_improve)
    """
    strengths: List[str] = []
    areas: List[str] = []

    for dimension, (strength_msg, improve_msg) in DIMENSION_MESSAGES.items():
        score = sub_scores.get(dimension, 0.0)
        max_score = max_scores[dimension]
        if score >= max_score * config.strength_fraction:
            strengths.append(strength_msg)
        elif score <= max_score * config.improvement_fraction:
            areas.append(improve_msg)

    excellent = [m for m in skill_matches if m.match_level == MatchLevel.EXCELLENT]
    missing_required = [
        m for m in skill_matches if m.match_level == MatchLevel.MISSING and m.required
    ]
    if excellent:
        strengths.append(f"Excellent match on {len(excellent)} key skills")
    if missing_required:
        areas.append(f"Missing {len(missing_required)} required skills")

    return strengths, areas
