#!/usr/bin/env python3
"""
Score Statistics - Averages and distributions over a set of KFN results.
"""

from collections import Counter
from typing import Dict, Sequence

import numpy as np

from kfn.scorer.models import MatchResult, RecommendationTier, ScoreStatistics

SCORE_FIELDS = (
    "overall_score",
    "skills_score",
    "experience_score",
    "location_score",
    "availability_score",
    "education_score",
    "cultural_score",
)

# (band, lower bound), checked in order
SCORE_BANDS = (
    ("excellent", 90.0),
    ("good", 75.0),
    ("average", 60.0),
    ("poor", 0.0),
)


def _band(score: float) -> str:
    for name, lower in SCORE_BANDS:
        if score >= lower:
            return name
    return SCORE_BANDS[-1][0]


def summarize_scores(results: Sequence[MatchResult]) -> ScoreStatistics:
    """
    Aggregate a collection of match results.

    Returns:
        ScoreStatistics with per-field averages, overall min/max, recommendation
        counts and score-band counts/percentages. Empty input yields zeros.
    """
    bands: Dict[str, int] = {name: 0 for name, _ in SCORE_BANDS}
    tiers: Dict[str, int] = {tier.value: 0 for tier in RecommendationTier}

    if not results:
        return ScoreStatistics(
            count=0,
            average_scores={f: 0.0 for f in SCORE_FIELDS},
            recommendation_distribution=tiers,
            band_distribution=bands,
            band_percentages={name: 0.0 for name in bands}
        )

    matrix = np.array(
        [[getattr(r, f) for f in SCORE_FIELDS] for r in results],
        dtype=np.float64
    )
    means = matrix.mean(axis=0)
    overall = matrix[:, 0]

    tiers.update(Counter(r.recommendation.value for r in results))
    bands.update(Counter(_band(r.overall_score) for r in results))

    count = len(results)
    return ScoreStatistics(
        count=count,
        average_scores={f: round(float(m), 2) for f, m in zip(SCORE_FIELDS, means)},
        min_overall=float(overall.min()),
        max_overall=float(overall.max()),
        recommendation_distribution=tiers,
        band_distribution=bands,
        band_percentages={name: n / count * 100 for name, n in bands.items()}
    )
