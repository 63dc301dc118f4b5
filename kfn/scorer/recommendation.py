#!/usr/bin/env python3
"""
Recommendation & Confidence - Outcome tier and data-completeness confidence.
"""

from kfn.config_loader import ConfidenceConfig, RecommendationThresholds
from kfn.matcher.models import JobProfile, WorkerProfile
from kfn.scorer.completeness import calculate_job_completeness, calculate_worker_completeness
from kfn.scorer.models import RecommendationTier
from kfn.utils import clamp01


def get_recommendation(score: float, thresholds: RecommendationThresholds) -> RecommendationTier:
    """Map an overall score (0-100) to a recommendation tier; bounds are inclusive."""
    if score >= thresholds.strongly_recommend:
        return RecommendationTier.STRONGLY_RECOMMEND
    if score >= thresholds.recommend:
        return RecommendationTier.RECOMMEND
    if score >= thresholds.consider:
        return RecommendationTier.CONSIDER
    if score >= thresholds.not_recommend:
        return RecommendationTier.NOT_RECOMMEND
    return RecommendationTier.REJECT


def calculate_confidence(worker: WorkerProfile, job: JobProfile, config: ConfidenceConfig) -> float:
    """
    Confidence in a score from how complete both profiles are.

    Formula: base + w_worker * WorkerCompleteness + w_job * JobCompleteness,
    clamped to [0, 1]
    """
    confidence = (
        config.base +
        config.worker_weight * calculate_worker_completeness(worker) +
        config.job_weight * calculate_job_completeness(job)
    )
    return clamp01(confidence)
