from kfn.scorer.models import (
    RecommendationTier, MatchResult, MatchExplanation,
    BatchFailure, BatchScoreReport, ScoreStatistics
)
from kfn.scorer.engine import MatchEngine, compute_match
from kfn.scorer.explainability import explain, get_component_feedback
from kfn.scorer.completeness import (
    CompletenessField, CompletenessSchema,
    WORKER_COMPLETENESS_SCHEMA, JOB_COMPLETENESS_SCHEMA,
    calculate_completeness, calculate_worker_completeness, calculate_job_completeness
)
from kfn.scorer.recommendation import get_recommendation, calculate_confidence
from kfn.scorer.feedback import identify_strengths_and_areas
from kfn.scorer.ranking import apply_result_policy, rank_candidates, rank_jobs
from kfn.scorer.statistics import summarize_scores
from kfn.scorer.interfaces import ProfileRepository
from kfn.scorer.service import ScoringService

__all__ = [
    'RecommendationTier',
    'MatchResult',
    'MatchExplanation',
    'BatchFailure',
    'BatchScoreReport',
    'ScoreStatistics',
    'MatchEngine',
    'compute_match',
    'explain',
    'get_component_feedback',
    'CompletenessField',
    'CompletenessSchema',
    'WORKER_COMPLETENESS_SCHEMA',
    'JOB_COMPLETENESS_SCHEMA',
    'calculate_completeness',
    'calculate_worker_completeness',
    'calculate_job_completeness',
    'get_recommendation',
    'calculate_confidence',
    'identify_strengths_and_areas',
    'apply_result_policy',
    'rank_candidates',
    'rank_jobs',
    'summarize_scores',
    'ProfileRepository',
    'ScoringService',
]
