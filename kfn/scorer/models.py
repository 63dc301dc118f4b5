#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from kfn.matcher.models import (
    AvailabilityMatch, CulturalMatch, EducationMatch, LocationMatch,
    ExperienceMatches, SkillMatches
)


class RecommendationTier(str, Enum):
    STRONGLY_RECOMMEND = "STRONGLY_RECOMMEND"
    RECOMMEND = "RECOMMEND"
    CONSIDER = "CONSIDER"
    NOT_RECOMMEND = "NOT_RECOMMEND"
    REJECT = "REJECT"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class MatchResult:
    """
    Complete KFN score for one worker/job pair.

    overall_score is always the plain sum of the six sub-scores; each
    sub-score is already capped at its own ceiling.
    """
    skills_score: float
    experience_score: float
    location_score: float
    availability_score: float
    education_score: float
    cultural_score: float
    overall_score: float

    skill_matches: SkillMatches
    experience_matches: ExperienceMatches
    location_match: LocationMatch
    availability_match: AvailabilityMatch
    education_match: EducationMatch
    cultural_match: CulturalMatch

    recommendation: RecommendationTier
    confidence: float
    strengths: Tuple[str, ...] = ()
    areas_to_improve: Tuple[str, ...] = ()

    worker_id: Optional[str] = None
    job_id: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow, compare=False)

    @property
    def sub_scores(self) -> Dict[str, float]:
        return {
            "skills": self.skills_score,
            "experience": self.experience_score,
            "location": self.location_score,
            "availability": self.availability_score,
            "education": self.education_score,
            "cultural": self.cultural_score,
        }


@dataclass(frozen=True)
class MatchExplanation:
    """Human-readable rendering of a MatchResult."""
    summary: str
    breakdown: Dict[str, str]
    strengths: Tuple[str, ...]
    areas_to_improve: Tuple[str, ...]
    confidence_label: str


@dataclass
class BatchFailure:
    """A worker/job pair that could not be scored."""
    worker_id: Any
    job_id: Any
    error: str


@dataclass
class BatchScoreReport:
    """Outcome of scoring many pairs; failures are collected, not raised."""
    results: List[MatchResult] = field(default_factory=list)
    failures: List[BatchFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results) + len(self.failures)

    @property
    def successful(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> int:
        return len(self.failures)


@dataclass
class ScoreStatistics:
    """Aggregate view over a collection of MatchResults."""
    count: int = 0
    average_scores: Dict[str, float] = field(default_factory=dict)
    min_overall: Optional[float] = None
    max_overall: Optional[float] = None
    recommendation_distribution: Dict[str, int] = field(default_factory=dict)
    band_distribution: Dict[str, int] = field(default_factory=dict)
    band_percentages: Dict[str, float] = field(default_factory=dict)
