#!/usr/bin/env python3
"""
Match Engine - Compute the KFN score for a worker/job pair.

Runs the six dimension matchers, sums their capped sub-scores into the
overall 0-100 score and derives the recommendation tier, confidence and
feedback. The engine only holds configuration and keeps all per-call state
local, so a single instance can be shared across threads.
"""

from datetime import date
from typing import Optional
import logging

from kfn.config_loader import ScorerConfig
from kfn.exceptions import JobNotFoundException, WorkerNotFoundException
from kfn.matcher import (
    AvailabilityMatcher, CulturalMatcher, EducationMatcher, ExperienceMatcher,
    LocationMatcher, SkillMatcher
)
from kfn.matcher.models import JobProfile, WorkerProfile
from kfn.scorer.feedback import identify_strengths_and_areas
from kfn.scorer.models import MatchResult
from kfn.scorer.recommendation import calculate_confidence, get_recommendation
from kfn.utils import round_score

logger = logging.getLogger(__name__)


class MatchEngine:
    """Stateless KFN scoring engine."""

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()
        self.skill_matcher = SkillMatcher(self.config.skills)
        self.experience_matcher = ExperienceMatcher(self.config.experience)
        self.location_matcher = LocationMatcher(self.config.location)
        self.availability_matcher = AvailabilityMatcher(self.config.availability)
        self.education_matcher = EducationMatcher(self.config.education)
        self.cultural_matcher = CulturalMatcher(self.config.cultural)

    def compute_match(
        self,
        worker: Optional[WorkerProfile],
        job: Optional[JobProfile],
        as_of: Optional[date] = None
    ) -> MatchResult:
        """
        Score a worker against a job.

        Args:
            worker: Worker profile snapshot
            job: Job profile snapshot
            as_of: Reference date for current roles (defaults to today)

        Returns:
            MatchResult with sub-scores, details, tier, confidence and feedback

        Raises:
            WorkerNotFoundException / JobNotFoundException if either input is missing
        """
        if worker is None:
            raise WorkerNotFoundException()
        if job is None:
            raise JobNotFoundException()

        as_of = as_of or date.today()

        skills_score, skill_matches = self.skill_matcher.calculate(
            worker.skills, job.required_skills, job.preferred_skills
        )
        experience_score, experience_matches = self.experience_matcher.calculate(
            worker.experience, job, as_of
        )
        location_score, location_match = self.location_matcher.calculate(worker, job)
        availability_score, availability_match = self.availability_matcher.calculate(worker, job)
        education_score, education_match = self.education_matcher.calculate(
            worker.education, job.requirements
        )
        cultural_score, cultural_match = self.cultural_matcher.calculate(worker, job)

        raw_scores = {
            "skills": skills_score,
            "experience": experience_score,
            "location": location_score,
            "availability": availability_score,
            "education": education_score,
            "cultural": cultural_score,
        }
        sub_scores = {dimension: round_score(score) for dimension, score in raw_scores.items()}
        overall_score = round_score(sum(sub_scores.values()))

        recommendation = get_recommendation(overall_score, self.config.recommendation)
        confidence = calculate_confidence(worker, job, self.config.confidence)
        # Feedback thresholds compare unrounded scores
        strengths, areas = identify_strengths_and_areas(
            raw_scores, self.config.max_scores(), skill_matches, self.config.feedback
        )

        logger.debug(
            f"KFN worker={worker.id} job={job.id}: overall={overall_score:.2f} "
            f"({recommendation.value}), confidence={confidence:.2f}"
        )

        return MatchResult(
            skills_score=sub_scores["skills"],
            experience_score=sub_scores["experience"],
            location_score=sub_scores["location"],
            availability_score=sub_scores["availability"],
            education_score=sub_scores["education"],
            cultural_score=sub_scores["cultural"],
            overall_score=overall_score,
            skill_matches=skill_matches,
            experience_matches=experience_matches,
            location_match=location_match,
            availability_match=availability_match,
            education_match=education_match,
            cultural_match=cultural_match,
            recommendation=recommendation,
            confidence=confidence,
            strengths=tuple(strengths),
            areas_to_improve=tuple(areas),
            worker_id=worker.id,
            job_id=job.id
        )


_default_engine: Optional[MatchEngine] = None


def compute_match(
    worker: Optional[WorkerProfile],
    job: Optional[JobProfile],
    config: Optional[ScorerConfig] = None,
    as_of: Optional[date] = None
) -> MatchResult:
    """Score a worker/job pair with the given config (defaults if omitted)."""
    global _default_engine
    if config is not None:
        return MatchEngine(config).compute_match(worker, job, as_of=as_of)
    if _default_engine is None:
        _default_engine = MatchEngine()
    return _default_engine.compute_match(worker, job, as_of=as_of)
