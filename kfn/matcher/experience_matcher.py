#!/usr/bin/env python3
"""
Experience Matcher - Years of experience and role relevance.

Two components:
1. Years score: total years across roles vs. years required by the job level
2. Relevance score: mean per-role blend of title similarity, industry keyword
   hits and description token overlap with the job text

Roles with unparsable dates still count towards relevance but are left out
of the years total.
"""
from datetime import date
from typing import List, Optional, Sequence, Tuple
import logging

from kfn.config_loader import ExperienceScoringConfig
from kfn.matcher.models import (
    Experience, ExperienceMatch, ExperienceMatches, JobProfile, MatchLevel
)
from kfn.matcher.similarity import SimilarityCalculator
from kfn.utils import normalize_key, parse_date

logger = logging.getLogger(__name__)


class ExperienceMatcher:
    """Score a worker's work history against a job."""

    def __init__(self, config: ExperienceScoringConfig):
        self.config = config

    def get_role_duration(self, experience: Experience, as_of: date) -> Optional[float]:
        """
        Duration of one role in fractional years.

        Current or open-ended roles run until as_of. Returns None when the
        start date (or an explicit end date) cannot be parsed.
        """
        start = parse_date(experience.start_date)
        if start is None:
            logger.debug(f"Skipping duration for role {experience.title!r}: no usable start date")
            return None

        if experience.current or not experience.end_date:
            end = as_of
        else:
            end = parse_date(experience.end_date)
            if end is None:
                logger.debug(f"Skipping duration for role {experience.title!r}: bad end date")
                return None

        days = (end - start).days
        return max(0.0, days / self.config.days_per_year)

    def calculate_total_years(self, experience: Sequence[Experience], as_of: date) -> float:
        total = 0.0
        for exp in experience or ():
            duration = self.get_role_duration(exp, as_of)
            if duration is not None:
                total += duration
        return round(total, 1)

    def get_required_years(self, experience_level) -> float:
        key = normalize_key(experience_level)
        return float(self.config.required_years_by_level.get(key, self.config.default_required_years))

    def calculate_years_score(self, total_years: float, required_years: float) -> float:
        if total_years >= required_years:
            return 1.0
        if total_years > 0:
            return total_years / required_years
        return 0.0

    def calculate_role_relevance(self, experience: Experience, job: JobProfile) -> float:
        """Weighted title / industry / description relevance of one role (0-1)."""
        title_relevance = 0.0
        if experience.title and job.title:
            title_relevance = SimilarityCalculator.similarity(experience.title, job.title)

        industry_relevance = 0.0
        if job.industry and experience.company:
            context = f"{experience.company} {experience.description or ''}".lower()
            for keyword in job.industry.lower().split():
                if keyword in context:
                    industry_relevance += self.config.industry_keyword_increment
            industry_relevance = min(industry_relevance, 1.0)

        description_relevance = 0.0
        if experience.description:
            description_relevance = SimilarityCalculator.token_overlap(job.full_text, experience.description)

        return (
            title_relevance * self.config.title_weight +
            industry_relevance * self.config.industry_weight +
            description_relevance * self.config.description_weight
        )

    def calculate_relevance(self, experience: Sequence[Experience], job: JobProfile) -> float:
        if not experience:
            return 0.0
        return sum(self.calculate_role_relevance(exp, job) for exp in experience) / len(experience)

    def get_match_level(self, relevance: float) -> MatchLevel:
        levels = self.config.match_levels
        if relevance >= levels.excellent:
            return MatchLevel.EXCELLENT
        if relevance >= levels.good:
            return MatchLevel.GOOD
        if relevance >= levels.fair:
            return MatchLevel.FAIR
        return MatchLevel.POOR

    def get_experience_matches(
        self,
        experience: Sequence[Experience],
        job: JobProfile,
        as_of: date
    ) -> ExperienceMatches:
        matches: List[ExperienceMatch] = []
        for exp in experience or ():
            relevance = self.calculate_role_relevance(exp, job)
            duration = self.get_role_duration(exp, as_of)
            matches.append(ExperienceMatch(
                title=exp.title,
                company=exp.company,
                duration_years=round(duration, 1) if duration is not None else None,
                relevance=relevance,
                match_level=self.get_match_level(relevance)
            ))
        return tuple(matches)

    def calculate(
        self,
        experience: Sequence[Experience],
        job: JobProfile,
        as_of: date
    ) -> Tuple[float, ExperienceMatches]:
        """Returns: (sub_score, experience_matches)"""
        experience = experience or ()
        matches = self.get_experience_matches(experience, job, as_of)
        if not experience:
            return 0.0, matches

        total_years = self.calculate_total_years(experience, as_of)
        required_years = self.get_required_years(job.experience_level)
        years_score = self.calculate_years_score(total_years, required_years)
        relevance = self.calculate_relevance(experience, job)

        combined = years_score * self.config.years_weight + relevance * self.config.relevance_weight
        score = min(max(combined * 100, 0.0), self.config.max_score)

        logger.debug(
            f"Experience: {total_years}y of {required_years}y required, "
            f"relevance={relevance:.2f} -> {score:.2f}"
        )
        return score, matches
