#!/usr/bin/env python3
"""
Skill Matcher - Match worker skills to a job's required and preferred skills.

Score = blend(required avg similarity, preferred avg similarity)
        * proficiency multiplier * experience multiplier * 100,
capped at the skills ceiling.
"""
from typing import List, Optional, Sequence, Tuple
import logging

from kfn.config_loader import SkillScoringConfig, MatchLevelThresholds
from kfn.matcher.models import JobSkill, MatchLevel, Skill, SkillMatch, SkillMatches
from kfn.matcher.similarity import SimilarityCalculator
from kfn.utils import normalize_key

logger = logging.getLogger(__name__)


def get_match_level(score: float, thresholds: MatchLevelThresholds) -> MatchLevel:
    """Map a 0-1 similarity onto a discrete match level."""
    if score >= thresholds.excellent:
        return MatchLevel.EXCELLENT
    if score >= thresholds.good:
        return MatchLevel.GOOD
    if score >= thresholds.fair:
        return MatchLevel.FAIR
    if score >= thresholds.poor:
        return MatchLevel.POOR
    return MatchLevel.MISSING


class SkillMatcher:
    """Score worker skills against job skill lists."""

    def __init__(self, config: SkillScoringConfig):
        self.config = config

    def find_best_match(
        self,
        target_skill: str,
        worker_skills: Sequence[Skill]
    ) -> Tuple[Optional[Skill], float]:
        """
        Find the worker skill most similar to target_skill.

        Returns: (best_skill or None, similarity)
        """
        best_skill = None
        best_score = 0.0
        for worker_skill in worker_skills:
            score = SimilarityCalculator.similarity(target_skill, worker_skill.name)
            if score > best_score:
                best_skill = worker_skill
                best_score = score
        return best_skill, best_score

    def are_similar(self, skill_a: str, skill_b: str) -> bool:
        return SimilarityCalculator.similarity(skill_a, skill_b) > self.config.similarity_threshold

    def _first_similar(self, job_skill: JobSkill, worker_skills: Sequence[Skill]) -> Optional[Skill]:
        for worker_skill in worker_skills:
            if self.are_similar(worker_skill.name, job_skill.name):
                return worker_skill
        return None

    def _average_best_similarity(
        self,
        job_skills: Sequence[JobSkill],
        worker_skills: Sequence[Skill]
    ) -> float:
        if not job_skills:
            return 0.0
        total = sum(self.find_best_match(js.name, worker_skills)[1] for js in job_skills)
        return total / len(job_skills)

    def calculate_proficiency_multiplier(
        self,
        worker_skills: Sequence[Skill],
        job_skills: Sequence[JobSkill]
    ) -> float:
        """Mean proficiency multiplier across job skills the worker matches."""
        multipliers = []
        for job_skill in job_skills:
            worker_skill = self._first_similar(job_skill, worker_skills)
            if worker_skill is None:
                continue
            key = normalize_key(worker_skill.proficiency)
            multipliers.append(
                self.config.proficiency_multipliers.get(key, self.config.default_proficiency_multiplier)
            )

        if not multipliers:
            return self.config.default_proficiency_multiplier
        return sum(multipliers) / len(multipliers)

    def calculate_experience_multiplier(
        self,
        worker_skills: Sequence[Skill],
        required_skills: Sequence[JobSkill]
    ) -> float:
        """Map mean years on matched required skills onto [floor, ceiling]."""
        cap = self.config.experience_years_cap
        normalized = []
        for job_skill in required_skills:
            worker_skill = self._first_similar(job_skill, worker_skills)
            if worker_skill is None or not worker_skill.years_of_experience:
                continue
            years = max(0.0, float(worker_skill.years_of_experience))
            normalized.append(min(years, cap) / cap)

        if not normalized:
            return self.config.unmatched_experience_multiplier

        span = self.config.experience_multiplier_ceiling - self.config.experience_multiplier_floor
        return self.config.experience_multiplier_floor + span * (sum(normalized) / len(normalized))

    def calculate_score(
        self,
        worker_skills: Sequence[Skill],
        required_skills: Sequence[JobSkill],
        preferred_skills: Sequence[JobSkill]
    ) -> float:
        """Skills sub-score in [0, max_score]."""
        worker_skills = worker_skills or ()
        required_skills = required_skills or ()
        preferred_skills = preferred_skills or ()
        if not worker_skills or not required_skills:
            return 0.0

        required_avg = self._average_best_similarity(required_skills, worker_skills)
        preferred_avg = self._average_best_similarity(preferred_skills, worker_skills)

        blended = required_avg * self.config.required_weight
        if preferred_skills:
            blended += preferred_avg * self.config.preferred_weight

        proficiency = self.calculate_proficiency_multiplier(
            worker_skills, list(required_skills) + list(preferred_skills)
        )
        experience = self.calculate_experience_multiplier(worker_skills, required_skills)

        score = min(max(blended * proficiency * experience * 100, 0.0), self.config.max_score)
        logger.debug(
            f"Skills: required={required_avg:.2f} preferred={preferred_avg:.2f} "
            f"proficiency={proficiency:.2f} experience={experience:.2f} -> {score:.2f}"
        )
        return score

    def get_skill_matches(
        self,
        worker_skills: Sequence[Skill],
        required_skills: Sequence[JobSkill],
        preferred_skills: Sequence[JobSkill]
    ) -> SkillMatches:
        """Per-skill report, required skills first."""
        worker_skills = worker_skills or ()
        matches: List[SkillMatch] = []
        for job_skills, required in ((required_skills or (), True), (preferred_skills or (), False)):
            for job_skill in job_skills:
                best, score = self.find_best_match(job_skill.name, worker_skills)
                matches.append(SkillMatch(
                    job_skill=job_skill.name,
                    worker_skill=best.name if best else None,
                    score=score,
                    match_level=get_match_level(score, self.config.match_levels),
                    required=required,
                    importance=job_skill.importance
                ))
        return tuple(matches)

    def calculate(
        self,
        worker_skills: Sequence[Skill],
        required_skills: Sequence[JobSkill],
        preferred_skills: Sequence[JobSkill]
    ) -> Tuple[float, SkillMatches]:
        """Returns: (sub_score, skill_matches)"""
        score = self.calculate_score(worker_skills, required_skills, preferred_skills)
        matches = self.get_skill_matches(worker_skills, required_skills, preferred_skills)
        return score, matches
