#!/usr/bin/env python3
"""
Cultural Matcher - Coarse cultural-fit estimate from stated preferences.

Starts from a base value and adds one increment per check, scaled by how well
the check matched:
- company size preference
- industry preference
- work style (remote vs. onsite)
- shared workplace values (keyword vocabulary)
- growth opportunities vs. the worker's growth goals
"""
from typing import Optional, Sequence, Tuple
import logging

from kfn.config_loader import CulturalScoringConfig
from kfn.matcher.models import CulturalMatch, JobProfile, WorkerProfile
from kfn.utils import clamp01, normalize_key

logger = logging.getLogger(__name__)


class CulturalMatcher:
    """Estimate cultural fit between a worker and an employer."""

    def __init__(self, config: CulturalScoringConfig):
        self.config = config

    def check_company_size_match(
        self,
        preferred_sizes: Sequence[str],
        company_size: Optional[str]
    ) -> Optional[float]:
        if not preferred_sizes or not company_size:
            return None
        preferred = {normalize_key(s) for s in preferred_sizes}
        if normalize_key(company_size) in preferred:
            return self.config.preference_match
        return self.config.preference_mismatch

    def check_industry_match(
        self,
        preferred_industries: Sequence[str],
        job_industry: Optional[str]
    ) -> Optional[float]:
        if not preferred_industries or not job_industry:
            return None
        industry = job_industry.lower()
        for preferred in preferred_industries:
            preferred = (preferred or "").lower()
            if preferred and (preferred in industry or industry in preferred):
                return self.config.preference_match
        return self.config.preference_mismatch

    def check_work_style_match(self, worker_preference, job_preference) -> float:
        worker = normalize_key(worker_preference)
        job = normalize_key(job_preference)

        if worker == job and worker in ("REMOTE", "ONSITE"):
            return self.config.work_style_same
        if worker == "HYBRID" or job == "HYBRID":
            return self.config.work_style_hybrid
        if worker != job:
            return self.config.work_style_different
        return self.config.work_style_unknown

    def check_values_match(self, worker: WorkerProfile, job: JobProfile) -> float:
        """Fraction of the values vocabulary present in both job text and worker summary."""
        vocabulary = self.config.value_keywords
        if not vocabulary:
            return 0.0
        job_text = job.full_text.lower()
        worker_text = worker.summary_text.lower()
        shared = sum(1 for value in vocabulary if value in job_text and value in worker_text)
        return shared / len(vocabulary)

    def check_growth_match(self, worker: WorkerProfile, job: JobProfile) -> float:
        """Growth keywords offered by the job relative to those the worker asks for."""
        job_text = (job.description or "").lower()
        worker_goals = worker.summary_text.lower()

        job_hits = sum(1 for kw in self.config.growth_keywords if kw in job_text)
        worker_hits = sum(1 for kw in self.config.growth_keywords if kw in worker_goals)

        if worker_hits == 0:
            return self.config.no_growth_goals_score
        return min(job_hits / worker_hits, 1.0)

    def calculate(self, worker: WorkerProfile, job: JobProfile) -> Tuple[float, CulturalMatch]:
        """Returns: (sub_score, cultural_match)"""
        size_match = self.check_company_size_match(worker.preferred_company_sizes, job.company_size)
        industry_match = self.check_industry_match(worker.preferred_industries, job.industry)
        work_style_match = self.check_work_style_match(worker.remote_preference, job.remote_preference)
        values_match = self.check_values_match(worker, job)
        growth_match = self.check_growth_match(worker, job)

        fit = self.config.base_score
        for check in (size_match, industry_match, work_style_match, values_match, growth_match):
            if check is not None:
                fit += check * self.config.increment
        fit = clamp01(fit)

        score = min(fit * self.config.max_score, self.config.max_score)

        details = CulturalMatch(
            company_size_match=size_match,
            industry_match=industry_match,
            work_style_match=work_style_match,
            values_match=values_match,
            growth_match=growth_match,
            cultural_fit=fit
        )
        logger.debug(f"Cultural: fit={fit:.2f} -> {score:.2f}")
        return score, details
