#!/usr/bin/env python3
"""
Availability Matcher - Availability status, notice period and full/part-time fit.
"""
from typing import Optional, Tuple
import logging

from kfn.config_loader import AvailabilityScoringConfig
from kfn.matcher.models import AvailabilityMatch, JobProfile, WorkerProfile
from kfn.utils import normalize_key

logger = logging.getLogger(__name__)


class AvailabilityMatcher:
    """Score how soon and in what capacity a worker can take the job."""

    def __init__(self, config: AvailabilityScoringConfig):
        self.config = config

    def calculate_status_score(self, availability) -> float:
        key = normalize_key(availability)
        if key not in self.config.status_scores:
            if key is not None:
                logger.warning(f"Unknown availability status {availability!r}, using default score")
            return self.config.default_status_score
        return self.config.status_scores[key]

    def calculate_notice_score(self, notice_period: Optional[int]) -> float:
        """Shorter notice scores higher; missing notice defaults to default_notice_days."""
        days = self.config.default_notice_days if notice_period is None else notice_period
        for max_days, score in self.config.notice_tiers:
            if days <= max_days:
                return score
        return self.config.notice_fallback_score

    def calculate_full_time_score(self, worker_full_time: Optional[bool], employment_type) -> float:
        job_type = normalize_key(employment_type)
        if job_type == "FULL_TIME" and not worker_full_time:
            return self.config.part_time_worker_full_time_job
        if job_type == "PART_TIME" and worker_full_time:
            return self.config.full_time_worker_part_time_job
        return 1.0

    def calculate(self, worker: WorkerProfile, job: JobProfile) -> Tuple[float, AvailabilityMatch]:
        """Returns: (sub_score, availability_match)"""
        status_score = self.calculate_status_score(worker.availability)
        notice_score = self.calculate_notice_score(worker.notice_period)
        full_time_score = self.calculate_full_time_score(worker.full_time, job.employment_type)

        combined = (
            status_score * self.config.status_weight +
            notice_score * self.config.notice_weight +
            full_time_score * self.config.full_time_weight
        )
        score = min(max(combined * self.config.max_score, 0.0), self.config.max_score)

        details = AvailabilityMatch(
            worker_availability=normalize_key(worker.availability),
            worker_notice_period=worker.notice_period,
            worker_full_time=worker.full_time,
            job_employment_type=normalize_key(job.employment_type),
            status_score=status_score,
            notice_score=notice_score,
            full_time_score=full_time_score,
            compatibility=score / self.config.max_score if self.config.max_score else 0.0
        )
        return score, details
