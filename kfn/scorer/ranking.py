#!/usr/bin/env python3
"""
Ranking - Order candidates for a job, or jobs for a candidate, by KFN score.
"""

from datetime import date
from typing import Iterable, List, Optional
import logging

from kfn.config_loader import ResultPolicy
from kfn.matcher.models import JobProfile, WorkerProfile
from kfn.scorer.engine import MatchEngine
from kfn.scorer.models import MatchResult

logger = logging.getLogger(__name__)


def apply_result_policy(
    results: List[MatchResult],
    policy: Optional[ResultPolicy]
) -> List[MatchResult]:
    """
    Filter and truncate results already sorted by overall_score.

    Args:
        results: Sorted match results
        policy: ResultPolicy to apply, or None for no filtering
    """
    if policy is None:
        return results

    filtered = results
    if policy.min_score > 0:
        filtered = [r for r in filtered if r.overall_score >= policy.min_score]
    if policy.top_k is not None:
        filtered = filtered[:policy.top_k]
    return filtered


def _sort(results: List[MatchResult]) -> List[MatchResult]:
    # sorted() is stable, so equal scores keep input order
    return sorted(results, key=lambda r: r.overall_score, reverse=True)


def rank_candidates(
    job: JobProfile,
    workers: Iterable[WorkerProfile],
    engine: Optional[MatchEngine] = None,
    policy: Optional[ResultPolicy] = None,
    as_of: Optional[date] = None
) -> List[MatchResult]:
    """Score every worker against job, best first."""
    engine = engine or MatchEngine()
    results = [engine.compute_match(worker, job, as_of=as_of) for worker in workers]
    ranked = apply_result_policy(_sort(results), policy)
    logger.info(f"Ranked {len(results)} candidates for job {job.id}, returning {len(ranked)}")
    return ranked


def rank_jobs(
    worker: WorkerProfile,
    jobs: Iterable[JobProfile],
    engine: Optional[MatchEngine] = None,
    policy: Optional[ResultPolicy] = None,
    as_of: Optional[date] = None
) -> List[MatchResult]:
    """Score worker against every job, best first."""
    engine = engine or MatchEngine()
    results = [engine.compute_match(worker, job, as_of=as_of) for job in jobs]
    ranked = apply_result_policy(_sort(results), policy)
    logger.info(f"Ranked {len(results)} jobs for worker {worker.id}, returning {len(ranked)}")
    return ranked
