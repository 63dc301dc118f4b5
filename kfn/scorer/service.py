#!/usr/bin/env python3
"""
Scoring Service - Repository-backed entry point for KFN scoring.

Resolves workers and jobs by id through a ProfileRepository, then delegates
to the MatchEngine. Batch scoring captures per-pair failures instead of
aborting the whole run.
"""

from datetime import date
from itertools import product
from typing import Any, Iterable, List, Optional, Sequence, Tuple
import logging

from kfn.config_loader import ResultPolicy, ScorerConfig
from kfn.exceptions import JobNotFoundException, ScoringException, WorkerNotFoundException
from kfn.matcher.models import JobProfile, WorkerProfile
from kfn.scorer.engine import MatchEngine
from kfn.scorer.explainability import explain
from kfn.scorer.interfaces import ProfileRepository
from kfn.scorer.models import BatchFailure, BatchScoreReport, MatchExplanation, MatchResult
from kfn.scorer.ranking import rank_candidates, rank_jobs

logger = logging.getLogger(__name__)


class ScoringService:
    """Looks up profiles and computes KFN scores for them."""

    def __init__(
        self,
        repo: ProfileRepository,
        config: Optional[ScorerConfig] = None,
        engine: Optional[MatchEngine] = None
    ):
        self.repo = repo
        self.config = config or ScorerConfig()
        self.engine = engine or MatchEngine(self.config)

    def _load_worker(self, worker_id: Any) -> WorkerProfile:
        worker = self.repo.get_worker(worker_id)
        if worker is None:
            raise WorkerNotFoundException(worker_id)
        return worker

    def _load_job(self, job_id: Any) -> JobProfile:
        job = self.repo.get_job(job_id)
        if job is None:
            raise JobNotFoundException(job_id)
        return job

    def calculate(self, worker_id: Any, job_id: Any, as_of: Optional[date] = None) -> MatchResult:
        """
        Score one worker/job pair by id.

        Raises:
            WorkerNotFoundException / JobNotFoundException
        """
        worker = self._load_worker(worker_id)
        job = self._load_job(job_id)
        return self.engine.compute_match(worker, job, as_of=as_of)

    def calculate_batch(
        self,
        pairs: Optional[Sequence[Tuple[Any, Any]]] = None,
        worker_ids: Optional[Sequence[Any]] = None,
        job_ids: Optional[Sequence[Any]] = None,
        as_of: Optional[date] = None
    ) -> BatchScoreReport:
        """
        Score many pairs.

        Either pass explicit (worker_id, job_id) pairs, or worker_ids and
        job_ids to score their cartesian product.

        Raises:
            ValueError: If neither form of input is supplied
        """
        if pairs is None:
            if not worker_ids or not job_ids:
                raise ValueError("Provide either pairs or both worker_ids and job_ids")
            pairs = list(product(worker_ids, job_ids))

        report = BatchScoreReport()
        for worker_id, job_id in pairs:
            try:
                report.results.append(self.calculate(worker_id, job_id, as_of=as_of))
            except ScoringException as e:
                logger.warning(f"Failed to score worker={worker_id} job={job_id}: {e}")
                report.failures.append(BatchFailure(worker_id=worker_id, job_id=job_id, error=str(e)))

        logger.info(
            f"Batch scoring complete: {report.successful}/{report.total} succeeded, "
            f"{report.failed} failed"
        )
        return report

    def _load_existing(self, loader, ids: Iterable[Any], kind: str) -> List:
        profiles = []
        for entity_id in ids:
            try:
                profiles.append(loader(entity_id))
            except ScoringException as e:
                logger.warning(f"Skipping {kind} {entity_id}: {e}")
        return profiles

    def rank_candidates_for_job(
        self,
        job_id: Any,
        worker_ids: Iterable[Any],
        policy: Optional[ResultPolicy] = None,
        as_of: Optional[date] = None
    ) -> List[MatchResult]:
        """Rank workers for a job. Unknown worker ids are skipped."""
        job = self._load_job(job_id)
        workers = self._load_existing(self._load_worker, worker_ids, "worker")
        return rank_candidates(job, workers, engine=self.engine, policy=policy, as_of=as_of)

    def rank_jobs_for_worker(
        self,
        worker_id: Any,
        job_ids: Iterable[Any],
        policy: Optional[ResultPolicy] = None,
        as_of: Optional[date] = None
    ) -> List[MatchResult]:
        """Rank jobs for a worker. Unknown job ids are skipped."""
        worker = self._load_worker(worker_id)
        jobs = self._load_existing(self._load_job, job_ids, "job")
        return rank_jobs(worker, jobs, engine=self.engine, policy=policy, as_of=as_of)

    def get_score_breakdown(self, result: MatchResult) -> MatchExplanation:
        return explain(result, self.config)
