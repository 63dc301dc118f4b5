"""
Profile Repository Interface - Abstract source of assembled profiles.

Implementations resolve skills, experience and education before returning a
profile; the scorer never performs lookups of its own.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional

from kfn.matcher.models import JobProfile, WorkerProfile


class ProfileRepository(ABC):
    """
    Abstract interface for loading worker and job profiles.
    """

    @abstractmethod
    def get_worker(self, worker_id: Any) -> Optional[WorkerProfile]:
        """
        Return the assembled worker profile, or None if it does not exist.
        """
        pass

    @abstractmethod
    def get_job(self, job_id: Any) -> Optional[JobProfile]:
        """
        Return the assembled job profile, or None if it does not exist.
        """
        pass
