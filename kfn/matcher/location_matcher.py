#!/usr/bin/env python3
"""
Location Matcher - Remote-work compatibility and location proximity.

Locations are assumed to be comma separated "City, State, Country" strings.
Free text that does not follow that shape only gets the exact-match,
"remote" and fallback scores; this is a known limitation of the heuristic,
not something the matcher tries to repair.

A missing location on either side caps the sub-score at the missing-proximity
share of the max, even for a fully compatible remote arrangement.
"""
from typing import List, Optional, Tuple
import logging

from kfn.config_loader import LocationScoringConfig
from kfn.matcher.models import JobProfile, LocationMatch, WorkerProfile
from kfn.utils import normalize_key

logger = logging.getLogger(__name__)


def _segment(parts: List[str], index: int) -> Optional[str]:
    if index < len(parts):
        return parts[index].strip() or None
    return None


class LocationMatcher:
    """Score remote preference compatibility and physical proximity."""

    def __init__(self, config: LocationScoringConfig):
        self.config = config

    def check_remote_compatibility(self, worker_preference, job_preference) -> float:
        """Lookup in the worker x job remote-preference table."""
        row = self.config.remote_compatibility.get(normalize_key(worker_preference))
        if row is None:
            return self.config.default_remote_compatibility
        return row.get(normalize_key(job_preference), self.config.default_remote_compatibility)

    def calculate_proximity(self, worker_location: Optional[str], job_location: Optional[str]) -> float:
        """
        Heuristic proximity of two location strings (0-1).

        Order: exact, city, state, country, either side "remote", fallback.
        """
        scores = self.config.proximity
        if not worker_location or not job_location:
            return scores.missing

        loc1 = worker_location.strip().lower()
        loc2 = job_location.strip().lower()

        if loc1 == loc2:
            return scores.exact

        parts1 = loc1.split(",")
        parts2 = loc2.split(",")

        city1, city2 = _segment(parts1, 0), _segment(parts2, 0)
        if city1 and city1 == city2:
            return scores.city

        state1, state2 = _segment(parts1, 1), _segment(parts2, 1)
        if state1 and state1 == state2:
            return scores.state

        # Without a third segment the whole string stands in for the country
        country1 = _segment(parts1, 2) or loc1
        country2 = _segment(parts2, 2) or loc2
        if country1 == country2:
            return scores.country

        if "remote" in loc1 or "remote" in loc2:
            return scores.remote

        return scores.other

    def calculate(self, worker: WorkerProfile, job: JobProfile) -> Tuple[float, LocationMatch]:
        """Returns: (sub_score, location_match)"""
        remote_compatibility = self.check_remote_compatibility(
            worker.remote_preference, job.remote_preference
        )
        proximity = self.calculate_proximity(worker.location, job.location)

        if not worker.location or not job.location:
            # Missing location caps the sub-score at the missing-proximity share
            score = min(max(remote_compatibility, 0.0), 1.0) * proximity * self.config.max_score
        elif remote_compatibility >= 1.0:
            # Fully compatible remote arrangement, location does not matter
            score = self.config.max_score
        else:
            score = min(max(remote_compatibility * proximity * self.config.max_score, 0.0),
                        self.config.max_score)

        details = LocationMatch(
            worker_location=worker.location,
            job_location=job.location,
            worker_remote_preference=normalize_key(worker.remote_preference),
            job_remote_preference=normalize_key(job.remote_preference),
            remote_compatibility=remote_compatibility,
            proximity_score=proximity
        )
        logger.debug(f"Location: remote={remote_compatibility:.2f} proximity={proximity:.2f} -> {score:.2f}")
        return score, details
