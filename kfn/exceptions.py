#!/usr/bin/env python3
"""
Custom exceptions for the KFN scoring engine.

Only missing entities and broken configuration raise; incomplete profile data
degrades the affected sub-score instead.
"""

from typing import Any, Optional


class ScoringException(Exception):
    """Base exception for scoring errors."""
    pass


class EntityNotFoundException(ScoringException):
    """Raised when a worker or job record is absent entirely."""

    entity_type = "entity"

    def __init__(self, entity_id: Optional[Any] = None, message: Optional[str] = None):
        self.entity_id = entity_id
        if message is None:
            if entity_id is None:
                message = f"{self.entity_type.capitalize()} not found"
            else:
                message = f"{self.entity_type.capitalize()} {entity_id} not found"
        super().__init__(message)


class WorkerNotFoundException(EntityNotFoundException):
    """Raised when a worker profile is not found."""
    entity_type = "worker"


class JobNotFoundException(EntityNotFoundException):
    """Raised when a job is not found."""
    entity_type = "job"


class InvalidConfigException(ScoringException):
    """Raised when scoring configuration cannot be loaded or validated."""
    pass
