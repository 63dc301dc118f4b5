#!/usr/bin/env python3
"""
Data Completeness - Versioned field checklists behind the confidence value.

Each checklist has a fixed total weight, so filling in any field can only
raise completeness.
"""

from dataclasses import dataclass
from typing import Any, Callable, Tuple
import logging

from kfn.matcher.models import JobProfile, WorkerProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompletenessField:
    name: str
    weight: int
    is_filled: Callable[[Any], bool]


@dataclass(frozen=True)
class CompletenessSchema:
    name: str
    version: str
    fields: Tuple[CompletenessField, ...]

    @property
    def total_weight(self) -> int:
        return sum(f.weight for f in self.fields)

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)


def _has(attr: str) -> Callable[[Any], bool]:
    return lambda entity: bool(getattr(entity, attr, None))


WORKER_COMPLETENESS_SCHEMA = CompletenessSchema(
    name="worker",
    version="1.0",
    fields=(
        CompletenessField("first_name", 1, _has("first_name")),
        CompletenessField("last_name", 1, _has("last_name")),
        CompletenessField("location", 1, _has("location")),
        CompletenessField("bio", 1, _has("bio")),
        CompletenessField("skills", 2, _has("skills")),
        CompletenessField("experience", 2, _has("experience")),
        CompletenessField("education", 2, _has("education")),
    )
)

JOB_COMPLETENESS_SCHEMA = CompletenessSchema(
    name="job",
    version="1.0",
    fields=(
        CompletenessField("title", 1, _has("title")),
        CompletenessField("description", 1, _has("description")),
        CompletenessField("requirements", 1, _has("requirements")),
        CompletenessField("location", 1, _has("location")),
        CompletenessField("required_skills", 2, _has("required_skills")),
        CompletenessField(
            "salary", 1,
            lambda job: job.salary_min is not None or job.salary_max is not None
        ),
    )
)


def calculate_completeness(entity: Any, schema: CompletenessSchema) -> float:
    """Filled weight / total weight for entity under schema (0.0-1.0)."""
    total = schema.total_weight
    if total <= 0:
        return 0.0
    filled = sum(f.weight for f in schema.fields if f.is_filled(entity))
    return filled / total


def calculate_worker_completeness(worker: WorkerProfile) -> float:
    return calculate_completeness(worker, WORKER_COMPLETENESS_SCHEMA)


def calculate_job_completeness(job: JobProfile) -> float:
    return calculate_completeness(job, JOB_COMPLETENESS_SCHEMA)
