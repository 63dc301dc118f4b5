#!/usr/bin/env python3
"""
Profile builders for scoring tests.

make_worker() / make_job() return a well-matched backend engineer and
backend role; pass keyword overrides to vary individual fields.
"""
from datetime import date

from kfn.matcher.models import (
    AvailabilityStatus, Education, EmploymentType, Experience, ExperienceLevel,
    JobProfile, JobSkill, Proficiency, RemotePreference, Skill, WorkerProfile
)

# Fixed reference date so current roles have a stable duration
AS_OF = date(2025, 1, 1)


def make_worker(**overrides) -> WorkerProfile:
    fields = dict(
        id="worker-1",
        first_name="Alex",
        last_name="Morgan",
        bio="Backend engineer focused on data-heavy Python services.",
        summary=(
            "Backend engineer who values collaboration and learning, "
            "looking for growth and mentorship."
        ),
        location="Austin, TX, USA",
        remote_preference=RemotePreference.HYBRID,
        availability=AvailabilityStatus.AVAILABLE,
        notice_period=14,
        full_time=True,
        skills=[
            Skill("Python", Proficiency.EXPERT, 8),
            Skill("PostgreSQL", Proficiency.ADVANCED, 6),
            Skill("Docker", Proficiency.INTERMEDIATE, 3),
        ],
        experience=[
            Experience(
                title="Senior Backend Engineer",
                company="Acme Software",
                description="Built Python services and PostgreSQL data pipelines.",
                start_date="2017-01-01",
                end_date="2022-12-31",
            ),
            Experience(
                title="Backend Engineer",
                company="Beta Labs",
                description="Python APIs on Docker.",
                start_date="2023-01-01",
                current=True,
            ),
        ],
        education=[Education("Master of Science", "UT Austin", "Computer Science")],
        preferred_company_sizes=["MEDIUM"],
        preferred_industries=["Software"],
    )
    fields.update(overrides)
    return WorkerProfile(**fields)


def make_job(**overrides) -> JobProfile:
    fields = dict(
        id="job-1",
        title="Senior Backend Engineer",
        description=(
            "Build Python services on PostgreSQL. We value collaboration and "
            "learning, and offer mentorship and career growth."
        ),
        requirements="Bachelor's degree in Computer Science or equivalent.",
        location="Austin, TX, USA",
        remote_preference=RemotePreference.HYBRID,
        employment_type=EmploymentType.FULL_TIME,
        experience_level=ExperienceLevel.SENIOR,
        required_skills=[JobSkill("Python", 1), JobSkill("PostgreSQL", 2)],
        preferred_skills=[JobSkill("Docker", 3)],
        company_size="MEDIUM",
        industry="Software",
        salary_min=120000,
        salary_max=160000,
    )
    fields.update(overrides)
    return JobProfile(**fields)
