#!/usr/bin/env python3
"""
Matcher Models - Input profiles and per-dimension match details.

WorkerProfile and JobProfile are assembled by the caller (usually a
repository) and treated as read-only snapshots. The detail dataclasses are
frozen so a MatchResult can be cached or shared between threads as-is.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import List, Optional, Tuple, Union


DateLike = Union[date, datetime, str, None]


class RemotePreference(str, Enum):
    ONSITE = "ONSITE"
    REMOTE = "REMOTE"
    HYBRID = "HYBRID"


class AvailabilityStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    SOON = "SOON"
    UNAVAILABLE = "UNAVAILABLE"


class Proficiency(str, Enum):
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"
    EXPERT = "EXPERT"


class EmploymentType(str, Enum):
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACT = "CONTRACT"
    FREELANCE = "FREELANCE"
    INTERNSHIP = "INTERNSHIP"


class ExperienceLevel(str, Enum):
    ENTRY = "ENTRY"
    JUNIOR = "JUNIOR"
    MID = "MID"
    SENIOR = "SENIOR"
    LEAD = "LEAD"
    EXECUTIVE = "EXECUTIVE"


class EducationTier(str, Enum):
    PHD = "PHD"
    MASTER = "MASTER"
    BACHELOR = "BACHELOR"
    ASSOCIATE = "ASSOCIATE"
    HIGH_SCHOOL = "HIGH_SCHOOL"
    OTHER = "OTHER"


class MatchLevel(str, Enum):
    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"
    MISSING = "MISSING"


# ----------------------------
# Input profiles
# ----------------------------
@dataclass
class Skill:
    """A skill claimed by a worker."""
    name: str
    proficiency: Optional[Union[Proficiency, str]] = None
    years_of_experience: Optional[float] = None


@dataclass
class JobSkill:
    """A skill listed on a job posting."""
    name: str
    importance: Optional[int] = None


@dataclass
class Experience:
    """A past or current role."""
    title: Optional[str] = None
    company: Optional[str] = None
    description: Optional[str] = None
    start_date: DateLike = None
    end_date: DateLike = None
    current: bool = False


@dataclass
class Education:
    degree: str
    institution: Optional[str] = None
    field_of_study: Optional[str] = None


@dataclass
class WorkerProfile:
    """Worker (candidate) profile snapshot."""
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    bio: Optional[str] = None
    summary: Optional[str] = None
    location: Optional[str] = None
    remote_preference: Optional[Union[RemotePreference, str]] = None
    availability: Optional[Union[AvailabilityStatus, str]] = None
    notice_period: Optional[int] = None  # days
    full_time: Optional[bool] = None
    skills: List[Skill] = field(default_factory=list)
    experience: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    preferred_company_sizes: List[str] = field(default_factory=list)
    preferred_industries: List[str] = field(default_factory=list)

    @property
    def summary_text(self) -> str:
        """Career summary used for values/growth checks; falls back to the bio."""
        return self.summary or self.bio or ""


@dataclass
class JobProfile:
    """Job posting snapshot."""
    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[str] = None
    location: Optional[str] = None
    remote_preference: Optional[Union[RemotePreference, str]] = None
    employment_type: Optional[Union[EmploymentType, str]] = None
    experience_level: Optional[Union[ExperienceLevel, str]] = None
    required_skills: List[JobSkill] = field(default_factory=list)
    preferred_skills: List[JobSkill] = field(default_factory=list)
    company_size: Optional[str] = None
    industry: Optional[str] = None
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None

    @property
    def full_text(self) -> str:
        """Description and requirements joined, as used for keyword checks."""
        return f"{self.description or ''} {self.requirements or ''}"


# ----------------------------
# Match details
# ----------------------------
@dataclass(frozen=True)
class SkillMatch:
    """Best worker skill found for one job skill."""
    job_skill: str
    worker_skill: Optional[str]
    score: float
    match_level: MatchLevel
    required: bool
    importance: Optional[int] = None


@dataclass(frozen=True)
class ExperienceMatch:
    """Relevance of one worker role to the job."""
    title: Optional[str]
    company: Optional[str]
    duration_years: Optional[float]  # None when the role's dates could not be parsed
    relevance: float
    match_level: MatchLevel


@dataclass(frozen=True)
class LocationMatch:
    worker_location: Optional[str]
    job_location: Optional[str]
    worker_remote_preference: Optional[str]
    job_remote_preference: Optional[str]
    remote_compatibility: float
    proximity_score: float


@dataclass(frozen=True)
class AvailabilityMatch:
    worker_availability: Optional[str]
    worker_notice_period: Optional[int]
    worker_full_time: Optional[bool]
    job_employment_type: Optional[str]
    status_score: float
    notice_score: float
    full_time_score: float
    compatibility: float  # 0-1


@dataclass(frozen=True)
class EducationMatch:
    worker_highest_education: EducationTier
    job_required_education: Optional[EducationTier]
    match_score: float  # 0-1


@dataclass(frozen=True)
class CulturalMatch:
    company_size_match: Optional[float]  # None when either side is unknown
    industry_match: Optional[float]
    work_style_match: float
    values_match: float
    growth_match: float
    cultural_fit: float  # 0-1


SkillMatches = Tuple[SkillMatch, ...]
ExperienceMatches = Tuple[ExperienceMatch, ...]
