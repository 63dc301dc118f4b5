"""Matcher Module - Per-dimension worker/job matchers and shared text utilities."""
from kfn.matcher.models import (
    WorkerProfile, JobProfile, Skill, JobSkill, Experience, Education,
    RemotePreference, AvailabilityStatus, Proficiency, EmploymentType,
    ExperienceLevel, EducationTier, MatchLevel,
    SkillMatch, ExperienceMatch, LocationMatch, AvailabilityMatch,
    EducationMatch, CulturalMatch
)
from kfn.matcher.similarity import SimilarityCalculator
from kfn.matcher.skill_matcher import SkillMatcher
from kfn.matcher.experience_matcher import ExperienceMatcher
from kfn.matcher.location_matcher import LocationMatcher
from kfn.matcher.availability_matcher import AvailabilityMatcher
from kfn.matcher.education_matcher import EducationMatcher
from kfn.matcher.cultural_matcher import CulturalMatcher

__all__ = [
    'SimilarityCalculator', 'SkillMatcher', 'ExperienceMatcher', 'LocationMatcher',
    'AvailabilityMatcher', 'EducationMatcher', 'CulturalMatcher',
    'WorkerProfile', 'JobProfile', 'Skill', 'JobSkill', 'Experience', 'Education',
    'RemotePreference', 'AvailabilityStatus', 'Proficiency', 'EmploymentType',
    'ExperienceLevel', 'EducationTier', 'MatchLevel',
    'SkillMatch', 'ExperienceMatch', 'LocationMatch', 'AvailabilityMatch',
    'EducationMatch', 'CulturalMatch'
]
