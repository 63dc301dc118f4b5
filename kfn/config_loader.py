import yaml
import os
import logging
from typing import List, Optional, Dict, Tuple
from pydantic import BaseModel, Field, ValidationError, model_validator

from kfn.exceptions import InvalidConfigException

logger = logging.getLogger(__name__)

# Every tunable below can be overridden from config.yaml.


class MatchLevelThresholds(BaseModel):
    """Lower bounds for discrete match levels (anything below `poor` is MISSING)."""
    excellent: float = 0.9
    good: float = 0.7
    fair: float = 0.5
    poor: float = 0.3


class SkillScoringConfig(BaseModel):
    max_score: float = 30.0
    required_weight: float = 0.7
    preferred_weight: float = 0.3

    # Worker skill counts as "matched" only above this similarity
    similarity_threshold: float = 0.7

    proficiency_multipliers: Dict[str, float] = Field(default_factory=lambda: {
        "BEGINNER": 0.6,
        "INTERMEDIATE": 0.8,
        "ADVANCED": 1.0,
        "EXPERT": 1.2,
    })
    default_proficiency_multiplier: float = 0.7

    # 0 years -> floor, years_cap+ years -> ceiling
    experience_multiplier_floor: float = 0.7
    experience_multiplier_ceiling: float = 1.2
    experience_years_cap: float = 10.0
    unmatched_experience_multiplier: float = 0.8

    match_levels: MatchLevelThresholds = Field(default_factory=MatchLevelThresholds)


class ExperienceLevelThresholds(BaseModel):
    excellent: float = 0.8
    good: float = 0.6
    fair: float = 0.4


class ExperienceScoringConfig(BaseModel):
    max_score: float = 25.0
    required_years_by_level: Dict[str, float] = Field(default_factory=lambda: {
        "ENTRY": 0,
        "JUNIOR": 1,
        "MID": 3,
        "SENIOR": 5,
        "LEAD": 8,
        "EXECUTIVE": 10,
    })
    default_required_years: float = 3.0

    years_weight: float = 0.6
    relevance_weight: float = 0.4

    # Per-role relevance blend
    title_weight: float = 0.4
    industry_weight: float = 0.3
    description_weight: float = 0.3
    industry_keyword_increment: float = 0.2

    days_per_year: float = 365.25
    match_levels: ExperienceLevelThresholds = Field(default_factory=ExperienceLevelThresholds)


class ProximityScores(BaseModel):
    exact: float = 1.0
    city: float = 0.9
    state: float = 0.7
    country: float = 0.5
    remote: float = 0.8
    other: float = 0.3
    missing: float = 0.5


class LocationScoringConfig(BaseModel):
    max_score: float = 15.0
    # worker preference -> job preference -> compatibility
    remote_compatibility: Dict[str, Dict[str, float]] = Field(default_factory=lambda: {
        "ONSITE": {"ONSITE": 1.0, "REMOTE": 0.0, "HYBRID": 0.5},
        "REMOTE": {"ONSITE": 0.0, "REMOTE": 1.0, "HYBRID": 0.8},
        "HYBRID": {"ONSITE": 0.5, "REMOTE": 0.8, "HYBRID": 1.0},
    })
    default_remote_compatibility: float = 0.5
    proximity: ProximityScores = Field(default_factory=ProximityScores)


class AvailabilityScoringConfig(BaseModel):
    max_score: float = 15.0
    status_scores: Dict[str, float] = Field(default_factory=lambda: {
        "AVAILABLE": 1.0,
        "SOON": 0.7,
        "UNAVAILABLE": 0.3,
    })
    default_status_score: float = 0.5

    # (max notice days, score), checked in order
    notice_tiers: List[Tuple[int, float]] = Field(default_factory=lambda: [
        (14, 1.0),
        (30, 0.8),
        (60, 0.6),
    ])
    notice_fallback_score: float = 0.4
    default_notice_days: int = 30

    part_time_worker_full_time_job: float = 0.5
    full_time_worker_part_time_job: float = 0.7

    status_weight: float = 0.4
    notice_weight: float = 0.3
    full_time_weight: float = 0.3


class EducationScoringConfig(BaseModel):
    max_score: float = 10.0
    tier_ranks: Dict[str, int] = Field(default_factory=lambda: {
        "PHD": 5,
        "MASTER": 4,
        "BACHELOR": 3,
        "ASSOCIATE": 2,
        "HIGH_SCHOOL": 1,
        "OTHER": 0,
    })
    # Scanned in order, first family with a hit wins.
    # Keywords of three letters or fewer match whole words only.
    keyword_families: List[Tuple[str, List[str]]] = Field(default_factory=lambda: [
        ("PHD", ["phd", "ph.d", "doctorate", "doctor"]),
        ("MASTER", ["master", "ms", "msc", "mba"]),
        ("BACHELOR", ["bachelor", "bs", "bsc", "ba"]),
        ("ASSOCIATE", ["associate", "diploma"]),
        ("HIGH_SCHOOL", ["high school", "hs diploma"]),
    ])
    no_requirement_fraction: float = 0.5


class CulturalScoringConfig(BaseModel):
    max_score: float = 5.0
    base_score: float = 0.5
    increment: float = 0.1

    preference_match: float = 1.0
    preference_mismatch: float = 0.3

    work_style_same: float = 1.0
    work_style_hybrid: float = 0.8
    work_style_different: float = 0.3
    work_style_unknown: float = 0.6

    value_keywords: List[str] = Field(default_factory=lambda: [
        "teamwork", "collaboration", "innovation", "creativity",
        "integrity", "excellence", "quality", "customer",
        "growth", "learning", "development", "diversity",
        "inclusion", "balance", "flexibility", "autonomy",
    ])
    growth_keywords: List[str] = Field(default_factory=lambda: [
        "growth", "advancement", "promotion", "career path",
        "development", "training", "mentorship", "leadership",
        "skills", "learning", "certification", "education",
    ])
    no_growth_goals_score: float = 0.5


class RecommendationThresholds(BaseModel):
    strongly_recommend: float = 90.0
    recommend: float = 75.0
    consider: float = 60.0
    not_recommend: float = 40.0


class ConfidenceConfig(BaseModel):
    base: float = 0.5
    worker_weight: float = 0.25
    job_weight: float = 0.25


class FeedbackConfig(BaseModel):
    """Fractions of a dimension's max that mark a strength / an area to improve."""
    strength_fraction: float = 0.75
    improvement_fraction: float = 0.5


class ScorerConfig(BaseModel):
    """
    Configuration for the KFN score engine.

    Global weighting lives in each dimension's max_score; the six ceilings
    must add up to 100 so the overall score stays on a 0-100 scale.
    """
    skills: SkillScoringConfig = Field(default_factory=SkillScoringConfig)
    experience: ExperienceScoringConfig = Field(default_factory=ExperienceScoringConfig)
    location: LocationScoringConfig = Field(default_factory=LocationScoringConfig)
    availability: AvailabilityScoringConfig = Field(default_factory=AvailabilityScoringConfig)
    education: EducationScoringConfig = Field(default_factory=EducationScoringConfig)
    cultural: CulturalScoringConfig = Field(default_factory=CulturalScoringConfig)

    recommendation: RecommendationThresholds = Field(default_factory=RecommendationThresholds)
    confidence: ConfidenceConfig = Field(default_factory=ConfidenceConfig)
    feedback: FeedbackConfig = Field(default_factory=FeedbackConfig)

    @model_validator(mode="after")
    def _ceilings_sum_to_100(self) -> "ScorerConfig":
        total = sum(self.max_scores().values())
        if abs(total - 100.0) > 1e-9:
            raise ValueError(f"Dimension max scores must sum to 100, got {total}")
        return self

    def max_scores(self) -> Dict[str, float]:
        return {
            "skills": self.skills.max_score,
            "experience": self.experience.max_score,
            "location": self.location.max_score,
            "availability": self.availability.max_score,
            "education": self.education.max_score,
            "cultural": self.cultural.max_score,
        }


class ResultPolicy(BaseModel):
    """Post-scoring result filtering and truncation policy for rankings."""
    min_score: float = 0.0  # 0-100, filter threshold
    top_k: Optional[int] = None  # None = keep everything


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseModel):
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    result_policy: ResultPolicy = Field(default_factory=ResultPolicy)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """
    Load AppConfig from YAML.

    KFN_CONFIG_PATH overrides the path; KFN_LOG_LEVEL overrides logging.level.
    A missing file yields the defaults.
    """
    config_path = os.environ.get("KFN_CONFIG_PATH", config_path)

    if not os.path.exists(config_path):
        # Fall back to the config.yaml shipped at the repository root
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise InvalidConfigException(f"Could not parse {config_path}: {e}") from e
    else:
        logger.info("No config file found, using default scoring configuration")

    env_log_level = os.environ.get("KFN_LOG_LEVEL")
    if env_log_level:
        data.setdefault("logging", {})
        if data["logging"] is None:
            data["logging"] = {}
        data["logging"]["level"] = env_log_level

    try:
        return AppConfig(**data)
    except ValidationError as e:
        raise InvalidConfigException(f"Invalid configuration in {config_path}: {e}") from e
