from dataclasses import dataclass
from typing import Optional
import logging

from kfn.config_loader import AppConfig, LoggingConfig
from kfn.scorer.engine import MatchEngine
from kfn.scorer.interfaces import ProfileRepository
from kfn.scorer.service import ScoringService


def configure_logging(logging_config: LoggingConfig) -> None:
    """Apply the configured level and format to the root logger."""
    level = getattr(logging, logging_config.level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=logging_config.format)
    logging.getLogger().setLevel(level)


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    The engine is always available; the scoring service only exists when a
    profile repository is supplied.
    """
    config: AppConfig
    engine: MatchEngine
    scoring_service: Optional[ScoringService] = None

    @classmethod
    def build(cls, config: AppConfig, repo: Optional[ProfileRepository] = None) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration
            repo: Optional profile repository backing the scoring service

        Returns:
            Fully wired AppContext instance
        """
        configure_logging(config.logging)

        engine = MatchEngine(config.scorer)

        scoring_service = None
        if repo is not None:
            scoring_service = ScoringService(repo, config.scorer, engine=engine)

        return cls(
            config=config,
            engine=engine,
            scoring_service=scoring_service
        )
