#!/usr/bin/env python3
"""
Education Matcher - Required education tier vs. worker's highest tier.
"""
import re
from typing import Optional, Sequence, Tuple
import logging

from kfn.config_loader import EducationScoringConfig
from kfn.matcher.models import Education, EducationMatch, EducationTier

logger = logging.getLogger(__name__)

# Keywords this short ("ms", "ba", "mba") only count as whole words
_WHOLE_WORD_MAX_LEN = 3


def _contains_keyword(text: str, keyword: str) -> bool:
    if len(keyword) <= _WHOLE_WORD_MAX_LEN:
        return re.search(rf"\b{re.escape(keyword)}\b", text) is not None
    return keyword in text


class EducationMatcher:
    """Compare education tiers on an ordinal scale."""

    def __init__(self, config: EducationScoringConfig):
        self.config = config

    def extract_education_level(self, text: Optional[str]) -> Optional[EducationTier]:
        """First keyword family found in text, or None."""
        if not text:
            return None
        lower = text.lower()
        for tier, keywords in self.config.keyword_families:
            if any(_contains_keyword(lower, kw) for kw in keywords):
                return EducationTier(tier)
        return None

    def get_rank(self, tier: Optional[EducationTier]) -> int:
        if tier is None:
            return 0
        return self.config.tier_ranks.get(tier.value, 0)

    def get_highest_education_level(self, education: Sequence[Education]) -> EducationTier:
        highest = EducationTier.OTHER
        for edu in education or ():
            tier = self.extract_education_level(edu.degree) or EducationTier.OTHER
            if self.get_rank(tier) > self.get_rank(highest):
                highest = tier
        return highest

    def calculate_match_score(
        self,
        worker_level: EducationTier,
        required_level: Optional[EducationTier]
    ) -> float:
        """Ratio of worker rank to required rank, 1.0 when met or exceeded."""
        worker_rank = self.get_rank(worker_level)
        required_rank = self.get_rank(required_level)
        if worker_rank >= required_rank:
            return 1.0
        return worker_rank / required_rank

    def calculate(
        self,
        education: Sequence[Education],
        requirements: Optional[str]
    ) -> Tuple[float, EducationMatch]:
        """Returns: (sub_score, education_match)"""
        required_level = self.extract_education_level(requirements)
        highest = self.get_highest_education_level(education)

        if required_level is None:
            fraction = self.config.no_requirement_fraction if education else 0.0
        else:
            fraction = self.calculate_match_score(highest, required_level)

        score = min(max(fraction * self.config.max_score, 0.0), self.config.max_score)

        details = EducationMatch(
            worker_highest_education=highest,
            job_required_education=required_level,
            match_score=fraction
        )
        logger.debug(f"Education: worker={highest.value} required={required_level} -> {score:.2f}")
        return score, details
