#!/usr/bin/env python3
"""
Similarity Calculator - Fuzzy string similarity and token overlap.
"""
import re
from collections import Counter
from typing import FrozenSet

_TOKEN_SPLIT = re.compile(r"[^a-z0-9]+")


class SimilarityCalculator:
    """Text similarity measures shared by the matchers."""

    @staticmethod
    def similarity(a: str, b: str) -> float:
        """
        Dice coefficient over character bigrams, case-insensitive.

        Args:
            a: First string
            b: Second string

        Returns:
            Similarity (0.0 to 1.0); 1.0 for identical strings (including two
            empty ones), 0.0 when only one side is empty
        """
        a = (a or "").lower()
        b = (b or "").lower()

        if a == b:
            return 1.0
        if len(a) < 2 or len(b) < 2:
            return 0.0

        bigrams_a = Counter(a[i:i + 2] for i in range(len(a) - 1))
        bigrams_b = Counter(b[i:i + 2] for i in range(len(b) - 1))
        overlap = sum((bigrams_a & bigrams_b).values())

        score = 2.0 * overlap / ((len(a) - 1) + (len(b) - 1))
        # Distinct strings with identical bigram multisets ("abab"/"baba" style) stay below 1.0
        return min(score, 0.999999)

    @staticmethod
    def tokenize(text: str) -> FrozenSet[str]:
        """Lower-case and split on non-alphanumeric boundaries."""
        if not text:
            return frozenset()
        return frozenset(t for t in _TOKEN_SPLIT.split(text.lower()) if t)

    @staticmethod
    def token_overlap(text_a: str, text_b: str) -> float:
        """
        Fraction of text_a's distinct tokens that also appear in text_b.

        Returns:
            |tokens(a) & tokens(b)| / max(|tokens(a)|, 1)
        """
        tokens_a = SimilarityCalculator.tokenize(text_a)
        tokens_b = SimilarityCalculator.tokenize(text_b)
        if not tokens_a or not tokens_b:
            return 0.0
        return len(tokens_a & tokens_b) / max(len(tokens_a), 1)
