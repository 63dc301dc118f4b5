#!/usr/bin/env python3
"""
Test suite for string similarity and token overlap.
"""

import unittest

from kfn.matcher.similarity import SimilarityCalculator


class TestSimilarity(unittest.TestCase):
    """Test the bigram Dice similarity."""

    def test_identical_strings_score_one(self):
        self.assertEqual(SimilarityCalculator.similarity("Python", "Python"), 1.0)

    def test_case_insensitive(self):
        self.assertEqual(SimilarityCalculator.similarity("JavaScript", "Javascript"), 1.0)
        self.assertEqual(SimilarityCalculator.similarity("SQL", "sql"), 1.0)

    def test_near_synonym_scores_high(self):
        score = SimilarityCalculator.similarity("JavaScript", "Java Script")
        self.assertGreater(score, 0.8)
        self.assertLess(score, 1.0)

    def test_disjoint_strings_score_zero(self):
        self.assertEqual(SimilarityCalculator.similarity("abc", "xyz"), 0.0)
        self.assertEqual(SimilarityCalculator.similarity("Rust", "Python"), 0.0)

    def test_empty_strings(self):
        self.assertEqual(SimilarityCalculator.similarity("", ""), 1.0)
        self.assertEqual(SimilarityCalculator.similarity("", "Python"), 0.0)
        self.assertEqual(SimilarityCalculator.similarity("Python", ""), 0.0)
        self.assertEqual(SimilarityCalculator.similarity(None, None), 1.0)

    def test_single_character_strings(self):
        self.assertEqual(SimilarityCalculator.similarity("a", "b"), 0.0)
        self.assertEqual(SimilarityCalculator.similarity("C", "c"), 1.0)

    def test_symmetry(self):
        pairs = [
            ("Python", "PyTorch"),
            ("PostgreSQL", "Postgres"),
            ("React", "React Native"),
            ("Go", "Golang"),
            ("Kubernetes", "k8s"),
        ]
        for a, b in pairs:
            with self.subTest(a=a, b=b):
                self.assertEqual(
                    SimilarityCalculator.similarity(a, b),
                    SimilarityCalculator.similarity(b, a)
                )

    def test_result_in_unit_interval(self):
        for a, b in [("aaaa", "aa"), ("abab", "baba"), ("Node.js", "NodeJS")]:
            with self.subTest(a=a, b=b):
                score = SimilarityCalculator.similarity(a, b)
                self.assertGreaterEqual(score, 0.0)
                self.assertLess(score, 1.0)


class TestTokenOverlap(unittest.TestCase):
    """Test tokenization and token overlap."""

    def test_tokenize_splits_on_punctuation(self):
        tokens = SimilarityCalculator.tokenize("Python, SQL & REST-APIs")
        self.assertEqual(tokens, frozenset({"python", "sql", "rest", "apis"}))

    def test_tokenize_empty(self):
        self.assertEqual(SimilarityCalculator.tokenize(""), frozenset())
        self.assertEqual(SimilarityCalculator.tokenize(None), frozenset())

    def test_overlap_is_relative_to_first_text(self):
        self.assertEqual(SimilarityCalculator.token_overlap("python sql", "I write python"), 0.5)
        self.assertAlmostEqual(
            SimilarityCalculator.token_overlap("I write python", "python sql"), 1 / 3
        )

    def test_overlap_with_empty_side(self):
        self.assertEqual(SimilarityCalculator.token_overlap("", "python"), 0.0)
        self.assertEqual(SimilarityCalculator.token_overlap("python", ""), 0.0)

    def test_duplicate_tokens_count_once(self):
        self.assertEqual(SimilarityCalculator.token_overlap("python python", "python"), 1.0)


if __name__ == '__main__':
    unittest.main()
