#!/usr/bin/env python3
"""
Test suite for score statistics.
"""

import unittest

from kfn.matcher.models import WorkerProfile
from kfn.scorer.engine import MatchEngine
from kfn.scorer.statistics import summarize_scores
from tests.fixtures.profiles import AS_OF, make_job, make_worker


class TestSummarizeScores(unittest.TestCase):

    def setUp(self):
        engine = MatchEngine()
        job = make_job()
        self.results = [
            engine.compute_match(make_worker(), job, as_of=AS_OF),
            engine.compute_match(WorkerProfile(id="weak"), job, as_of=AS_OF),
        ]

    def test_summary(self):
        stats = summarize_scores(self.results)

        self.assertEqual(stats.count, 2)
        self.assertAlmostEqual(stats.average_scores["overall_score"], 57.62)
        self.assertAlmostEqual(stats.average_scores["skills_score"], 15.0)
        self.assertAlmostEqual(stats.min_overall, 15.75)
        self.assertAlmostEqual(stats.max_overall, 99.49)

        self.assertEqual(stats.recommendation_distribution["STRONGLY_RECOMMEND"], 1)
        self.assertEqual(stats.recommendation_distribution["REJECT"], 1)
        self.assertEqual(stats.recommendation_distribution["RECOMMEND"], 0)

        self.assertEqual(stats.band_distribution, {"excellent": 1, "good": 0, "average": 0, "poor": 1})
        self.assertEqual(stats.band_percentages["excellent"], 50.0)
        self.assertEqual(stats.band_percentages["poor"], 50.0)

    def test_empty(self):
        stats = summarize_scores([])

        self.assertEqual(stats.count, 0)
        self.assertEqual(stats.average_scores["overall_score"], 0.0)
        self.assertIsNone(stats.min_overall)
        self.assertIsNone(stats.max_overall)
        self.assertEqual(sum(stats.band_distribution.values()), 0)
        self.assertEqual(stats.recommendation_distribution["REJECT"], 0)

    def test_plain_python_types(self):
        stats = summarize_scores(self.results)
        self.assertIs(type(stats.min_overall), float)
        self.assertIs(type(stats.average_scores["overall_score"]), float)


if __name__ == '__main__':
    unittest.main()
