#!/usr/bin/env python3
"""
Test suite for strengths and areas-to-improve feedback.
"""

import unittest

from kfn.config_loader import FeedbackConfig, ScorerConfig
from kfn.matcher.models import MatchLevel, SkillMatch
from kfn.scorer.feedback import DIMENSION_MESSAGES, identify_strengths_and_areas


def _skill_match(name, level, required=True):
    return SkillMatch(
        job_skill=name, worker_skill=None, score=0.0, match_level=level, required=required
    )


class TestFeedback(unittest.TestCase):

    def setUp(self):
        self.max_scores = ScorerConfig().max_scores()
        self.config = FeedbackConfig()

    def test_thresholds_per_dimension(self):
        sub_scores = {
            "skills": 22.5,        # exactly 75%
            "experience": 12.5,    # exactly 50%
            "location": 10.0,      # between
            "availability": 15.0,
            "education": 0.0,
            "cultural": 3.0,
        }
        strengths, areas = identify_strengths_and_areas(sub_scores, self.max_scores, [], self.config)

        self.assertEqual(strengths, [
            DIMENSION_MESSAGES["skills"][0],
            DIMENSION_MESSAGES["availability"][0],
        ])
        self.assertEqual(areas, [
            DIMENSION_MESSAGES["experience"][1],
            DIMENSION_MESSAGES["education"][1],
        ])

    def test_skill_match_messages(self):
        matches = [
            _skill_match("Python", MatchLevel.EXCELLENT),
            _skill_match("SQL", MatchLevel.EXCELLENT, required=False),
            _skill_match("Rust", MatchLevel.MISSING),
            _skill_match("Go", MatchLevel.MISSING, required=False),
            _skill_match("Java", MatchLevel.FAIR),
        ]
        sub_scores = {name: self.max_scores[name] * 0.6 for name in self.max_scores}

        strengths, areas = identify_strengths_and_areas(sub_scores, self.max_scores, matches, self.config)

        self.assertEqual(strengths, ["Excellent match on 2 key skills"])
        self.assertEqual(areas, ["Missing 1 required skills"])


if __name__ == '__main__':
    unittest.main()
