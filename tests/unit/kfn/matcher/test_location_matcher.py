#!/usr/bin/env python3
"""
Test suite for remote compatibility and location proximity.
"""

import unittest

from kfn.config_loader import LocationScoringConfig
from kfn.matcher.location_matcher import LocationMatcher
from kfn.matcher.models import JobProfile, RemotePreference, WorkerProfile


class TestRemoteCompatibility(unittest.TestCase):

    def setUp(self):
        self.matcher = LocationMatcher(LocationScoringConfig())

    def test_table(self):
        cases = [
            ("ONSITE", "ONSITE", 1.0),
            ("REMOTE", "ONSITE", 0.0),
            ("ONSITE", "REMOTE", 0.0),
            ("REMOTE", "HYBRID", 0.8),
            ("HYBRID", "ONSITE", 0.5),
            ("HYBRID", "HYBRID", 1.0),
        ]
        for worker, job, expected in cases:
            with self.subTest(worker=worker, job=job):
                self.assertEqual(self.matcher.check_remote_compatibility(worker, job), expected)

    def test_unknown_preferences_use_default(self):
        self.assertEqual(self.matcher.check_remote_compatibility(None, "REMOTE"), 0.5)
        self.assertEqual(self.matcher.check_remote_compatibility("REMOTE", "FLEXIBLE"), 0.5)

    def test_accepts_enums_and_lowercase(self):
        self.assertEqual(
            self.matcher.check_remote_compatibility(RemotePreference.REMOTE, "remote"), 1.0
        )


class TestProximity(unittest.TestCase):

    def setUp(self):
        self.matcher = LocationMatcher(LocationScoringConfig())

    def test_proximity_order(self):
        cases = [
            ("Austin, TX, USA", " austin, tx, usa ", 1.0),
            ("Austin, TX, USA", "Austin, CA, USA", 0.9),
            ("Dallas, TX, USA", "Austin, TX, USA", 0.7),
            ("Seattle, WA, USA", "Austin, TX, USA", 0.5),
            ("Remote", "Berlin, Germany", 0.8),
            ("Paris, France", "Berlin, Germany", 0.3),
        ]
        for loc1, loc2, expected in cases:
            with self.subTest(loc1=loc1, loc2=loc2):
                self.assertEqual(self.matcher.calculate_proximity(loc1, loc2), expected)

    def test_missing_location(self):
        self.assertEqual(self.matcher.calculate_proximity(None, "Austin, TX, USA"), 0.5)
        self.assertEqual(self.matcher.calculate_proximity("Austin, TX, USA", ""), 0.5)


class TestLocationScore(unittest.TestCase):

    def setUp(self):
        self.matcher = LocationMatcher(LocationScoringConfig())

    def _score(self, worker_pref, job_pref, worker_loc=None, job_loc=None):
        worker = WorkerProfile(remote_preference=worker_pref, location=worker_loc)
        job = JobProfile(remote_preference=job_pref, location=job_loc)
        return self.matcher.calculate(worker, job)

    def test_full_remote_ignores_location(self):
        score, details = self._score("REMOTE", "REMOTE", "Tokyo, Japan", "Lima, Peru")
        self.assertEqual(score, 15.0)
        self.assertEqual(details.proximity_score, 0.3)

    def test_full_compatibility_with_missing_locations_is_capped(self):
        score, _ = self._score("ONSITE", "ONSITE")
        self.assertEqual(score, 7.5)

    def test_full_remote_with_one_location_missing_is_capped(self):
        score, details = self._score("REMOTE", "REMOTE", None, "Austin, TX, USA")
        self.assertEqual(score, 7.5)
        self.assertEqual(details.remote_compatibility, 1.0)
        self.assertEqual(details.proximity_score, 0.5)

        score, _ = self._score("HYBRID", "HYBRID", "Austin, TX, USA", "")
        self.assertEqual(score, 7.5)

    def test_incompatible_preferences_with_missing_location(self):
        score, _ = self._score("REMOTE", "ONSITE", "Austin, TX, USA", None)
        self.assertEqual(score, 0.0)

    def test_incompatible_preferences(self):
        score, _ = self._score("REMOTE", "ONSITE", "Austin, TX, USA", "Austin, TX, USA")
        self.assertEqual(score, 0.0)

    def test_partial_compatibility_scales_by_proximity(self):
        score, _ = self._score("HYBRID", "ONSITE", "Austin, TX, USA", "Austin, TX")
        self.assertAlmostEqual(score, 0.5 * 0.9 * 15)

    def test_missing_location_caps_at_half(self):
        score, _ = self._score("REMOTE", "HYBRID")
        self.assertAlmostEqual(score, 0.8 * 0.5 * 15)
        self.assertLessEqual(score, 7.5)

    def test_details(self):
        _, details = self._score(RemotePreference.HYBRID, "onsite", "Austin, TX, USA", "Austin, TX, USA")
        self.assertEqual(details.worker_remote_preference, "HYBRID")
        self.assertEqual(details.job_remote_preference, "ONSITE")
        self.assertEqual(details.remote_compatibility, 0.5)
        self.assertEqual(details.proximity_score, 1.0)


if __name__ == '__main__':
    unittest.main()
