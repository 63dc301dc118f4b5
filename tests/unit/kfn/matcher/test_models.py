#!/usr/bin/env python3
"""
Test suite for matcher models.
"""

import unittest
from dataclasses import FrozenInstanceError

from kfn.matcher.models import (
    JobProfile, MatchLevel, RemotePreference, SkillMatch, WorkerProfile
)


class TestProfiles(unittest.TestCase):

    def test_summary_text_prefers_summary(self):
        worker = WorkerProfile(bio="bio text", summary="summary text")
        self.assertEqual(worker.summary_text, "summary text")

    def test_summary_text_falls_back_to_bio(self):
        self.assertEqual(WorkerProfile(bio="bio text").summary_text, "bio text")
        self.assertEqual(WorkerProfile().summary_text, "")

    def test_job_full_text(self):
        job = JobProfile(description="Build APIs.", requirements="BSc required.")
        self.assertEqual(job.full_text, "Build APIs. BSc required.")
        self.assertEqual(JobProfile().full_text, " ")

    def test_list_defaults_are_independent(self):
        a, b = WorkerProfile(), WorkerProfile()
        a.skills.append("x")
        self.assertEqual(b.skills, [])

    def test_enums_compare_to_strings(self):
        self.assertEqual(RemotePreference.REMOTE, "REMOTE")


class TestMatchDetails(unittest.TestCase):

    def test_skill_match_is_frozen(self):
        match = SkillMatch(
            job_skill="Python", worker_skill="Python", score=1.0,
            match_level=MatchLevel.EXCELLENT, required=True
        )
        with self.assertRaises(FrozenInstanceError):
            match.score = 0.5


if __name__ == '__main__':
    unittest.main()
