#!/usr/bin/env python3
"""Tests for configuration, envelope and polling models."""

import unittest

from contentgem.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from contentgem.models import BulkProgress, ClientConfig, GenerationRequest, JobState, is_success


class TestClientConfig(unittest.TestCase):
    def test_create_with_defaults(self):
        config = ClientConfig.create("cg_key")
        self.assertEqual(config, ClientConfig("cg_key", DEFAULT_BASE_URL, DEFAULT_TIMEOUT))

    def test_create_normalizes_values(self):
        config = ClientConfig.create("cg_key", base_url="http://localhost:3000/api/v1/", timeout=10)
        self.assertEqual(config.base_url, "http://localhost:3000/api/v1")
        self.assertIsInstance(config.timeout, float)

    def test_empty_values_fall_back(self):
        config = ClientConfig.create("cg_key", base_url="", timeout=0)
        self.assertEqual(config.base_url, DEFAULT_BASE_URL)
        self.assertEqual(config.timeout, DEFAULT_TIMEOUT)


class TestEnvelope(unittest.TestCase):
    def test_is_success(self):
        self.assertTrue(is_success({"success": True}))
        self.assertFalse(is_success({"success": False}))
        self.assertFalse(is_success({"success": "true"}))
        self.assertFalse(is_success({}))
        self.assertFalse(is_success(["success"]))

    def test_request_types_are_plain_dicts(self):
        request: GenerationRequest = {"prompt": "Write", "keywords": ["a"]}
        self.assertEqual(request, {"prompt": "Write", "keywords": ["a"]})


class TestPollingModels(unittest.TestCase):
    def test_terminal_states(self):
        self.assertFalse(JobState.PENDING.is_terminal)
        self.assertTrue(JobState.COMPLETED.is_terminal)
        self.assertTrue(JobState.FAILED.is_terminal)
        self.assertTrue(JobState.TIMED_OUT.is_terminal)
        self.assertEqual(JobState("completed"), JobState.COMPLETED)

    def test_bulk_progress(self):
        progress = BulkProgress(completed=2, failed=1, total=5)
        self.assertEqual(progress.resolved, 3)
        self.assertEqual(progress.pending, 2)
        self.assertFalse(progress.is_resolved)
        self.assertTrue(BulkProgress(3, 2, 5).is_resolved)
        self.assertEqual(BulkProgress(4, 3, 5).pending, 0)


if __name__ == "__main__":
    unittest.main()
