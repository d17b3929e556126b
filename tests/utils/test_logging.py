#!/usr/bin/env python3
"""Tests for logging and small helper utilities."""

import json
import logging
import unittest

from contentgem.models import BulkProgress, JobState
from contentgem.utils import (
    create_progress_bar,
    format_bulk_progress,
    log_poll_event,
    mask_api_key,
    validate_base_url,
)


class TestMaskApiKey(unittest.TestCase):
    def test_masks_all_but_last_four(self):
        self.assertEqual(mask_api_key("cg_test_api_key_123"), "***_123")

    def test_short_and_missing_keys(self):
        self.assertEqual(mask_api_key("abc"), "***")
        self.assertEqual(mask_api_key(""), "<unset>")
        self.assertEqual(mask_api_key(None), "<unset>")


class TestLogPollEvent(unittest.TestCase):
    def setUp(self):
        self.logger = logging.getLogger("tests.poll_events")

    def _record(self, cm):
        self.assertEqual(len(cm.records), 1)
        return cm.records[0]

    def test_attempt_logged_at_debug_as_json(self):
        with self.assertLogs(self.logger, level="DEBUG") as cm:
            log_poll_event("POLL_ATTEMPT", "Generation", "s1", 2, 60, JobState.PENDING, logger=self.logger)
        record = self._record(cm)
        self.assertEqual(record.levelno, logging.DEBUG)
        prefix, payload = record.getMessage().split(": ", 1)
        self.assertEqual(prefix, "POLL_ATTEMPT")
        data = json.loads(payload)
        self.assertEqual(data["event_type"], "poll_attempt")
        self.assertEqual(data["job_id"], "s1")
        self.assertEqual(data["attempt"], 2)
        self.assertEqual(data["state"], "pending")

    def test_levels_by_event_type(self):
        cases = [
            ("POLL_COMPLETE", logging.INFO),
            ("POLL_FAILED", logging.WARNING),
            ("POLL_TIMEOUT", logging.WARNING),
        ]
        for event_type, level in cases:
            with self.subTest(event_type=event_type):
                with self.assertLogs(self.logger, level="DEBUG") as cm:
                    log_poll_event(event_type, "Generation", "s1", 1, 1, JobState.COMPLETED, logger=self.logger)
                self.assertEqual(self._record(cm).levelno, level)


class TestHelpers(unittest.TestCase):
    def test_progress_bar(self):
        self.assertEqual(create_progress_bar(5, 10, width=10), "[█████░░░░░]")
        self.assertEqual(create_progress_bar(0, 0, width=4), "[    ]")
        self.assertEqual(create_progress_bar(20, 10, width=4), "[████]")

    def test_bulk_progress_format(self):
        text = format_bulk_progress(BulkProgress(completed=1, failed=1, total=4), width=4)
        self.assertEqual(text, "[██░░] 2/4")

    def test_validate_base_url(self):
        self.assertEqual(validate_base_url("https://gemcontent.com/api/v1"), (True, None))
        self.assertFalse(validate_base_url("gemcontent.com")[0])
        self.assertFalse(validate_base_url("https://")[0])
        self.assertFalse(validate_base_url(None)[0])


if __name__ == "__main__":
    unittest.main()
