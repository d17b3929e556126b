#!/usr/bin/env python3
"""
Tests for configuration loading.

Covers schema validation, source precedence (defaults < .env < OS
environment < CLI), and the global Env accessor.
"""

import argparse
import os
import tempfile
import unittest
from unittest.mock import patch

import contentgem.config.env as env_module
from contentgem.config import ConfigError, ConfigLoader, ConfigSchema, Env
from contentgem.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


class EnvTestCase(unittest.TestCase):
    def setUp(self):
        env_module._ENV = None
        self.env_patch = patch.dict(os.environ, {}, clear=True)
        self.env_patch.start()

    def tearDown(self):
        self.env_patch.stop()
        env_module._ENV = None


class TestConfigSchema(unittest.TestCase):
    def test_defaults(self):
        config = ConfigSchema(api_key="cg_key")
        self.assertEqual(config.base_url, DEFAULT_BASE_URL)
        self.assertEqual(config.timeout, DEFAULT_TIMEOUT)
        self.assertEqual(config.poll_interval, 5.0)
        self.assertEqual(config.poll_max_attempts, 60)

    def test_base_url_trailing_slash_removed(self):
        config = ConfigSchema(api_key="cg_key", base_url="https://example.com/api/")
        self.assertEqual(config.base_url, "https://example.com/api")

    def test_invalid_values_rejected(self):
        for kwargs in (
            {"api_key": ""},
            {"api_key": "k", "base_url": "ftp://example.com"},
            {"api_key": "k", "base_url": "not a url"},
            {"api_key": "k", "timeout": 0},
            {"api_key": "k", "poll_max_attempts": 0},
            {"api_key": "k", "unknown": 1},
        ):
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(ValueError):
                    ConfigSchema(**kwargs)


class TestEnvLoad(EnvTestCase):
    def test_missing_api_key(self):
        with self.assertRaises(ConfigError) as cm:
            Env.load(dotenv_path=None)
        self.assertIn("CONTENTGEM_API_KEY", str(cm.exception))

    def test_loads_from_os_environment(self):
        os.environ.update({
            "CONTENTGEM_API_KEY": "cg_os_key",
            "CONTENTGEM_TIMEOUT": "45",
            "CONTENTGEM_POLL_MAX_ATTEMPTS": "10",
        })
        env = Env.load(dotenv_path=None)
        self.assertEqual(env.CONTENTGEM_API_KEY, "cg_os_key")
        self.assertEqual(env.CONTENTGEM_TIMEOUT, 45.0)
        self.assertEqual(env.CONTENTGEM_POLL_MAX_ATTEMPTS, 10)
        self.assertIs(Env.current(), env)

    def test_blank_values_count_as_unset(self):
        os.environ.update({"CONTENTGEM_API_KEY": "cg_key", "CONTENTGEM_BASE_URL": "   "})
        env = Env.load(dotenv_path=None)
        self.assertEqual(env.CONTENTGEM_BASE_URL, DEFAULT_BASE_URL)

    def test_cli_args_override_environment(self):
        os.environ.update({"CONTENTGEM_API_KEY": "cg_os_key", "CONTENTGEM_TIMEOUT": "45"})
        args = argparse.Namespace(
            api_key="cg_cli_key", base_url=None, timeout=5.0,
            poll_interval=None, poll_max_attempts=None,
        )
        env = Env.load(cli_args=args, dotenv_path=None)
        self.assertEqual(env.CONTENTGEM_API_KEY, "cg_cli_key")
        self.assertEqual(env.CONTENTGEM_TIMEOUT, 5.0)

    def test_overrides_win(self):
        os.environ["CONTENTGEM_API_KEY"] = "cg_os_key"
        env = Env.load(cli_overrides={"CONTENTGEM_API_KEY": "cg_override"}, dotenv_path=None)
        self.assertEqual(env.CONTENTGEM_API_KEY, "cg_override")

    def test_dotenv_file_fills_unset_values(self):
        os.environ["CONTENTGEM_TIMEOUT"] = "12"
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, ".env")
            with open(path, "w") as f:
                f.write("CONTENTGEM_API_KEY=cg_dotenv_key\n")
                f.write("CONTENTGEM_TIMEOUT=99\n")
            env = Env.load(dotenv_path=path)

        self.assertEqual(env.CONTENTGEM_API_KEY, "cg_dotenv_key")
        self.assertEqual(env.CONTENTGEM_TIMEOUT, 12.0)

    def test_validation_error_names_env_var(self):
        os.environ.update({"CONTENTGEM_API_KEY": "cg_key", "CONTENTGEM_TIMEOUT": "-1"})
        with self.assertRaises(ConfigError) as cm:
            Env.load(dotenv_path=None)
        self.assertIn("CONTENTGEM_TIMEOUT", str(cm.exception))

    def test_current_before_load(self):
        with self.assertRaises(ConfigError):
            Env.current()


class TestEnvFromMapping(unittest.TestCase):
    def test_from_mapping(self):
        env = Env.from_mapping({
            "CONTENTGEM_API_KEY": "cg_key",
            "CONTENTGEM_BASE_URL": "http://localhost:3000/api/v1/",
        })
        self.assertEqual(env.CONTENTGEM_BASE_URL, "http://localhost:3000/api/v1")
        self.assertEqual(env.CONTENTGEM_TIMEOUT, DEFAULT_TIMEOUT)

    def test_from_mapping_requires_key(self):
        with self.assertRaises(ConfigError) as cm:
            Env.from_mapping({"CONTENTGEM_API_KEY": "  "})
        self.assertEqual(str(cm.exception), "Missing required configuration: CONTENTGEM_API_KEY")

    def test_env_is_frozen(self):
        env = Env.from_mapping({"CONTENTGEM_API_KEY": "cg_key"})
        with self.assertRaises(Exception):
            env.CONTENTGEM_API_KEY = "other"

    def test_mask_hides_key(self):
        env = Env.from_mapping({"CONTENTGEM_API_KEY": "cg_secret"})
        masked = env.mask()
        self.assertEqual(masked["CONTENTGEM_API_KEY"], "***")
        self.assertEqual(env.to_dict()["CONTENTGEM_API_KEY"], "cg_secret")


class TestSchemaArguments(unittest.TestCase):
    def test_adds_typed_options(self):
        parser = ConfigLoader.add_schema_arguments(argparse.ArgumentParser())
        args = parser.parse_args(["--api-key", "k", "--timeout", "2.5", "--poll-max-attempts", "3"])
        self.assertEqual(args.api_key, "k")
        self.assertEqual(args.timeout, 2.5)
        self.assertEqual(args.poll_max_attempts, 3)
        self.assertIsNone(args.base_url)


if __name__ == "__main__":
    unittest.main()
