import os
import unittest

from pydantic import SecretStr

from tgtypes.util.config import Config


class ConfigTest(unittest.TestCase):

    original_env: dict

    def setUp(self):
        self.original_env = os.environ.copy()
        os.environ.clear()
        Config._instances = {}

    def tearDown(self):
        os.environ.clear()
        os.environ.update(self.original_env)
        Config._instances = {}

    def test_default_config(self):
        config = Config()

        self.assertEqual(config.log_level, "info")
        self.assertFalse(config.log_raw_payloads)
        self.assertEqual(config.web_timeout_s, 10)
        self.assertEqual(config.telegram_api_base_url, "https://api.telegram.org")
        self.assertEqual(config.telegram_bot_token.get_secret_value(), "invalid")
        self.assertFalse(config.has_bot_token)

    def test_custom_config(self):
        os.environ["LOG_LEVEL"] = "DEBUG"
        os.environ["LOG_TG_PAYLOADS"] = "true"
        os.environ["WEB_TIMEOUT_S"] = "30"
        os.environ["TELEGRAM_API_BASE_URL"] = "http://localhost:8081/"
        os.environ["TELEGRAM_BOT_TOKEN"] = "123456:secret-token"

        config = Config()

        self.assertEqual(config.log_level, "debug")
        self.assertTrue(config.log_raw_payloads)
        self.assertEqual(config.web_timeout_s, 30)
        self.assertEqual(config.telegram_api_base_url, "http://localhost:8081")
        self.assertEqual(config.telegram_bot_token.get_secret_value(), "123456:secret-token")
        self.assertTrue(config.has_bot_token)

    def test_blank_env_values_fall_back_to_defaults(self):
        os.environ["WEB_TIMEOUT_S"] = "   "
        os.environ["TELEGRAM_BOT_TOKEN"] = ""

        config = Config(def_web_timeout_s = 5, def_telegram_bot_token = SecretStr("42:default"))

        self.assertEqual(config.web_timeout_s, 5)
        self.assertEqual(config.telegram_bot_token.get_secret_value(), "42:default")

    def test_all_secrets_are_masked(self):
        os.environ["TELEGRAM_BOT_TOKEN"] = "123456:secret-token"

        config = Config()

        for secret in config.all_secrets():
            self.assertIsInstance(secret, SecretStr)
            self.assertNotIn("secret-token", str(secret))

    def test_config_is_singleton(self):
        first = Config()
        second = Config()

        self.assertIs(first, second)
