import unittest
from unittest.mock import Mock, patch

from tgtypes.util import log


class LogTest(unittest.TestCase):

    def setUp(self):
        self.config_patcher = patch.object(log, "config", Mock(log_level = "info"))
        self.logger_patcher = patch.object(log, "logger")
        self.config_patcher.start()
        self.mock_logger = self.logger_patcher.start()

    def tearDown(self):
        self.config_patcher.stop()
        self.logger_patcher.stop()

    def test_returns_single_message(self):
        self.assertEqual(log.i("Hello"), "Hello")
        self.mock_logger.info.assert_called_once_with("Hello")

    def test_formats_multiple_parts_as_tree(self):
        message = log.w("Head", "Middle", "Tail")

        self.assertEqual(message, "Head\n ├─ Middle\n └─ Tail")
        self.mock_logger.warning.assert_called_once_with(message)

    def test_level_below_threshold_is_not_logged(self):
        message = log.d("Quiet")

        self.assertEqual(message, "Quiet")
        self.mock_logger.debug.assert_not_called()

    def test_exceptions_are_logged_even_below_threshold(self):
        error = ValueError("boom")

        message = log.t("Failed", error)

        self.assertIn("! ValueError (see below)", message)
        self.mock_logger.debug.assert_not_called()
        self.mock_logger.error.assert_any_call("Message: boom")

    def test_error_level_is_logged(self):
        log.e("Broken")

        self.mock_logger.error.assert_called_once_with("Broken")
