import sys
import unittest
from unittest.mock import call, patch

from util import log


class LogTest(unittest.TestCase):

    def setUp(self):
        patcher_config = patch("util.log.config")
        self.addCleanup(patcher_config.stop)
        self.mock_config = patcher_config.start()
        self.mock_config.log_level = "error"

    def test_returns_single_message(self):
        self.assertEqual(log.t("Hello"), "Hello")
        self.assertEqual(log.d("Hello"), "Hello")
        self.assertEqual(log.i("Hello"), "Hello")

    def test_returns_empty_message(self):
        self.assertEqual(log.w(), "")

    def test_joins_messages_into_tree(self):
        message = log.t("Head", "Middle", "Tail")

        self.assertEqual(message, "Head\n ├─ Middle\n └─ Tail")

    def test_describes_bytes_by_size(self):
        message = log.t("Body", b"12345")

        self.assertEqual(message, "Body\n └─ <5 bytes>")

    @patch("util.log.logger")
    def test_exceptions_are_always_logged(self, mock_logger):
        message = log.t("Failed", ValueError("boom"))

        self.assertEqual(message, "Failed\n ├─ ! ValueError (see below)")
        mock_logger.debug.assert_not_called()
        mock_logger.error.assert_any_call("Message: boom")

    @patch("util.log.logger")
    def test_level_threshold(self, mock_logger):
        self.mock_config.log_level = "warning"

        log.i("skipped")
        log.w("kept")

        mock_logger.info.assert_not_called()
        mock_logger.warning.assert_called_once_with("kept")

    @patch("builtins.print")
    @patch("util.log.logger")
    def test_local_level_prints_everything(self, mock_logger, mock_print):
        self.mock_config.log_level = "local"

        log.t("Hello")

        mock_print.assert_called_once_with("[T] Hello")
        mock_logger.debug.assert_not_called()

    @patch("builtins.print")
    def test_local_level_prints_exceptions_to_stderr(self, mock_print):
        self.mock_config.log_level = "local"

        log.e("Failed", ValueError("boom"))

        mock_print.assert_has_calls([
            call("[E] Failed\n ├─ ! ValueError (see below)"),
            call(" ‼  Message: boom", file = sys.stderr),
        ])

    @patch("builtins.print")
    @patch("util.log.logger")
    def test_falls_back_to_printing_when_logger_fails(self, mock_logger, mock_print):
        self.mock_config.log_level = "info"
        mock_logger.info.side_effect = Exception("logger down")

        message = log.i("Hello")

        self.assertEqual(message, "Hello")
        mock_logger.info.assert_called_once_with("Hello")
        mock_print.assert_called_once_with("[I] Hello")
