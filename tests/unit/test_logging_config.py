import logging
import unittest

from unittest.mock import patch

from extended_set import configure_logging


class ConfigureLoggingTests(unittest.TestCase):
    @patch("extended_set.utils.logging_config.logging.basicConfig")
    def test_debug(self, basic_config):
        configure_logging(debug=True)
        basic_config.assert_called_once_with(level=logging.DEBUG)

    @patch("extended_set.utils.logging_config.logging.basicConfig")
    def test_default_is_info(self, basic_config):
        configure_logging()
        basic_config.assert_called_once_with(level=logging.INFO)


if __name__ == "__main__":
    unittest.main()
