import logging
import unittest
import uuid

from utils import get_logger, set_console_level


def file_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


class TestGetLogger(unittest.TestCase):
    def setUp(self):
        self.prefix = f"test-{uuid.uuid4().hex[:8]}"

    def test_same_filename_shares_one_file_handler(self):
        loggers = [get_logger(f"{self.prefix}-Worker-{i}", f"{self.prefix}-WORKER")
                   for i in range(5)]
        handlers = {id(file_handlers(logger)[0]) for logger in loggers}
        self.assertEqual(len(handlers), 1)
        for logger in loggers:
            self.assertEqual(len(file_handlers(logger)), 1)

    def test_different_filenames_get_their_own_file(self):
        first = get_logger(f"{self.prefix}-A")
        second = get_logger(f"{self.prefix}-B")
        self.assertIsNot(file_handlers(first)[0], file_handlers(second)[0])

    def test_same_name_is_configured_once(self):
        logger = get_logger(f"{self.prefix}-FRONTIER")
        again = get_logger(f"{self.prefix}-FRONTIER")
        self.assertIs(logger, again)
        self.assertEqual(len(logger.handlers), 2)

    def test_set_console_level(self):
        logger = get_logger(f"{self.prefix}-CRAWLER")
        try:
            set_console_level(logging.WARNING)
            console = [h for h in logger.handlers if not isinstance(h, logging.FileHandler)]
            self.assertEqual([h.level for h in console], [logging.WARNING])
            self.assertEqual(file_handlers(logger)[0].level, logging.DEBUG)
        finally:
            set_console_level(logging.INFO)


if __name__ == "__main__":
    unittest.main()
