import unittest
from configparser import ConfigParser

from utils.config import Config


def parse(sections):
    cparser = ConfigParser()
    cparser.read_dict(sections)
    return cparser


class TestConfig(unittest.TestCase):
    def test_defaults(self):
        config = Config(parse({"CONNECTION": {"BASEURL": "https://mirror.example.org/"}}))
        self.assertEqual(config.base_url, "https://mirror.example.org")
        self.assertEqual(config.user_agent, "autoindex-crawler")
        self.assertEqual(config.threads_count, 100)
        self.assertEqual(config.timeout, 30.0)
        self.assertEqual(config.poll_interval, 0.1)

    def test_values(self):
        config = Config(parse({
            "IDENTIFICATION": {"USERAGENT": " my agent "},
            "CONNECTION": {"BASEURL": "http://host:8080", "TIMEOUT": ""},
            "LOCAL PROPERTIES": {"THREADCOUNT": "7"},
            "CRAWLER": {"POLLINTERVAL": "0.5"},
        }))
        self.assertEqual(config.user_agent, "my agent")
        self.assertEqual(config.base_url, "http://host:8080")
        self.assertEqual(config.host, "host:8080")
        self.assertIsNone(config.timeout)
        self.assertEqual(config.threads_count, 7)
        self.assertEqual(config.poll_interval, 0.5)

    def test_base_url_required(self):
        with self.assertRaises(AssertionError):
            Config(parse({}))
        with self.assertRaises(AssertionError):
            Config(parse({"CONNECTION": {"BASEURL": "ftp://host"}}))

    def test_thread_count_positive(self):
        with self.assertRaises(AssertionError):
            Config(parse({
                "CONNECTION": {"BASEURL": "http://host"},
                "LOCAL PROPERTIES": {"THREADCOUNT": "0"},
            }))


if __name__ == "__main__":
    unittest.main()
