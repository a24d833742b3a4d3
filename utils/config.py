import re
from urllib.parse import urlparse


class Config(object):
    """
    A class representing the crawler configuration.

    Attributes:
        user_agent (str): The user agent string sent with every request.
        base_url (str): Scheme and host of the listing site, without a trailing slash.
        host (str): Network location of the listing site, taken from base_url.
        timeout (float): Per-request timeout in seconds, None to wait forever.
        threads_count (int): The number of worker threads.
        poll_interval (float): How often an idle worker re-checks the frontier.
    """
    def __init__(self, config):
        self.user_agent = config.get(
            "IDENTIFICATION", "USERAGENT", fallback="autoindex-crawler").strip()
        assert self.user_agent, "Set useragent in config.ini"

        self.base_url = config.get("CONNECTION", "BASEURL", fallback="").strip().rstrip("/")
        assert re.match(r"^https?://[^/]+", self.base_url), "Set an http(s) baseurl in config.ini"
        self.host = urlparse(self.base_url).netloc
        timeout = config.get("CONNECTION", "TIMEOUT", fallback="30").strip()
        self.timeout = float(timeout) if timeout else None

        self.threads_count = config.getint("LOCAL PROPERTIES", "THREADCOUNT", fallback=100)
        assert self.threads_count >= 1, "threadcount must be at least 1"

        self.poll_interval = config.getfloat("CRAWLER", "POLLINTERVAL", fallback=0.1)
