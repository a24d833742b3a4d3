class CrawlError(Exception):
    """Base class for errors that make continued crawling unsafe."""


class ListingFormatError(CrawlError):
    """A listing page does not follow the four-column table layout."""


class ContentTypeMismatch(CrawlError):
    """A directory path was answered with something other than HTML."""

    def __init__(self, path, content_type):
        self.path = path
        self.content_type = content_type
        super().__init__(
            f"{path} was served as {content_type!r}, expected text/html")


class CrawlAborted(CrawlError):
    """Raised by the crawler once any worker has hit a fatal error."""
