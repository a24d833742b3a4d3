class Response(object):
    """
    Base class for the outcome of fetching one directory page.

    Attributes:
        path (str): The requested directory path.
        status (int): The HTTP status code, None if no response arrived.
    """
    def __init__(self, path, status=None):
        self.path = path
        self.status = status

    def __repr__(self):
        return f"{type(self).__name__}({self.path!r}, status={self.status})"


class Success(Response):
    """A 200 response with an HTML body."""
    def __init__(self, path, status, body):
        super().__init__(path, status)
        self.body = body


class TransientFailure(Response):
    """
    A network error or a non-200 status. The path should be retried.

    Attributes:
        error (str): The network error message, None for a plain bad status.
    """
    def __init__(self, path, status=None, error=None):
        super().__init__(path, status)
        self.error = error

    @property
    def reason(self):
        if self.error is not None:
            return self.error
        return f"status <{self.status}>"


class FatalMismatch(Response):
    """A 200 response whose content-type is not HTML. Never retried."""
    def __init__(self, path, status, content_type):
        super().__init__(path, status)
        self.content_type = content_type
