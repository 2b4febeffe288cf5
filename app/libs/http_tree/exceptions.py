class HttpTreeError(Exception):
    """Base error for the HTTP tree client."""


class TransportFailure(HttpTreeError):
    """The transport failed before an HTTP exchange completed."""

    def __init__(self, reason: str, detail: str = ""):
        super().__init__(f"{reason}: {detail}" if detail else reason)
        self.reason = reason
        self.detail = detail


class MalformedResponseBody(HttpTreeError):
    """A 200 response whose body is not a JSON object or array."""

    def __init__(self, url: str, body: bytes, message: str | None = None):
        super().__init__(message or f"Malformed JSON response from {url}")
        self.url = url
        self.body = body


class UnexpectedShape(HttpTreeError):
    """A child expected to hold a leaf value holds a nested tree."""

    def __init__(self, name: str):
        super().__init__(f"Child '{name}' is a nested tree, not a leaf value")
        self.name = name
