from dataclasses import dataclass, field, replace

# Status code of a response whose request never reached the server.
TRANSPORT_FAILURE = -1

FORM_URLENCODED = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class Request:
    method: str
    url: str
    content_type: str | None = None
    body: bytes = b""
    auth: tuple[str, str] | None = None

    @property
    def has_upload(self) -> bool:
        return self.method in ("POST", "PUT")

    def headers(self) -> dict[str, str]:
        if self.content_type is None:
            return {}
        return {"Content-Type": self.content_type}

    def with_auth(self, auth: tuple[str, str] | None) -> "Request":
        return replace(self, auth=auth)


@dataclass(frozen=True)
class Response:
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    latency_ms: int = 0
    request: Request | None = None

    @property
    def transport_failed(self) -> bool:
        return self.status_code == TRANSPORT_FAILURE

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")
