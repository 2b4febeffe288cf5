import logging
import time
from typing import Any

import httpx

from configs import app_config

from .aggregator import ResponseAggregator, UploadObject
from .exceptions import TransportFailure
from .models import FORM_URLENCODED, TRANSPORT_FAILURE, Request, Response
from .parser import parse_tree
from .transport import Transport
from .tree import Tree

logger = logging.getLogger(__name__)


class HttpClient:
    """Blocking HTTP client over a single reusable transport handle.

    Basic-auth credentials set with :meth:`set_auth` belong to this instance
    and apply to every later call on it until :meth:`clear_auth`. An instance
    must not be shared between threads.
    """

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._user_agent = user_agent or app_config.HTTP_CLIENT_USER_AGENT
        self._transport = Transport(
            timeout=timeout if timeout is not None else app_config.HTTP_CLIENT_TIMEOUT,
            transport=transport,
        )
        self._auth: tuple[str, str] | None = None

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *_args: Any) -> None:
        self.close()

    def set_auth(self, user: str, password: str) -> None:
        self._auth = (user, password)

    def clear_auth(self) -> None:
        self._auth = None

    def _execute(self, request: Request) -> Response:
        request = request.with_auth(self._auth)
        aggregator = ResponseAggregator()
        transport = self._transport

        transport.setopt(
            method=request.method,
            url=request.url,
            headers=request.headers(),
            user_agent=self._user_agent,
            auth=request.auth,
            body_sink=aggregator.write_body,
            header_sink=aggregator.write_header,
        )
        if request.has_upload:
            upload = UploadObject(request.body)
            transport.setopt(read_sink=upload.read, upload_size=len(upload))

        start_time = time.time()
        try:
            try:
                transport.perform()
            except TransportFailure as exc:
                logger.warning(
                    "%s %s failed before reaching the server: %s",
                    request.method,
                    request.url,
                    exc,
                )
                aggregator.replace_body(
                    f"Failed to query. Transport error: {exc.reason} DETAIL: {exc.detail}"
                )
                return aggregator.to_response(request, TRANSPORT_FAILURE)

            latency_ms = int((time.time() - start_time) * 1000)
            return aggregator.to_response(request, transport.status_code, latency_ms)
        finally:
            transport.reset()

    def get(self, url: str) -> Response:
        return self._execute(Request(method="GET", url=url))

    def post(self, url: str, content_type: str, body: bytes | str) -> Response:
        return self._execute(
            Request(method="POST", url=url, content_type=content_type, body=_encode(body))
        )

    def put(self, url: str, content_type: str, body: bytes | str) -> Response:
        return self._execute(
            Request(method="PUT", url=url, content_type=content_type, body=_encode(body))
        )

    def delete(self, url: str) -> Response:
        return self._execute(Request(method="DELETE", url=url))

    def get_tree(self, url: str) -> Tree:
        """GET ``url`` and parse the JSON reply.

        Non-200 replies and transport failures come back as a tree holding a
        single ``error`` leaf.

        Raises:
            MalformedResponseBody: the server answered 200 with invalid JSON.
        """
        return parse_tree(self.get(url), url)

    def post_tree(self, url: str, data: bytes | str) -> Tree:
        """POST form-encoded ``data`` to ``url`` and parse the JSON reply."""
        return parse_tree(self.post(url, FORM_URLENCODED, data), url)


def _encode(body: bytes | str) -> bytes:
    if isinstance(body, bytes):
        return body
    return body.encode("utf-8")
