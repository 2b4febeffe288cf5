import logging
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Any

import httpx

from .exceptions import TransportFailure
from .types import BodySink, HeaderSink, ReadSink

logger = logging.getLogger(__name__)

UPLOAD_CHUNK_SIZE = 16 * 1024


@dataclass(frozen=True)
class TransferOptions:
    method: str = "GET"
    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    user_agent: str | None = None
    auth: tuple[str, str] | None = None
    body_sink: BodySink | None = None
    header_sink: HeaderSink | None = None
    read_sink: ReadSink | None = None
    upload_size: int = 0


class Transport:
    """One reusable httpx connection handle plus the options of the next call.

    Options are set with :meth:`setopt`, consumed by :meth:`perform` and
    cleared by :meth:`reset`, so nothing carries over between calls.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self._client = httpx.Client(timeout=timeout, transport=transport)
        self._options = TransferOptions()
        self.status_code = 0

    @property
    def options(self) -> TransferOptions:
        return self._options

    def setopt(self, **options: Any) -> None:
        self._options = replace(self._options, **options)

    def reset(self) -> None:
        self._options = TransferOptions()
        self.status_code = 0

    def close(self) -> None:
        self._client.close()

    def _request_headers(self) -> dict[str, str]:
        opts = self._options
        headers = dict(opts.headers)
        if opts.user_agent:
            headers["User-Agent"] = opts.user_agent
        if opts.read_sink is not None:
            headers["Content-Length"] = str(opts.upload_size)
        return headers

    def _upload_chunks(self, read_sink: ReadSink) -> Iterator[bytes]:
        buffer = bytearray(UPLOAD_CHUNK_SIZE)
        while True:
            copied = read_sink(buffer)
            if not copied:
                return
            yield bytes(buffer[:copied])

    @staticmethod
    def _deliver(sink: BodySink | HeaderSink | None, data: bytes) -> None:
        if sink is None:
            return
        consumed = sink(data)
        if consumed != len(data):
            raise TransportFailure(
                "WriteError",
                f"sink consumed {consumed} of {len(data)} bytes, transfer aborted",
            )

    def _emit_headers(self, response: httpx.Response) -> None:
        sink = self._options.header_sink
        status_line = f"{response.http_version} {response.status_code} {response.reason_phrase}"
        self._deliver(sink, f"{status_line}\r\n".encode("latin-1"))
        for key, value in response.headers.raw:
            self._deliver(sink, key + b": " + value + b"\r\n")
        self._deliver(sink, b"\r\n")

    def perform(self) -> None:
        """Run the configured request, feeding the registered sinks.

        Raises:
            TransportFailure: if no HTTP exchange could be completed.
        """
        opts = self._options
        logger.debug("-> %s %s", opts.method, opts.url)
        content = None
        if opts.read_sink is not None:
            content = self._upload_chunks(opts.read_sink)

        try:
            with self._client.stream(
                opts.method,
                opts.url,
                headers=self._request_headers(),
                content=content,
                auth=httpx.BasicAuth(*opts.auth) if opts.auth is not None else None,
            ) as response:
                self._emit_headers(response)
                for chunk in response.iter_bytes():
                    self._deliver(opts.body_sink, chunk)
                self.status_code = response.status_code
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise TransportFailure(type(exc).__name__, str(exc)) from exc
