"""Sink callbacks the transport drives while a request is in flight.

A :class:`ResponseAggregator` collects body chunks and header lines for one
response; an :class:`UploadObject` feeds a fixed request body back to the
transport piece by piece.
"""

from .models import Request, Response


class ResponseAggregator:
    def __init__(self) -> None:
        self._body = bytearray()
        self._headers: dict[str, str] = {}

    @property
    def body(self) -> bytes:
        return bytes(self._body)

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    def write_body(self, chunk: bytes) -> int:
        self._body.extend(chunk)
        return len(chunk)

    def write_header(self, line: bytes) -> int:
        header = line.decode("latin-1")
        key, sep, value = header.partition(":")
        if not sep:
            header = header.strip()
            # blank line between header blocks
            if header:
                self._headers[header] = "present"
        else:
            self._headers[key.strip()] = value.strip()
        return len(line)

    def replace_body(self, text: str) -> None:
        self._body = bytearray(text.encode("utf-8"))

    def to_response(
        self, request: Request, status_code: int, latency_ms: int = 0
    ) -> Response:
        return Response(
            status_code=status_code,
            headers=self.headers,
            body=self.body,
            latency_ms=latency_ms,
            request=request,
        )


class UploadObject:
    def __init__(self, data: bytes):
        self._data = memoryview(data)
        self._cursor = 0
        self.remaining = len(data)

    def __len__(self) -> int:
        return len(self._data)

    def read(self, buffer: bytearray) -> int:
        size = min(self.remaining, len(buffer))
        buffer[:size] = self._data[self._cursor : self._cursor + size]
        self._cursor += size
        self.remaining -= size
        return size
