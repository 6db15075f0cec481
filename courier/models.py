from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from .errors import JsonDecodeError
from .headers import HeaderBag, HeaderValue, group_header_pairs

log = logging.getLogger(__name__)


def _protocol_version(http_version: str) -> float:
    # httpx reports "HTTP/1.1", "HTTP/2", ...
    return float(http_version.rpartition("/")[2] or 1.1)


class Response:
    """
    HTTP response wrapper with case-insensitive header access.

    The setters mutate the response in place and return it so calls can be
    chained; they never produce a copy.

    Args:
        raw: Response returned by the httpx engine
        stream: The raw response is a lazy stream. It is drained here and
            ``get_body()`` returns the drained stream instead of the parsed body.
    """

    def __init__(self, raw: httpx.Response, stream: bool = False) -> None:
        self.version = _protocol_version(raw.http_version)
        self.status_code = raw.status_code
        self.reason: str | None = raw.reason_phrase
        encoding = raw.headers.encoding
        self.headers = HeaderBag(
            group_header_pairs(
                (name.decode(encoding), value.decode(encoding))
                for name, value in raw.headers.raw
            )
        )
        self.stream = raw if stream else None
        try:
            raw.read()
        finally:
            if stream:
                raw.close()
        self.body: Any = self.parse_body(raw.text)

    def parse_body(self, text: str) -> Any:
        return text

    def get_protocol_version(self) -> float:
        return self.version

    def set_protocol_version(self, version: float) -> Response:
        self.version = version
        return self

    def get_status_code(self) -> int:
        return self.status_code

    def get_reason_phrase(self) -> str | None:
        return self.reason

    def is_successful(self) -> bool:
        return self.status_code < 400

    def set_status(self, code: int, reason_phrase: str | None = None) -> Response:
        self.status_code = code
        self.reason = reason_phrase
        return self

    def get_headers(self) -> dict[str, HeaderValue]:
        return self.headers.to_dict()

    def get_header(self, name: str) -> HeaderValue | None:
        return self.headers.get(name)

    def get_header_line(self, name: str) -> str | None:
        return self.headers.get_line(name)

    def has_header(self, name: str) -> bool:
        return self.headers.has(name)

    def set_header(self, name: str, value: HeaderValue) -> Response:
        self.headers.set(name, value)
        return self

    def append_header(self, name: str, value: HeaderValue) -> Response:
        self.headers.append(name, value)
        return self

    def remove_header(self, name: str) -> Response:
        self.headers.remove(name)
        return self

    def get_body(self) -> Any:
        if self.stream is not None:
            return self.stream
        return self.body

    def set_body(self, body: Any) -> Response:
        self.body = body
        return self

    def get(self, key: Any, default: Any = None) -> Any:
        """Look up a field of the body. Plain responses have no fields."""
        return default

    def __repr__(self) -> str:
        reason = f" {self.reason}" if self.reason else ""
        return f"<{type(self).__name__} [{self.status_code}{reason}]>"


class JsonResponse(Response):
    """
    Response whose body is decoded as JSON.

    A body that does not decode raises ``JsonDecodeError``; a missing field
    looked up through ``get()`` returns the default instead.
    """

    def parse_body(self, text: str) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            log.warning("Malformed JSON body in %s response: %s", self.status_code, exc.msg)
            raise JsonDecodeError(exc.msg, exc.doc, exc.pos) from exc

    def get(self, key: Any, default: Any = None) -> Any:
        body = self.body
        if isinstance(body, dict):
            return body.get(key, default)
        if isinstance(body, list) and isinstance(key, int) and not isinstance(key, bool):
            if key < 0:
                return default
            try:
                return body[key]
            except IndexError:
                return default
        return default

    def __contains__(self, key: object) -> bool:
        body = self.body
        if isinstance(body, dict):
            return key in body
        return False
