from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import Any

import httpx

from courier.models import JsonResponse, Response

log = logging.getLogger(__name__)

# Per-request options accepted by httpx.Client.send rather than build_request.
_SEND_OPTIONS = ("auth", "follow_redirects")

_BODILESS_STATUSES = frozenset({204, 304})


class Method(str, enum.Enum):
    GET = "GET"
    HEAD = "HEAD"
    PUT = "PUT"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class Client:
    """
    Synchronous client that wraps httpx responses into Response objects.

    Responses whose Content-Type contains ``application/json`` come back as
    JsonResponse, everything else as a plain Response. 4xx responses are
    returned like any other; transport failures and 5xx responses raise.

    Args:
        base_url: Prefix concatenated to every endpoint as-is
        callback: Called with every parsed response
        http_errors: Let the engine raise for 4xx/5xx statuses (4xx are recovered)
        stream: Request lazily streamed bodies and drain them into the response
        **options: Passed through to ``httpx.Client`` (transport, headers, auth, timeout...)
    """

    def __init__(
        self,
        base_url: str | None = None,
        callback: Callable[[Response], Any] | None = None,
        http_errors: bool = True,
        stream: bool = False,
        **options: Any,
    ) -> None:
        self.base_url = base_url
        self.callback = callback
        self.http_errors = http_errors
        self.stream = stream
        self.client = httpx.Client(**options)

    def _send(self, method: str, url: str, options: dict[str, Any]) -> httpx.Response:
        send_options = {key: options.pop(key) for key in _SEND_OPTIONS if key in options}
        request = self.client.build_request(method, url, **options)
        return self.client.send(request, stream=self.stream, **send_options)

    def request(self, method: str, endpoint: str = "", **options: Any) -> Response:
        """
        Make an HTTP request and parse the response.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: Appended to the configured base URL
            **options: Per-request httpx options (params, headers, json, content...)

        Returns:
            JsonResponse for JSON content, Response otherwise
        """
        url = (self.base_url or "") + endpoint
        try:
            raw = self._send(method, url, dict(options))
            if self.http_errors and raw.is_error:
                raw.raise_for_status()
        except httpx.HTTPStatusError as exc:
            if not exc.response.is_client_error:
                exc.response.close()
                raise
            log.debug("%s %s returned client error %s", method, url, exc.response.status_code)
            raw = exc.response

        log.debug("%s %s -> %s", method, url, raw.status_code)
        response = self.parse_response(raw)

        if self.callback is not None:
            self.callback(response)

        return response

    def parse_response(self, raw: httpx.Response) -> Response:
        # HEAD, 204 and 304 carry no body whatever their Content-Type says.
        if raw.request.method == Method.HEAD.value or raw.status_code in _BODILESS_STATUSES:
            return Response(raw, stream=self.stream)
        content_type = raw.headers.get("Content-Type") or ""
        if "application/json" in content_type:
            return JsonResponse(raw, stream=self.stream)
        return Response(raw, stream=self.stream)

    def get(self, endpoint: str = "", **options: Any) -> Response:
        return self.request(Method.GET.value, endpoint, **options)

    def head(self, endpoint: str = "", **options: Any) -> Response:
        return self.request(Method.HEAD.value, endpoint, **options)

    def put(self, endpoint: str = "", **options: Any) -> Response:
        return self.request(Method.PUT.value, endpoint, **options)

    def post(self, endpoint: str = "", **options: Any) -> Response:
        return self.request(Method.POST.value, endpoint, **options)

    def patch(self, endpoint: str = "", **options: Any) -> Response:
        return self.request(Method.PATCH.value, endpoint, **options)

    def delete(self, endpoint: str = "", **options: Any) -> Response:
        return self.request(Method.DELETE.value, endpoint, **options)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
