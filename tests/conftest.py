"""Pytest configuration and fixtures."""

from collections import deque

import httpx
import pytest


class MockServer:
    """Plays back queued responses and records every request it receives."""

    def __init__(self):
        self.queue: deque[httpx.Response] = deque()
        self.history: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self.handle)

    def append(self, *responses: httpx.Response) -> None:
        self.queue.extend(responses)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.history.append(request)
        if not self.queue:
            raise AssertionError(f"No queued response for {request.method} {request.url}")
        return self.queue.popleft()

    def assert_request_sent(self, method: str, path: str) -> httpx.Request:
        assert len(self.history) > 0
        request = self.history.pop(0)
        assert request.method == method
        assert request.url.path == path
        return request


@pytest.fixture
def server():
    """Create a mock server to plug into a Client as its transport."""
    return MockServer()


@pytest.fixture
def html_response():
    """Create a raw text/html response with a repeated header."""
    return httpx.Response(
        200,
        headers=[
            ("Content-Type", "text/html"),
            ("Server", "Apache"),
            ("Server", "Courier"),
        ],
        content='<html lang="en"><p>Hello, World!</p></html>',
    )


@pytest.fixture
def json_response():
    """Create a raw application/json response."""
    return httpx.Response(200, json={"foo": "bar", "items": [1, 2, 3]})
