# ABOUTME: Shared pytest fixtures for linkdapi tests.
# ABOUTME: Provides fake HTTP responses, a mocked transport session, and a ready client.

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from linkdapi.client import LinkdAPI

ResponseFactory = Callable[..., MagicMock]


@pytest.fixture
def make_response() -> ResponseFactory:
    """Return a factory for fake requests.Response objects."""

    def _make(
        status_code: int = 200,
        json_body: Any = None,
        text: str | None = None,
        reason: str = "OK",
    ) -> MagicMock:
        """Build a streamed response whose body is ``text``, or ``json_body`` encoded."""
        if text is None:
            text = json.dumps(json_body if json_body is not None else {})
        content = text.encode("utf-8")

        response = MagicMock()
        response.status_code = status_code
        response.ok = status_code < 400
        response.reason = reason
        response.encoding = "utf-8"
        response.iter_content.return_value = [content[:4], content[4:]]
        return response

    return _make


@pytest.fixture
def mock_session(make_response: ResponseFactory) -> MagicMock:
    """Create a mock transport session that answers 200 with a small JSON body."""
    session = MagicMock()
    session.request.return_value = make_response(json_body={"success": True})
    return session


@pytest.fixture
def mock_sleep():
    """Patch the backoff sleep so retries run instantly."""
    with patch("linkdapi.http.executor.time.sleep") as sleep:
        yield sleep


@pytest.fixture
def client(mock_session: MagicMock) -> LinkdAPI:
    """Create a client wired to the mock session with retries disabled."""
    return LinkdAPI("test-api-key", max_retries=0, session=mock_session)

