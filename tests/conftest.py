"""Pytest configuration and fixtures."""

import json
import logging

import httpx
import pytest


def pull_request_payload(body: str | None = "Fixes #4") -> dict:
    """A trimmed pull_request webhook payload."""
    return {
        "action": "closed",
        "number": 4,
        "pull_request": {
            "number": 4,
            "title": "Add widgets",
            "body": body,
            "state": "closed",
            "merged": True,
            "head": {"sha": "abc123", "ref": "feature/widgets"},
            "base": {"sha": "def456", "ref": "main"},
            "user": {"login": "octocat", "id": 1},
        },
        "repository": {"id": 42, "full_name": "acme/widgets", "name": "widgets"},
        "sender": {"login": "octocat", "id": 1, "type": "User"},
    }


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it handles."""

    def __init__(self, status_code: int = 201, json_body: dict | None = None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.json_body = json_body if json_body is not None else {"id": 1}
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.json_body)

    def payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def event_file(tmp_path):
    """Write a pull_request event with body 'Fixes #4' and return its path."""
    path = tmp_path / "event.json"
    path.write_text(json.dumps(pull_request_payload()))
    return path


@pytest.fixture
def transport():
    """A transport that accepts every request with 201 Created."""
    return RecordingTransport()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging between tests."""
    yield
    logger = logging.getLogger("semver_release")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_event_file(tmp_path):
    """Factory writing arbitrary event content to a file."""

    def _make(content, name: str = "custom_event.json"):
        path = tmp_path / name
        if isinstance(content, (dict, list)):
            content = json.dumps(content)
        path.write_text(content)
        return path

    return _make


@pytest.fixture
def make_transport():
    """Factory for transports answering with a fixed status and body."""
    return RecordingTransport


@pytest.fixture
def make_payload():
    """Factory for pull_request payloads with a given body."""
    return pull_request_payload


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings from the environment for every test."""
    from semver_release.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
