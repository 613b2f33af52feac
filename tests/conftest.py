from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from auth.google_token import GoogleTokenStrategy, StrategyOptions
from auth.request import InboundRequest

ADA_USERINFO = {
    "id": "42",
    "name": "Ada Lovelace",
    "family_name": "Lovelace",
    "given_name": "Ada",
    "email": "ada@example.com",
    "picture": "http://x/y.png",
}


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = ""):
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Stands in for requests.Session and records every GET."""

    def __init__(self, response: FakeResponse | None = None, exc: Exception | None = None):
        self.response = response or FakeResponse(200, json.dumps(ADA_USERINFO))
        self.exc = exc
        self.calls: list[tuple[str, dict]] = []

    def get(self, url: str, headers: dict | None = None, **kwargs):
        self.calls.append((url, headers or {}))
        if self.exc is not None:
            raise self.exc
        return self.response


class RecordingActions:
    def __init__(self):
        self.signals: list[tuple[str, Any]] = []

    def success(self, user, info=None):
        self.signals.append(("success", (user, info)))

    def fail(self, info=None):
        self.signals.append(("fail", info))

    def error(self, err):
        self.signals.append(("error", err))

    def as_actions(self):
        from auth.base import StrategyActions

        return StrategyActions(success=self.success, fail=self.fail, error=self.error)

    @property
    def only(self) -> tuple[str, Any]:
        assert len(self.signals) == 1, self.signals
        return self.signals[0]


def make_strategy(verify, session=None, **options) -> GoogleTokenStrategy:
    return GoogleTokenStrategy(
        StrategyOptions(client_id="client-id", client_secret="client-secret", **options),
        verify,
        session=session if session is not None else FakeSession(),
    )


def make_request(body: dict | None = None, query: dict | None = None, headers: dict | None = None, original: Any = None) -> InboundRequest:
    return InboundRequest(
        body=body,
        query=query or {},
        headers=headers or {},
        original=original,
    )


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def actions() -> RecordingActions:
    return RecordingActions()


@pytest.fixture
def accept_all():
    calls: list[tuple] = []

    def verify(*args):
        calls.append(args)
        done = args[-1]
        done(None, {"id": 1})

    verify.calls = calls
    return verify


@pytest.fixture
def transport_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")
