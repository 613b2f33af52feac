from __future__ import annotations

import pytest
from flask import Flask, g, jsonify

from auth.authenticator import Authenticator
from auth.base import AuthStrategy


class ScriptedStrategy(AuthStrategy):
    """Signals a fixed outcome and records the requests it saw."""

    def __init__(self, name: str, signal: str, payload=None):
        self.name = name
        self.signal = signal
        self.payload = payload
        self.requests = []

    def authenticate(self, req, actions):
        self.requests.append(req)
        if self.signal == "success":
            actions.success(*self.payload)
        elif self.signal == "fail":
            actions.fail(self.payload)
        elif self.signal == "error":
            actions.error(self.payload)
        elif self.signal == "twice":
            actions.fail({"message": "first"})
            actions.success({"id": 1}, None)


def _app(strategy) -> Flask:
    authenticator = Authenticator().use(strategy)
    app = Flask(__name__)

    @app.route("/protected", methods=["GET", "POST"])
    @authenticator.authenticate(strategy.name)
    def protected():
        return jsonify({"user": g.user, "info": g.auth_info})

    return app


def test_use_registers_under_strategy_name():
    strategy = ScriptedStrategy("scripted", "fail")
    authenticator = Authenticator().use(strategy)

    assert authenticator.get("scripted") is strategy
    assert authenticator.names() == ["scripted"]


def test_use_accepts_explicit_name():
    authenticator = Authenticator().use(ScriptedStrategy("scripted", "fail"), name="alias")

    assert authenticator.names() == ["alias"]


def test_unknown_strategy_raises_key_error():
    with pytest.raises(KeyError):
        Authenticator().get("missing")


def test_success_exposes_user_to_the_view():
    strategy = ScriptedStrategy("scripted", "success", ({"id": 7}, {"scope": "email"}))

    resp = _app(strategy).test_client().post("/protected", json={"access_token": "t"})

    assert resp.status_code == 200
    assert resp.get_json() == {"user": {"id": 7}, "info": {"scope": "email"}}
    assert strategy.requests[0].body == {"access_token": "t"}


def test_fail_returns_401_with_info():
    strategy = ScriptedStrategy("scripted", "fail", {"message": "denied"})

    resp = _app(strategy).test_client().get("/protected")

    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Unauthorized", "info": {"message": "denied"}}


def test_error_returns_500_without_leaking_cause():
    strategy = ScriptedStrategy("scripted", "error", RuntimeError("secret detail"))

    resp = _app(strategy).test_client().get("/protected")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Authentication error"}


def test_only_first_outcome_counts():
    resp = _app(ScriptedStrategy("scripted", "twice")).test_client().get("/protected")

    assert resp.status_code == 401
    assert resp.get_json()["info"] == {"message": "first"}


def test_strategy_without_outcome_is_rejected():
    authenticator = Authenticator().use(ScriptedStrategy("silent", "none"))

    with pytest.raises(RuntimeError):
        authenticator.run("silent", None)
