from __future__ import annotations

from flask import Flask

from auth.request import InboundRequest


app = Flask(__name__)


def test_lookup_prefers_body_then_query_then_headers():
    req = InboundRequest(
        body={"access_token": ""},
        query={"access_token": "q"},
        headers={"access_token": "h"},
    )

    assert req.lookup("access_token") == "q"
    assert req.lookup("refresh_token") is None


def test_lookup_tolerates_missing_body():
    req = InboundRequest(body=None, headers={"access_token": "h"})

    assert req.lookup("access_token") == "h"


def test_from_flask_json_body():
    with app.test_request_context(
        "/login?refresh_token=r", method="POST", json={"access_token": "a"}
    ) as ctx:
        req = InboundRequest.from_flask(ctx.request)

    assert req.body == {"access_token": "a"}
    assert req.query == {"refresh_token": "r"}
    assert req.original is not None


def test_from_flask_malformed_json_has_no_body():
    with app.test_request_context(
        "/login", method="POST", data="{not json", content_type="application/json"
    ) as ctx:
        req = InboundRequest.from_flask(ctx.request)

    assert req.body is None


def test_from_flask_json_array_has_no_body():
    with app.test_request_context("/login", method="POST", json=["a"]) as ctx:
        req = InboundRequest.from_flask(ctx.request)

    assert req.body is None


def test_from_flask_form_body_and_headers():
    with app.test_request_context(
        "/login",
        method="POST",
        data={"access_token": "form-token"},
        headers={"refresh_token": "header-refresh"},
    ) as ctx:
        req = InboundRequest.from_flask(ctx.request)
        refresh_token = req.lookup("refresh_token")

    assert req.body == {"access_token": "form-token"}
    assert refresh_token == "header-refresh"


def test_from_flask_get_has_empty_body():
    with app.test_request_context("/login?access_token=q") as ctx:
        req = InboundRequest.from_flask(ctx.request)

    assert req.body == {}
    assert req.lookup("access_token") == "q"


def test_from_flask_empty_json_is_empty_body():
    with app.test_request_context(
        "/login?access_token=q", method="POST", data="", content_type="application/json"
    ) as ctx:
        req = InboundRequest.from_flask(ctx.request)

    assert req.body == {}
    assert req.lookup("access_token") == "q"


def test_from_flask_hyphenated_token_headers():
    with app.test_request_context(
        "/login", headers={"Access-Token": "a", "Refresh-Token": "r"}
    ) as ctx:
        req = InboundRequest.from_flask(ctx.request)
        tokens = (req.lookup("access_token"), req.lookup("refresh_token"))

    assert tokens == ("a", "r")
