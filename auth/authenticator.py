# Copyright (c) 2025 Tsutomu FUNADA
# This software is licensed for:
#   - Non-commercial use under the MIT License (see LICENSE-NC.txt)
#   - Commercial use requires a separate commercial license (contact author)
# You may not use this software for commercial purposes under the MIT License.

import logging
from functools import wraps
from http import HTTPStatus
from typing import Any, Optional

from flask import g, jsonify, make_response, request

from auth.base import AuthStrategy, StrategyActions
from auth.request import InboundRequest


class _Outcome:
    """Collects the single outcome signalled by a strategy."""

    def __init__(self):
        self.kind: Optional[str] = None
        self.user: Any = None
        self.info: Any = None
        self.error: Optional[BaseException] = None

    def _settle(self, kind: str) -> bool:
        if self.kind is not None:
            logging.warning(
                f"[Authenticator] Ignoring '{kind}' after '{self.kind}' was signalled"
            )
            return False
        self.kind = kind
        return True

    def success(self, user: Any, info: Any = None) -> None:
        if self._settle("success"):
            self.user = user
            self.info = info

    def fail(self, info: Any = None) -> None:
        if self._settle("fail"):
            self.info = info

    def signal_error(self, err: BaseException) -> None:
        if self._settle("error"):
            self.error = err

    def actions(self) -> StrategyActions:
        return StrategyActions(
            success=self.success, fail=self.fail, error=self.signal_error
        )


class Authenticator:
    """Registry of strategies plus a Flask decorator that runs them."""

    def __init__(self):
        self._strategies: dict[str, AuthStrategy] = {}

    def use(self, strategy: AuthStrategy, name: Optional[str] = None) -> "Authenticator":
        name = name or getattr(strategy, "name", None)
        if not name:
            raise ValueError("Authentication strategies must have a name")
        self._strategies[name] = strategy
        return self

    def get(self, name: str) -> AuthStrategy:
        strategy = self._strategies.get(name)
        if strategy is None:
            raise KeyError(f"Unknown authentication strategy: {name}")
        return strategy

    def names(self) -> list[str]:
        return sorted(self._strategies)

    def run(self, name: str, req: InboundRequest) -> _Outcome:
        outcome = _Outcome()
        self.get(name).authenticate(req, outcome.actions())
        if outcome.kind is None:
            raise RuntimeError(f"Strategy '{name}' finished without an outcome")
        return outcome

    def authenticate(self, name: str):
        """Protects a Flask view with the named strategy.

        On success the user is available as `g.user` (and `g.auth_info`).
        """

        def decorator(f):
            @wraps(f)
            def decorated_function(*args, **kwargs):
                outcome = self.run(name, InboundRequest.from_flask(request))

                if outcome.kind == "error":
                    logging.error(
                        f"[Authenticator] Strategy '{name}' errored on {request.path}: {outcome.error}"
                    )
                    return make_response(
                        jsonify({"error": "Authentication error"}),
                        HTTPStatus.INTERNAL_SERVER_ERROR,
                    )

                if outcome.kind == "fail":
                    return make_response(
                        jsonify({"error": "Unauthorized", "info": outcome.info}),
                        HTTPStatus.UNAUTHORIZED,
                    )

                g.user = outcome.user
                g.auth_info = outcome.info
                return f(*args, **kwargs)

            return decorated_function

        return decorator
