# Copyright (c) 2025 Tsutomu FUNADA
# This software is licensed for:
#   - Non-commercial use under the MIT License (see LICENSE-NC.txt)
#   - Commercial use requires a separate commercial license (contact author)
# You may not use this software for commercial purposes under the MIT License.

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class InboundRequest:
    """Framework-neutral view of an inbound authentication request.

    `body` is None when the request carries no parsed body at all.
    `original` keeps the framework request object so it can be handed to
    verify callbacks that asked for it.
    """

    body: Optional[Mapping[str, Any]]
    query: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, Any] = field(default_factory=dict)
    original: Any = None

    def lookup(self, key: str) -> Optional[Any]:
        """Returns the first truthy value for `key` from body, query, then headers."""
        for source in (self.body or {}, self.query, self.headers):
            value = source.get(key)
            if value:
                return value
        return None

    @classmethod
    def from_flask(cls, request) -> "InboundRequest":
        """Builds an InboundRequest from a Flask/Werkzeug request.

        JSON requests expose the decoded object as the body. An empty JSON
        payload is an empty body; a payload that does not decode to an object
        is no body. Any other request exposes its form fields, which is an
        empty mapping when none were sent.

        WSGI servers (Werkzeug, Gunicorn) and nginx drop header names that
        contain underscores, so header tokens only arrive as `Access-Token`
        and `Refresh-Token`. Werkzeug maps both spellings to the same key.
        """
        if request.is_json:
            if not request.get_data(cache=True):
                body = {}
            else:
                payload = request.get_json(silent=True)
                body = payload if isinstance(payload, dict) else None
        else:
            body = request.form.to_dict()

        return cls(
            body=body,
            query=request.args.to_dict(),
            headers=request.headers,
            original=request,
        )
