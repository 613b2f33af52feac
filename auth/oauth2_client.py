# Copyright (c) 2025 Tsutomu FUNADA
# This software is licensed for:
#   - Non-commercial use under the MIT License (see LICENSE-NC.txt)
#   - Commercial use requires a separate commercial license (contact author)
# You may not use this software for commercial purposes under the MIT License.

import logging
from typing import Optional

import requests

from auth.errors import OAuth2RequestError


class OAuth2Client:
    """Minimal OAuth 2.0 client holding the provider credentials and endpoints.

    Only authenticated resource GETs are performed; the authorization and
    token endpoints are kept for callers that need them.
    """

    def __init__(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        authorization_url: str,
        token_url: str,
        session: Optional[requests.Session] = None,
    ):
        if not client_id:
            raise ValueError("OAuth2Client requires a client_id option")
        if not client_secret:
            raise ValueError("OAuth2Client requires a client_secret option")
        if not authorization_url:
            raise ValueError("OAuth2Client requires an authorization_url option")
        if not token_url:
            raise ValueError("OAuth2Client requires a token_url option")

        self.client_id = client_id
        self.client_secret = client_secret
        self.authorization_url = authorization_url
        self.token_url = token_url
        self.session = session or requests.Session()

    def get(self, url: str, access_token: Optional[str]) -> str:
        """
        Performs a GET against a protected resource.

        Args:
            url (str): Resource URL.
            access_token (Optional[str]): Bearer token sent in the Authorization header.

        Returns:
            str: The response body, undecoded.

        Raises:
            OAuth2RequestError: On transport failure or a non-2xx response.
        """
        headers = {"Authorization": f"Bearer {access_token or ''}"}
        try:
            resp = self.session.get(url, headers=headers)
        except requests.RequestException as e:
            logging.error(f"[OAuth2Client] GET {url} failed: {e}")
            raise OAuth2RequestError(None, str(e)) from e

        if not 200 <= resp.status_code < 300:
            logging.warning(f"[OAuth2Client] GET {url} returned {resp.status_code}")
            raise OAuth2RequestError(resp.status_code, resp.text)

        return resp.text
