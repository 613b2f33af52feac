# Copyright (c) 2025 Tsutomu FUNADA
# This software is licensed for:
#   - Non-commercial use under the MIT License (see LICENSE-NC.txt)
#   - Commercial use requires a separate commercial license (contact author)
# You may not use this software for commercial purposes under the MIT License.

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

import requests

from auth.base import AuthStrategy, StrategyActions
from auth.errors import InternalOAuthError, OAuth2RequestError
from auth.oauth2_client import OAuth2Client
from auth.request import InboundRequest
from auth.skip_profile import SkipUserProfile
from config.types import (
    ACCESS_TOKEN_KEY,
    GOOGLE_AUTHORIZATION_URL,
    GOOGLE_TOKEN_URL,
    GOOGLE_USERINFO_URL,
    PROVIDER,
    REFRESH_TOKEN_KEY,
    STRATEGY_NAME,
)
from models.types import NormalizedProfile, ProfileName, ValueObject


@dataclass(frozen=True)
class StrategyOptions:
    client_id: Optional[str]
    client_secret: Optional[str]
    authorization_url: Optional[str] = None
    token_url: Optional[str] = None
    callback_url: Optional[str] = None  # Unused by the token flow
    pass_req_to_callback: bool = False
    skip_user_profile: Union[bool, SkipUserProfile] = False


class GoogleTokenStrategy(AuthStrategy):
    """Authenticates requests carrying a Google OAuth 2.0 access token.

    The token is read from the request body, query string or headers and
    exchanged for the user's profile at Google's userinfo endpoint.

    Applications supply a `verify` callback which accepts `access_token`,
    `refresh_token`, `profile` and `done` (preceded by the request when
    `pass_req_to_callback` is set) and finishes by calling
    `done(err, user, info)`. `user` should be falsy when the credentials
    are not accepted.

    Example:
        def verify(access_token, refresh_token, profile, done):
            user = users.find_or_create(profile.id)
            done(None, user)

        strategy = GoogleTokenStrategy(
            StrategyOptions(client_id="123-456-789", client_secret="shhh"),
            verify,
        )
    """

    def __init__(
        self,
        options: StrategyOptions,
        verify: Callable[..., None],
        session: Optional[requests.Session] = None,
    ):
        if not callable(verify):
            raise TypeError("GoogleTokenStrategy requires a verify callback")

        self.options = StrategyOptions(
            client_id=options.client_id,
            client_secret=options.client_secret,
            authorization_url=options.authorization_url or GOOGLE_AUTHORIZATION_URL,
            token_url=options.token_url or GOOGLE_TOKEN_URL,
            callback_url=options.callback_url,
            pass_req_to_callback=bool(options.pass_req_to_callback),
            skip_user_profile=SkipUserProfile.coerce(options.skip_user_profile),
        )
        self._oauth2 = OAuth2Client(
            self.options.client_id,
            self.options.client_secret,
            self.options.authorization_url,
            self.options.token_url,
            session=session,
        )
        self.verify = verify
        self.name = STRATEGY_NAME

    def authenticate(self, req: InboundRequest, actions: StrategyActions) -> None:
        """Runs one authentication attempt and signals exactly one outcome."""
        if req.query.get("error"):
            # The OAuth error code/description in the query is not propagated.
            logging.warning("[GoogleTokenStrategy] Request carries an OAuth error")
            return actions.fail(None)

        if req.body is None:
            logging.warning("[GoogleTokenStrategy] Request has no parsed body")
            return actions.fail(None)

        access_token = req.lookup(ACCESS_TOKEN_KEY)
        refresh_token = req.lookup(REFRESH_TOKEN_KEY)

        try:
            profile = self.load_user_profile(access_token)
        except Exception as e:
            logging.error(f"[GoogleTokenStrategy] Loading user profile failed: {e}")
            return actions.error(e)

        settled = False

        def verified(err: Optional[BaseException] = None, user: Any = None, info: Any = None):
            nonlocal settled
            if settled:
                logging.warning("[GoogleTokenStrategy] verify completed more than once")
                return
            settled = True

            if err:
                logging.error(f"[GoogleTokenStrategy] verify reported an error: {err}")
                return actions.error(err)
            if not user:
                logging.info(f"[GoogleTokenStrategy] verify rejected the user: {info}")
                return actions.fail(info)
            actions.success(user, info)

        try:
            if self.options.pass_req_to_callback:
                self.verify(req.original, access_token, refresh_token, profile, verified)
            else:
                self.verify(access_token, refresh_token, profile, verified)
        except Exception as e:
            if settled:
                raise
            verified(e)

    def user_profile(self, access_token: Optional[str]) -> NormalizedProfile:
        """
        Retrieves the user's profile from Google.

        Raises:
            InternalOAuthError: If the userinfo request fails.
            json.JSONDecodeError: If the response body is not valid JSON.
        """
        try:
            body = self._oauth2.get(GOOGLE_USERINFO_URL, access_token)
        except OAuth2RequestError as e:
            raise InternalOAuthError("failed to fetch user profile", e) from e

        data = json.loads(body)
        if not isinstance(data, dict):
            raise ValueError("userinfo response is not a JSON object")

        return NormalizedProfile(
            provider=PROVIDER,
            id=data.get("id"),
            display_name=data.get("name"),
            name=ProfileName(
                family_name=data.get("family_name"),
                given_name=data.get("given_name"),
                middle_name=data.get("middle_name"),
            ),
            gender=data.get("gender"),
            emails=(ValueObject(data.get("email")),),
            photos=(ValueObject(data.get("picture")),),
            raw=body,
            json=data,
        )

    def load_user_profile(self, access_token: Optional[str]) -> Optional[NormalizedProfile]:
        """Returns the profile, or None when the skip setting bypasses the fetch."""
        if self.options.skip_user_profile.should_skip(access_token):
            logging.debug("[GoogleTokenStrategy] Skipping user profile fetch")
            return None
        return self.user_profile(access_token)
