# Copyright (c) 2025 Tsutomu FUNADA
# This software is licensed for:
#   - Non-commercial use under the MIT License (see LICENSE-NC.txt)
#   - Commercial use requires a separate commercial license (contact author)
# You may not use this software for commercial purposes under the MIT License.

from typing import Callable

from auth.google_token import GoogleTokenStrategy, StrategyOptions
from config import settings


def build_options() -> StrategyOptions:
    return StrategyOptions(
        client_id=settings.GOOGLE_CLIENT_ID,
        client_secret=settings.GOOGLE_CLIENT_SECRET,
        authorization_url=settings.GOOGLE_AUTHORIZATION_URL,
        token_url=settings.GOOGLE_TOKEN_URL,
        callback_url=settings.GOOGLE_CALLBACK_URL,
        pass_req_to_callback=settings.PASS_REQ_TO_CALLBACK,
        skip_user_profile=settings.SKIP_USER_PROFILE,
    )


def get_google_token_strategy(verify: Callable[..., None]) -> GoogleTokenStrategy:
    """Builds the strategy from environment settings.

    Raises:
        ValueError: If GOOGLE_CLIENT_ID or GOOGLE_CLIENT_SECRET is not set.
    """
    return GoogleTokenStrategy(build_options(), verify)
