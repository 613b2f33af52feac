# Copyright (c) 2025 Tsutomu FUNADA
# This software is licensed for:
#   - Non-commercial use under the MIT License (see LICENSE-NC.txt)
#   - Commercial use requires a separate commercial license (contact author)
# You may not use this software for commercial purposes under the MIT License.

import logging
import uuid
from typing import Any, Callable, Optional

from models.types import NormalizedProfile

# 固定の名前空間（アプリ全体で統一するため）
NAMESPACE_OAUTH = uuid.UUID("12345678-1234-5678-1234-567812345678")


def get_user_id(profile: NormalizedProfile) -> str:
    """Derives a stable 36 character user_id from the provider subject."""
    if not profile.id:
        logging.error(
            f"[get_user_id] Missing subject id for provider: {profile.provider}"
        )
        raise ValueError(f"Missing user id for provider: {profile.provider}")
    return str(uuid.uuid5(NAMESPACE_OAUTH, f"{profile.provider}:{profile.id}"))


def verify_google_user(
    access_token: Optional[str],
    refresh_token: Optional[str],
    profile: Optional[NormalizedProfile],
    done: Callable[..., None],
) -> None:
    """Default verify callback: maps a Google profile to an application user."""
    if profile is None:
        return done(None, False, {"message": "User profile unavailable"})

    user: dict[str, Any] = {
        "id": get_user_id(profile),
        "provider": profile.provider,
        "provider_id": profile.id,
        "name": profile.display_name,
        "email": profile.emails[0].value if profile.emails else None,
        "picture": profile.photos[0].value if profile.photos else None,
    }
    done(None, user)
