# Copyright (c) 2025 Tsutomu FUNADA
# This software is licensed for:
#   - Non-commercial use under the MIT License (see LICENSE-NC.txt)
#   - Commercial use requires a separate commercial license (contact author)
# You may not use this software for commercial purposes under the MIT License.

STRATEGY_NAME = "google-token"
"""str: Name the strategy registers under with the host."""

PROVIDER = "google"
"""str: Value of `provider` on every normalized profile."""

GOOGLE_AUTHORIZATION_URL = "https://accounts.google.com/o/oauth2/auth"
GOOGLE_TOKEN_URL = "https://accounts.google.com/o/oauth2/token"

# Not overridable
GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v2/userinfo"

ACCESS_TOKEN_KEY = "access_token"
REFRESH_TOKEN_KEY = "refresh_token"
