# Copyright (c) 2025 Tsutomu FUNADA
# This software is licensed for:
#   - Non-commercial use under the MIT License (see LICENSE-NC.txt)
#   - Commercial use requires a separate commercial license (contact author)
# You may not use this software for commercial purposes under the MIT License.

import os

from dotenv import load_dotenv

from config.types import GOOGLE_AUTHORIZATION_URL as DEFAULT_AUTHORIZATION_URL
from config.types import GOOGLE_TOKEN_URL as DEFAULT_TOKEN_URL
from utils.misc import str_to_bool

load_dotenv(dotenv_path=os.getenv("DOTENV_PATH", ".env"))

# 運用時は下記のパラメータを適切に修正しなければならない
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "http://localhost")
FLASK_DEBUG = str_to_bool(os.getenv("FLASK_DEBUG", "False"))
PORT = int(os.getenv("PORT", 4001))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Google OAuth client. Checked when the strategy is built, not here.
GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID")
GOOGLE_CLIENT_SECRET = os.getenv("GOOGLE_CLIENT_SECRET")
GOOGLE_CALLBACK_URL = os.getenv("GOOGLE_CALLBACK_URL")

GOOGLE_AUTHORIZATION_URL = os.getenv(
    "GOOGLE_AUTHORIZATION_URL", DEFAULT_AUTHORIZATION_URL
)
GOOGLE_TOKEN_URL = os.getenv("GOOGLE_TOKEN_URL", DEFAULT_TOKEN_URL)

# Strategy behaviour
PASS_REQ_TO_CALLBACK = str_to_bool(os.getenv("PASS_REQ_TO_CALLBACK", "false"))
SKIP_USER_PROFILE = str_to_bool(os.getenv("SKIP_USER_PROFILE", "false"))
