# Copyright (c) 2025 Tsutomu FUNADA
# This software is licensed for:
#   - Non-commercial use under the MIT License (see LICENSE-NC.txt)
#   - Commercial use requires a separate commercial license (contact author)
# You may not use this software for commercial purposes under the MIT License.

from http import HTTPStatus

from flask import Blueprint, g, jsonify, make_response

from auth.authenticator import Authenticator
from config.types import STRATEGY_NAME

auth_bp = Blueprint("auth", __name__)

authenticator = Authenticator()


@auth_bp.route("/google/token", methods=["GET", "POST"])
@authenticator.authenticate(STRATEGY_NAME)
def google_token_login():
    """Exchanges a Google access token for the application user.

    Returns:
        Response: JSON with the authenticated user and any verify info.
    """
    return make_response(
        jsonify({"status": "success", "user": g.user, "info": g.auth_info}),
        HTTPStatus.OK,
    )
