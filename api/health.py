# Copyright (c) 2025 Tsutomu FUNADA
# This software is licensed for:
#   - Non-commercial use under the MIT License (see LICENSE-NC.txt)
#   - Commercial use requires a separate commercial license (contact author)
# You may not use this software for commercial purposes under the MIT License.

from http import HTTPStatus

from flask import Blueprint, jsonify, make_response

from api.auth_api import authenticator

health_bp = Blueprint("health", __name__)


@health_bp.route("/health", methods=["GET"])
def health_check():
    """Health check endpoint.

    Returns:
        Response: JSON status plus the names of the registered strategies.
    """
    return make_response(
        jsonify({"status": "healthy", "strategies": authenticator.names()}),
        HTTPStatus.OK,
    )
