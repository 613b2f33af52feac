# Copyright (c) 2025 Tsutomu FUNADA
# This software is licensed for:
#   - Non-commercial use under the MIT License (see LICENSE-NC.txt)
#   - Commercial use requires a separate commercial license (contact author)
# You may not use this software for commercial purposes under the MIT License.

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from api.auth_api import auth_bp, authenticator
from api.health import health_bp
from auth.base import AuthStrategy
from auth.factory import get_google_token_strategy
from auth.users import verify_google_user
from config.settings import ALLOWED_ORIGINS, FLASK_DEBUG, LOG_LEVEL, PORT


def create_app(strategy: Optional[AuthStrategy] = None) -> Flask:
    """Builds the Flask application.

    Args:
        strategy (Optional[AuthStrategy]): Strategy to register. Defaults to the
            Google token strategy configured from the environment.
    """
    app = Flask(__name__)

    # Enable Cross-Origin Resource Sharing (CORS)
    CORS(
        app,
        supports_credentials=True,
        resources={
            r"/*": {
                "origins": ALLOWED_ORIGINS,
                "methods": ["GET", "POST", "OPTIONS"],
                "allow_headers": [
                    "Content-Type",
                    "Authorization",
                    "Access-Token",
                    "Refresh-Token",
                ],
            }
        },
    )

    authenticator.use(strategy or get_google_token_strategy(verify_google_user))

    app.register_blueprint(auth_bp, url_prefix="/v1/auth")
    app.register_blueprint(health_bp, url_prefix="/v1")
    return app


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL)
    create_app().run(host="0.0.0.0", port=PORT, debug=FLASK_DEBUG)
