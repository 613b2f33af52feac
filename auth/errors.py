# Copyright (c) 2025 Tsutomu FUNADA
# This software is licensed for:
#   - Non-commercial use under the MIT License (see LICENSE-NC.txt)
#   - Commercial use requires a separate commercial license (contact author)
# You may not use this software for commercial purposes under the MIT License.

from typing import Any, Optional


class OAuth2RequestError(Exception):
    """Raised by `OAuth2Client` when the provider call does not succeed."""

    def __init__(self, status_code: Optional[int], data: Any = None):
        self.status_code = status_code
        self.data = data
        super().__init__(f"OAuth2 request failed (status={status_code})")


class InternalOAuthError(Exception):
    """Wraps an error that occurred while talking to the identity provider.

    Args:
        message (str): Human readable description.
        oauth_error (Exception): The underlying cause.
    """

    def __init__(self, message: str, oauth_error: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.oauth_error = oauth_error
        self.__cause__ = oauth_error

    def __str__(self) -> str:
        if self.oauth_error is None:
            return self.message
        return f"{self.message}: {self.oauth_error}"
