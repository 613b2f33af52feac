# Copyright (c) 2025 Tsutomu FUNADA
# This software is licensed for:
#   - Non-commercial use under the MIT License (see LICENSE-NC.txt)
#   - Commercial use requires a separate commercial license (contact author)
# You may not use this software for commercial purposes under the MIT License.

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class ValueObject:
    """Single-value wrapper used for profile emails and photos."""

    value: Optional[str]


@dataclass(frozen=True)
class ProfileName:
    """Structured decomposition of the user's name."""

    family_name: Optional[str] = None
    given_name: Optional[str] = None
    middle_name: Optional[str] = None


@dataclass(frozen=True)
class NormalizedProfile:
    """Provider-agnostic user profile built from a userinfo response.

    Built once per authentication attempt and never mutated afterwards.
    """

    provider: str  # Identifier of the issuing provider
    id: Optional[str]  # Provider-assigned subject identifier
    display_name: Optional[str]  # Full name
    name: ProfileName = field(default_factory=ProfileName)
    gender: Optional[str] = None
    emails: tuple[ValueObject, ...] = ()
    photos: tuple[ValueObject, ...] = ()
    raw: str = ""  # Unparsed response body
    json: Mapping[str, Any] = field(default_factory=dict)  # Parsed response

    def __post_init__(self):
        if not isinstance(self.json, MappingProxyType):
            object.__setattr__(self, "json", MappingProxyType(dict(self.json)))

    def to_dict(self) -> dict[str, Any]:
        """Returns the profile in the conventional camelCase dict shape."""
        return {
            "provider": self.provider,
            "id": self.id,
            "displayName": self.display_name,
            "name": {
                "familyName": self.name.family_name,
                "givenName": self.name.given_name,
                "middleName": self.name.middle_name,
            },
            "gender": self.gender,
            "emails": [{"value": email.value} for email in self.emails],
            "photos": [{"value": photo.value} for photo in self.photos],
            "_raw": self.raw,
            "_json": dict(self.json),
        }
