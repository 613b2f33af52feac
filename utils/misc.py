# Copyright (c) 2025 Tsutomu FUNADA
# This software is licensed for:
#   - Non-commercial use under the MIT License (see LICENSE-NC.txt)
#   - Commercial use requires a separate commercial license (contact author)
# You may not use this software for commercial purposes under the MIT License.

from typing import Optional


def str_to_bool(value: Optional[str], default: bool = False) -> bool:
    """Parses an environment flag such as "true", "1", "yes" or "on"."""
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ["true", "1", "yes", "on"]
