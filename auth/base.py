# Copyright (c) 2025 Tsutomu FUNADA
# This software is licensed for:
#   - Non-commercial use under the MIT License (see LICENSE-NC.txt)
#   - Commercial use requires a separate commercial license (contact author)
# You may not use this software for commercial purposes under the MIT License.

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

from auth.request import InboundRequest


@dataclass(frozen=True)
class StrategyActions:
    """Outcome signals supplied by the host for a single authentication attempt.

    Exactly one of them is invoked per call to `AuthStrategy.authenticate`.
    """

    success: Callable[[Any, Optional[Any]], None]
    fail: Callable[[Optional[Any]], None]
    error: Callable[[BaseException], None]


class AuthStrategy(ABC):
    name: str

    @abstractmethod
    def authenticate(self, req: InboundRequest, actions: StrategyActions) -> None:
        pass
