# Copyright (c) 2025 Tsutomu FUNADA
# This software is licensed for:
#   - Non-commercial use under the MIT License (see LICENSE-NC.txt)
#   - Commercial use requires a separate commercial license (contact author)
# You may not use this software for commercial purposes under the MIT License.

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

SkipDone = Callable[[Optional[BaseException], bool], None]
SyncSkipPredicate = Callable[[Optional[str]], Any]
AsyncSkipPredicate = Callable[[Optional[str], SkipDone], None]


class SkipMode(Enum):
    """Enum representing how the profile-skip decision is made."""

    ALWAYS = "always"
    SYNC = "sync"
    ASYNC = "async"


@dataclass(frozen=True)
class SkipUserProfile:
    """Decides, per authentication attempt, whether the profile fetch is bypassed.

    Build one with `always`, `when` or `when_async`. The variant is fixed at
    configuration time.
    """

    mode: SkipMode
    flag: bool = False
    predicate: Optional[Callable[..., Any]] = None

    @classmethod
    def always(cls, flag: bool) -> "SkipUserProfile":
        return cls(mode=SkipMode.ALWAYS, flag=bool(flag))

    @classmethod
    def when(cls, predicate: SyncSkipPredicate) -> "SkipUserProfile":
        """`predicate(access_token)` returns a truthy value to skip."""
        if not callable(predicate):
            raise TypeError("skip predicate must be callable")
        return cls(mode=SkipMode.SYNC, predicate=predicate)

    @classmethod
    def when_async(cls, predicate: AsyncSkipPredicate) -> "SkipUserProfile":
        """`predicate(access_token, done)` reports through `done(err, skip)`."""
        if not callable(predicate):
            raise TypeError("skip predicate must be callable")
        return cls(mode=SkipMode.ASYNC, predicate=predicate)

    @classmethod
    def coerce(cls, value: Union[bool, "SkipUserProfile", None]) -> "SkipUserProfile":
        if isinstance(value, SkipUserProfile):
            return value
        if value is None or isinstance(value, bool):
            return cls.always(bool(value))
        raise TypeError(
            "skip_user_profile must be a bool or a SkipUserProfile, "
            f"got {type(value).__name__}"
        )

    def should_skip(self, access_token: Optional[str]) -> bool:
        """Resolves the skip decision, raising whatever the predicate reports."""
        if self.mode is SkipMode.ALWAYS:
            return self.flag

        if self.mode is SkipMode.SYNC:
            return bool(self.predicate(access_token))

        outcome: dict[str, Any] = {}

        def done(err: Optional[BaseException] = None, skip: bool = False) -> None:
            if outcome:
                return
            outcome["err"] = err
            outcome["skip"] = skip

        self.predicate(access_token, done)
        if not outcome:
            raise RuntimeError("skip predicate returned without calling done")
        if outcome["err"] is not None:
            raise outcome["err"]
        return bool(outcome["skip"])
