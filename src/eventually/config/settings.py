"""Config settings – EventuallySettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from eventually.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class EventuallySettings:
    """Environment-sourced defaults, e.g. ``EVENTUALLY_RETRIES=3``."""

    _prefix: ClassVar[str] = "EVENTUALLY"

    retries: int = 0
    backoff: list[int] = dataclasses.field(default_factory=list)

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if self.retries < 0:
            raise InvalidSettingValueError("retries", self.retries, "must be >= 0")
        if any(ms < 0 for ms in self.backoff):
            raise InvalidSettingValueError("backoff", self.backoff, "delays must be >= 0")


__all__ = ["EventuallySettings"]
