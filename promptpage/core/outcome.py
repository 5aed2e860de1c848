"""Result values returned to the presentation layer instead of notifications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

SUCCESS = "success"
ERROR = "error"


@dataclass(frozen=True)
class Outcome:
    status: str
    message: str
    value: Optional[Any] = None

    @property
    def ok(self) -> bool:
        return self.status == SUCCESS

    @classmethod
    def success(cls, message: str, value: Optional[Any] = None) -> "Outcome":
        return cls(SUCCESS, message, value)

    @classmethod
    def error(cls, message: str) -> "Outcome":
        return cls(ERROR, message)
