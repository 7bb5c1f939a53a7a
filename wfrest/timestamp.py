"""Microsecond-resolution timestamps since the Unix epoch."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, order=True)
class Timestamp:
    """A point in time in microseconds since 1970-01-01 00:00:00 UTC."""

    micro_sec_since_epoch: int = 0

    K_MICRO_SEC_PER_SEC: ClassVar[int] = 1_000_000

    def __post_init__(self) -> None:
        if self.micro_sec_since_epoch < 0:
            raise ValueError("timestamp cannot be before the epoch")

    def to_str(self) -> str:
        """Return "seconds.microseconds" with the fraction unpadded."""
        seconds, micros = divmod(self.micro_sec_since_epoch, self.K_MICRO_SEC_PER_SEC)
        return f"{seconds}.{micros}"

    def to_format_str(self, fmt: str = "%Y-%m-%d %X") -> str:
        """Format the whole seconds in local time with strftime."""
        seconds = self.micro_sec_since_epoch // self.K_MICRO_SEC_PER_SEC
        return time.strftime(fmt, time.localtime(seconds))

    def valid(self) -> bool:
        return self.micro_sec_since_epoch > 0

    @classmethod
    def now(cls) -> Timestamp:
        return cls(time.time_ns() // 1000)

    @classmethod
    def invalid(cls) -> Timestamp:
        return cls()

    @classmethod
    def _delta(cls, other: object) -> int | None:
        if isinstance(other, bool):
            return None
        if isinstance(other, int):
            return other
        if isinstance(other, float):
            return int(other * cls.K_MICRO_SEC_PER_SEC)
        return None

    def __add__(self, other: object) -> Timestamp:
        """Add microseconds (int) or seconds (float)."""
        delta = self._delta(other)
        if delta is None:
            return NotImplemented
        return Timestamp(self.micro_sec_since_epoch + delta)

    def __sub__(self, other: object):
        """Subtract microseconds (int), seconds (float), or another Timestamp.

        The difference of two timestamps is returned in seconds.
        """
        if isinstance(other, Timestamp):
            diff = self.micro_sec_since_epoch - other.micro_sec_since_epoch
            return diff / self.K_MICRO_SEC_PER_SEC
        delta = self._delta(other)
        if delta is None:
            return NotImplemented
        return Timestamp(self.micro_sec_since_epoch - delta)