"""
Clock abstraction: services read the time through a `Clock` so tests can
pin it with `FakeClock`.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    @property
    @abstractmethod
    def utc_now(self) -> datetime: ...


class SystemClock(Clock):
    @property
    def utc_now(self) -> datetime:
        return datetime.now(timezone.utc)


class FakeClock(Clock):
    def __init__(self, fixed_utc_now: datetime):
        self._now = fixed_utc_now

    @property
    def utc_now(self) -> datetime:
        return self._now


class ExpiringOfferService:
    def __init__(self, clock: Clock, expiry_utc: datetime):
        self._clock = clock
        self._expiry_utc = expiry_utc

    def is_offer_active(self) -> bool:
        # expiry instant itself is already inactive
        return self._clock.utc_now < self._expiry_utc
