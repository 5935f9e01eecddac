from datetime import timedelta
from typing import Optional

from exercises_app.domain.clock import Clock, ExpiringOfferService, FakeClock, SystemClock

OFFER_DURATION = timedelta(minutes=10)
FAKE_CLOCK_SHIFT = timedelta(hours=1)


def exercise_34(clock: Optional[Clock] = None):
    """Same offer checked against the real clock and a clock one hour ahead."""
    clock = clock or SystemClock()
    offer_ends = clock.utc_now + OFFER_DURATION

    live_service = ExpiringOfferService(clock, offer_ends)
    print(f"[34] Offer active (system clock)? {live_service.is_offer_active()}")

    fake_future = FakeClock(clock.utc_now + FAKE_CLOCK_SHIFT)
    test_service = ExpiringOfferService(fake_future, offer_ends)
    print(f"[34] Offer active (fake future)? {test_service.is_offer_active()}")
