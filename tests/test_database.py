from datetime import datetime, timedelta, timezone

from brickly.database import from_cents, to_cents, utcnow


class TestTimestamps:

    def test_utcnow_is_naive_utc(self):
        now = utcnow()

        assert now.tzinfo is None
        reference = datetime.now(timezone.utc).replace(tzinfo=None)
        assert abs(reference - now) < timedelta(seconds=5)


class TestCents:

    def test_to_cents_rounds_to_nearest(self):
        assert to_cents(185) == 18500
        assert to_cents(12.34) == 1234
        assert to_cents(0.01) == 1

    def test_from_cents(self):
        assert from_cents(18550) == 185.5
        assert from_cents(None) is None
