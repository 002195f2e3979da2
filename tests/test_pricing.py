"""Unit tests for per-performance amounts and volume credits.

Run with: pytest tests/test_pricing.py -v
"""

import pytest

from statements.domain import Performance, Play, PlayId
from statements.domain.errors import UnknownPlayTypeError
from statements.domain.pricing import amount_for, volume_credits_for

TRAGEDY = Play(name="Hamlet", type="tragedy")
COMEDY = Play(name="As You Like It", type="comedy")
HISTORY = Play(name="Henry V", type="history")


def perf(audience: int) -> Performance:
    return Performance(play_id=PlayId("any"), audience=audience)


class TestAmountFor:
    """Tests for amount_for."""

    @pytest.mark.parametrize("audience", [0, 10, 30])
    def test_tragedy_small_audience_is_base_amount(self, audience):
        assert amount_for(TRAGEDY, perf(audience)).cents == 40000

    def test_tragedy_large_audience_adds_per_seat(self):
        assert amount_for(TRAGEDY, perf(35)).cents == 45000

    def test_comedy_without_large_audience_bonus(self):
        assert amount_for(COMEDY, perf(15)).cents == 34500

    def test_comedy_at_threshold_has_no_bonus(self):
        assert amount_for(COMEDY, perf(20)).cents == 30000 + 300 * 20

    def test_comedy_with_large_audience_bonus(self):
        assert amount_for(COMEDY, perf(25)).cents == 50000

    def test_unknown_type_raises(self):
        with pytest.raises(UnknownPlayTypeError):
            amount_for(HISTORY, perf(10))


class TestVolumeCreditsFor:
    """Tests for volume_credits_for."""

    def test_small_audience_earns_nothing(self):
        assert volume_credits_for(TRAGEDY, perf(10)) == 0

    def test_tragedy_earns_seats_over_thirty(self):
        assert volume_credits_for(TRAGEDY, perf(55)) == 25

    def test_comedy_earns_extra_per_five_attendees(self):
        assert volume_credits_for(COMEDY, perf(35)) == 12

    def test_comedy_extra_credits_below_threshold(self):
        assert volume_credits_for(COMEDY, perf(14)) == 2

    def test_unknown_type_raises(self):
        with pytest.raises(UnknownPlayTypeError):
            volume_credits_for(HISTORY, perf(35))
