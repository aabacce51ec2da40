"""Tests for a single interaction subscription."""

import pytest

from interaction_core import InteractionSubscription, InvalidDurationError, SubscriptionStatus


class TestSubscriptionLifecycle:
    """Timer and status handling of one subscription."""

    def test_starts_pending_without_timer(self, scheduler):
        """Construction does not schedule anything."""
        sub = InteractionSubscription(100, scheduler=scheduler)

        assert sub.status == SubscriptionStatus.PENDING
        assert sub.is_pending()
        assert not sub.has_timer
        assert scheduler.pending() == 0

    def test_timer_fire_goes_inactive(self, scheduler, recorder):
        """Firing the timer marks the subscription inactive."""
        on_inactive = recorder()
        sub = InteractionSubscription(100, on_inactive=on_inactive, scheduler=scheduler)
        sub.refresh_timeout()

        scheduler.advance(99)
        assert on_inactive.count == 0

        scheduler.advance(1)
        assert on_inactive.calls == [100]
        assert sub.status == SubscriptionStatus.INACTIVE
        assert not sub.is_pending()
        assert not sub.has_timer

    def test_repeated_refresh_replaces_timer(self, scheduler, recorder):
        """Only the last refresh counts; earlier timers never fire."""
        on_inactive = recorder()
        sub = InteractionSubscription(100, on_inactive=on_inactive, scheduler=scheduler)

        for _ in range(5):
            sub.refresh_timeout()
        assert scheduler.pending() == 1

        scheduler.advance(40)
        sub.refresh_timeout()
        scheduler.advance(1000)

        assert on_inactive.calls == [140]

    def test_clear_timeout_keeps_status(self, scheduler, recorder):
        """Clearing cancels the countdown without a callback."""
        on_inactive = recorder()
        sub = InteractionSubscription(100, on_inactive=on_inactive, scheduler=scheduler)
        sub.refresh_timeout()

        sub.clear_timeout()
        scheduler.advance(500)

        assert on_inactive.count == 0
        assert sub.status == SubscriptionStatus.PENDING
        assert not sub.has_timer

    def test_clear_timeout_without_timer_is_noop(self, scheduler):
        sub = InteractionSubscription(100, scheduler=scheduler)
        sub.clear_timeout()
        sub.clear_timeout()
        assert not sub.has_timer

    def test_late_delivery_of_cancelled_timer_is_ignored(self, scheduler, recorder):
        """A host that delivers a cancelled timer anyway does not trigger a transition."""
        on_inactive = recorder()
        sub = InteractionSubscription(100, on_inactive=on_inactive, scheduler=scheduler)
        sub.refresh_timeout()
        sub.clear_timeout()

        scheduler.fire_cancelled()

        assert on_inactive.count == 0
        assert sub.status == SubscriptionStatus.PENDING

    def test_replaced_timer_delivered_late_is_ignored(self, scheduler, recorder):
        on_inactive = recorder()
        sub = InteractionSubscription(100, on_inactive=on_inactive, scheduler=scheduler)
        sub.refresh_timeout()
        sub.refresh_timeout()

        scheduler.fire_cancelled()
        assert on_inactive.count == 0
        assert sub.has_timer

        scheduler.advance(100)
        assert on_inactive.count == 1

    def test_zero_duration_fires_on_next_turn(self, scheduler, recorder):
        on_inactive = recorder()
        sub = InteractionSubscription(0, on_inactive=on_inactive, scheduler=scheduler)
        sub.refresh_timeout()

        assert on_inactive.count == 0
        scheduler.advance(0)
        assert on_inactive.count == 1


class TestMarkActive:
    """Promotion to the active state."""

    def test_active_fires_callback_once(self, scheduler, recorder):
        """Repeated promotions while active do not fire again."""
        on_active = recorder()
        sub = InteractionSubscription(100, on_active=on_active, scheduler=scheduler)

        sub.active()
        sub.active()
        sub.active()

        assert on_active.count == 1
        assert sub.status == SubscriptionStatus.ACTIVE

    def test_active_after_inactive_fires_again(self, scheduler, recorder):
        on_active = recorder()
        sub = InteractionSubscription(100, on_active=on_active, scheduler=scheduler)
        sub.active()
        sub.refresh_timeout()
        scheduler.advance(100)
        assert sub.status == SubscriptionStatus.INACTIVE

        sub.active()

        assert on_active.count == 2

    def test_missing_callbacks_are_skipped(self, scheduler):
        """Absent callbacks are not an error."""
        sub = InteractionSubscription(10, scheduler=scheduler)
        sub.refresh_timeout()
        scheduler.advance(10)
        sub.active()

        assert sub.status == SubscriptionStatus.ACTIVE


class TestDurationValidation:
    """Timeouts are checked when the subscription is built."""

    @pytest.mark.parametrize("value", [-1, -0.5, 1.5, "100", None, True, float("nan"), float("inf")])
    def test_rejects_unusable_durations(self, scheduler, value):
        with pytest.raises(InvalidDurationError):
            InteractionSubscription(value, scheduler=scheduler)

    def test_invalid_duration_is_a_value_error(self, scheduler):
        with pytest.raises(ValueError):
            InteractionSubscription(-10, scheduler=scheduler)

    def test_accepts_integral_float(self, scheduler):
        sub = InteractionSubscription(250.0, scheduler=scheduler)
        assert sub.duration_ms == 250
        assert isinstance(sub.duration_ms, int)

    def test_accepts_zero(self, scheduler):
        assert InteractionSubscription(0, scheduler=scheduler).duration_ms == 0
