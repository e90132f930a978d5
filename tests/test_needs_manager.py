"""Tests for the needs aggregate and the default pet needs."""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import Mock

import pytest

from internal.modules.needs import (
    DecayingAttribute, Energy, Fun, Hunger, NeedsManager,
)


@pytest.fixture
def manager(clock):
    return NeedsManager(clock=clock)


class TestRegistry:
    def test_default_needs(self, manager):
        assert [name for name, _ in manager.all()] == ["hunger", "energy", "fun", "hygiene"]

    def test_get_returns_same_instance(self, manager):
        assert manager.get("hunger") is manager.needs["hunger"]
        assert isinstance(manager.get("hunger"), Hunger)

    def test_unknown_need_raises(self, manager):
        with pytest.raises(ValueError):
            manager.get("thirst")

    def test_duplicate_need_raises(self, manager, clock):
        with pytest.raises(ValueError):
            manager.add(DecayingAttribute("hunger", clock=clock))

    def test_custom_needs(self, clock):
        custom = NeedsManager(clock=clock, needs=[DecayingAttribute("thirst", decay_rate=2, clock=clock)])
        assert "thirst" in custom
        assert "hunger" not in custom

    def test_decay_rates_come_from_config(self, clock, monkeypatch):
        monkeypatch.setenv("HUNGER_DECAY_RATE", "12.5")
        assert Hunger(clock=clock).decay_rate == 12.5
        assert Energy(clock=clock).decay_rate == 4.0


class TestForwarding:
    def test_update_needs_uses_each_rate(self, manager, t0):
        manager.update_needs(now=t0 + timedelta(hours=2))
        summary = manager.get_needs_summary()
        assert summary["hunger"]["value"] == 90.0
        assert summary["energy"]["value"] == 92.0
        assert summary["fun"]["value"] == 87.5
        assert summary["hygiene"]["percentage"] == 0.9375

    def test_update_subset(self, manager, clock):
        clock.advance(hours=1)
        manager.update_needs(["fun"])
        assert manager.get_need_value("fun") == 93.75
        assert manager.get_need_value("hunger") == 100.0

    def test_update_unknown_raises(self, manager):
        with pytest.raises(ValueError):
            manager.update_needs(["thirst"])

    def test_alter_need(self, manager):
        manager.alter_need("hunger", -30)
        assert manager.get_need_value("hunger") == 70.0
        manager.alter_need("hunger", 10)
        assert manager.get_need_value("hunger") == 80.0

    def test_need_changes_are_redispatched(self, manager):
        listener = Mock()
        manager.events.add_listener("need:changed", listener)
        manager.alter_need("energy", -5)
        assert listener.call_count == 1
        assert listener.call_args[0][0].data == {"need_name": "energy"}


class TestState:
    def test_round_trip(self, manager, clock):
        manager.alter_need("hunger", -25)
        clock.advance(hours=1)
        state = manager.get_needs_state()

        restored = NeedsManager(clock=clock)
        restored.set_needs_state(state)
        assert restored.get_needs_state() == state

    def test_unknown_need_in_state_raises(self, manager, t0):
        with pytest.raises(ValueError):
            manager.set_needs_state({"thirst": {"value": 1, "updated_at": t0.isoformat()}})


    def test_failed_restore_changes_nothing(self, manager, clock, t0):
        before = manager.get_needs_state()
        listener = Mock()
        manager.events.add_listener("need:changed", listener)
        later = (t0 + timedelta(hours=1)).isoformat()
        with pytest.raises(ValueError):
            manager.set_needs_state({
                "hunger": {"value": 10, "updated_at": later},
                "energy": {"value": 20, "updated_at": later},
                "fun": {"value": 30, "updated_at": "soon"},
            })
        assert manager.get_needs_state() == before
        listener.assert_not_called()


class TestUsageConditions:
    def test_fun_needs_energy(self, manager):
        fun = manager.get("fun")
        assert fun.usage_condition(manager)
        manager.get("energy").set(19.9)
        assert not fun.usage_condition(manager)
        manager.get("energy").set(20)
        assert fun.usage_condition(manager)

    def test_other_needs_always_usable(self, manager):
        manager.get("energy").set(0)
        assert manager.get("hunger").usage_condition(manager)


class TestNotificationSchedule:
    def test_sorted_by_time_to_empty(self, manager, t0):
        schedule = manager.get_notification_schedule(t0)
        assert [n.need_name for n in schedule] == ["fun", "hunger", "energy", "hygiene"]
        assert schedule[0].fire_at == t0 + timedelta(hours=16)
        assert schedule[1].fire_at == t0 + timedelta(hours=20)
        assert schedule[1].title == Hunger.notification_title

    def test_accounts_for_elapsed_decay(self, manager, clock, t0):
        clock.advance(hours=5)
        hunger = [n for n in manager.get_notification_schedule() if n.need_name == "hunger"][0]
        assert hunger.fire_at == t0 + timedelta(hours=20)

    def test_skips_non_decaying_and_silent_needs(self, clock):
        silent = Fun(clock=clock)
        silent.has_notifications = False
        manager = NeedsManager(clock=clock, needs=[
            Hunger(clock=clock, decay_rate=0),
            Energy(clock=clock, decay_rate=-1),
            silent,
            DecayingAttribute("plain", clock=clock),
        ])
        assert manager.get_notification_schedule() == []
