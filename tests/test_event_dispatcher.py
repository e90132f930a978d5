"""Tests for the per-instance event dispatcher."""

from unittest.mock import Mock

from event_dispatcher import Event, EventDispatcher


class TestEventDispatcher:
    def test_priority_order(self):
        dispatcher = EventDispatcher()
        calls = []
        dispatcher.add_listener("need:updated", lambda e: calls.append("low"), priority=0)
        dispatcher.add_listener("need:updated", lambda e: calls.append("high"), priority=10)
        dispatcher.dispatch_event(Event("need:updated"))
        assert calls == ["high", "low"]

    def test_wildcard(self):
        dispatcher = EventDispatcher()
        listener = Mock()
        dispatcher.add_listener("need:*", listener)
        dispatcher.dispatch_event(Event("need:changed", {"need_name": "fun"}))
        dispatcher.dispatch_event(Event("timer:stopped"))
        assert listener.call_count == 1

    def test_remove_listener(self):
        dispatcher = EventDispatcher()
        listener = Mock()
        dispatcher.add_listener("need:updated", listener)
        assert dispatcher.has_listeners()
        dispatcher.remove_listener("need:updated", listener)
        assert not dispatcher.has_listeners()
        dispatcher.dispatch_event(Event("need:updated"))
        listener.assert_not_called()

    def test_failing_listener_is_isolated(self):
        dispatcher = EventDispatcher()
        after = Mock()
        dispatcher.add_listener("need:updated", Mock(side_effect=ValueError("bad")), priority=1)
        dispatcher.add_listener("need:updated", after)
        dispatcher.dispatch_event(Event("need:updated"))
        after.assert_called_once()

    def test_dispatchers_are_independent(self):
        first, second = EventDispatcher(), EventDispatcher()
        listener = Mock()
        first.add_listener("need:updated", listener)
        second.dispatch_event(Event("need:updated"))
        listener.assert_not_called()
