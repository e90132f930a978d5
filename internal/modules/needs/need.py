# modules/needs/need.py

from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional

from core.clock import Clock, SystemClock
from event_dispatcher import Event, EventDispatcher
from loggers import NeedsLogger

SECONDS_PER_HOUR = 3600.0


class InvalidOperation(Exception):
    """Raised when a projection has no defined answer (e.g. a zero decay rate)."""


class DecayingAttribute:
    """
    A bounded value that decays with real elapsed time.

    Decay is lazy: nothing happens between calls. ``update`` settles the decay
    accrued since ``last_updated`` and is the only place the decay arithmetic
    lives; the mutators settle first and then apply their own change. Reads of
    ``value`` and ``percentage`` never recompute, so callers that need the value
    as of "now" call ``update`` first.
    """

    def __init__(self, name, max_value=100.0, min_value=0.0, decay_rate=5.0,
                 value=None, last_updated=None, clock: Optional[Clock] = None):
        """
        Initializes a DecayingAttribute instance.

        Args:
            name (str): The name of the need (e.g., 'hunger').
            max_value (float, optional): The maximum value the need can have.
            min_value (float, optional): The minimum value the need can have.
            decay_rate (float, optional): Units lost per hour. Negative values grow the need.
            value (float, optional): The initial value, defaults to max_value.
            last_updated (datetime, optional): When value was last accurate, defaults to now.
            clock (Clock, optional): Time source, defaults to the wall clock.
        """
        if min_value >= max_value:
            raise ValueError(f"min_value ({min_value}) must be lower than max_value ({max_value}) for '{name}'")

        self.name = name
        self.min_value = float(min_value)
        self.max_value = float(max_value)
        self.decay_rate = float(decay_rate)
        self.clock = clock or SystemClock()
        self.events = EventDispatcher()

        self._value = self._clamp(self.max_value if value is None else value)
        self.last_updated: datetime = last_updated if last_updated is not None else self.clock.now()

    @property
    def value(self) -> float:
        return self._value

    @property
    def percentage(self) -> float:
        """Position of value between the bounds, 0.0 to 1.0."""
        return (self._value - self.min_value) / (self.max_value - self.min_value)

    def _clamp(self, value: float) -> float:
        return max(self.min_value, min(self.max_value, float(value)))

    def _now(self, now: Optional[datetime]) -> datetime:
        return now if now is not None else self.clock.now()

    def _settle(self, now: datetime) -> None:
        elapsed_hours = (now - self.last_updated).total_seconds() / SECONDS_PER_HOUR
        old_value = self._value
        # backward clock jumps apply no decay
        if elapsed_hours > 0:
            self._value = self._clamp(self._value - self.decay_rate * elapsed_hours)
        self.last_updated = now
        NeedsLogger.log_decay(self.name, elapsed_hours, old_value, self._value)

    def _notify(self) -> None:
        self.events.dispatch_event(Event("need:updated", {"need_name": self.name}))

    def add_listener(self, callback: Callable[[Event], Any], priority: int = 0) -> None:
        """Subscribes to 'need:updated', fired once after every update or mutation."""
        self.events.add_listener("need:updated", callback, priority)

    def remove_listener(self, callback: Callable[[Event], Any]) -> None:
        self.events.remove_listener("need:updated", callback)

    def update(self, now: Optional[datetime] = None) -> None:
        """
        Applies the decay accrued between last_updated and now.

        The notification fires even when nothing changed (zero elapsed time).
        A now earlier than last_updated applies no decay but still becomes the
        new last_updated, so once the clock catches up again that span decays
        a second time.

        Args:
            now (datetime, optional): The instant to settle to, defaults to the clock.
        """
        self._settle(self._now(now))
        self._notify()

    def increase(self, amount: float, now: Optional[datetime] = None) -> None:
        """
        Settles decay up to now, then adds amount, clamped to the bounds.

        A negative amount decreases the value instead; it is allowed but logged.
        """
        self._change(amount, 1, "increased", now)

    def decrease(self, amount: float, now: Optional[datetime] = None) -> None:
        """
        Settles decay up to now, then subtracts amount, clamped to the bounds.

        A negative amount increases the value instead; it is allowed but logged.
        """
        self._change(amount, -1, "decreased", now)

    def _change(self, amount: float, direction: int, action: str, now: Optional[datetime]) -> None:
        if amount < 0:
            NeedsLogger.warning(f"{self.name} {action} by a negative amount ({amount}), direction inverted")
        self._settle(self._now(now))
        old_value = self._value
        self._value = self._clamp(self._value + direction * amount)
        NeedsLogger.log_change(self.name, action, old_value, self._value)
        self._notify()

    def set(self, value: float, now: Optional[datetime] = None) -> None:
        """
        Sets the value directly (clamped). Accrued decay is discarded.
        """
        old_value = self._value
        self._value = self._clamp(value)
        self.last_updated = self._now(now)
        NeedsLogger.log_change(self.name, "set", old_value, self._value)
        self._notify()

    def time_at_value(self, goal: float, now: Optional[datetime] = None) -> datetime:
        """
        Projects when the need will reach a specific value.

        The need is updated to now first. A goal the decay moves away from yields
        an instant in the past; it is returned as-is.

        Args:
            goal (float): The value to reach.
            now (datetime, optional): The instant to project from.

        Returns:
            datetime: last_updated plus (value - goal) / decay_rate hours.

        Raises:
            InvalidOperation: If decay_rate is zero, so the value never moves.
        """
        if self.decay_rate == 0:
            raise InvalidOperation(f"'{self.name}' has a zero decay rate and never reaches {goal}")
        self.update(now)
        hours_to_reach = (self._value - goal) / self.decay_rate
        return self.last_updated + timedelta(hours=hours_to_reach)

    def time_at_min_value(self, now: Optional[datetime] = None) -> datetime:
        return self.time_at_value(self.min_value, now)

    def hours_until(self, goal: float, now: Optional[datetime] = None) -> float:
        """Hours from now until goal is reached; negative if it lies in the past."""
        if self.decay_rate == 0:
            raise InvalidOperation(f"'{self.name}' has a zero decay rate and never reaches {goal}")
        self.update(now)
        return (self._value - goal) / self.decay_rate

    def get_state(self) -> Dict[str, Any]:
        """Serializable state; updated_at is kept so offline decay is applied after loading."""
        return {
            "value": self._value,
            "updated_at": self.last_updated.isoformat(),
            "min_value": self.min_value,
            "max_value": self.max_value,
            "decay_rate": self.decay_rate,
        }

    def validate_state(self, state: Dict[str, Any]) -> Dict[str, Any]:
        """
        Parses persisted state without touching the need.

        Returns:
            dict: value, updated_at (datetime), min_value, max_value and decay_rate.

        Raises:
            ValueError: If a field is missing or malformed, or the bounds are inverted.
        """
        try:
            value = float(state["value"])
            updated_at = state["updated_at"]
            if not isinstance(updated_at, datetime):
                updated_at = datetime.fromisoformat(updated_at)
            min_value = float(state.get("min_value", self.min_value))
            max_value = float(state.get("max_value", self.max_value))
            decay_rate = float(state.get("decay_rate", self.decay_rate))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid state for need '{self.name}': {e}") from e

        if min_value >= max_value:
            raise ValueError(f"Invalid bounds for need '{self.name}': {min_value} >= {max_value}")

        return {
            "value": value,
            "updated_at": updated_at,
            "min_value": min_value,
            "max_value": max_value,
            "decay_rate": decay_rate,
        }

    def set_state(self, state: Dict[str, Any]) -> None:
        """
        Restores persisted state as-is: no decay is applied and updated_at is not reset.
        """
        parsed = self.validate_state(state)
        self.min_value = parsed["min_value"]
        self.max_value = parsed["max_value"]
        self.decay_rate = parsed["decay_rate"]
        self._value = self._clamp(parsed["value"])
        self.last_updated = parsed["updated_at"]
        self._notify()

    def __repr__(self):
        return (f"{type(self).__name__}(name={self.name!r}, value={self._value}, "
                f"decay_rate={self.decay_rate}, last_updated={self.last_updated!r})")

    def __str__(self):
        return f"{self.name}: {self._value}/{self.max_value}"
