# modules/needs/needs_manager.py

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from core.clock import Clock, SystemClock
from event_dispatcher import Event, EventDispatcher
from .need import DecayingAttribute
from .pet_needs import DEFAULT_NEEDS


@dataclass
class NeedNotification:
    """When a need will run out, for a notification scheduler to deliver."""
    need_name: str
    title: str
    description: str
    icon: str
    fire_at: datetime


class NeedsManager:
    """
    Manages all needs of one pet.

    Holds no decay logic of its own: it looks needs up by name, forwards calls
    and re-dispatches every need's 'need:updated' as 'need:changed' on its own
    dispatcher so a display only has to subscribe once.
    """

    def __init__(self, clock: Optional[Clock] = None, needs: Optional[Iterable[DecayingAttribute]] = None):
        """
        Initializes the NeedsManager.

        Args:
            clock (Clock, optional): Shared time source; each default need is built with it.
            needs (Iterable[DecayingAttribute], optional): Needs to manage instead of the defaults.
        """
        self.clock = clock or SystemClock()
        self.events = EventDispatcher()
        self.needs: Dict[str, DecayingAttribute] = {}

        if needs is None:
            needs = [need_cls(clock=self.clock) for need_cls in DEFAULT_NEEDS]
        for need in needs:
            self.add(need)

    def add(self, need: DecayingAttribute) -> None:
        if need.name in self.needs:
            raise ValueError(f"Need '{need.name}' already exists.")
        self.needs[need.name] = need
        need.add_listener(self._handle_need_updated)

    def _handle_need_updated(self, event: Event) -> None:
        self.events.dispatch_event(Event("need:changed", event.data))

    def get(self, need_name: str) -> DecayingAttribute:
        need = self.needs.get(need_name)
        if need is None:
            raise ValueError(f"Need '{need_name}' does not exist.")
        return need

    def all(self) -> List[Tuple[str, DecayingAttribute]]:
        return list(self.needs.items())

    def __contains__(self, need_name: str) -> bool:
        return need_name in self.needs

    def update_needs(self, needs_to_update: Optional[Iterable[str]] = None, now: Optional[datetime] = None) -> None:
        """
        Updates specified needs to the same instant.

        Args:
            needs_to_update (Iterable[str], optional): Need names to update. If None, updates all needs.
            now (datetime, optional): Instant to update to, defaults to the clock.
        """
        if needs_to_update is None:
            needs_to_update = list(self.needs.keys())
        now = now if now is not None else self.clock.now()

        for need_name in needs_to_update:
            self.get(need_name).update(now)

    def alter_need(self, need_name: str, amount: float, now: Optional[datetime] = None) -> None:
        """
        Alters a specific need by a given amount, increasing for positive and decreasing for negative amounts.
        """
        need = self.get(need_name)
        if amount >= 0:
            need.increase(amount, now)
        else:
            need.decrease(-amount, now)

    def get_need_value(self, need_name: str) -> float:
        """Stored value of a need; does not apply pending decay."""
        return self.get(need_name).value

    def get_needs_state(self) -> Dict[str, Dict[str, Any]]:
        return {name: need.get_state() for name, need in self.needs.items()}

    def set_needs_state(self, needs_state: Dict[str, Dict[str, Any]]) -> None:
        """
        Sets the state of needs from persisted data, keeping each persisted updated_at.

        Every entry is validated before any need changes, so a bad entry leaves all needs untouched.
        """
        for need_name, state in needs_state.items():
            if need_name not in self.needs:
                raise ValueError(f"Need '{need_name}' does not exist")
            self.needs[need_name].validate_state(state)
        for need_name, state in needs_state.items():
            self.needs[need_name].set_state(state)

    def get_needs_summary(self) -> Dict[str, Dict[str, float]]:
        """
        Packages the stored value and percentage of each need; pure reads.
        """
        return {
            name: {
                "value": need.value,
                "percentage": need.percentage,
            }
            for name, need in self.needs.items()
        }

    def get_notification_schedule(self, now: Optional[datetime] = None) -> List[NeedNotification]:
        """
        Lists when each decaying need will hit its minimum, soonest first.

        Needs without notifications or with a non-positive decay rate never run
        out on their own and are skipped.
        """
        now = now if now is not None else self.clock.now()
        schedule = []
        for name, need in self.needs.items():
            if not getattr(need, "has_notifications", False) or need.decay_rate <= 0:
                continue
            schedule.append(NeedNotification(
                need_name=name,
                title=need.notification_title,
                description=need.notification_description,
                icon=need.notification_icon,
                fire_at=need.time_at_min_value(now),
            ))
        schedule.sort(key=lambda n: n.fire_at)
        return schedule
