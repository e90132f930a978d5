"""
Pet session object.
One explicitly constructed instance per save; pass it to whatever needs it.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from config import Config
from core.clock import Clock, SystemClock
from internal.modules.needs import DecayingAttribute, NeedsManager

class Pet:
    """
    A pet and the needs it owns.
    """

    def __init__(self, name: Optional[str] = None, clock: Optional[Clock] = None,
                 needs_manager: Optional[NeedsManager] = None, created_at: Optional[datetime] = None):
        """
        Args:
            name: Display name, defaults to Config.get_pet_name().
            clock: Time source shared with the needs.
            needs_manager: Existing needs, defaults to a fresh set of the default needs.
            created_at: When the save was created; kept as-is when loading.
        """
        self.clock = clock or SystemClock()
        self.name = name or Config.get_pet_name()
        self.created_at = created_at if created_at is not None else self.clock.now()
        self.needs_manager = needs_manager or NeedsManager(clock=self.clock)

    def get(self, need_name: str) -> DecayingAttribute:
        return self.needs_manager.get(need_name)

    def all(self) -> List[Tuple[str, DecayingAttribute]]:
        return self.needs_manager.all()

    def update_needs(self, now: Optional[datetime] = None) -> None:
        self.needs_manager.update_needs(now=now)

    def can_use(self, need_name: str) -> bool:
        """Whether the player may act on a need now (e.g. play requires energy)."""
        need = self.get(need_name)
        usage_condition = getattr(need, "usage_condition", None)
        return usage_condition(self) if usage_condition else True

    def get_status(self, now: Optional[datetime] = None) -> Dict[str, Dict[str, Any]]:
        """
        Brings every need up to now and reports value, percentage and usability.
        """
        self.update_needs(now)
        status = self.needs_manager.get_needs_summary()
        for need_name, entry in status.items():
            entry["usable"] = self.can_use(need_name)
        return status

    def __str__(self):
        needs = ", ".join(str(need) for _, need in self.all())
        return f"{self.name} ({needs})"
