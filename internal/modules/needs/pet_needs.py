# modules/needs/pet_needs.py

"""
The needs every pet starts with.
"""

from config import Config
from .need import DecayingAttribute


class PetNeed(DecayingAttribute):
    """
    Base class for all pet needs.

    Subclasses fix the name and the notification texts; bounds and decay rate
    come from Config. usage_condition decides whether the player may act on the
    need right now (e.g. play only when the pet has enough energy).
    """

    NAME = None
    has_notifications = True
    notification_title = ""
    notification_description = ""
    notification_icon = ""

    def __init__(self, clock=None, value=None, last_updated=None, decay_rate=None):
        super().__init__(
            self.NAME,
            max_value=Config.NEED_MAX_VALUE,
            min_value=Config.NEED_MIN_VALUE,
            decay_rate=Config.get_decay_rate(self.NAME) if decay_rate is None else decay_rate,
            value=value,
            last_updated=last_updated,
            clock=clock,
        )

    def usage_condition(self, pet) -> bool:
        """
        Args:
            pet: Anything exposing get(need_name), i.e. a Pet or a NeedsManager.
        """
        return True


class Hunger(PetNeed):
    NAME = "hunger"
    notification_title = "Your pet is starving!"
    notification_description = "Feed your pet before it gets sick."
    notification_icon = "icon_hunger"


class Energy(PetNeed):
    NAME = "energy"
    notification_title = "Your pet is exhausted!"
    notification_description = "Put your pet to bed so it can recharge."
    notification_icon = "icon_energy"


class Fun(PetNeed):
    NAME = "fun"
    notification_title = "Your pet is bored!"
    notification_description = "Come back and play with your pet."
    notification_icon = "icon_fun"

    def usage_condition(self, pet) -> bool:
        return pet.get(Energy.NAME).value >= Config.FUN_MIN_ENERGY


class Hygiene(PetNeed):
    NAME = "hygiene"
    notification_title = "Your pet is filthy!"
    notification_description = "Give your pet a bath."
    notification_icon = "icon_hygiene"


DEFAULT_NEEDS = (Hunger, Energy, Fun, Hygiene)
