from .need import DecayingAttribute, InvalidOperation
from .pet_needs import PetNeed, Hunger, Energy, Fun, Hygiene, DEFAULT_NEEDS
from .needs_manager import NeedsManager, NeedNotification

__all__ = [
    'DecayingAttribute', 'InvalidOperation',
    'PetNeed', 'Hunger', 'Energy', 'Fun', 'Hygiene', 'DEFAULT_NEEDS',
    'NeedsManager', 'NeedNotification',
]
