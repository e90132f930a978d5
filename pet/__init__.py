# pet/__init__.py

from .pet import Pet
from .state_persistence import PetStateManager
