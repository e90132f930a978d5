"""
Pet state persistence system.
Handles saving and loading of the pet and its needs.
"""

from dataclasses import dataclass, asdict, field
from typing import Dict, Optional, Any
from datetime import datetime
import json
from pathlib import Path

from config import Config
from core.clock import Clock
from internal.modules.needs import DecayingAttribute
from loggers import SystemLogger
from pet.pet import Pet

@dataclass
class NeedState:
    """
    Persisted need state.
    updated_at is restored as-is so decay accrued while closed is applied on the next update.
    """
    value: float
    updated_at: str
    min_value: float
    max_value: float
    decay_rate: float

@dataclass
class CorePetState:
    """
    Complete saved pet.
    """
    name: str
    created_at: datetime
    needs: Dict[str, NeedState]
    timestamp: datetime
    metadata: Dict[str, Any] = field(default_factory=dict)
    version: str = Config.VERSION

class PetStateManager:
    """Manages saving and loading of pet state."""

    def __init__(self, state_dir: Optional[str] = None, backups_to_keep: Optional[int] = None):
        self.state_dir = Path(state_dir) if state_dir is not None else Config.get_state_dir()
        self.state_dir.mkdir(parents=True, exist_ok=True)
        self.state_file = self.state_dir / 'core_state.json'
        self.backup_dir = self.state_dir / 'backups'
        self.backup_dir.mkdir(exist_ok=True)
        self.backups_to_keep = backups_to_keep if backups_to_keep is not None else Config.get_backups_to_keep()

    def save_state(self, pet: Pet) -> None:
        """
        Save current pet state.
        Creates both current and backup states.
        """
        try:
            state = self._extract_state(pet)
            
            self._write_state(self.state_file, state)
            
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S_%f')
            backup_file = self.backup_dir / f'state_backup_{timestamp}.json'
            self._write_state(backup_file, state)
            
            self._cleanup_old_backups(self.backups_to_keep)
            
        except Exception as e:
            SystemLogger.log_state_io("save", self.state_file, error=str(e))
            raise

    def load_state(self) -> Optional[CorePetState]:
        """
        Load most recent valid state.
        Falls back to backups if main state is corrupted.
        """
        if self.state_file.exists():
            try:
                return self._read_state(self.state_file)
            except (OSError, ValueError, TypeError, KeyError) as e:
                SystemLogger.warning(f"Error reading main state, trying backup: {e}")

        for backup in reversed(sorted(self.backup_dir.glob('state_backup_*.json'))):
            try:
                return self._read_state(backup)
            except (OSError, ValueError, TypeError, KeyError) as e:
                SystemLogger.warning(f"Skipping unreadable backup {backup.name}: {e}")

        return None

    def load_pet(self, clock: Optional[Clock] = None) -> Optional[Pet]:
        """
        Rebuild a Pet from the stored state, or None when nothing usable is stored.
        Needs keep their persisted updated_at; no decay is applied here.
        """
        state = self.load_state()
        if state is None:
            return None

        pet = Pet(name=state.name, clock=clock, created_at=state.created_at)
        known = {name: asdict(need) for name, need in state.needs.items() if name in pet.needs_manager}
        for name in state.needs:
            if name not in known:
                SystemLogger.warning(f"Ignoring unknown need '{name}' in saved state")
        pet.needs_manager.set_needs_state(known)
        return pet

    def _extract_state(self, pet: Pet) -> CorePetState:
        """Extract core state from pet instance."""
        return CorePetState(
            name=pet.name,
            created_at=pet.created_at,
            needs={
                name: NeedState(**need_state)
                for name, need_state in pet.needs_manager.get_needs_state().items()
            },
            timestamp=pet.clock.now()
        )

    def _write_state(self, path: Path, state: CorePetState) -> None:
        """Write state to file with proper formatting."""
        data = asdict(state)
        data['created_at'] = state.created_at.isoformat()
        data['timestamp'] = state.timestamp.isoformat()
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
        SystemLogger.log_state_io("write", path)

    def _read_state(self, path: Path) -> CorePetState:
        """Read and validate state from file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
            
        data['created_at'] = datetime.fromisoformat(data['created_at'])
        data['timestamp'] = datetime.fromisoformat(data['timestamp'])
        data['needs'] = {name: NeedState(**need) for name, need in data['needs'].items()}
        # a file that parses but holds an unusable need counts as corrupt
        for name, need in data['needs'].items():
            DecayingAttribute(name).validate_state(asdict(need))
        
        return CorePetState(**data)

    def _cleanup_old_backups(self, keep: int = 5) -> None:
        """Maintain only recent backups."""
        backups = sorted(self.backup_dir.glob('state_backup_*.json'))
        for backup in backups[:-keep] if keep > 0 else backups:
            backup.unlink()

    def clear_state(self) -> None:
        """Delete the saved pet and all backups, starting the next load fresh."""
        if self.state_file.exists():
            self.state_file.unlink()
        for backup in self.backup_dir.glob('state_backup_*.json'):
            backup.unlink()
        SystemLogger.info(f"Cleared pet state in {self.state_dir}")
