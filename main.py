"""
Main entry point.
Loads the pet, applies one command, and saves it again.
"""

from __future__ import annotations
import argparse
import asyncio
import sys
from datetime import datetime
from typing import Optional

from dotenv import load_dotenv

from config import Config
from core.clock import Clock, SystemClock
from core.timer import TimerCoordinator
from internal.modules.needs import InvalidOperation
from loggers import LogManager, SystemLogger
from pet import Pet, PetStateManager


def load_or_create_pet(state_manager: PetStateManager, clock: Clock) -> Pet:
    pet = state_manager.load_pet(clock)
    if pet is None:
        SystemLogger.info("No saved pet found, creating a new one")
        pet = Pet(clock=clock)
    return pet


def format_time(instant: datetime) -> str:
    return instant.strftime('%Y-%m-%d %H:%M')


def print_status(pet: Pet) -> None:
    status = pet.get_status()
    print(f"{pet.name} (since {format_time(pet.created_at)})")
    for need_name, entry in status.items():
        need = pet.get(need_name)
        line = f"  {need_name:10} {entry['value']:6.2f}/{need.max_value:g}  {entry['percentage']:4.0%}"
        if not entry["usable"]:
            line += "  (unavailable)"
        print(line)


def print_forecast(pet: Pet) -> None:
    schedule = pet.needs_manager.get_notification_schedule()
    if not schedule:
        print("No need is running out.")
        return
    for notification in schedule:
        print(f"  {format_time(notification.fire_at)}  {notification.need_name:10} {notification.title}")


async def run_loop(pet: Pet, state_manager: PetStateManager) -> None:
    """Keep the pet up to date and autosave until interrupted."""
    timer = TimerCoordinator()
    timer.add_task("needs", Config.get_need_update_interval(), pet.update_needs, priority=0)
    timer.add_task("autosave", Config.get_autosave_interval(), lambda: state_manager.save_state(pet), priority=1)
    try:
        await timer.run()
    finally:
        timer.stop()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Care for a pet whose needs decay in real time')
    parser.add_argument('--state-dir', default=None,
                        help='Directory holding the saved pet (default: PET_STATE_DIR or data/pet_state)')
    parser.add_argument('--verbose', action='store_true',
                        help='Also print warnings and errors to the console')
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('status', help='Show every need as of now')
    subparsers.add_parser('forecast', help='Show when each need runs out')
    subparsers.add_parser('run', help='Keep updating and autosaving until Ctrl+C')
    subparsers.add_parser('reset', help='Delete the saved pet')

    for command, help_text in [('increase', 'Raise a need'), ('decrease', 'Lower a need'), ('set', 'Set a need')]:
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument('need')
        sub.add_argument('amount', type=float)

    return parser


def main(argv: Optional[list[str]] = None, clock: Optional[Clock] = None) -> int:
    args = build_parser().parse_args(argv)

    load_dotenv()
    LogManager.setup_logging(str(Config.get_log_dir()), console=args.verbose)

    clock = clock or SystemClock()
    state_manager = PetStateManager(args.state_dir)

    if args.command == 'reset':
        state_manager.clear_state()
        print("Saved pet deleted.")
        return 0

    try:
        pet = load_or_create_pet(state_manager, clock)

        if args.command == 'status':
            print_status(pet)
        elif args.command == 'forecast':
            print_forecast(pet)
        elif args.command == 'run':
            try:
                asyncio.run(run_loop(pet, state_manager))
            except KeyboardInterrupt:
                print("\nShutting down...")
        elif args.command in ('increase', 'decrease', 'set'):
            # usage conditions read other needs, which must include decay up to now
            pet.update_needs()
            if args.command in ('increase', 'decrease') and not pet.can_use(args.need):
                print(f"{args.need} is not available right now.", file=sys.stderr)
                return 1
            getattr(pet.get(args.need), args.command)(args.amount)
            print(pet.get(args.need))
    except (ValueError, InvalidOperation) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    state_manager.save_state(pet)
    return 0


if __name__ == "__main__":
    sys.exit(main())
