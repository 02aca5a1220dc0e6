#!/usr/bin/env python3
"""
Run a turn-based car simulation.

Usage:
    python scripts/run_simulation.py
    python scripts/run_simulation.py --actions 2,3,3,5,6,1 --verbose
    python scripts/run_simulation.py --config sim.json --driver-json driver.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from carsim.config import SimulationConfig
from carsim.driver import Driver, load_driver
from carsim.session import SimulationSession
from carsim.status import Action


MENU = "\n".join(f"  {action.value}. {action.label}" for action in Action)


def parse_actions(raw: str) -> list:
    """Parse a comma separated list of action selectors."""
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Actions must be integers: {raw!r}") from e


def prompt_actions():
    """Yield selectors typed by the user until EOF or 'q'."""
    print("Choose an action (q to quit):")
    print(MENU)
    while True:
        try:
            raw = input("> ").strip()
        except EOFError:
            return
        if raw.lower() in ("q", "quit", "exit"):
            return
        try:
            yield int(raw)
        except ValueError:
            print(f"Not a number: {raw!r}")


def main():
    parser = argparse.ArgumentParser(
        description="Run a turn-based car simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Actions:
{MENU}

Examples:
    python scripts/run_simulation.py --actions 2,3,3,5
    python scripts/run_simulation.py --seed 42 --min-decay 1
        """,
    )

    parser.add_argument(
        "--actions",
        type=parse_actions,
        default=None,
        help="Comma separated action selectors (default: interactive prompt)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON simulation config (default: CARSIM_* environment variables)",
    )
    parser.add_argument(
        "--driver-json",
        default=None,
        help="Driver payload in random-user format",
    )
    parser.add_argument(
        "--driver-name",
        default="Driver",
        help="Driver first name when no payload is given (default: Driver)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for randomised decay",
    )
    parser.add_argument(
        "--min-decay",
        type=int,
        default=None,
        help="Lower bound of per-turn decay (enables randomised decay)",
    )

    # Output
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the session summary as JSON",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        if args.config:
            config = SimulationConfig.from_json(args.config)
        else:
            config = SimulationConfig.from_env()
        if args.seed is not None:
            config.seed = args.seed
        if args.min_decay is not None:
            config = SimulationConfig.from_dict({**config.to_dict(), "min_decay_per_turn": args.min_decay})

        driver = load_driver(args.driver_json) if args.driver_json else Driver(first=args.driver_name)
        session = SimulationSession(driver=driver, config=config)

        actions = args.actions if args.actions is not None else prompt_actions()
        for action in actions:
            record = session.take_turn(action)
            if record is None:
                continue
            print(f"[Turn {record.turn}] {record.action_message}")
            print(f"    {record.driver_message}")
            print(f"    {record.car_message}")
            if not session.is_running:
                break

        summary = session.summary()
        if args.json:
            print(json.dumps(summary, indent=2))
        else:
            status = summary["status"]
            print(f"\n{summary['driver']}: {summary['turns']} turns, outcome {summary['outcome']}")
            print(
                f"Facing {status['cardinal_direction']}, "
                f"energy {status['energy_value']}, gas {status['gas_value']}"
            )
        return 0

    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
