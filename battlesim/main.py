"""
Main entry point for the battle simulator.

Loads the roster file named on the command line, runs the battle between the
heroes and the enemies and prints the final state of every combatant
followed by the verdict.

Usage:
    battlesim <filename>

Exit codes:
    0 on success, 1 on a missing argument or an unreadable/invalid roster.
"""

import sys
from typing import Optional

from rich.console import Console

from battlesim.combat import run_battle
from battlesim.core.constants import DEFAULT_LOG_LEVEL
from battlesim.core.error_handling import BattleError
from battlesim.core.logging import log_debug, setup_logging
from battlesim.roster import load_roster
from battlesim.ui.report import report

# Console for usage and error messages.
_err_console = Console(stderr=True)


def _print_error(message: str) -> None:
    # Written to the console file directly so tabs and control characters
    # of the offending line are not rendered away.
    _err_console.file.write(f"{message}\n")


def main(argv: Optional[list[str]] = None) -> int:
    """
    Runs the simulator on the roster file given as first argument.

    Args:
        argv (list[str] | None): The command line arguments, without the
            program name. Defaults to sys.argv[1:].

    Returns:
        int: The process exit code.

    """
    args = sys.argv[1:] if argv is None else argv
    setup_logging(DEFAULT_LOG_LEVEL)

    if not args:
        _print_error("Usage: battlesim <filename>")
        return 1

    try:
        heroes, enemies = load_roster(args[0])
    except BattleError as e:
        log_debug(f"Roster rejected: {e}", e.context)
        _print_error(f"Error: {e}")
        return 1

    run_battle(heroes, enemies)
    sys.stdout.write(report(heroes, enemies))
    return 0


if __name__ == "__main__":
    sys.exit(main())
