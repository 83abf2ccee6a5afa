"""
Roster loader module for the simulator.

Parses a roster file, one `<class> <name> <hp> <ap>` record per line, into
the ordered list of heroes and the ordered list of enemies.
"""

from pathlib import Path

from battlesim.combatant import Combatant, create_combatant
from battlesim.core.error_handling import RosterFormatError, RosterOpenError
from battlesim.core.logging import log_debug, log_info

from .roster_entry import RosterEntry


def parse_line(line: str) -> Combatant:
    """
    Creates a combatant from a single roster line.

    Args:
        line (str): The roster line, without its line terminator.

    Returns:
        Combatant: The combatant described by the line.

    Raises:
        RosterFormatError: If the line does not hold four well-formed fields.
        UnknownClassError: If the class is not a supported one.

    """
    try:
        entry = RosterEntry.from_line(line)
    except ValueError as e:
        raise RosterFormatError(line) from e
    return create_combatant(entry.class_name, entry.name, entry.hp, entry.ap)


def load_roster(path: str | Path) -> tuple[list[Combatant], list[Combatant]]:
    """
    Loads the heroes and the enemies listed in a roster file.

    Blank lines are skipped. Both lists keep the order of the file. Nothing
    is returned if any line is invalid.

    Args:
        path (str | Path): The path of the roster file.

    Returns:
        tuple[list[Combatant], list[Combatant]]: The heroes and the enemies.

    Raises:
        RosterOpenError: If the file cannot be opened or decoded.
        RosterFormatError: If a line is malformed.
        UnknownClassError: If a line names an unsupported class.

    """
    heroes: list[Combatant] = []
    enemies: list[Combatant] = []

    try:
        handle = open(path, encoding="utf-8")
    except OSError as e:
        raise RosterOpenError(str(path)) from e

    try:
        with handle:
            for line_number, raw_line in enumerate(handle, start=1):
                line = raw_line.rstrip("\r\n")
                if not line.strip():
                    continue
                combatant = parse_line(line)
                if combatant.combatant_class.is_hero:
                    heroes.append(combatant)
                else:
                    enemies.append(combatant)
                log_debug(
                    f"Loaded {combatant.combatant_class.colored_name} "
                    f"{combatant.colored_name}",
                    {"line": line_number, "hp": combatant.hp, "ap": combatant.ap},
                )
    except UnicodeDecodeError as e:
        raise RosterOpenError(str(path)) from e

    log_info(
        f"Loaded roster with {len(heroes)} heroes and {len(enemies)} enemies",
        {"path": path},
    )
    return heroes, enemies
