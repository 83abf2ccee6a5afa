"""
Final battle report.

Formats the state of every combatant after the battle, heroes first and
enemies second, each side in roster order, followed by the verdict.
"""

from battlesim.combat import determine_verdict
from battlesim.combatant import Combatant


def format_status_line(combatant: Combatant) -> str:
    """
    Formats the final state of a combatant.

    Args:
        combatant (Combatant): The combatant to describe.

    Returns:
        str: A line like "Orc - HP: 0, Status: Defeated".

    """
    return f"{combatant.name} - HP: {combatant.hp}, Status: {combatant.status.value}"


def report(heroes: list[Combatant], enemies: list[Combatant]) -> str:
    """
    Builds the final battle report.

    The verdict line is omitted when both sides still have someone alive.

    Args:
        heroes (list[Combatant]): The party.
        enemies (list[Combatant]): The enemies.

    Returns:
        str: The report, every line terminated by a newline.

    """
    lines = [format_status_line(combatant) for combatant in heroes + enemies]
    verdict = determine_verdict(heroes, enemies)
    if verdict is not None:
        lines.append(verdict.value)
    return "".join(f"{line}\n" for line in lines)
