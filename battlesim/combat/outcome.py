from typing import Optional

from battlesim.combatant import Combatant
from battlesim.core.constants import Verdict


def determine_verdict(
    heroes: list[Combatant], enemies: list[Combatant]
) -> Optional[Verdict]:
    """
    Determines the outcome of the battle from the state of both sides.

    Args:
        heroes (list[Combatant]): The party.
        enemies (list[Combatant]): The enemies.

    Returns:
        Verdict | None: The outcome, or None while both sides have someone alive.

    """
    any_hero_alive = any(hero.is_alive() for hero in heroes)
    any_enemy_alive = any(enemy.is_alive() for enemy in enemies)
    if any_hero_alive and not any_enemy_alive:
        return Verdict.HEROES_WIN
    if not any_hero_alive and any_enemy_alive:
        return Verdict.ENEMIES_WIN
    if not any_hero_alive and not any_enemy_alive:
        return Verdict.DRAW
    return None
