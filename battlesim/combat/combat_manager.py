# combat_manager.py
from typing import Optional

from catchery import log_debug

from battlesim.combatant import Combatant
from battlesim.core.constants import STALEMATE_ROUNDS

from .combat_log import CombatLog


def first_alive(side: list[Combatant]) -> Optional[Combatant]:
    """Returns the first combatant of the side that is still alive, if any."""
    for combatant in side:
        if combatant.is_alive():
            return combatant
    return None


def total_hp(side: list[Combatant]) -> int:
    """Returns the sum of the current HP of a side."""
    return sum(combatant.hp for combatant in side)


class CombatManager:
    """Drives a battle between the heroes and the enemies until it ends.

    A round is a hero phase followed by an enemy phase. In each phase every
    alive combatant of the acting side, in roster order, attacks the first
    alive combatant of the other side. The battle ends as soon as one side
    has nobody left to attack or to be attacked.
    """

    def __init__(self, heroes: list[Combatant], enemies: list[Combatant]):
        """Initialize the CombatManager with the two sides.

        Args:
            heroes (list[Combatant]): The party, in roster order.
            enemies (list[Combatant]): The enemies, in roster order.

        """
        self.heroes: list[Combatant] = heroes
        self.enemies: list[Combatant] = enemies

        # The number of rounds started so far.
        self.round_number: int = 0

        # History of every attack.
        self.log: CombatLog = CombatLog()

        # Consecutive complete rounds in which no HP changed.
        self._idle_rounds: int = 0

    def is_combat_over(self) -> bool:
        """Determines if combat has ended.

        Returns:
            bool: True if either side has no alive combatant.

        """
        return first_alive(self.heroes) is None or first_alive(self.enemies) is None

    def run_phase(self, attackers: list[Combatant], defenders: list[Combatant]) -> bool:
        """Lets every alive attacker strike the first alive defender.

        The target is selected again for each attacker, so a defender
        defeated earlier in the phase is not attacked again.

        Args:
            attackers (list[Combatant]): The acting side.
            defenders (list[Combatant]): The side being attacked.

        Returns:
            bool: False if an attacker found no defender left, True otherwise.

        """
        for attacker in attackers:
            if not attacker.is_alive():
                continue
            target = first_alive(defenders)
            if target is None:
                return False
            result = attacker.attack(target)
            if result is not None:
                event = self.log.record(self.round_number, result)
                if event.special:
                    log_debug(f"{event} ({attacker.combatant_class.special_name})")
                else:
                    log_debug(str(event))
        return True

    def run_round(self) -> bool:
        """Runs a single round: the hero phase, then the enemy phase.

        Returns:
            bool: True if the battle must continue with another round.

        """
        self.round_number += 1
        self.log.rounds = self.round_number
        hp_before = total_hp(self.heroes) + total_hp(self.enemies)

        if not self.run_phase(self.heroes, self.enemies):
            log_debug("No enemy left to attack. Combat ends.")
            return False
        if first_alive(self.enemies) is None:
            log_debug("All enemies defeated! Combat ends.")
            return False
        if not self.run_phase(self.enemies, self.heroes):
            log_debug("No hero left to attack. Combat ends.")
            return False
        if first_alive(self.heroes) is None:
            log_debug("All heroes defeated! Combat ends.")
            return False

        # Within STALEMATE_ROUNDS idle rounds every attacker has tried all of
        # its attacks on unchanged targets, so nothing can change anymore.
        if total_hp(self.heroes) + total_hp(self.enemies) == hp_before:
            self._idle_rounds += 1
        else:
            self._idle_rounds = 0
        if self._idle_rounds >= STALEMATE_ROUNDS:
            self.log.stalemate = True
            log_debug(
                f"No damage dealt for {self._idle_rounds} rounds. Combat ends in a stalemate."
            )
            return False
        return True

    def run(self) -> CombatLog:
        """Runs rounds until the battle ends.

        Returns:
            CombatLog: The history of the battle.

        """
        while self.run_round():
            pass
        return self.log


def run_battle(heroes: list[Combatant], enemies: list[Combatant]) -> CombatLog:
    """
    Runs a battle between the heroes and the enemies, mutating their state.

    Args:
        heroes (list[Combatant]): The party, in roster order.
        enemies (list[Combatant]): The enemies, in roster order.

    Returns:
        CombatLog: The history of the battle.

    """
    return CombatManager(heroes, enemies).run()
