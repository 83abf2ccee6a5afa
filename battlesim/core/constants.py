"""
Constants and enumerations for the battle simulator.

Defines the combatant classes and their special attacks, the status and
verdict labels printed in the final report, and the tunable rule constants
used by the combat engine.
"""

import logging
from enum import Enum

# Every n-th attack made by a combatant is its class special attack.
SPECIAL_ATTACK_INTERVAL = 3

# Flat bonus added to the Warrior's AP by Crushing Blow.
CRUSHING_BLOW_BONUS = 15

# Number of consecutive rounds without any HP change after which the battle
# can no longer progress.
STALEMATE_ROUNDS = SPECIAL_ATTACK_INTERVAL

# Logging level used by the command line driver.
DEFAULT_LOG_LEVEL = logging.WARNING


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class CombatantClass(NiceEnum):
    """Defines the class of a combatant, as spelled in roster files."""

    ARCHER = "Archer"
    WARRIOR = "Warrior"
    MAGE = "Mage"
    ENEMY = "Enemy"

    @property
    def is_hero(self) -> bool:
        """Returns True if combatants of this class fight for the party."""
        return self is not CombatantClass.ENEMY

    @property
    def special_name(self) -> str:
        """Returns the name of the special attack of this class."""
        return {
            CombatantClass.ARCHER: "Triple Shot",
            CombatantClass.WARRIOR: "Crushing Blow",
            CombatantClass.MAGE: "Arcane Blast",
            CombatantClass.ENEMY: "Savage Strike",
        }[self]

    @property
    def color(self) -> str:
        """Returns the color string associated with this class."""
        return {
            CombatantClass.ARCHER: "bold green",
            CombatantClass.WARRIOR: "bold yellow",
            CombatantClass.MAGE: "bold blue",
            CombatantClass.ENEMY: "bold red",
        }[self]

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies class color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class CombatantStatus(NiceEnum):
    """Defines the status shown for a combatant in the final report."""

    ALIVE = "Alive"
    DEFEATED = "Defeated"


class Verdict(NiceEnum):
    """Defines the possible outcomes of a battle."""

    HEROES_WIN = "Your party has won the battle!"
    ENEMIES_WIN = "The enemies have won the battle!"
    DRAW = "The battle ended in a draw!"
