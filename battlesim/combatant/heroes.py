"""
Hero classes: the combatants that fight for the player's party.
"""

from battlesim.core.constants import CRUSHING_BLOW_BONUS, CombatantClass

from .main import Combatant


class Archer(Combatant):
    """Archer, whose Triple Shot deals three times its AP."""

    combatant_class = CombatantClass.ARCHER

    def special_damage(self, target: Combatant) -> int:
        return 3 * self.ap


class Warrior(Combatant):
    """Warrior, whose Crushing Blow adds a flat bonus to its AP."""

    combatant_class = CombatantClass.WARRIOR

    def special_damage(self, target: Combatant) -> int:
        return self.ap + CRUSHING_BLOW_BONUS


class Mage(Combatant):
    """
    Mage, whose Arcane Blast deals twice its AP plus half of the target's
    current HP.
    """

    combatant_class = CombatantClass.MAGE

    def special_damage(self, target: Combatant) -> int:
        # HP is never negative, so floor division truncates toward zero.
        return 2 * self.ap + target.hp // 2
