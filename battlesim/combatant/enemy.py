from battlesim.core.constants import CombatantClass

from .main import Combatant


class Enemy(Combatant):
    """Enemy, whose Savage Strike deals twice its AP."""

    combatant_class = CombatantClass.ENEMY

    def special_damage(self, target: Combatant) -> int:
        return 2 * self.ap
