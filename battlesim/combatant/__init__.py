"""
Combatant model: identity, combat state and the class-dispatched damage rule.
"""

from .combatant_factory import COMBATANT_TYPES, create_combatant, parse_combatant_class
from .enemy import Enemy
from .heroes import Archer, Mage, Warrior
from .main import AttackResult, Combatant

__all__ = [
    "COMBATANT_TYPES",
    "Archer",
    "AttackResult",
    "Combatant",
    "Enemy",
    "Mage",
    "Warrior",
    "create_combatant",
    "parse_combatant_class",
]
