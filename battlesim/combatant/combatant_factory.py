from battlesim.core.constants import CombatantClass
from battlesim.core.error_handling import UnknownClassError

from .enemy import Enemy
from .heroes import Archer, Mage, Warrior
from .main import Combatant

COMBATANT_TYPES: dict[CombatantClass, type[Combatant]] = {
    CombatantClass.ARCHER: Archer,
    CombatantClass.WARRIOR: Warrior,
    CombatantClass.MAGE: Mage,
    CombatantClass.ENEMY: Enemy,
}


def parse_combatant_class(class_name: str) -> CombatantClass:
    """
    Resolves a class name, as written in a roster file, to its CombatantClass.

    Args:
        class_name (str): The case-sensitive class name (e.g. "Archer").

    Raises:
        UnknownClassError: If the name is not one of the supported classes.

    """
    try:
        return CombatantClass(class_name)
    except ValueError as e:
        raise UnknownClassError(class_name) from e


def create_combatant(class_name: str, name: str, hp: int, ap: int) -> Combatant:
    """
    Creates a combatant of the class named by `class_name`.

    Supported classes:
        - "Archer", "Warrior", "Mage": heroes
        - "Enemy": enemies

    Args:
        class_name (str): The case-sensitive class name.
        name (str): The display name of the combatant.
        hp (int): The starting hit points.
        ap (int): The attack points.

    Returns:
        Combatant: The new combatant.

    Raises:
        UnknownClassError: If the class name is not supported.

    """
    combatant_class = parse_combatant_class(class_name)
    return COMBATANT_TYPES[combatant_class](name, hp, ap)
