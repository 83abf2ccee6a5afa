"""
Combatant module for the simulator.

Defines the Combatant base class, which holds a combatant's identity and
mutable combat state, and the AttackResult model describing a single attack.
Subclasses provide the class-specific special attack.
"""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, Field

from battlesim.core.constants import (
    SPECIAL_ATTACK_INTERVAL,
    CombatantClass,
    CombatantStatus,
)
from battlesim.core.logging import log_debug


class AttackResult(BaseModel):
    """Describes the outcome of one attack from one combatant to another."""

    attacker: str = Field(
        description="The name of the attacking combatant.",
    )
    target: str = Field(
        description="The name of the combatant that was attacked.",
    )
    attack_number: int = Field(
        description="The attacker's attack count after this attack.",
    )
    special: bool = Field(
        description="Whether the attacker used its class special attack.",
    )
    damage: int = Field(
        description="The damage computed for the attack.",
    )
    target_hp_before: int = Field(
        description="The HP of the target when the attack was dispatched.",
    )
    target_hp_after: int = Field(
        description="The HP of the target after the damage was applied.",
    )


class Combatant(ABC):
    """
    Represents a single combatant: its name, class, hit points, attack
    points and the number of attacks it has made so far.

    Attributes:
        combatant_class (CombatantClass):
            The class of the combatant, set by each subclass.
        name (str):
            The display name of the combatant.
        hp (int):
            The current hit points, never below 0 and never above hp_max.
        hp_max (int):
            The hit points the combatant started with.
        ap (int):
            The attack points, i.e. the damage of a normal attack.
        attack_count (int):
            The number of attacks this combatant has initiated.

    """

    combatant_class: CombatantClass

    def __init__(self, name: str, hp: int, ap: int) -> None:
        self.name = name
        self.hp_max = max(0, hp)
        self.hp = self.hp_max
        self.ap = ap
        self.attack_count = 0

    @property
    def colored_name(self) -> str:
        """Returns the combatant's name colored by its class."""
        return self.combatant_class.colorize(self.name)

    @property
    def status(self) -> CombatantStatus:
        """Returns the status of the combatant."""
        if self.is_alive():
            return CombatantStatus.ALIVE
        return CombatantStatus.DEFEATED

    def is_alive(self) -> bool:
        """Returns True if the combatant has any hit points left."""
        return self.hp > 0

    def receive_damage(self, damage: int) -> int:
        """
        Reduces the combatant's HP by the given damage, never below 0.

        Negative damage is treated as 0, combatants are never healed.

        Args:
            damage (int): The amount of damage to receive.

        Returns:
            int: The HP actually lost.

        """
        before = self.hp
        self.hp = max(0, self.hp - max(0, damage))
        log_debug(
            f"{self.colored_name} takes {before - self.hp} damage "
            f"(requested: {damage}, remaining HP: {self.hp})"
        )
        return before - self.hp

    def is_special_attack(self, attack_number: int) -> bool:
        """Returns True if the given attack number triggers a special attack."""
        return attack_number % SPECIAL_ATTACK_INTERVAL == 0

    def attack(self, target: "Combatant") -> Optional[AttackResult]:
        """
        Attacks the target, using the special attack on every third attack.

        Does nothing when the attacker is already defeated.

        Args:
            target (Combatant): The combatant to attack.

        Returns:
            AttackResult | None: The outcome, or None if no attack was made.

        """
        if not self.is_alive():
            return None
        self.attack_count += 1
        special = self.is_special_attack(self.attack_count)
        # The damage is computed against the target's current state.
        damage = self.special_damage(target) if special else self.ap
        target_hp_before = target.hp
        target.receive_damage(damage)
        return AttackResult(
            attacker=self.name,
            target=target.name,
            attack_number=self.attack_count,
            special=special,
            damage=damage,
            target_hp_before=target_hp_before,
            target_hp_after=target.hp,
        )

    @abstractmethod
    def special_damage(self, target: "Combatant") -> int:
        """
        Computes the damage of this combatant's special attack.

        Args:
            target (Combatant): The combatant about to be hit.

        Returns:
            int: The damage of the special attack.

        """

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, hp={self.hp}, "
            f"ap={self.ap}, attack_count={self.attack_count})"
        )
