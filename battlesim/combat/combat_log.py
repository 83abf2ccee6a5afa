"""
Combat log module for the simulator.

Records every attack of a battle together with the round it happened in.
"""

from pydantic import BaseModel, Field

from battlesim.combatant import AttackResult


class AttackEvent(AttackResult):
    """An attack, as it happened during a specific round."""

    round_number: int = Field(
        description="The round in which the attack took place, starting at 1.",
    )

    def __str__(self) -> str:
        kind = "special" if self.special else "normal"
        return (
            f"Round {self.round_number}: {self.attacker} attack #{self.attack_number} "
            f"({kind}, {self.damage}) -> {self.target} HP {self.target_hp_after}"
        )


class CombatLog(BaseModel):
    """The history of a battle."""

    events: list[AttackEvent] = Field(
        default_factory=list,
        description="Every attack, in the order it was made.",
    )
    rounds: int = Field(
        default=0,
        description="The number of rounds that were started.",
    )
    stalemate: bool = Field(
        default=False,
        description="Whether the battle stopped because no HP could change anymore.",
    )

    def record(self, round_number: int, result: AttackResult) -> AttackEvent:
        """
        Appends an attack to the log.

        Args:
            round_number (int): The current round.
            result (AttackResult): The outcome of the attack.

        Returns:
            AttackEvent: The recorded event.

        """
        event = AttackEvent(round_number=round_number, **result.model_dump())
        self.events.append(event)
        return event

    def attacks_by(self, name: str) -> list[AttackEvent]:
        """Returns the attacks made by the combatants with the given name."""
        return [event for event in self.events if event.attacker == name]
