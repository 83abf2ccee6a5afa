"""
Roster entry module for the simulator.

A RosterEntry is one validated record of a roster file, before it is turned
into a combatant.
"""

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

# Decimal integer with an optional sign.
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


class RosterEntry(BaseModel):
    """Represents the four fields of a roster record."""

    class_name: str = Field(
        description="The class of the combatant, as written in the file.",
    )
    name: str = Field(
        description="The display name of the combatant.",
    )
    hp: int = Field(
        description="The starting hit points.",
    )
    ap: int = Field(
        description="The attack points.",
    )

    @field_validator("hp", "ap", mode="before")
    @classmethod
    def _parse_integer_token(cls, value: Any) -> Any:
        """Only accepts plain decimal integers for textual values."""
        if isinstance(value, str):
            if not INTEGER_TOKEN.fullmatch(value):
                raise ValueError(f"'{value}' is not a decimal integer")
            return int(value)
        return value

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if not self.class_name:
            raise ValueError("class_name must be a non-empty string")
        if not self.name:
            raise ValueError("name must be a non-empty string")

    @classmethod
    def from_line(cls, line: str) -> "RosterEntry":
        """
        Builds an entry from a roster line.

        Fields are separated by runs of whitespace; tokens past the fourth
        are ignored.

        Args:
            line (str): The roster line, without its line terminator.

        Raises:
            ValueError: If the line does not hold four well-formed fields.

        """
        tokens = line.split()
        if len(tokens) < 4:
            raise ValueError(f"expected 4 fields, found {len(tokens)}")
        class_name, name, hp, ap = tokens[:4]
        return cls(class_name=class_name, name=name, hp=hp, ap=ap)
