"""
Combat system module for the battle simulator.

This module drives the rounds of a battle, records each attack and decides
the outcome once the battle is over.
"""

from .combat_log import AttackEvent, CombatLog
from .combat_manager import CombatManager, first_alive, run_battle
from .outcome import determine_verdict

__all__ = [
    "AttackEvent",
    "CombatLog",
    "CombatManager",
    "determine_verdict",
    "first_alive",
    "run_battle",
]
