"""
Roster loading: turns a roster file into ordered hero and enemy lists.
"""

from .roster_entry import RosterEntry
from .roster_loader import load_roster, parse_line

__all__ = ["RosterEntry", "load_roster", "parse_line"]
