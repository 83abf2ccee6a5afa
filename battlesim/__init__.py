"""
Battle simulator package.

This package contains the modules of a deterministic, turn-based
party-versus-enemy battle simulator: the combatant model, the roster loader,
the combat engine and the final report.
"""
