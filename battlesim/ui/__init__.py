"""
User-facing output of the battle simulator.
"""
