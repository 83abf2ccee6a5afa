"""
Core module for the battle simulator.

This module contains the constants, the error taxonomy and the logging setup
shared by the rest of the simulator.
"""
