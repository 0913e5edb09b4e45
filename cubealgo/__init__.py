"""Move sequence generator for the 3x3x3 Rubik's Cube.

Cube states and quarter turns, a meet-in-the-middle solver and a command
line front end.
"""

__version__ = "0.1.0"