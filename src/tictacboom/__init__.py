"""
Tic-Tac-Boom: rules and computer opponent for exploding 3D tic-tac-toe.
"""

__version__ = "0.1.0"
