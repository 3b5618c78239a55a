"""
Duel Pong - two-player Pong on a resizable 16:9 court
"""

__version__ = "0.1.0"
