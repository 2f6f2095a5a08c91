"""
Duck Game Podium Detection

Reads Duck Game end-of-round podium screenshots:
- Number of players (from the score placards)
- Victor banner fingerprint (two-tone pixel classification)
- Album-wide grouping of rounds by victor
"""

__version__ = "0.1.0"
