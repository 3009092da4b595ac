"""
sportsterminal - Live sports scores in the terminal

A terminal interface for browsing live and upcoming games from ESPN's public
scoreboard API, with drill-down into box scores, leaders and recent plays.
"""

__version__ = "1.0.0"
__author__ = "sportsterminal contributors"
