"""
Utility functions module.

Time Semantics:
- ESPN event timestamps are UTC and authoritative for ordering
- Local time is only used for display
- Scoreboard date windows are computed in the viewer's local calendar
"""
