"""
Terminal user interface.

Navigation state, key handling and rendering are plain Python and testable
without a terminal; only ``app`` touches curses.
"""
