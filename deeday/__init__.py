"""
Deeday - Source Package

A small birthday tracker for families. Members are kept in a local
roster and each one is shown with the days left until their next
birthday and the age they will turn.

DESIGN PRINCIPLES:
1. The roster in memory is the source of truth for a session
2. Storage is injected and swappable
3. Bad stored data never crashes the app
4. Date math works on calendar dates only, never timestamps
"""

__version__ = "1.0.0"
__author__ = "Deeday Team"
