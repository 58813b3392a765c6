"""
patchdiff: consolidated diffs of game patch notes.

Reads successive patch notes pages and collapses every edit made to a
property over a version range into one net change.
"""

__version__ = "0.1.0"
