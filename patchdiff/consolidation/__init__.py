"""
Change consolidation for patch notes.

This module provides functionality to:
1. Classify patch note lines into structured change records
2. Merge the records of a version range into net changes
3. Render net changes back to patch note lines
"""
from patchdiff.consolidation.change_model import (
    PROPERTY_SEPARATOR,
    AbsoluteChange,
    ChangeData,
    ChangeRecord,
    OtherChange,
    RelativeChange,
    diff_change_data,
)
from patchdiff.consolidation.classifier import ChangeClassifier, parse_text
from patchdiff.consolidation.diff_engine import PatchDiffEngine, patch_diff
from patchdiff.consolidation.renderer import absolute_change_direction, write_text

__all__ = [
    "PROPERTY_SEPARATOR",
    "AbsoluteChange",
    "ChangeData",
    "ChangeRecord",
    "OtherChange",
    "RelativeChange",
    "diff_change_data",
    "ChangeClassifier",
    "parse_text",
    "PatchDiffEngine",
    "patch_diff",
    "absolute_change_direction",
    "write_text",
]
