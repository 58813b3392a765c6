"""
Patch Diff Engine for Patch Notes.

This module collapses the edits of several patch versions into net changes:
- Records are sorted by property, then version, then change data
- Consecutive mergeable edits of a property fold into one record
- An edit that cannot be merged (a free-form note, a different change
  kind) starts a new run instead of failing the whole diff

Versions are assumed to sort chronologically as plain strings
("7.32" < "7.32a" < "7.33"); this is not checked.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, List

from patchdiff.consolidation.change_model import ChangeRecord
from patchdiff.core.exceptions import MergeError

logger = logging.getLogger(__name__)


@dataclass
class MergeStats:
    """Counters describing the last merge."""
    records_in: int = 0
    records_out: int = 0
    merges: int = 0
    run_breaks: int = 0


class PatchDiffEngine:
    """
    Engine for folding chronological change records into net changes.

    Each property ends up as one or more runs. A run is a maximal stretch of
    sorted records that merge cleanly; its accumulator is replaced (never
    mutated) each time a later record folds into it.
    """

    def __init__(self):
        """Initialize the diff engine."""
        self.stats = MergeStats()

    def merge(self, records: Iterable[ChangeRecord]) -> List[ChangeRecord]:
        """
        Merge change records into net changes.

        Args:
            records: Change records from any number of versions, in any order

        Returns:
            One record per run, in sorted property order. Zero-sum relative
            runs are kept as RelativeChange(0).
        """
        ordered = sorted(records)
        self.stats = MergeStats(records_in=len(ordered))

        result: List[ChangeRecord] = []
        for current in ordered:
            if not result:
                result.append(current)
                continue

            try:
                result[-1] = ChangeRecord.diff(result[-1], current)
                self.stats.merges += 1
            except MergeError as e:
                if result[-1].property == current.property:
                    self.stats.run_breaks += 1
                    logger.debug(f"Run break on '{current.property}' at {current.version}: {e.message}")
                result.append(current)

        self.stats.records_out = len(result)
        logger.debug(
            f"Merged {self.stats.records_in} records into {self.stats.records_out} "
            f"({self.stats.merges} merges, {self.stats.run_breaks} run breaks)"
        )
        return result


def patch_diff(records: Iterable[ChangeRecord]) -> List[ChangeRecord]:
    """
    Collapse change records into net changes.

    Convenience function for a one-off merge.

    Args:
        records: Change records from any number of versions, in any order

    Returns:
        Net change records, one per run

    Example:
        >>> merged = patch_diff(old_patch + new_patch)
    """
    engine = PatchDiffEngine()
    return engine.merge(records)
