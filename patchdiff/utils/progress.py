"""
Progress tracking utilities for reading patch notes corpora.
"""
import logging
from datetime import datetime
from typing import Optional

logger = logging.getLogger(__name__)

# Logged once each as progress crosses them
MILESTONES = (0.25, 0.50, 0.75)


class ProgressTracker:
    """
    Simple progress tracker logging milestones of a long-running operation.
    """

    def __init__(self, enabled: bool = True, label: str = "items"):
        """
        Initialize progress tracker.

        Args:
            enabled: Whether progress tracking is enabled
            label: Noun used in log messages (e.g. "versions")
        """
        self.enabled = enabled
        self.label = label
        self.start_time: Optional[datetime] = None
        self.current_item = 0
        self.total_items = 0

    def start(self, total: int):
        """
        Start tracking progress.

        Args:
            total: Total number of items to process
        """
        if not self.enabled:
            return

        self.total_items = total
        self.current_item = 0
        self.start_time = datetime.now()

        logger.info(f"Starting processing of {total} {self.label}...")

    def update(self, increment: int = 1):
        """
        Update progress.

        Args:
            increment: Number of items completed since last update
        """
        if not self.enabled:
            return

        previous = self.current_item
        self.current_item += increment

        if self.total_items <= 0 or self.current_item >= self.total_items:
            return

        for milestone in MILESTONES:
            threshold = self.total_items * milestone
            if previous < threshold <= self.current_item:
                self._log_progress(self.current_item / self.total_items * 100)
                break

    def _log_progress(self, percentage: float):
        """Log progress at percentage milestone."""
        elapsed = self._get_elapsed_seconds()
        logger.info(
            f"  Progress: {self.current_item}/{self.total_items} {self.label} "
            f"({percentage:.1f}%) - {elapsed:.1f}s elapsed"
        )

    def finish(self):
        """Finish tracking progress."""
        if not self.enabled:
            return

        elapsed = self._get_elapsed_seconds()
        logger.info(
            f"Completed {self.current_item}/{self.total_items} {self.label} "
            f"in {elapsed:.1f}s"
        )

    def _get_elapsed_seconds(self) -> float:
        """Get elapsed time in seconds."""
        if self.start_time:
            return (datetime.now() - self.start_time).total_seconds()
        return 0.0
