"""
Consolidation Orchestrator for Patch Notes.

This module orchestrates a version range diff:
1. Enumerate the patch notes pages saved in the corpus directory
2. Select the pages of the requested version range (inclusive)
3. Parse and classify every change line of every selected page
4. Merge the changes into net changes and write the diff document

Usage:
    python -m patchdiff.consolidation.consolidate --from 7.32 --to 7.32c
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from patchdiff.consolidation.change_model import ChangeRecord
from patchdiff.consolidation.diff_engine import PatchDiffEngine
from patchdiff.core.config import (
    DEFAULT_FROM_VERSION,
    DEFAULT_TO_VERSION,
    HTML_DIR,
    LOG_LEVEL,
    OUTPUT_FILE,
    PROGRESS_ENABLED,
)
from patchdiff.core.exceptions import ConfigurationError, ParsingError, PatchDiffError, ValidationError
from patchdiff.core.logging import setup_logging
from patchdiff.parser.html_parser import PatchNotesParser
from patchdiff.parser.html_writer import render_diff_text, save_diff_as_html
from patchdiff.utils.progress import ProgressTracker

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIX = ".html"


class PatchDiffConsolidator:
    """
    Orchestrates the diff of a patch notes corpus over a version range.

    The corpus is a directory holding one "<version>.html" page per patch.
    Version names must sort chronologically as strings.
    """

    def __init__(
        self,
        html_dir: Optional[Path] = None,
        output_file: str = OUTPUT_FILE,
        parser: Optional[PatchNotesParser] = None,
        progress_enabled: bool = PROGRESS_ENABLED,
    ):
        """
        Initialize the consolidator.

        Args:
            html_dir: Corpus directory (defaults to PATCHDIFF_HTML_DIR)
            output_file: File name of the diff document inside html_dir
            parser: Patch notes parser (a default one is created if omitted)
            progress_enabled: Whether to log reading progress
        """
        self.html_dir = Path(html_dir) if html_dir is not None else HTML_DIR
        self.output_file = output_file
        self.parser = parser or PatchNotesParser()
        self.diff_engine = PatchDiffEngine()
        self.progress_enabled = progress_enabled

    @property
    def output_path(self) -> Path:
        return self.html_dir / self.output_file

    def get_version_list(self) -> List[str]:
        """
        List the versions available in the corpus, oldest first.

        Returns:
            Sorted version names (file stems), excluding the diff document

        Raises:
            ConfigurationError: If the corpus directory does not exist
        """
        if not self.html_dir.is_dir():
            raise ConfigurationError(
                "Patch notes directory not found",
                config_key="PATCHDIFF_HTML_DIR",
                config_file=str(self.html_dir),
            )

        versions = [
            path.stem
            for path in self.html_dir.iterdir()
            if path.is_file() and path.suffix == DOCUMENT_SUFFIX and path.name != self.output_file
        ]
        return sorted(versions)

    def select_versions(self, from_version: str, to_version: str) -> List[str]:
        """
        Select the versions of an inclusive range.

        The bounds may be given in either order.

        Args:
            from_version: One end of the range
            to_version: The other end of the range

        Returns:
            Versions in the range, oldest first

        Raises:
            ValidationError: If a bound is not in the corpus
        """
        if from_version > to_version:
            from_version, to_version = to_version, from_version

        versions = self.get_version_list()
        for bound in (from_version, to_version):
            if bound not in versions:
                raise ValidationError(
                    "Version not found in patch notes directory",
                    details={"available": ", ".join(versions) or "none"},
                    field_name="version",
                    field_value=bound,
                )

        start = versions.index(from_version)
        end = versions.index(to_version)
        return versions[start:end + 1]

    def read_document(self, version: str) -> str:
        """
        Read the patch notes page of a version.

        Raises:
            ParsingError: If the page cannot be read
        """
        path = self.html_dir / f"{version}{DOCUMENT_SUFFIX}"
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ParsingError(
                f"Failed to read patch notes page: {e}",
                details={"path": str(path)},
                version=version,
                parser_type="html",
            ) from e

    def collect_changes(self, from_version: str, to_version: str) -> List[ChangeRecord]:
        """
        Parse every change line of every version in a range.

        Args:
            from_version: One end of the range
            to_version: The other end of the range

        Returns:
            Change records of all selected versions, in document order
        """
        versions = self.select_versions(from_version, to_version)
        logger.info(f"Collecting changes from {len(versions)} versions: {versions[0]} .. {versions[-1]}")

        progress = ProgressTracker(enabled=self.progress_enabled, label="versions")
        progress.start(len(versions))

        records: List[ChangeRecord] = []
        for version in versions:
            html = self.read_document(version)
            version_records = self.parser.parse_document(html, version)
            logger.debug(f"Version {version}: {len(version_records)} changes")
            records.extend(version_records)
            progress.update()

        progress.finish()
        return records

    def get_diff_between(self, from_version: str, to_version: str) -> List[ChangeRecord]:
        """
        Compute the net changes of a version range.

        Returns:
            Merged change records in sorted order
        """
        records = self.collect_changes(from_version, to_version)
        return self.diff_engine.merge(records)

    def save_diff(self, records: List[ChangeRecord]) -> Path:
        """Write merged change records to the diff document."""
        return save_diff_as_html(records, self.output_path)

    def consolidate(self, from_version: str, to_version: str, save: bool = True) -> Dict[str, Any]:
        """
        Compute and optionally save the diff of a version range.

        Args:
            from_version: One end of the range
            to_version: The other end of the range
            save: Whether to write the diff document

        Returns:
            Dictionary with consolidation results
        """
        results: Dict[str, Any] = {
            'from_version': min(from_version, to_version),
            'to_version': max(from_version, to_version),
            'status': 'started',
            'changes_collected': 0,
            'net_changes': 0,
            'run_breaks': 0,
            'lines': [],
            'output_path': None,
        }

        merged = self.get_diff_between(from_version, to_version)
        stats = self.diff_engine.stats
        lines = render_diff_text(merged)

        results['changes_collected'] = stats.records_in
        results['net_changes'] = len(lines)
        results['run_breaks'] = stats.run_breaks
        results['lines'] = lines

        if save:
            results['output_path'] = str(self.save_diff(merged))

        results['status'] = 'completed'
        logger.info(
            f"Diff {results['from_version']} -> {results['to_version']}: "
            f"{results['changes_collected']} changes, {results['net_changes']} net changes"
        )
        return results


def consolidate_diff(
    from_version: str,
    to_version: str,
    html_dir: Optional[Path] = None,
    save: bool = True,
) -> Dict[str, Any]:
    """
    Diff a version range of a patch notes corpus.

    Convenience function for one-off diffs.

    Args:
        from_version: One end of the range
        to_version: The other end of the range
        html_dir: Corpus directory (defaults to PATCHDIFF_HTML_DIR)
        save: Whether to write the diff document

    Returns:
        Dictionary with consolidation results

    Example:
        >>> results = consolidate_diff('7.32', '7.32c')
        >>> print(f"{results['net_changes']} net changes")
    """
    consolidator = PatchDiffConsolidator(html_dir=html_dir)
    return consolidator.consolidate(from_version, to_version, save=save)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command-line usage."""
    parser = argparse.ArgumentParser(description="Diff a range of patch notes into net changes")
    parser.add_argument(
        '--from',
        dest='from_version',
        default=DEFAULT_FROM_VERSION or None,
        required=not DEFAULT_FROM_VERSION,
        help='First version of the range (e.g. 7.32)',
    )
    parser.add_argument(
        '--to',
        dest='to_version',
        default=DEFAULT_TO_VERSION or None,
        required=not DEFAULT_TO_VERSION,
        help='Last version of the range (e.g. 7.32c)',
    )
    parser.add_argument(
        '--html-dir',
        type=Path,
        default=HTML_DIR,
        help='Directory holding one <version>.html page per patch',
    )
    parser.add_argument(
        '--output',
        default=OUTPUT_FILE,
        help='File name of the diff document written into --html-dir',
    )
    parser.add_argument(
        '--text',
        action='store_true',
        help='Print the net changes instead of writing the diff document',
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging',
    )

    args = parser.parse_args(argv)

    setup_logging("patchdiff", level="DEBUG" if args.verbose else LOG_LEVEL)

    consolidator = PatchDiffConsolidator(html_dir=args.html_dir, output_file=args.output)
    try:
        results = consolidator.consolidate(args.from_version, args.to_version, save=not args.text)
    except PatchDiffError as e:
        logger.error(f"Diff failed: {e}")
        return 1

    if args.text:
        for line in results['lines']:
            print(line)
        return 0

    print("\n" + "="*60)
    print("Patch Diff Results")
    print("="*60)
    print(f"Range: {results['from_version']} -> {results['to_version']}")
    print(f"Status: {results['status']}")
    print(f"Changes collected: {results['changes_collected']}")
    print(f"Net changes: {results['net_changes']}")
    print(f"Output: {results['output_path']}")
    print("="*60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
