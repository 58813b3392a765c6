"""
Patch notes document parser for wiki-rendered HTML.

Walks the top-level content of a patch notes page in document order:
1. <h2> starts a section (e.g. "Heroes") and resets the subsection
2. <h3> starts a subsection (e.g. "Zeus")
3. <ul> holds change lines; a leading <b> in a list item is a lead-in
   label (e.g. "Lightning Bolt") for that item's nested lines

Every change line is emitted with its context path and then classified.
"""
import logging
from typing import Iterator, List, NamedTuple, Optional, Sequence

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from patchdiff.consolidation.change_model import ChangeRecord, join_property
from patchdiff.consolidation.classifier import ChangeClassifier
from patchdiff.core.config import CONTENT_SELECTOR, IGNORED_SECTIONS

logger = logging.getLogger(__name__)


class ChangeLine(NamedTuple):
    """One raw change line with its structural position."""
    raw_line: str
    context_path: str
    version: str


class PatchNotesParser:
    """
    Parser for patch notes pages.

    Turns a page into (raw_line, context_path, version) lines and classifies
    them into change records.
    """

    def __init__(
        self,
        ignored_sections: Optional[Sequence[str]] = None,
        content_selector: str = CONTENT_SELECTOR,
        classifier: Optional[ChangeClassifier] = None,
    ):
        """
        Initialize the patch notes parser.

        Args:
            ignored_sections: Top-level sections to skip
                              (defaults to PATCHDIFF_IGNORED_SECTIONS)
            content_selector: CSS selector for the page's top-level content elements
            classifier: Line classifier (a default one is created if omitted)
        """
        if ignored_sections is None:
            ignored_sections = IGNORED_SECTIONS
        self.ignored_sections = set(ignored_sections)
        self.content_selector = content_selector
        self.classifier = classifier or ChangeClassifier()

    def iter_change_lines(self, html: str, version: str) -> Iterator[ChangeLine]:
        """
        Walk a patch notes page and yield its change lines in document order.

        Args:
            html: Page HTML
            version: Patch version of the page

        Yields:
            ChangeLine for every non-empty list item text outside ignored sections
        """
        soup = BeautifulSoup(html, 'html.parser')
        elements = soup.select(self.content_selector)
        if not elements:
            logger.warning(f"No content matched '{self.content_selector}' in version {version}")

        current_h2 = ""
        current_h3 = ""

        for element in elements:
            if element.name == "h2":
                current_h2 = self._heading_text(element)
                current_h3 = ""
            elif element.name == "h3":
                current_h3 = self._heading_text(element)
            elif element.name == "ul":
                if current_h2 in self.ignored_sections:
                    continue
                context = join_property(current_h2, current_h3)
                yield from self._iter_list(element, context, version)

    def parse_document(self, html: str, version: str) -> List[ChangeRecord]:
        """
        Parse a patch notes page into change records.

        Args:
            html: Page HTML
            version: Patch version of the page

        Returns:
            List of ChangeRecord, one per change line
        """
        records = [
            self.classifier.parse_text(line.raw_line, line.context_path, line.version)
            for line in self.iter_change_lines(html, version)
        ]
        logger.debug(f"Parsed {len(records)} change lines from version {version}")
        return records

    def _iter_list(self, ul: Tag, context: str, version: str) -> Iterator[ChangeLine]:
        """Yield the lines of a list and its nested lists."""
        for li in ul.find_all("li", recursive=False):
            label = self._lead_in_label(li)
            item_context = context
            if label is not None:
                item_context = join_property(context, label.get_text(strip=True))

            text = self._item_text(li, label)
            if text:
                yield ChangeLine(raw_line=text, context_path=item_context, version=version)

            for nested in li.find_all("ul", recursive=False):
                yield from self._iter_list(nested, item_context, version)

    @staticmethod
    def _heading_text(heading: Tag) -> str:
        # Wiki headings carry trailing "[edit]" links; the first string is the title
        return next(heading.stripped_strings, "")

    @staticmethod
    def _lead_in_label(li: Tag) -> Optional[Tag]:
        """Return the <b> opening a list item, if the item starts with one."""
        for child in li.children:
            if isinstance(child, Comment):
                continue
            if isinstance(child, NavigableString):
                if child.strip():
                    return None
                continue
            return child if child.name == "b" else None
        return None

    @staticmethod
    def _item_text(li: Tag, label: Optional[Tag]) -> str:
        """Own text of a list item, without its label and nested lists."""
        parts = []
        for child in li.children:
            if child is label or isinstance(child, Comment):
                continue
            if isinstance(child, NavigableString):
                parts.append(str(child))
            elif child.name != "ul":
                parts.append(child.get_text())
        text = " ".join("".join(parts).split())
        if label is not None:
            text = text.lstrip(":").strip()
        return text


def parse_patch_document(html: str, version: str) -> List[ChangeRecord]:
    """
    Parse a patch notes page with the default parser settings.

    Args:
        html: Page HTML
        version: Patch version of the page

    Returns:
        List of ChangeRecord
    """
    parser = PatchNotesParser()
    return parser.parse_document(html, version)
