"""
Consolidated diff document writer.

Renders merged change records as a nested HTML fragment mirroring the
layout of a patch notes page:

    <div>
      <h2>Items</h2>
      <h3>Blade Mail</h3>
      <ul>
        <li>Duration increased from 4.5s to 6.5s</li>
      </ul>
    </div>

Records with no net change are left out.
"""
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from patchdiff.consolidation.change_model import PROPERTY_SEPARATOR, ChangeRecord, RelativeChange
from patchdiff.consolidation.renderer import is_unchanged, write_text

logger = logging.getLogger(__name__)


def is_net_change(record: ChangeRecord) -> bool:
    """Check whether a merged record changes anything."""
    if isinstance(record.data, RelativeChange):
        return not is_unchanged(write_text(record))
    return True


def split_line(line: str) -> Tuple[str, str, str, str]:
    """
    Split a rendered line into (section, subsection, label, item).

    Lines with four or more segments nest under a label; the item keeps
    any further separators it contains.

    Args:
        line: Rendered change line

    Returns:
        Tuple of (section, subsection, label, item); missing parts are ""
    """
    parts = line.split(PROPERTY_SEPARATOR)
    if len(parts) >= 4:
        return parts[0], parts[1], parts[2], PROPERTY_SEPARATOR.join(parts[3:])
    if len(parts) == 3:
        return parts[0], parts[1], "", parts[2]
    if len(parts) == 2:
        return parts[0], "", "", parts[1]
    return "", "", "", parts[0]


def render_diff_html(records: Iterable[ChangeRecord]) -> str:
    """
    Render merged change records as an HTML fragment.

    Args:
        records: Merged change records in sorted order

    Returns:
        HTML string rooted at a <div>
    """
    soup = BeautifulSoup("", 'html.parser')
    root = soup.new_tag("div")
    soup.append(root)

    current_h2: Optional[str] = None
    current_h3: Optional[str] = None
    current_label: Optional[str] = None
    section_list: Optional[Tag] = None
    label_list: Optional[Tag] = None

    written = 0
    for record in records:
        if not is_net_change(record):
            continue

        section, subsection, label, item = split_line(write_text(record))

        if section != current_h2:
            heading = soup.new_tag("h2")
            heading.string = section
            root.append(heading)
            current_h2 = section
            current_h3 = None
            section_list = None

        if subsection != current_h3 or section_list is None:
            if subsection:
                heading = soup.new_tag("h3")
                heading.string = subsection
                root.append(heading)
            section_list = soup.new_tag("ul")
            root.append(section_list)
            current_h3 = subsection
            current_label = None
            label_list = None

        if label:
            if label != current_label or label_list is None:
                label_item = soup.new_tag("li")
                label_item.append(label)
                label_list = soup.new_tag("ul")
                label_item.append(label_list)
                section_list.append(label_item)
                current_label = label
            target = label_list
        else:
            current_label = None
            label_list = None
            target = section_list

        list_item = soup.new_tag("li")
        list_item.string = item
        target.append(list_item)
        written += 1

    logger.debug(f"Rendered {written} change lines")
    return str(soup)


def save_diff_as_html(records: Iterable[ChangeRecord], output_path: Path) -> Path:
    """
    Write merged change records to an HTML file.

    Args:
        records: Merged change records in sorted order
        output_path: Destination file

    Returns:
        The path written
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_diff_html(records), encoding="utf-8")
    logger.info(f"Saved diff to {output_path}")
    return output_path


def render_diff_text(records: Iterable[ChangeRecord]) -> List[str]:
    """Render merged change records as plain lines, skipping no-op changes."""
    return [write_text(record) for record in records if is_net_change(record)]
