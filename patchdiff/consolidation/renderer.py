"""
Change record rendering.

Turns a (usually merged) ChangeRecord back into a patch note line.
"""
import re
from typing import List, Optional

from patchdiff.consolidation.change_model import (
    PROPERTY_SEPARATOR,
    AbsoluteChange,
    ChangeRecord,
    OtherChange,
    RelativeChange,
)

NUMBER_REGEX = re.compile(r'-?\d+(?:\.\d+)?')
LEVEL_SEPARATOR = "/"
TALENT_WORD = "Talent"
UNCHANGED_SUFFIX = " unchanged"


def _level_values(value: str) -> List[Optional[float]]:
    """First number of each slash-separated level, None where a level has none."""
    levels = []
    for segment in value.split(LEVEL_SEPARATOR):
        match = NUMBER_REGEX.search(segment)
        levels.append(float(match.group()) if match else None)
    return levels


def absolute_change_direction(old: str, new: str) -> str:
    """
    Describe how a possibly multi-level value moved.

    Levels are compared pairwise; when one side has fewer levels its last
    level stands in for the missing ones.

    Args:
        old: Value before the change (e.g. "1/3/4/6s")
        new: Value after the change (e.g. "2/3/4/5s")

    Returns:
        "rescaled" if some levels went up and others down, otherwise
        "increased", "decreased", or "changed" when no number moved

    Examples:
        >>> absolute_change_direction("1s", "2s")
        'increased'
        >>> absolute_change_direction("1/3/4/6s", "2/3/4/5s")
        'rescaled'
    """
    old_levels = _level_values(old)
    new_levels = _level_values(new)

    increased = False
    decreased = False
    for index in range(max(len(old_levels), len(new_levels))):
        old_value = old_levels[min(index, len(old_levels) - 1)]
        new_value = new_levels[min(index, len(new_levels) - 1)]
        if old_value is None or new_value is None:
            continue
        if new_value > old_value:
            increased = True
        elif new_value < old_value:
            decreased = True

    if increased and decreased:
        return "rescaled"
    if increased:
        return "increased"
    if decreased:
        return "decreased"
    return "changed"


def is_talent_property(property_path: str) -> bool:
    """Check whether any segment of a property path names a talent."""
    return any(
        segment == TALENT_WORD or segment.endswith(f" {TALENT_WORD}")
        for segment in property_path.split(PROPERTY_SEPARATOR)
    )


def write_text(record: ChangeRecord) -> str:
    """
    Render a change record as a patch note line.

    Args:
        record: Change record to render

    Returns:
        Line such as "Items > Blade Mail > Duration increased from 4.5s to 6.5s".
        A zero relative change renders as "<property> unchanged".
    """
    data = record.data

    if isinstance(data, AbsoluteChange):
        if is_talent_property(record.property):
            return f"{record.property} {data.old} replaced with {data.new}"
        direction = absolute_change_direction(data.old, data.new)
        return f"{record.property} {direction} from {data.old} to {data.new}"
    elif isinstance(data, RelativeChange):
        if data.delta == 0:
            return f"{record.property}{UNCHANGED_SUFFIX}"
        direction = "increased" if data.delta > 0 else "decreased"
        return f"{record.property} {direction} by {abs(data.delta)}"
    elif isinstance(data, OtherChange):
        return f"{record.property}{PROPERTY_SEPARATOR}{data.text}"
    raise TypeError(f"Unknown change data: {data!r}")


def is_unchanged(line: str) -> bool:
    """Check whether a rendered line reports no net change."""
    return line.endswith(UNCHANGED_SUFFIX)
