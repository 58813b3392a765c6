"""
Change Record Model for Patch Notes.

This module defines the structured form of a single patch note edit:
- AbsoluteChange: a value changed from an old literal to a new literal
- RelativeChange: a value shifted by a signed integer amount
- OtherChange: a free-form note with no before/after

and the rules for folding two edits of the same property into one net edit.
"""
from dataclasses import dataclass
from functools import total_ordering
from typing import List, Tuple, Union

from patchdiff.core.exceptions import MergeError, MergeErrorKind, ValidationError

# Separator between segments of a property path
PROPERTY_SEPARATOR = " > "


@dataclass(frozen=True, order=True)
class AbsoluteChange:
    """A property's literal value changed from `old` to `new`."""
    old: str
    new: str


@dataclass(frozen=True, order=True)
class RelativeChange:
    """A property shifted by `delta`; positive means increased."""
    delta: int


@dataclass(frozen=True, order=True)
class OtherChange:
    """A note that cannot be expressed as a before/after or a delta."""
    text: str


ChangeData = Union[AbsoluteChange, RelativeChange, OtherChange]


def change_data_sort_key(data: ChangeData) -> Tuple:
    """
    Get the natural ordering key of a change data value.

    Values are ordered by variant first (absolute, relative, other),
    then by their fields.

    Args:
        data: Change data value

    Returns:
        Tuple usable as a sort key
    """
    if isinstance(data, AbsoluteChange):
        return (0, data.old, data.new)
    elif isinstance(data, RelativeChange):
        return (1, data.delta)
    elif isinstance(data, OtherChange):
        return (2, data.text)
    raise TypeError(f"Unknown change data: {data!r}")


def diff_change_data(old: ChangeData, new: ChangeData) -> ChangeData:
    """
    Combine two consecutive changes of the same property into one.

    - Absolute + Absolute: earliest old value to latest new value
    - Relative + Relative: sum of the deltas
    - Other + anything: never combined

    Args:
        old: Earlier change
        new: Later change

    Returns:
        Net change data

    Raises:
        MergeError: If the variants differ (VARIANT_MISMATCH) or the
                    variant does not track a cumulative diff (UNCOMBINABLE)
    """
    if type(old) is not type(new):
        raise MergeError(
            "Change data variants are not equal",
            kind=MergeErrorKind.VARIANT_MISMATCH,
            details={"old": type(old).__name__, "new": type(new).__name__},
        )

    if isinstance(old, AbsoluteChange):
        return AbsoluteChange(old=old.old, new=new.new)
    elif isinstance(old, RelativeChange):
        return RelativeChange(delta=old.delta + new.delta)
    elif isinstance(old, OtherChange):
        raise MergeError(
            "OtherChange does not track diff",
            kind=MergeErrorKind.UNCOMBINABLE,
        )
    raise TypeError(f"Unknown change data: {old!r}")


@total_ordering
@dataclass(frozen=True)
class ChangeRecord:
    """
    One observed edit of a property in a patch version.

    Records order by property, then version, then change data, so sorting
    a mixed list groups each property's edits together chronologically.
    """
    property: str
    version: str
    data: ChangeData

    def __post_init__(self):
        if not self.property:
            raise ValidationError(
                "Change record property must not be empty",
                field_name="property",
                field_value=self.property,
            )

    def sort_key(self) -> Tuple:
        return (self.property, self.version, change_data_sort_key(self.data))

    def __lt__(self, other):
        if not isinstance(other, ChangeRecord):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def segments(self) -> List[str]:
        """Property path split into its segments."""
        return self.property.split(PROPERTY_SEPARATOR)

    @staticmethod
    def diff(old: "ChangeRecord", new: "ChangeRecord") -> "ChangeRecord":
        """
        Fold a later record of the same property into an earlier one.

        Args:
            old: Earlier record (the accumulator)
            new: Later record

        Returns:
            New record carrying the net change, tagged with `new.version`

        Raises:
            MergeError: If the properties differ (PROPERTY_MISMATCH) or the
                        change data cannot be combined
        """
        if old.property != new.property:
            raise MergeError(
                "Change record properties do not match",
                kind=MergeErrorKind.PROPERTY_MISMATCH,
                details={"old": old.property, "new": new.property},
            )
        return ChangeRecord(
            property=old.property,
            version=new.version,
            data=diff_change_data(old.data, new.data),
        )


def join_property(*segments: str) -> str:
    """Join non-empty path segments with the property separator."""
    return PROPERTY_SEPARATOR.join(segment for segment in segments if segment)
