"""
Patch Note Line Classifier.

This module turns one raw patch note line into a ChangeRecord:
- "<subject> increased from <old> to <new>"  -> AbsoluteChange
- "<subject> decreased by <amount>"           -> RelativeChange
- "<... Talent> <old> replaced with <new>"    -> AbsoluteChange
- "Now has a <value> <subject>"               -> AbsoluteChange from "0"
- anything else                               -> OtherChange

Patterns are tried in that order and the first match wins.

Example:
    >>> parse_text("Duration increased from 4.5s to 5.5s", "Items > Blade Mail", "7.32")
    ChangeRecord(property='Items > Blade Mail > Duration', version='7.32',
                 data=AbsoluteChange(old='4.5s', new='5.5s'))
"""
import logging
import re
from typing import Callable, List, Optional, Tuple

from patchdiff.consolidation.change_model import (
    AbsoluteChange,
    ChangeData,
    ChangeRecord,
    OtherChange,
    RelativeChange,
    join_property,
)

logger = logging.getLogger(__name__)

# Property used when a line has neither a context nor a parsed subject
FALLBACK_PROPERTY = "General"

# Start of a trailing annotation such as "(from 7.31d)"
ANNOTATION_MARKER = " ("

# A builder returns (subject, change data) for a successful match
Builder = Callable[[re.Match], Tuple[str, ChangeData]]


def normalize_line(raw_line: str) -> str:
    """
    Trim a raw line and drop its trailing parenthetical annotation.

    Args:
        raw_line: Line as extracted from the document

    Returns:
        Cleaned line used for classification
    """
    line = raw_line.strip()
    return line.split(ANNOTATION_MARKER, 1)[0].strip()


def _build_absolute(match: re.Match) -> Tuple[str, ChangeData]:
    return match.group("subject"), AbsoluteChange(old=match.group("old"), new=match.group("new"))


def _build_relative(match: re.Match) -> Tuple[str, ChangeData]:
    amount = int(match.group("amount"))
    if match.group("verb") == "decreased":
        amount = -amount
    return match.group("subject"), RelativeChange(delta=amount)


def _build_new_value(match: re.Match) -> Tuple[str, ChangeData]:
    return match.group("subject"), AbsoluteChange(old="0", new=match.group("value"))


class ChangeClassifier:
    """
    Classifier for patch note lines.

    Holds the ordered priority list of (pattern, builder) pairs. Each pattern
    must match the whole normalized line.
    """

    # Ordered by priority; earlier patterns preempt later ones
    PATTERNS: List[Tuple[str, str, Builder]] = [
        (
            'absolute',
            r'(?P<subject>.+) (?:increased|decreased) from (?P<old>\S+) to (?P<new>\S+)',
            _build_absolute,
        ),
        (
            'relative',
            r'(?P<subject>.+) (?P<verb>increased|decreased) by (?P<amount>[+-]?\d+)',
            _build_relative,
        ),
        (
            'talent',
            r'(?P<subject>.*Talent) (?P<old>.+) replaced with (?P<new>.+)',
            _build_absolute,
        ),
        (
            'new_value',
            r'.*ow has a (?P<value>\S+) (?P<subject>.+)',
            _build_new_value,
        ),
    ]

    def __init__(self):
        """Initialize the classifier and compile its patterns."""
        self.rules = [
            (name, re.compile(pattern, re.UNICODE), builder)
            for name, pattern, builder in self.PATTERNS
        ]

    def match_rule(self, line: str) -> Optional[Tuple[str, str, ChangeData]]:
        """
        Find the first rule matching a normalized line.

        Args:
            line: Normalized patch note line

        Returns:
            Tuple of (rule name, subject, change data), or None if no rule matches
        """
        for name, regex, builder in self.rules:
            match = regex.fullmatch(line)
            if match:
                subject, data = builder(match)
                return name, subject, data
        return None

    def parse_text(self, raw_line: str, context_path: str, version: str) -> ChangeRecord:
        """
        Classify a raw patch note line.

        Never raises: lines no rule recognizes become an OtherChange holding
        the cleaned line, keyed by the context path alone.

        Args:
            raw_line: Line as extracted from the document
            context_path: Property path of the enclosing sections
            version: Patch version the line belongs to

        Returns:
            ChangeRecord for the line
        """
        line = normalize_line(raw_line)
        matched = self.match_rule(line)

        if matched is None:
            logger.debug(f"Unclassified line in {version} at '{context_path}': {line}")
            property_path = join_property(context_path) or FALLBACK_PROPERTY
            return ChangeRecord(property=property_path, version=version, data=OtherChange(text=line))

        _, subject, data = matched
        property_path = join_property(context_path, subject.strip()) or FALLBACK_PROPERTY
        return ChangeRecord(property=property_path, version=version, data=data)


_default_classifier = ChangeClassifier()


def parse_text(raw_line: str, context_path: str, version: str) -> ChangeRecord:
    """
    Classify a raw patch note line with the default classifier.

    Args:
        raw_line: Line as extracted from the document
        context_path: Property path of the enclosing sections
        version: Patch version the line belongs to

    Returns:
        ChangeRecord for the line
    """
    return _default_classifier.parse_text(raw_line, context_path, version)
