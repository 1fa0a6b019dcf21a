"""Line-level parsing of artifact bodies.

Artifact bodies use a small markdown subset: ``#`` headings, ``-``/``*``
bullets, ``1.``/``1)`` numbered items, ``**bold**``, ``*italic*``,
`code`, horizontal rules and plain paragraph lines. Everything here
works line by line; no nesting is tracked.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterator, Optional

from loguru import logger

from docrender.config.settings import settings
from docrender.data.formats import format_timestamp
from docrender.data.models import StructuredTable

HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.*)$")
BULLET_PATTERN = re.compile(r"^[-*]\s+(.*)$")
NUMBERED_PATTERN = re.compile(r"^(\d+)[.)]\s+(.*)$")
RULE_PATTERN = re.compile(r"^([-*_])(?:\s*\1){2,}$")

BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*")
ITALIC_PATTERN = re.compile(r"\*(.+?)\*")
CODE_PATTERN = re.compile(r"`(.+?)`")


class LineKind(str, Enum):
    BLANK = "blank"
    HEADING = "heading"
    BULLET = "bullet"
    NUMBERED = "numbered"
    RULE = "rule"
    METADATA = "metadata"
    TEXT = "text"


@dataclass(frozen=True)
class ParsedLine:
    """One classified line.

    ``text`` has list/heading markers removed but keeps inline markup;
    ``level`` is the heading depth or the item number, 0 otherwise.
    """

    kind: LineKind
    text: str = ""
    level: int = 0

    @property
    def plain(self) -> str:
        return strip_inline(self.text)


def strip_inline(text: str) -> str:
    """Remove bold, italic and inline-code markers, keeping their content."""
    text = BOLD_PATTERN.sub(r"\1", text)
    text = ITALIC_PATTERN.sub(r"\1", text)
    return CODE_PATTERN.sub(r"\1", text)


def _metadata_pattern() -> "re.Pattern[str]":
    label = re.escape(settings.render.generated_label)
    return re.compile(rf"^(?:{label}|generated at)\s*:", re.IGNORECASE)


def classify_line(line: str) -> ParsedLine:
    """Classify a single body line."""
    stripped = line.strip()
    if not stripped:
        return ParsedLine(LineKind.BLANK)

    match = HEADING_PATTERN.match(stripped)
    if match:
        return ParsedLine(LineKind.HEADING, match.group(2).strip(), len(match.group(1)))

    # rules first, "- - -" and "* * *" would otherwise read as bullets
    if RULE_PATTERN.match(stripped):
        return ParsedLine(LineKind.RULE)

    match = BULLET_PATTERN.match(stripped)
    if match:
        return ParsedLine(LineKind.BULLET, match.group(1).strip())

    match = NUMBERED_PATTERN.match(stripped)
    if match:
        return ParsedLine(LineKind.NUMBERED, match.group(2).strip(), int(match.group(1)))

    if _metadata_pattern().match(strip_inline(stripped)):
        return ParsedLine(LineKind.METADATA, stripped)

    return ParsedLine(LineKind.TEXT, stripped)


def iter_lines(body: str) -> Iterator[ParsedLine]:
    for line in (body or "").splitlines():
        yield classify_line(line)


class MarkdownStructureParser:
    """Flattens an artifact body into ``[index, category, content]`` rows.

    The category is the nearest preceding heading, or the document title
    before any heading. The index is a single running counter across the
    whole document; sections do not restart it. Headings, blank lines,
    rules and the generated-at line produce no rows.
    """

    def parse(self, body: str, title: str, generated_at: Optional[datetime] = None) -> StructuredTable:
        """Flatten ``body``.

        Args:
            body: artifact body
            title: category used until the first heading
            generated_at: when given, a trailing metadata row is appended

        Returns:
            the header names and the ordered rows
        """
        table = StructuredTable(headers=tuple(settings.render.table_headers))
        category = title
        counter = 1

        for line in iter_lines(body):
            if line.kind == LineKind.HEADING:
                category = line.plain
            elif line.kind in (LineKind.BULLET, LineKind.NUMBERED, LineKind.TEXT):
                table.rows.append([str(counter), category, line.plain])
                counter += 1

        if generated_at is not None:
            table.rows.append(["", settings.render.metadata_category, format_timestamp(generated_at)])

        logger.debug(f"Parsed {len(table.rows)} row(s) from '{title}'")
        return table
