from __future__ import annotations

import math
import re

from .errors import MalformedLineError
from .models import Token

# text, then an optional " <digits>" frequency, then an optional " <lowercase>" tag.
DICT_LINE_PATTERN = r"^(.+?)( [0-9]+)?( [a-z]+)?$"

BOM = "\ufeff"


class LineGrammar:
    """Map one raw dictionary line to a Token, or None when it should be skipped."""

    def __init__(self, pattern: str | re.Pattern[str] = DICT_LINE_PATTERN) -> None:
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        if compiled.groups < 3:
            raise ValueError(
                "Dictionary line pattern needs text, frequency and tag groups; "
                f"got {compiled.groups} group(s) in {compiled.pattern!r}."
            )
        self._pattern = compiled

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    def parse(self, line: str) -> Token | None:
        """
        Parse a single line.

        Blank lines, lines that do not match the pattern, and lines whose text
        is empty once the byte-order mark is removed are skipped. A frequency
        field that matched but is not a finite, non-negative number raises
        MalformedLineError carrying the raw line.
        """
        match = self._pattern.match(line.strip())
        if match is None:
            return None
        raw_text, raw_frequency, raw_pos = match.group(1, 2, 3)
        text = (raw_text or "").replace(BOM, "", 1).strip()
        if not text:
            return None
        if not raw_frequency:
            # A tag is only meaningful after an explicit frequency.
            return Token(text=text)
        try:
            frequency = _parse_frequency(raw_frequency)
        except ValueError as exc:
            raise MalformedLineError(line, exc) from exc
        pos = raw_pos.strip() if raw_pos else ""
        return Token(text=text, frequency=frequency, pos=pos)


def _parse_frequency(field: str) -> float:
    value = float(field.strip())
    if math.isinf(value):
        raise ValueError(f"frequency {field.strip()!r} out of range")
    if math.isnan(value) or value < 0:
        raise ValueError(f"frequency {field.strip()!r} is not a non-negative number")
    return value


DEFAULT_GRAMMAR = LineGrammar()


def parse_line(line: str) -> Token | None:
    """Parse a line with the default dictionary grammar."""
    return DEFAULT_GRAMMAR.parse(line)
