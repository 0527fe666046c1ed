"""Column filters for the table view.

The filter panel holds a comma-separated list of regular expressions. A key
is shown as a table column when at least one of them matches it.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

logger = logging.getLogger(__name__)

FILTER_SEPARATOR = ","
FILTER_TRIM_CHARS = " \t\r\n"


def split_filter_text(raw_text: str) -> list[str]:
    """Split raw filter text into trimmed pattern tokens."""
    return [token.strip(FILTER_TRIM_CHARS) for token in raw_text.split(FILTER_SEPARATOR)]


def compile_filters(raw_text: str) -> list[re.Pattern[str]]:
    """Compile every token of ``raw_text``; invalid patterns are dropped.

    Empty tokens compile to the empty pattern and therefore match any key.
    """
    matchers: list[re.Pattern[str]] = []
    for token in split_filter_text(raw_text):
        try:
            matchers.append(re.compile(token))
        except re.error as exc:
            logger.debug("ignoring column filter %r: %s", token, exc)
    return matchers


def matches_any(matchers: Sequence[re.Pattern[str]], key: str) -> bool:
    return any(matcher.search(key) is not None for matcher in matchers)
