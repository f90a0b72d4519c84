"""Collapses reply headers that mail clients wrapped over several lines."""

import logging
import re
from typing import Iterable

logger = logging.getLogger(__name__)


def collapse_quote_headers(text: str, patterns: Iterable[re.Pattern]) -> str:
    """Put each wrapped reply header back on a single line.

    Some clients break "On DATE, NAME <EMAIL> wrote:" after the name or
    before "wrote:". For every pattern, in order, the first match in the
    text is taken and the newlines inside its header phrase are replaced
    with single spaces. Text outside the phrase is left untouched.

    Args:
        text: Email body with ``\\n`` line endings.
        patterns: Ordered header catalog. The phrase is the first capturing
            group, or the whole match for patterns without groups.

    Returns:
        The body with matched header phrases on one line each.
    """
    for pattern in patterns:
        match = pattern.search(text)
        if match is None:
            continue

        group = 1 if pattern.groups else 0
        start, end = match.span(group)
        if start < 0:
            continue

        header = text[start:end]
        if "\n" not in header:
            continue

        text = text[:start] + header.replace("\n", " ") + text[end:]
        logger.debug(
            "Collapsed %d-line quote header matched by %r",
            header.count("\n") + 1,
            pattern.pattern,
        )

    return text
