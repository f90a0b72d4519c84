"""Per-line classification predicates used by the fragment assembler."""

import re
from typing import Iterable, Optional

from .patterns import (
    DEFAULT_QUOTE_MARKER_PATTERN,
    DEFAULT_SIGNATURE_PATTERN,
    PatternLike,
    compile_header_patterns,
    compile_pattern,
)


class LineClassifier:
    """Classifies single lines of an email body.

    Each predicate looks at one line in natural reading order and keeps no
    state between calls, so one classifier can be shared by any number of
    parses.

    Example usage:
        classifier = LineClassifier()
        classifier.is_signature_line("-- ")          # True
        classifier.is_quote_marker_line("> hello")   # True
        classifier.is_quote_header_line("On Mon, Bob wrote:")  # True
    """

    def __init__(
        self,
        signature_pattern: Optional[PatternLike] = None,
        quote_marker_pattern: Optional[PatternLike] = None,
        quote_header_patterns: Optional[Iterable[PatternLike]] = None,
    ):
        """Initialize the classifier.

        Args:
            signature_pattern: Matches signature delimiter lines.
                Defaults to DEFAULT_SIGNATURE_PATTERN.
            quote_marker_pattern: Matches quoted lines.
                Defaults to DEFAULT_QUOTE_MARKER_PATTERN (leading ``>``).
            quote_header_patterns: Ordered reply header catalog. Strings are
                compiled with re.MULTILINE. Defaults to
                DEFAULT_QUOTE_HEADER_PATTERNS.

        Raises:
            PatternConfigError: If a pattern is invalid.
        """
        self._signature_pattern = (
            DEFAULT_SIGNATURE_PATTERN
            if signature_pattern is None
            else compile_pattern(signature_pattern)
        )
        self._quote_marker_pattern = (
            DEFAULT_QUOTE_MARKER_PATTERN
            if quote_marker_pattern is None
            else compile_pattern(quote_marker_pattern)
        )
        self._quote_header_patterns = compile_header_patterns(quote_header_patterns)

    @property
    def quote_header_patterns(self) -> tuple[re.Pattern, ...]:
        """The ordered reply header catalog."""
        return self._quote_header_patterns

    def is_signature_line(self, line: str) -> bool:
        return self._signature_pattern.search(line) is not None

    def is_quote_marker_line(self, line: str) -> bool:
        return self._quote_marker_pattern.search(line) is not None

    def is_quote_header_line(self, line: str) -> bool:
        return any(pattern.search(line) for pattern in self._quote_header_patterns)
