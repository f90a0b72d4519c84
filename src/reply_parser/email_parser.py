"""Main EmailReplyParser class and the parse() entry point."""

import logging
from typing import Any, Iterable, Optional, Union

from .fragment_assembler import FragmentAssembler
from .header_normalizer import collapse_quote_headers
from .line_classifier import LineClassifier
from .models import Email
from .patterns import PatternLike

logger = logging.getLogger(__name__)


class EmailReplyParser:
    """Splits plain text email bodies into reply, quoted and signature fragments.

    Pattern configuration is fixed at construction and only read while
    parsing; each call to parse() keeps its own state, so one instance can
    serve concurrent callers.

    Example usage:
        parser = EmailReplyParser()
        email = parser.parse(body)
        print(email.visible_text())

    With a custom reply header catalog:
        parser = EmailReplyParser(quote_header_patterns=[r"^(\\d{4}[\\S\\s]*rta:)$"])

    Custom patterns run against untrusted text. Patterns prone to
    catastrophic backtracking will make parsing slow; they are not checked.
    """

    def __init__(
        self,
        signature_pattern: Optional[PatternLike] = None,
        quote_marker_pattern: Optional[PatternLike] = None,
        quote_header_patterns: Optional[Iterable[PatternLike]] = None,
    ):
        """Initialize the parser.

        Args:
            signature_pattern: Overrides the signature delimiter pattern.
            quote_marker_pattern: Overrides the quoted line pattern.
            quote_header_patterns: Overrides the ordered reply header catalog.

        Raises:
            PatternConfigError: If a pattern is invalid.
        """
        self._classifier = LineClassifier(
            signature_pattern=signature_pattern,
            quote_marker_pattern=quote_marker_pattern,
            quote_header_patterns=quote_header_patterns,
        )
        self._assembler = FragmentAssembler(self._classifier)

    @property
    def classifier(self) -> LineClassifier:
        return self._classifier

    def parse(self, text: Any) -> Email:
        """Parse an email body.

        Args:
            text: Plain text body. Anything that is not a string yields an
                empty Email.

        Returns:
            The parsed Email. Never raises for any input.
        """
        if not isinstance(text, str):
            logger.debug("Ignoring non-string email body of type %s", type(text).__name__)
            return Email([])
        if not text:
            return Email([])

        normalized = text.replace("\r\n", "\n")
        normalized = collapse_quote_headers(normalized, self._classifier.quote_header_patterns)
        fragments = self._assembler.assemble(normalized)

        hidden_count = sum(1 for fragment in fragments if fragment.is_hidden)
        logger.debug(
            "Parsed email body into %d fragments (%d hidden)",
            len(fragments),
            hidden_count,
            extra={"fragment_count": len(fragments), "hidden_count": hidden_count},
        )
        return Email(fragments)


def parse(text: Any, visible_text_only: bool = False) -> Union[Email, str]:
    """Parse an email body with the default patterns.

    Args:
        text: Plain text body.
        visible_text_only: Return the visible text instead of the Email.

    Returns:
        The parsed Email, or its visible text when visible_text_only is set
        (an empty string for non-string input).
    """
    email = EmailReplyParser().parse(text)
    if visible_text_only:
        return email.visible_text()
    return email
