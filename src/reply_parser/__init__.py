"""Reply parser module for separating new reply text from quoted history.

This module splits a plain text email body into fragments tagged as reply
text, quoted history or signature, and derives the text a reader of the top
of the thread cares about.

Public API:
    - parse: Parse a body with default patterns, optionally returning only
      the visible text
    - EmailReplyParser: Parser with configurable patterns
    - Email: Parsed email, an ordered sequence of fragments
    - Fragment: One classified run of lines
    - LineClassifier: Per-line signature, quote and reply header predicates
    - load_pattern_file: Read a reply header catalog from a file
    - ReplyParserError: Base exception for the module
    - PatternConfigError: A configured pattern cannot be used

Example:
    from src.reply_parser import parse

    email = parse(body)
    for fragment in email.fragments:
        print(fragment.is_quoted, fragment.is_signature, fragment.content)

    reply = parse(body, visible_text_only=True)
"""

from .email_parser import EmailReplyParser, parse
from .exceptions import PatternConfigError, ReplyParserError
from .line_classifier import LineClassifier
from .models import Email, Fragment
from .patterns import (
    DEFAULT_QUOTE_HEADER_PATTERNS,
    DEFAULT_QUOTE_MARKER_PATTERN,
    DEFAULT_SIGNATURE_PATTERN,
    load_pattern_file,
)

__all__ = [
    # Main entry points
    "parse",
    "EmailReplyParser",
    "LineClassifier",
    # Models
    "Email",
    "Fragment",
    # Patterns
    "DEFAULT_QUOTE_HEADER_PATTERNS",
    "DEFAULT_QUOTE_MARKER_PATTERN",
    "DEFAULT_SIGNATURE_PATTERN",
    "load_pattern_file",
    # Exceptions
    "ReplyParserError",
    "PatternConfigError",
]
