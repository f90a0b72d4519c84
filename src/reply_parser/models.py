"""Data models for the reply parser module."""

import copy
from dataclasses import dataclass, field
from typing import Any, Iterable


@dataclass(frozen=True)
class Fragment:
    """A run of consecutive lines of an email body sharing one classification.

    Attributes:
        content: Fragment text in reading order, lines joined by newlines.
        is_signature: Whether the fragment is a signature block.
        is_quoted: Whether the fragment is quoted history.
        is_hidden: Derived when the fragment is created: quoted, signature,
            or empty. Never passed in and never recomputed.
    """

    content: str
    is_signature: bool = False
    is_quoted: bool = False
    is_hidden: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "is_hidden", self.is_quoted or self.is_signature or self.is_empty
        )

    @property
    def is_empty(self) -> bool:
        """Whether the content has no characters other than newlines."""
        return len(self.content.replace("\n", "")) == 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize fragment to dictionary."""
        return {
            "content": self.content,
            "is_signature": self.is_signature,
            "is_quoted": self.is_quoted,
            "is_hidden": self.is_hidden,
            "is_empty": self.is_empty,
        }


class Email:
    """A parsed email: its fragments in reading order.

    Instances are immutable. ``fragments`` hands out copies, so callers can
    modify what they get back without affecting the email.

    Example usage:
        email = EmailReplyParser().parse(body)
        for fragment in email.fragments:
            print(fragment.is_quoted, fragment.content)
        print(email.visible_text())
    """

    def __init__(self, fragments: Iterable[Fragment]):
        self._fragments: tuple[Fragment, ...] = tuple(fragments)

    @property
    def fragments(self) -> list[Fragment]:
        """Return a deep copy of the fragments in reading order."""
        return copy.deepcopy(list(self._fragments))

    def visible_text(self, aggressive: bool = False) -> str:
        """Join the content of the visible fragments with newlines.

        Args:
            aggressive: Also drop a visible fragment whose neighbours on both
                sides are hidden. The first and last fragments only have one
                neighbour and are never dropped by this rule.

        Returns:
            The visible text, or an empty string if nothing is visible.
        """
        fragments = self._fragments
        visible = []
        for index, fragment in enumerate(fragments):
            if fragment.is_hidden:
                continue
            if aggressive and 0 < index < len(fragments) - 1:
                if fragments[index - 1].is_hidden and fragments[index + 1].is_hidden:
                    continue
            visible.append(fragment.content)
        return "\n".join(visible)

    def to_dict(self) -> dict[str, Any]:
        """Serialize email to dictionary for output or storage."""
        return {
            "fragments": [fragment.to_dict() for fragment in self._fragments],
            "visible_text": self.visible_text(),
        }

    def __len__(self) -> int:
        return len(self._fragments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Email):
            return NotImplemented
        return self._fragments == other._fragments

    def __hash__(self) -> int:
        return hash(self._fragments)

    def __repr__(self) -> str:
        return f"Email(fragments={list(self._fragments)!r})"
