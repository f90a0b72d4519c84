"""Groups the lines of an email body into classified fragments."""

from typing import Optional

from .line_classifier import LineClassifier
from .models import Fragment


class _FragmentBuilder:
    """An open fragment collecting lines while the body is walked bottom-up.

    Lines are held in the order they were read, i.e. last line first.
    """

    def __init__(self, is_quoted: bool):
        self.lines: list[str] = []
        self.is_quoted = is_quoted
        self.is_signature = False

    @property
    def last_line(self) -> str:
        """The line read most recently, which sits directly above the others."""
        return self.lines[-1]

    def seal(self) -> Fragment:
        """Fix the classification and build the immutable Fragment."""
        content = "\n".join(reversed(self.lines))
        # A fragment whose top line is blank starts with a newline; drop one.
        if content.startswith("\n"):
            content = content[1:]
        return Fragment(
            content=content,
            is_signature=self.is_signature,
            is_quoted=self.is_quoted,
        )


class FragmentAssembler:
    """Splits a normalized email body into fragments.

    The body is read from the last line to the first. A signature delimiter
    or a reply header is only known to close the text *below* it once the
    line above has been read, so walking upwards lets every boundary be
    decided by looking at a single previous line: the top line of the open
    fragment.

    Rules, for each line read:

    1. If the open fragment's top line is a signature delimiter, the open
       fragment is a signature and is closed. Otherwise, if the current line
       is blank and the top line is a reply header, the open fragment is
       quoted and is closed.
    2. The line joins the open fragment when their quoted state agrees, or
       when the fragment is quoted and the line is blank or a reply header.
       Otherwise the open fragment is closed and a new one is started.

    Lines are right-trimmed unless they are signature delimiters, so that
    ``"-- "`` keeps its space. Leading indentation is always kept.
    """

    def __init__(self, classifier: LineClassifier):
        self._classifier = classifier

    def assemble(self, text: str) -> list[Fragment]:
        """Split text into fragments in reading order.

        Args:
            text: Email body with ``\\n`` line endings and reply headers
                already collapsed onto single lines.

        Returns:
            Fragments ordered from the top of the body to the bottom.
        """
        classifier = self._classifier
        fragments: list[Fragment] = []
        builder: Optional[_FragmentBuilder] = None

        for raw_line in reversed(text.split("\n")):
            line = raw_line if classifier.is_signature_line(raw_line) else raw_line.rstrip()

            if builder is not None:
                top = builder.last_line
                if classifier.is_signature_line(top):
                    builder.is_signature = True
                    fragments.append(builder.seal())
                    builder = None
                elif not line and classifier.is_quote_header_line(top):
                    builder.is_quoted = True
                    fragments.append(builder.seal())
                    builder = None

            is_quoted = classifier.is_quote_marker_line(line)

            if builder is None or not self._belongs_to(builder, line, is_quoted):
                if builder is not None:
                    fragments.append(builder.seal())
                builder = _FragmentBuilder(is_quoted)

            builder.lines.append(line)

        if builder is not None:
            fragments.append(builder.seal())

        fragments.reverse()
        return fragments

    def _belongs_to(self, builder: _FragmentBuilder, line: str, is_quoted: bool) -> bool:
        if builder.is_quoted == is_quoted:
            return True
        if builder.is_quoted:
            return not line or self._classifier.is_quote_header_line(line)
        return False
