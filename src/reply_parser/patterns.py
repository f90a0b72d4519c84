"""Default pattern catalogs and pattern compilation helpers.

All patterns are matched against single lines in natural reading order,
except quote header patterns, which the header normalizer also runs over the
whole message body. Header patterns therefore use ``re.MULTILINE`` and put
the header phrase in their first capturing group.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Optional, Union

from .exceptions import PatternConfigError

logger = logging.getLogger(__name__)

PatternLike = Union[str, re.Pattern]

DEFAULT_SIGNATURE_PATTERN = re.compile(
    r"(?:^\s*--|^\s*__|^-\w|^-- $)"
    r"|(?:^Sent from my (?:\s*\w+){1,4}$)"
    r"|(?:^={30,}$)$"
)

DEFAULT_QUOTE_MARKER_PATTERN = re.compile(r"^>+")

DEFAULT_QUOTE_HEADER_PATTERNS: tuple[re.Pattern, ...] = tuple(
    re.compile(pattern, re.MULTILINE)
    for pattern in (
        # On DATE, NAME <EMAIL> wrote:
        r"^\s*(On(?:(?!.*On\b|\bwrote:)[\s\S])+wrote:)$",
        # Le DATE, NAME <EMAIL> a écrit :
        r"^\s*(Le(?:(?!.*Le\b|\bécrit:)[\s\S])+écrit :)$",
        # El DATE, NAME <EMAIL> escribió:
        r"^\s*(El(?:(?!.*El\b|\bescribió:)[\s\S])+escribió:)$",
        # Il DATE, NAME <EMAIL> ha scritto:
        r"^\s*(Il(?:(?!.*Il\b|\bscritto:)[\s\S])+scritto:)$",
        # Op DATE schreef NAME <EMAIL>:
        r"^\s*(Op\s[\S\s]+?schreef[\S\s]+?:)$",
        # Em DATE, NAME <EMAIL> escreveu:
        r"^\s*(Em(?:(?!.*Em\b|\bescreveu:)[\s\S])+escreveu:)$",
        # W dniu DATE, NAME <EMAIL> pisze|napisał:
        r"^\s*((W\sdniu|Dnia)\s[\S\s]+?(pisze|napisał(\(a\))?):)$",
        # Den DATE skrev NAME <EMAIL>:
        r"^\s*(Den\s.+\sskrev\s.+:)$",
        # Am DATE um TIME schrieb NAME:
        r"^\s*(Am\s.+\sum\s.+\sschrieb\s.+:)$",
        # 在 DATE, TIME, NAME 写道：
        r"^(在[\S\s]+?写道：)$",
        # DATE TIME NAME 작성:
        r"^(20[0-9]{2}\..+\s작성:)$",
        # DATE TIME、NAME のメッセージ:
        r"^(20[0-9]{2}/.+のメッセージ:)$",
        # NAME <EMAIL> schrieb:
        r"^(.+\s<.+>\sschrieb:)$",
        # From: NAME <EMAIL>, From : NAME<EMAIL>, From: NAME [mailto:EMAIL]
        r"^\s*(From\s?:.+\s?(\[|<).+(\]|>))",
        r"^\s*(De\s?:.+\s?(\[|<).+(\]|>))",
        r"^\s*(Van\s?:.+\s?(\[|<).+(\]|>))",
        r"^\s*(Da\s?:.+\s?(\[|<).+(\]|>))",
        # 20YY-MM-DD HH:II GMT+01:00 NAME <EMAIL>:
        r"^(20[0-9]{2}-(?:0?[1-9]|1[012])-(?:0?[0-9]|[1-2][0-9]|3[01]|[1-9])"
        r"\s[0-2]?[0-9]:\d{2}\s[\S\s]+?:)$",
        # DATE skrev NAME <EMAIL>:
        r"^\s*([a-z]{3,4}\.[\s\S]+?\sskrev[\s\S]+?:)$",
    )
)


def compile_pattern(pattern: PatternLike, flags: int = 0) -> re.Pattern:
    """Compile a configured pattern.

    Args:
        pattern: Pattern string or an already compiled pattern. Compiled
            patterns are returned unchanged and keep their own flags.
        flags: ``re`` flags applied when compiling a string.

    Returns:
        The compiled pattern.

    Raises:
        PatternConfigError: If the value is not a pattern or does not compile.
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise PatternConfigError(
            f"Expected a pattern string or compiled pattern, got {type(pattern).__name__}",
            pattern=pattern,
        )
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise PatternConfigError(f"Invalid pattern {pattern!r}: {e}", pattern=pattern) from e


def compile_header_patterns(
    patterns: Optional[Iterable[PatternLike]],
) -> tuple[re.Pattern, ...]:
    """Compile an ordered quote header catalog, or return the default one."""
    if patterns is None:
        return DEFAULT_QUOTE_HEADER_PATTERNS
    if isinstance(patterns, (str, re.Pattern)):
        raise PatternConfigError(
            "Quote header patterns must be a sequence of patterns, not a single pattern",
            pattern=patterns,
        )
    return tuple(compile_pattern(p, re.MULTILINE) for p in patterns)


def load_pattern_file(path: Union[str, Path]) -> tuple[re.Pattern, ...]:
    """Load a quote header catalog from a text file.

    The file holds one regular expression per line. Blank lines and lines
    starting with ``#`` are skipped. Order is preserved.

    Raises:
        PatternConfigError: If the file cannot be read, holds no patterns,
            or a line does not compile.
    """
    path = Path(path)
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as e:
        raise PatternConfigError(f"Cannot read pattern file {path}: {e}", pattern=str(path)) from e

    entries = [line for line in lines if line.strip() and not line.lstrip().startswith("#")]
    if not entries:
        raise PatternConfigError(f"Pattern file {path} contains no patterns", pattern=str(path))

    logger.debug("Loaded %d quote header patterns from %s", len(entries), path)
    return compile_header_patterns(entries)
