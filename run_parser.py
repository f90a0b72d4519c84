"""CLI entry point for the email reply parser."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from src.logging_config import configure_logging
from src.reply_parser import Email, EmailReplyParser, PatternConfigError, load_pattern_file

logger = logging.getLogger(__name__)


def _format_fragments(email: Email) -> str:
    blocks = []
    for index, fragment in enumerate(email.fragments):
        flags = [
            name
            for name, value in (
                ("quoted", fragment.is_quoted),
                ("signature", fragment.is_signature),
                ("hidden", fragment.is_hidden),
            )
            if value
        ]
        header = f"--- fragment {index}" + (f" [{', '.join(flags)}]" if flags else "")
        blocks.append(f"{header}\n{fragment.content}")
    return "\n".join(blocks)


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Print the reply portion of a plain text email body"
    )
    parser.add_argument("path", help="File containing the email body")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging level (overrides LOG_LEVEL env var)",
    )
    parser.add_argument(
        "--aggressive",
        action="store_true",
        help="Also hide visible fragments sandwiched between hidden ones",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--fragments",
        action="store_true",
        help="Print every fragment with its classification",
    )
    output.add_argument(
        "--json",
        action="store_true",
        help="Print the parsed email as JSON",
    )
    parser.add_argument(
        "--header-patterns",
        metavar="FILE",
        default=os.getenv("REPLY_PARSER_HEADER_PATTERNS"),
        help="Reply header catalog, one regex per line "
        "(default: REPLY_PARSER_HEADER_PATTERNS env var, else built-in)",
    )
    args = parser.parse_args(argv)
    configure_logging(level_override=args.log_level)

    try:
        header_patterns = (
            load_pattern_file(args.header_patterns) if args.header_patterns else None
        )
        reply_parser = EmailReplyParser(quote_header_patterns=header_patterns)
    except PatternConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    try:
        body = Path(args.path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"ERROR: Cannot read {args.path}: {e}", file=sys.stderr)
        return 1

    email = reply_parser.parse(body)
    logger.info("Parsed %s into %d fragments", args.path, len(email))

    if args.json:
        print(json.dumps(email.to_dict(), ensure_ascii=False, indent=2))
    elif args.fragments:
        print(_format_fragments(email))
    else:
        print(email.visible_text(aggressive=args.aggressive))

    return 0


if __name__ == "__main__":
    sys.exit(main())
