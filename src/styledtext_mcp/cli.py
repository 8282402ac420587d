"""Command-line front end: style text, randomize it, or restore plain text."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from styledtext_mcp.config import Settings
from styledtext_mcp.encoder import StyleError
from styledtext_mcp.formatter import (
    ErrorPolicy,
    markdown_to_unicode,
    random_style_text,
    style_text,
    to_plain,
)
from styledtext_mcp.tables import Emphasis, StyleFamily

logger = logging.getLogger(__name__)

_FAMILIES = [f.value for f in StyleFamily]
_EMPHASES = [e.value for e in Emphasis]


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="styledtext",
        description="Convert text to Unicode mathematical letter styles and back",
        epilog=f"Families: {', '.join(_FAMILIES)}. Emphases: {', '.join(_EMPHASES)}.",
    )
    parser.add_argument("text", help="Text to convert")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--family",
        type=StyleFamily,
        metavar="FAMILY",
        help=f"Target style family (default: {settings.styledtext_default_family.value})",
    )
    mode.add_argument(
        "--random", action="store_true", help="Draw a random style for every character"
    )
    mode.add_argument(
        "--ascii", action="store_true", help="Turn styled characters back into plain text"
    )
    mode.add_argument(
        "--markdown",
        action="store_true",
        help="Apply **bold**, *italic*, ***bold italic*** and `monospace` spans",
    )

    parser.add_argument(
        "--emphasis",
        type=Emphasis,
        metavar="EMPHASIS",
        help=f"Target emphasis (default: {settings.styledtext_default_emphasis.value})",
    )
    parser.add_argument(
        "--exclude-families",
        nargs="+",
        type=StyleFamily,
        default=[],
        metavar="FAMILY",
        help="With --random: families never drawn",
    )
    parser.add_argument(
        "--exclude-emphases",
        nargs="+",
        type=Emphasis,
        default=[],
        metavar="EMPHASIS",
        help="With --random: emphases never drawn",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.styledtext_random_seed,
        help="With --random: seed for reproducible output",
    )
    parser.add_argument(
        "--errors",
        type=ErrorPolicy,
        choices=list(ErrorPolicy),
        default=settings.styledtext_error_policy,
        help="What to do with characters that have no form in the target style "
        "(default: %(default)s)",
    )
    parser.add_argument(
        "--replacement",
        default=settings.styledtext_replacement,
        help="Replacement text for --errors replace",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every conversion failure"
    )
    return parser


def validate_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if (args.exclude_families or args.exclude_emphases) and not args.random:
        parser.error("--exclude-families/--exclude-emphases require --random")
    if args.emphasis is not None and (args.random or args.ascii or args.markdown):
        parser.error("--emphasis only applies to --family conversion")
    if args.errors is ErrorPolicy.REPLACE and args.replacement is None:
        parser.error("--errors replace requires --replacement")


def run(args: argparse.Namespace, settings: Settings) -> str:
    if args.ascii:
        return to_plain(args.text)
    if args.markdown:
        return markdown_to_unicode(args.text)
    if args.random:
        return random_style_text(
            args.text,
            exclude_families=args.exclude_families,
            exclude_emphases=args.exclude_emphases,
            seed=args.seed,
        )
    return style_text(
        args.text,
        args.family or settings.styledtext_default_family,
        args.emphasis or settings.styledtext_default_emphasis,
        errors=args.errors,
        replacement=args.replacement,
    )


def main(argv: list[str] | None = None) -> int:
    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"styledtext: error: invalid STYLEDTEXT_* setting\n{exc}", file=sys.stderr)
        sys.exit(2)
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    validate_args(parser, args)

    level = logging.DEBUG if args.verbose else settings.styledtext_log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        result = run(args, settings)
    except StyleError as exc:
        print(f"Error: {exc} for {exc.char!r}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
