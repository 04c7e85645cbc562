"""CLI interface for auto-summary - an mdBook preprocessor that generates SUMMARY.md."""

import argparse
import logging
import sys
from pathlib import Path

from autosummary.config import PREPROCESSOR_NAME, get_settings
from autosummary.errors import AutoSummaryError
from autosummary.generator import generate_summary
from autosummary.indexer import SUMMARY_FILE, SummaryOptions
from autosummary.preprocessor import handle_preprocessing, supports_renderer

logger = logging.getLogger(__name__)


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    GREEN = "\033[32m"
    RED = "\033[31m"


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for CLI.

    Logs go to stderr: stdout carries the book in preprocessor mode.
    """
    logging.basicConfig(
        format="%(message)s",
        level=level,
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PREPROCESSOR_NAME,
        description="A mdbook preprocessor to auto generate book summary.",
    )
    subparsers = parser.add_subparsers(dest="command")

    supports = subparsers.add_parser(
        "supports",
        help="Check whether a renderer is supported by this preprocessor",
    )
    supports.add_argument("renderer", help="Name of the mdbook renderer")

    gen = subparsers.add_parser(
        "gen",
        help="Generate SUMMARY.md for a markdown book source directory",
    )
    gen.add_argument("dir", type=Path, help="The dir of markdown book src")
    gen.add_argument(
        "--first-line-as-link-text",
        action="store_true",
        default=None,
        help="Use the first '# ' heading of each document as its link text",
    )

    return parser


def run_gen(source_dir: Path, use_title_as_link_text: bool) -> None:
    """Generate the summary and report whether it changed."""
    result = generate_summary(
        source_dir, SummaryOptions(use_title_as_link_text=use_title_as_link_text)
    )
    if result.changed:
        print(f"{Colors.GREEN}✓ Updated {result.summary_path}{Colors.RESET}")
    else:
        print(f"{Colors.DIM}{SUMMARY_FILE} is up to date{Colors.RESET}")


def cli(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "supports":
        # Signal whether the renderer is supported by exiting with 0 or 1
        sys.exit(0 if supports_renderer(args.renderer) else 1)

    try:
        settings = get_settings()
    except ValueError as e:
        setup_logging()
        logger.error(f"{Colors.RED}Failed to load settings: {e}{Colors.RESET}")
        sys.exit(1)

    setup_logging(settings.log_level)

    try:
        if args.command == "gen":
            use_title = args.first_line_as_link_text
            if use_title is None:
                use_title = settings.use_title_as_link_text
            run_gen(args.dir, use_title)
        else:
            handle_preprocessing(sys.stdin, sys.stdout)
    except AutoSummaryError as e:
        logger.error(f"{Colors.RED}{e}{Colors.RESET}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
