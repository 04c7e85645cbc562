"""mdBook preprocessor protocol adapter.

mdBook writes ``[context, book]`` as JSON to the preprocessor's stdin and
expects the processed book as JSON on stdout. The book sent by mdBook is
ignored: SUMMARY.md is regenerated from the source tree and the book is
rebuilt from the result.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any

from autosummary.book import Book, build_book
from autosummary.config import PREPROCESSOR_NAME, PreprocessorConfig
from autosummary.errors import ConfigurationTriggeredError, ProtocolError
from autosummary.generator import generate_summary
from autosummary.indexer import SummaryOptions

logger = logging.getLogger(__name__)

# mdBook release this preprocessor speaks the protocol of
MDBOOK_VERSION = "0.4.40"

DEFAULT_BOOK_SRC = "src"

# Renderer name used by mdBook's test suite to check unsupported renderers
UNSUPPORTED_RENDERER = "not-supported"


@dataclass
class PreprocessorContext:
    """The parts of mdBook's preprocessor context this plugin uses."""

    root: Path
    book_src: str = DEFAULT_BOOK_SRC
    renderer: str = ""
    mdbook_version: str = ""
    preprocessor_config: dict[str, Any] = field(default_factory=dict)

    @property
    def source_dir(self) -> Path:
        return self.root / self.book_src

    @classmethod
    def from_dict(cls, data: dict) -> "PreprocessorContext":
        if not isinstance(data, dict) or "root" not in data:
            raise ProtocolError("Preprocessor context is missing 'root'")

        config = _table(data, "config")
        book_cfg = _table(config, "book")
        preprocessors = _table(config, "preprocessor")

        book_src = book_cfg.get("src") or DEFAULT_BOOK_SRC
        if not isinstance(data["root"], str) or not isinstance(book_src, str):
            raise ProtocolError("Preprocessor context 'root' and 'book.src' must be strings")

        return cls(
            root=Path(data["root"]),
            book_src=book_src,
            renderer=data.get("renderer", ""),
            mdbook_version=data.get("mdbook_version", ""),
            preprocessor_config=_table(preprocessors, PREPROCESSOR_NAME),
        )


def _table(data: dict, key: str) -> dict:
    """Return data[key] as a dict, empty when absent."""
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ProtocolError(f"Expected '{key}' to be an object, got {type(value).__name__}")
    return value


def supports_renderer(renderer: str) -> bool:
    """Whether this preprocessor can run for the given renderer."""
    return renderer != UNSUPPORTED_RENDERER


def parse_input(stream: IO[str]) -> tuple[PreprocessorContext, dict]:
    """Parse the ``[context, book]`` pair mdBook sends on stdin."""
    try:
        payload = json.load(stream)
    except json.JSONDecodeError as e:
        raise ProtocolError(f"Invalid preprocessor input: {e}") from e

    if not isinstance(payload, list) or len(payload) != 2:
        raise ProtocolError("Preprocessor input must be a [context, book] pair")

    context, book = payload
    return PreprocessorContext.from_dict(context), book


def run(ctx: PreprocessorContext, book: dict | None = None) -> Book:
    """Regenerate SUMMARY.md and return the book it describes."""
    config = PreprocessorConfig.from_dict(ctx.preprocessor_config)

    # Lets the host test how it surfaces preprocessor failures
    if config.blow_up:
        raise ConfigurationTriggeredError("Boom!!1!")

    options = SummaryOptions(use_title_as_link_text=config.first_line_as_link_text)
    result = generate_summary(ctx.source_dir, options)

    return build_book(result.summary_path.parent, result.root, options)


def handle_preprocessing(stdin: IO[str], stdout: IO[str]) -> None:
    """Read a request from stdin, process it and write the book to stdout."""
    ctx, book = parse_input(stdin)

    if ctx.mdbook_version != MDBOOK_VERSION:
        logger.warning(
            f"Warning: The {PREPROCESSOR_NAME} plugin was built against version "
            f"{MDBOOK_VERSION} of mdbook, but we're being called from version "
            f"{ctx.mdbook_version}"
        )

    processed = run(ctx, book)
    json.dump(processed.to_dict(), stdout, ensure_ascii=False)
