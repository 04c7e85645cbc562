"""Scan, render and persist pipeline."""

import logging
from dataclasses import dataclass
from pathlib import Path

from autosummary.indexer import SUMMARY_FILE, BookScanner, Group, SummaryOptions, render_summary
from autosummary.storage import persist_if_changed

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Outcome of one summary generation run."""

    summary_path: Path
    text: str
    changed: bool
    root: Group


def generate_summary(source_dir: Path | str, options: SummaryOptions | None = None) -> GenerationResult:
    """Regenerate SUMMARY.md for a book source directory.

    The file is only rewritten when the rendered summary differs from what is
    already on disk, so repeated runs on an unchanged tree are no-ops.
    """
    options = options or SummaryOptions()
    root_dir = Path(source_dir).resolve()

    root = BookScanner(root_dir).scan()
    text = render_summary(root_dir, root, options)

    summary_path = root_dir / SUMMARY_FILE
    changed = persist_if_changed(summary_path, text)
    if not changed:
        logger.info(f"{SUMMARY_FILE} unchanged")

    return GenerationResult(summary_path=summary_path, text=text, changed=changed, root=root)
