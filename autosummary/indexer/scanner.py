"""Book scanner - builds the tree of groups and documents."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from autosummary.errors import ScanError

logger = logging.getLogger(__name__)

# Reserved file names inside every book directory
README_FILE = "README.md"
SUMMARY_FILE = "SUMMARY.md"

# Only files with this extension are treated as documents (case-insensitive)
DOCUMENT_EXTENSION = "md"

# Marker of a top-level heading line
TITLE_MARKER = "# "


@dataclass(frozen=True)
class Document:
    """A single markdown document."""

    name: str
    title: str
    path: str


@dataclass
class Group:
    """A directory holding documents and nested groups."""

    name: str
    path: str
    has_index: bool = False
    documents: list[Document] = field(default_factory=list)
    subgroups: list["Group"] = field(default_factory=list)

    def walk(self) -> Iterator["Group"]:
        """Yield this group and every reachable descendant group."""
        yield self
        for subgroup in self.subgroups:
            yield from subgroup.walk()

    def document_count(self) -> int:
        """Count documents in this group and all reachable descendants."""
        return sum(len(group.documents) for group in self.walk())


def split_extension(file_name: str) -> tuple[str, str] | None:
    """Split a file name on its last dot. Returns None when there is no extension."""
    stem, sep, ext = file_name.rpartition(".")
    if not sep:
        return None
    return stem, ext


def extract_title(file_path: Path) -> str:
    """Return the text of the first top-level heading, or an empty string."""
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ScanError(f"Cannot read {file_path}: {e}") from e

    for line in content.split("\n"):
        if line.startswith(TITLE_MARKER):
            return line.strip("#").strip()

    return ""


class BookScanner:
    """Scans a book source directory and builds the group tree.

    Only directories holding a README.md directly are part of the tree. A
    directory without one is dropped along with everything below it.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def scan(self) -> Group:
        """Perform a full scan of the book sources."""
        logger.info(f"Scanning book sources: {self.root}")

        if not self.root.is_dir():
            raise ScanError(f"Source directory does not exist or is not a directory: {self.root}")

        group = self._scan_dir(self.root)

        logger.info(
            f"Found {group.document_count()} documents in {len(list(group.walk()))} groups"
        )
        return group

    def _scan_dir(self, directory: Path) -> Group:
        """Build the group for a single directory, recursing into subdirectories."""
        group = Group(name=directory.name, path=str(directory))

        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise ScanError(f"Cannot list directory {directory}: {e}") from e

        for entry in entries:
            try:
                is_dir = entry.is_dir()
                is_link = entry.is_symlink()
            except OSError as e:
                raise ScanError(f"Cannot read metadata of {entry}: {e}") from e

            if is_dir and is_link:
                logger.debug(f"Skipping {entry}: symlinked directory")
                continue

            if is_dir:
                subgroup = self._scan_dir(entry)
                if subgroup.has_index:
                    group.subgroups.append(subgroup)
                else:
                    logger.debug(f"Skipping {entry}: no {README_FILE}")
                continue

            parts = split_extension(entry.name)
            if parts is None:
                continue
            stem, ext = parts
            if ext.lower() != DOCUMENT_EXTENSION:
                continue

            if entry.name == README_FILE:
                group.has_index = True
                continue
            if entry.name == SUMMARY_FILE:
                continue

            group.documents.append(
                Document(name=stem, title=extract_title(entry), path=str(entry))
            )

        return group
