"""mdBook book model built from the scanned group tree.

The layout matches what mdBook loads from the generated SUMMARY.md: the root
index and root documents at the top level, every top-level group opening a
new section, and documents and nested groups as sub-items of their group.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from autosummary.errors import ScanError
from autosummary.indexer import README_FILE, Document, Group, SummaryOptions
from autosummary.indexer.summary import WELCOME_LABEL, display_name, link_text, relative_path

SEPARATOR = "Separator"


@dataclass
class Chapter:
    """A single chapter of the book."""

    name: str
    content: str
    path: str
    number: list[int] = field(default_factory=list)
    sub_items: list["BookItem"] = field(default_factory=list)
    parent_names: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "Chapter": {
                "name": self.name,
                "content": self.content,
                "number": self.number,
                "sub_items": [_item_to_dict(item) for item in self.sub_items],
                "path": self.path,
                "source_path": self.path,
                "parent_names": self.parent_names,
            }
        }


# A book item is either a chapter or a section separator
BookItem = Chapter | str


def _item_to_dict(item: BookItem) -> Any:
    if isinstance(item, Chapter):
        return item.to_dict()
    return item


@dataclass
class Book:
    """Book tree handed back to mdBook."""

    sections: list[BookItem] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "sections": [_item_to_dict(item) for item in self.sections],
            "__non_exhaustive": None,
        }

    def chapters(self) -> list[Chapter]:
        """All chapters in reading order."""
        result: list[Chapter] = []
        stack = list(reversed(self.sections))
        while stack:
            item = stack.pop()
            if isinstance(item, Chapter):
                result.append(item)
                stack.extend(reversed(item.sub_items))
        return result


class BookBuilder:
    """Builds a Book from the root group of a scan."""

    def __init__(self, root_dir: Path, options: SummaryOptions | None = None) -> None:
        self.root_dir = root_dir
        self.options = options or SummaryOptions()

    def build(self, root: Group) -> Book:
        book = Book()
        if display_name(root) != WELCOME_LABEL:
            book.sections.append(SEPARATOR)

        book.sections.append(self._group_chapter(root, []))
        for document in root.documents:
            book.sections.append(self._document_chapter(document, []))

        for group in root.subgroups:
            if display_name(group) != WELCOME_LABEL:
                book.sections.append(SEPARATOR)
            book.sections.append(self._nested_group_chapter(group, []))

        _number(book.sections, [])
        return book

    def _nested_group_chapter(self, group: Group, parent_names: list[str]) -> Chapter:
        chapter = self._group_chapter(group, parent_names)
        names = [*parent_names, chapter.name]
        for document in group.documents:
            chapter.sub_items.append(self._document_chapter(document, names))
        for subgroup in group.subgroups:
            chapter.sub_items.append(self._nested_group_chapter(subgroup, names))
        return chapter

    def _group_chapter(self, group: Group, parent_names: list[str]) -> Chapter:
        rel = relative_path(self.root_dir, group.path)
        path = f"{rel}/{README_FILE}" if rel else README_FILE
        return Chapter(
            name=display_name(group),
            content=self._read(self.root_dir / path),
            path=path,
            parent_names=list(parent_names),
        )

    def _document_chapter(self, document: Document, parent_names: list[str]) -> Chapter:
        return Chapter(
            name=link_text(document, self.options),
            content=self._read(Path(document.path)),
            path=relative_path(self.root_dir, document.path),
            parent_names=list(parent_names),
        )

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            # mdBook creates missing chapter files empty
            return ""
        except (OSError, UnicodeDecodeError) as e:
            raise ScanError(f"Cannot read {path}: {e}") from e


def _number(items: list[BookItem], prefix: list[int]) -> None:
    """Assign section numbers to chapters, per level, starting at 1."""
    counter = 0
    for item in items:
        if not isinstance(item, Chapter):
            continue
        counter += 1
        item.number = [*prefix, counter]
        _number(item.sub_items, item.number)


def build_book(root_dir: Path, root: Group, options: SummaryOptions | None = None) -> Book:
    """Build the mdBook book for a scanned source tree."""
    return BookBuilder(root_dir, options).build(root)
