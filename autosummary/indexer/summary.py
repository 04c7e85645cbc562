"""Render the SUMMARY.md navigation index from a scanned group tree."""

from dataclasses import dataclass
from pathlib import Path

from .scanner import README_FILE, SUMMARY_FILE, Document, Group

SUMMARY_TITLE = "# Summary"
SEPARATOR = "----"
INDENT = "    "

# The conventional mdBook source directory is shown under a friendlier label
SOURCE_DIR_NAME = "src"
WELCOME_LABEL = "Welcome"


@dataclass
class SummaryOptions:
    """Options controlling how links are rendered."""

    use_title_as_link_text: bool = False


def relative_path(root_dir: Path, path: str) -> str:
    """Path relative to the book root with forward slashes, '' for the root itself."""
    rel = Path(path).relative_to(root_dir).as_posix()
    return "" if rel == "." else rel


def _depth(rel_path: str) -> int:
    # The root and its direct children share the first level
    return max(len(rel_path.split("/")), 1)


def display_name(group: Group) -> str:
    """Name shown for a group's index link."""
    if group.name == SOURCE_DIR_NAME:
        return WELCOME_LABEL
    return group.name


def link_text(document: Document, options: SummaryOptions) -> str:
    """Title when requested and available, otherwise the file name."""
    if options.use_title_as_link_text and document.title:
        return document.title
    return document.name


def render_summary_lines(
    root_dir: Path, group: Group, options: SummaryOptions | None = None
) -> list[str]:
    """Render the navigation lines for a group and all its subgroups."""
    options = options or SummaryOptions()
    lines: list[str] = []

    path = relative_path(root_dir, group.path)
    indent = INDENT * (_depth(path) - 1)
    name = display_name(group)

    if path == "":
        lines.append(SUMMARY_TITLE)
        index_link = f"{indent}* [{name}]({README_FILE})"
    else:
        index_link = f"{indent}* [{name}]({path}/{README_FILE})"

    # Top-level entries start a new section
    if not indent:
        # One empty line; older generators pushed a "\n" entry here instead
        lines.append("")
        if name != WELCOME_LABEL:
            lines.append(SEPARATOR)

    lines.append(index_link)

    for document in group.documents:
        doc_path = relative_path(root_dir, document.path)
        if doc_path == SUMMARY_FILE or doc_path.endswith(README_FILE):
            continue

        doc_indent = INDENT * (_depth(doc_path) - 1)
        lines.append(f"{doc_indent}* [{link_text(document, options)}]({doc_path})")

    for subgroup in group.subgroups:
        lines.extend(render_summary_lines(root_dir, subgroup, options))

    return lines


def render_summary(root_dir: Path, group: Group, options: SummaryOptions | None = None) -> str:
    """Render the full SUMMARY.md text."""
    return "\n".join(render_summary_lines(root_dir, group, options))
