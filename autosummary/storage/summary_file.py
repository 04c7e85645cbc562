"""Change-aware persistence of the generated SUMMARY.md."""

import hashlib
import logging
import os
import tempfile
from pathlib import Path

from autosummary.errors import PersistenceError

logger = logging.getLogger(__name__)


def fingerprint(data: bytes) -> str:
    """MD5 digest used only to detect content changes."""
    return hashlib.md5(data, usedforsecurity=False).hexdigest().upper()


def persist_if_changed(target: Path, text: str) -> bool:
    """Write text to target unless the file already holds exactly that content.

    A missing target counts as empty. The write goes through a temporary file
    in the same directory followed by a rename, so readers never observe a
    half-written summary.

    Returns:
        True if the file was written, False if it was left untouched
    """
    new_content = text.encode("utf-8")

    try:
        old_content = target.read_bytes()
    except FileNotFoundError:
        old_content = b""
    except OSError as e:
        raise PersistenceError(f"Cannot read {target}: {e}") from e

    if fingerprint(new_content) == fingerprint(old_content) and target.exists():
        logger.debug(f"{target.name} is up to date")
        return False

    if not target.parent.is_dir():
        raise PersistenceError(f"Directory does not exist: {target.parent}")

    # Keep the permissions of an existing summary
    try:
        mode = target.stat().st_mode & 0o777
    except FileNotFoundError:
        mode = 0o644
    except OSError as e:
        raise PersistenceError(f"Cannot stat {target}: {e}") from e

    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", delete=False
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(new_content)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    except OSError as e:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        raise PersistenceError(f"Cannot write {target}: {e}") from e

    logger.info(f"Wrote {target}")
    return True
