from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Wraps the 'os' primitives the pipeline needs: listing a directory, resolving
the user-supplied target, and persisting the rendered fragment.
"""

import logging
import os
import stat
from typing import List, Optional

from doclist.domain.constants import OUTPUT_ENCODING, OUTPUT_FILE_MODE, OUTPUT_FILE_NAME
from doclist.domain.listing_models import ListingEntry, OutputWriteError, TargetPathError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# DIRECTORY LISTING API
# -----------------------------------------------------------------------------

def scandir_entries(path: str) -> List[ListingEntry]:
    """
    List a directory in the order the operating system reports it.

    Symbolic links are not followed, so a link to a directory is reported
    as a plain entry and never descended into.

    Args:
        path: Directory to list.

    Returns:
        List[ListingEntry]: Entries in raw enumeration order.

    Raises:
        OSError: If the directory cannot be opened or an entry cannot be
            inspected.
    """
    with os.scandir(path) as it:
        return [ListingEntry(name=e.name, is_dir=e.is_dir(follow_symlinks=False)) for e in it]

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def resolve_target_dir(path: str, cwd: Optional[str] = None) -> str:
    """
    Resolve a user-supplied directory into a validated absolute path.

    Relative paths are interpreted against 'cwd' (defaults to the process
    working directory).

    Args:
        path: Raw path argument.
        cwd: Base directory for relative paths.

    Returns:
        str: Normalized absolute path of an existing directory.

    Raises:
        TargetPathError: If the path does not exist or is not a directory.
    """
    base = cwd if cwd is not None else os.getcwd()
    abs_path = os.path.normpath(os.path.join(base, path))

    try:
        st = os.stat(abs_path)
    except OSError as e:
        raise TargetPathError(f"stat {path}: {e.strerror or e}", path=abs_path) from e

    if not stat.S_ISDIR(st.st_mode):
        raise TargetPathError(f"'{path}' is not a directory", path=abs_path)

    return abs_path


def get_output_path(target_dir: str) -> str:
    """Return the sibling 'tmp.html' path one level above 'target_dir'."""
    return os.path.join(os.path.dirname(target_dir), OUTPUT_FILE_NAME)

# -----------------------------------------------------------------------------
# OUTPUT PERSISTENCE API
# -----------------------------------------------------------------------------

def write_output(output_path: str, content: str) -> None:
    """
    Write the fragment, replacing any previous file at 'output_path'.

    New files are created with mode 0644 (subject to the process umask).
    Line endings are written verbatim.

    Raises:
        OutputWriteError: If the file cannot be created or written.
    """
    try:
        fd = os.open(output_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OUTPUT_FILE_MODE)
        with open(fd, "w", encoding=OUTPUT_ENCODING, newline="") as out:
            out.write(content)
    except OSError as e:
        raise OutputWriteError(f"open {output_path}: {e.strerror or e}", path=output_path) from e

    logger.debug(f"Wrote {len(content)} characters to {output_path}")