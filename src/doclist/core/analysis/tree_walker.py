from __future__ import annotations

"""
Directory Tree Walker.

Traverses a root directory depth-first and groups visible files under their
immediate parent directory. Directory order follows first encounter during
the walk; nothing is sorted, so the listing order reported by the
filesystem is what ends up in the output.
"""

import logging
import os
from typing import Dict, Iterator, List, Tuple

from doclist.core.processing.name_cleaner import clean_dir_name, clean_file_name, is_hidden
from doclist.domain.listing_models import DirectoryGroup, DirectoryLister, TreeWalkError
from doclist.infra.fs import scandir_entries

logger = logging.getLogger(__name__)

# Directory key: path segments from (and including) the root's base name
DirKey = Tuple[str, ...]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def walk_directory(root: str, lister: DirectoryLister = scandir_entries) -> List[DirectoryGroup]:
    """
    Collect the non-empty directory groups below 'root'.

    Hidden entries are skipped; a hidden directory takes its whole subtree
    with it. Directories without visible files of their own produce no
    group.

    Args:
        root: Absolute path of the directory to scan.
        lister: Directory listing capability, injectable for tests.

    Returns:
        List[DirectoryGroup]: Groups in first-encounter order.

    Raises:
        TreeWalkError: If any directory cannot be listed. No partial result
            is returned.
    """
    root_name = os.path.basename(root.rstrip(os.sep)) or root
    if is_hidden(root_name):
        logger.debug(f"Root '{root}' is hidden, nothing to list")
        return []

    dir_files: Dict[DirKey, List[str]] = {}

    for key, dirs, files in _walk(root, (root_name,), lister):
        # In-place pruning keeps hidden subtrees out of the traversal
        dirs[:] = [d for d in dirs if not is_hidden(d)]

        bucket = dir_files.setdefault(key, [])
        bucket.extend(clean_file_name(f) for f in files if not is_hidden(f))

    groups = [
        DirectoryGroup(display_name=clean_dir_name(key[-1]), files=tuple(files))
        for key, files in dir_files.items()
        if files
    ]

    logger.debug(f"Walked {len(dir_files)} directories under {root}, {len(groups)} with files")
    return groups

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _walk(
        root: str,
        root_key: DirKey,
        lister: DirectoryLister,
) -> Iterator[Tuple[DirKey, List[str], List[str]]]:
    """
    Top-down walk in the style of os.walk, driven by 'lister'.

    Yields (key, dirnames, filenames) for every directory in pre-order.
    Callers may prune 'dirnames' in place before the walk descends. An
    explicit stack is used so that deep trees are not bound by the
    interpreter's recursion limit.
    """
    stack: List[Tuple[str, DirKey]] = [(root, root_key)]

    while stack:
        path, key = stack.pop()
        try:
            entries = list(lister(path))
        except OSError as e:
            raise TreeWalkError(f"open {path}: {e.strerror or e}", path=path) from e

        dirs = [e.name for e in entries if e.is_dir]
        files = [e.name for e in entries if not e.is_dir]

        yield key, dirs, files

        # Reversed push so the first listed subdirectory is visited first
        for name in reversed(dirs):
            stack.append((os.path.join(path, name), key + (name,)))
