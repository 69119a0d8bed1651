from __future__ import annotations

"""
Directory Listing Data Models.

Defines the value objects exchanged between the filesystem layer, the tree
walker and the HTML renderer, plus the error hierarchy raised along the way.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ListingEntry:
    """
    One item reported by a directory listing.

    Attributes:
        name: Bare entry name (no path separators).
        is_dir: Whether the entry should be descended into.
    """
    name: str
    is_dir: bool


@dataclass(frozen=True)
class DirectoryGroup:
    """
    A directory holding at least one visible file, ready for rendering.

    Attributes:
        display_name: Cleaned directory name used as the heading.
        files: Cleaned file names in encounter order.
    """
    display_name: str
    files: Tuple[str, ...]


DirectoryLister = Callable[[str], Iterable[ListingEntry]]

# -----------------------------------------------------------------------------
# ERROR MODELS
# -----------------------------------------------------------------------------

class DoclistError(Exception):
    """Base class for every failure that terminates a run."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class TargetPathError(DoclistError):
    """The requested directory is missing or is not a directory."""


class TreeWalkError(DoclistError):
    """The filesystem refused a listing while walking the tree."""


class OutputWriteError(DoclistError):
    """The rendered fragment could not be persisted."""
