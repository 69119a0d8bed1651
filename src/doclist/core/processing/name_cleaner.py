from __future__ import annotations

"""
Name Cleaner.

Turns raw filesystem names into the human-readable labels shown in the
generated fragment.
"""

from doclist.domain.constants import HIDDEN_PREFIX

_SEPARATOR_CHARS = ("_", "-")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_hidden(name: str) -> bool:
    """Return True for dot-prefixed entries that must never be listed."""
    return name.startswith(HIDDEN_PREFIX)


def clean_file_name(name: str) -> str:
    """
    Build the display label of a file.

    Drops everything from the last '.' onwards, then applies the same
    separator replacement as directories.

    Args:
        name: Bare file name, e.g. 'report-final.pdf'.

    Returns:
        str: Display label, e.g. 'report final'. May be empty.
    """
    stem, dot, _ = name.rpartition(".")
    if dot:
        name = stem
    return clean_dir_name(name)


def clean_dir_name(name: str) -> str:
    """
    Build the display label of a directory.

    Underscores and hyphens become spaces and the result is trimmed. Dotted
    suffixes such as 'v1.2' are kept.
    """
    for char in _SEPARATOR_CHARS:
        name = name.replace(char, " ")
    return name.strip()
