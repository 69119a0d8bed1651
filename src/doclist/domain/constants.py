from __future__ import annotations

"""
Domain Constants.

Fixed values shared by the walker, the renderer and the CLI.
"""

PROGRAM_NAME = "doclist"
USAGE_LINE = f"Usage: {PROGRAM_NAME} <directory>"
DESCRIPTION = "Converts a directory listing to WordPress-ready HTML format"

# Entries whose name starts with this marker are skipped (with their subtree)
HIDDEN_PREFIX = "."

OUTPUT_FILE_NAME = "tmp.html"
OUTPUT_FILE_MODE = 0o644
OUTPUT_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# HTML FRAGMENT TEMPLATES
# -----------------------------------------------------------------------------

HEADING_TEMPLATE = "<h3>{name}</h3>\n"
LIST_OPEN = "<ul>\n"
LIST_ITEM_TEMPLATE = " \t<li>{name}</li>\n"
LIST_CLOSE = "</ul>\n"
