from __future__ import annotations

"""
CLI Argument Definition.

Defines the command-line schema. The directory positional is optional at
the parser level so that the controller, not argparse, reports a missing
argument (argparse would exit with status 2). There is no -h/--help option
and no abbreviation of long options, so any other token can name the
directory.
"""

import argparse

from doclist.domain.constants import DESCRIPTION, PROGRAM_NAME

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the doclist CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description=DESCRIPTION,
        add_help=False,
        allow_abbrev=False,
    )

    p.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory to convert. The fragment is written to tmp.html in its parent.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )

    return p
