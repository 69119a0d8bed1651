from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Parses arguments, bootstraps logging, runs the pipeline and turns its result
into the user-facing messages and exit code. Streams and the working
directory are parameters so the whole flow can be driven from tests.
"""

import sys
from typing import Dict, List, Optional, TextIO

from doclist.core.pipeline.engine import run_pipeline
from doclist.domain.constants import DESCRIPTION, USAGE_LINE
from doclist.domain.pipeline_models import (
    ERROR_KIND_PATH,
    ERROR_KIND_WALK,
    ERROR_KIND_WRITE,
    PipelineResult,
)
from doclist.infra.logging import LoggingConfig, configure_logging, get_logger
from doclist.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1

_ERROR_PREFIXES: Dict[str, str] = {
    ERROR_KIND_PATH: "Error",
    ERROR_KIND_WALK: "Error walking directory",
    ERROR_KIND_WRITE: "Error writing output",
}

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(
        argv: Optional[List[str]] = None,
        cwd: Optional[str] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv[1:].
        cwd: Base directory for a relative target. Defaults to the process cwd.
        stdout: Stream for the confirmation line. Defaults to sys.stdout.
        stderr: Stream for usage and error messages. Defaults to sys.stderr.

    Returns:
        int: Process exit code (0 for success, 1 for any failure).
    """
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args, extra = parser.parse_known_args(argv)

    # 2. Logging bootstrap (console on stderr)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # A directory named like an option (e.g. "-drafts") lands in 'extra'
    directory = args.directory
    if directory is None and extra:
        directory, extra = extra[0], extra[1:]

    if extra:
        logger.debug(f"Ignoring extra arguments: {extra}")

    if directory is None:
        print(USAGE_LINE, file=err)
        print(DESCRIPTION, file=err)
        return EXIT_FAILURE

    # 3. Pipeline execution phase
    try:
        result = run_pipeline(directory, cwd=cwd)
    except KeyboardInterrupt:
        print("Interrupted.", file=err)
        return EXIT_FAILURE
    except Exception as e:
        logger.critical(f"Unexpected failure: {e}", exc_info=True)
        print(f"Error: {e}", file=err)
        return EXIT_FAILURE

    # 4. Result rendering phase
    return _report(result, out, err)

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _report(result: PipelineResult, out: TextIO, err: TextIO) -> int:
    """Print the outcome of a run and return its exit code."""
    if not result.ok:
        prefix = _ERROR_PREFIXES.get(result.error_kind, "Error")
        print(f"{prefix}: {result.error}", file=err)
        return EXIT_FAILURE

    print(f"Done! Output saved to: {result.output_path}", file=out)
    return EXIT_OK

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
