from __future__ import annotations

"""
Pipeline Engine.

Runs the whole conversion in sequence: validate the target, walk it, render
the fragment and write it next to the scanned directory. Every failure is
terminal and reported through a PipelineResult, so interface layers never
deal with raw exceptions from the domain.
"""

import logging
from typing import Optional

from doclist.core.analysis.html_renderer import render_html
from doclist.core.analysis.tree_walker import walk_directory
from doclist.domain.listing_models import (
    DirectoryLister,
    OutputWriteError,
    TargetPathError,
    TreeWalkError,
)
from doclist.domain.pipeline_models import (
    ERROR_KIND_PATH,
    ERROR_KIND_WALK,
    ERROR_KIND_WRITE,
    PipelineResult,
    create_error_result,
    create_success_result,
)
from doclist.infra.fs import get_output_path, resolve_target_dir, scandir_entries, write_output

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_pipeline(
        input_path: str,
        cwd: Optional[str] = None,
        lister: DirectoryLister = scandir_entries,
) -> PipelineResult:
    """
    Convert the tree at 'input_path' into 'tmp.html' one level above it.

    Args:
        input_path: Directory argument as supplied by the user.
        cwd: Base directory for a relative 'input_path'.
        lister: Directory listing capability used by the walker.

    Returns:
        PipelineResult: Success with the written path, or the first failure.
    """
    # 1. Target validation
    try:
        base_path = resolve_target_dir(input_path, cwd=cwd)
    except TargetPathError as e:
        logger.debug(f"Target rejected: {e}")
        return create_error_result(str(e), ERROR_KIND_PATH, base_path=e.path or input_path)

    logger.info(f"Scanning directory: {base_path}")

    # 2. Traversal (all-or-nothing)
    try:
        groups = walk_directory(base_path, lister=lister)
    except TreeWalkError as e:
        logger.debug("Walk aborted", exc_info=True)
        return create_error_result(str(e), ERROR_KIND_WALK, base_path=base_path)

    # 3. Rendering
    html = render_html(groups)

    # 4. Persistence
    output_path = get_output_path(base_path)
    try:
        write_output(output_path, html)
    except OutputWriteError as e:
        logger.debug("Write failed", exc_info=True)
        return create_error_result(
            str(e),
            ERROR_KIND_WRITE,
            base_path=base_path,
            output_path=output_path,
            summary_extra={"groups": len(groups)},
        )

    result = create_success_result(base_path, output_path, groups, html)
    logger.info(
        f"Rendered {result.summary['groups']} groups "
        f"({result.summary['files']} files) into {output_path}"
    )
    return result
