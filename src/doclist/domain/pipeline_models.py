from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object returned by the pipeline engine to the interface
layer, together with its factory functions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from doclist.domain.listing_models import DirectoryGroup

# Failure categories, each mapped to its own message by the CLI
ERROR_KIND_PATH = "path"
ERROR_KIND_WALK = "walk"
ERROR_KIND_WRITE = "write"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Outcome of a complete walk-render-write run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Failure category (path, walk, write) or empty on success.
        base_path: Absolute directory that was scanned.
        output_path: Absolute path of the written fragment.
        groups: Directory groups that made it into the output.
        html: Rendered fragment.
        summary: Execution statistics.
    """
    ok: bool
    error: str
    error_kind: str

    base_path: str
    output_path: str = ""

    groups: List[DirectoryGroup] = field(default_factory=list)
    html: str = ""

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        error_kind: str,
        base_path: str,
        output_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        error_kind: One of the ERROR_KIND_* categories.
        base_path: The target input directory.
        output_path: Output file path, when already known.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        base_path=base_path,
        output_path=output_path,
        summary=summary_extra or {},
    )


def create_success_result(
        base_path: str,
        output_path: str,
        groups: List[DirectoryGroup],
        html: str,
) -> PipelineResult:
    """
    Create a successful pipeline result instance.

    Args:
        base_path: Absolute scanned directory.
        output_path: Absolute path of the written fragment.
        groups: Rendered directory groups.
        html: Rendered fragment.

    Returns:
        PipelineResult: An immutable success result object.
    """
    return PipelineResult(
        ok=True,
        error="",
        error_kind="",
        base_path=base_path,
        output_path=output_path,
        groups=groups,
        html=html,
        summary={
            "groups": len(groups),
            "files": sum(len(g.files) for g in groups),
            "bytes": len(html.encode("utf-8")),
        },
    )
