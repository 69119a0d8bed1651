from __future__ import annotations

"""
Unit tests for the Pipeline Engine.

Verifies the validate-walk-render-write sequence and that each failure
category stops the run with the matching error kind.
"""

import os
from pathlib import Path
from unittest.mock import patch

from doclist.core.pipeline.engine import run_pipeline
from doclist.domain.listing_models import OutputWriteError
from doclist.domain.pipeline_models import ERROR_KIND_PATH, ERROR_KIND_WALK, ERROR_KIND_WRITE


def test_run_pipeline_writes_sibling_output(my_docs_tree: Path) -> None:
    result = run_pipeline(str(my_docs_tree))

    assert result.ok is True
    assert result.base_path == str(my_docs_tree)
    assert result.output_path == str(my_docs_tree.parent / "tmp.html")
    assert result.summary == {"groups": 1, "files": 1, "bytes": len(result.html)}
    assert (my_docs_tree.parent / "tmp.html").read_text(encoding="utf-8") == result.html


def test_run_pipeline_resolves_relative_path_against_cwd(my_docs_tree: Path) -> None:
    result = run_pipeline("My_Docs", cwd=str(my_docs_tree.parent))

    assert result.ok is True
    assert result.base_path == str(my_docs_tree)


def test_run_pipeline_missing_target(tmp_path: Path) -> None:
    result = run_pipeline(str(tmp_path / "nope"))

    assert result.ok is False
    assert result.error_kind == ERROR_KIND_PATH
    assert not (tmp_path / "tmp.html").exists()


def test_run_pipeline_target_is_file(tmp_path: Path) -> None:
    f = tmp_path / "file.txt"
    f.write_text("x", encoding="utf-8")

    result = run_pipeline(str(f))

    assert result.ok is False
    assert result.error_kind == ERROR_KIND_PATH
    assert "is not a directory" in result.error


def test_run_pipeline_walk_failure_writes_nothing(tmp_path: Path, fake_lister) -> None:
    target = tmp_path / "docs"
    target.mkdir()
    lister = fake_lister(
        {str(target): [("ok.txt", False), ("locked", True)]},
        failures={os.path.join(str(target), "locked"): PermissionError(13, "Permission denied")},
    )

    result = run_pipeline(str(target), lister=lister)

    assert result.ok is False
    assert result.error_kind == ERROR_KIND_WALK
    assert not (tmp_path / "tmp.html").exists()


def test_run_pipeline_write_failure(my_docs_tree: Path) -> None:
    with patch(
        "doclist.core.pipeline.engine.write_output",
        side_effect=OutputWriteError("open tmp.html: Read-only file system"),
    ):
        result = run_pipeline(str(my_docs_tree))

    assert result.ok is False
    assert result.error_kind == ERROR_KIND_WRITE
    assert result.output_path == str(my_docs_tree.parent / "tmp.html")
    assert result.summary == {"groups": 1}
