from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An in-memory directory lister for order and failure scenarios.
3. A logging reset so that CLI runs do not leak handlers between tests.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from doclist.domain.listing_models import ListingEntry  # noqa: E402
from doclist.infra.logging import _HANDLER_TAG_ATTR, _QUEUE_LISTENER_ATTR  # noqa: E402
from doclist.infra.logging.core import _CONFIGURED_FLAG_ATTR, _safe_stop_listener  # noqa: E402


# -----------------------------------------------------------------------------
# Fake Filesystem
# -----------------------------------------------------------------------------
class FakeLister:
    """
    In-memory directory listing keyed by absolute path.

    Entries are returned exactly in the order they were declared, and paths
    listed in 'failures' raise the given OSError.
    """

    def __init__(
            self,
            tree: Dict[str, List[Tuple[str, bool]]],
            failures: Optional[Dict[str, OSError]] = None,
    ) -> None:
        self.tree = tree
        self.failures = failures or {}
        self.calls: List[str] = []

    def __call__(self, path: str) -> Iterable[ListingEntry]:
        self.calls.append(path)
        if path in self.failures:
            raise self.failures[path]
        return [ListingEntry(name=n, is_dir=d) for n, d in self.tree.get(path, [])]


@pytest.fixture
def fake_lister() -> Callable[..., FakeLister]:
    """Factory for FakeLister instances."""
    return FakeLister


@pytest.fixture
def my_docs_tree(tmp_path: Path) -> Path:
    """
    Create the reference tree used across integration tests.

    Structure:
    /My_Docs
      report-final.pdf
      .DS_Store
      /.git
        config
    """
    root = tmp_path / "My_Docs"
    root.mkdir()
    (root / "report-final.pdf").write_text("pdf", encoding="utf-8")
    (root / ".DS_Store").write_text("junk", encoding="utf-8")
    (root / ".git").mkdir()
    (root / ".git" / "config").write_text("[core]", encoding="utf-8")
    return root


# -----------------------------------------------------------------------------
# Logging Isolation
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_logging() -> Iterable[None]:
    """Tear down doclist's logging setup after every test."""
    yield
    root = logging.getLogger()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG_ATTR, False):
            root.removeHandler(h)
            h.close()

    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)
