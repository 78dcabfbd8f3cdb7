from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. The reference shared-folder tree used by scanner and CLI tests.
3. Logging teardown shared by tests that bootstrap the root logger.
"""

import logging
import os
import sys
from logging.handlers import QueueListener
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
def _can_symlink(tmp_path: Path) -> bool:
    probe = tmp_path / "_probe_link"
    try:
        probe.symlink_to(tmp_path)
    except (OSError, NotImplementedError):
        return False
    probe.unlink()
    return True


@pytest.fixture
def shared_folder(tmp_path: Path) -> Path:
    """
    Create the reference project below a temporary shared folder.

    Structure:
        project/a.txt          (text)
        project/sub/b.bin      (binary)
        project/sub/link       -> a.txt (symlink)
        project/sub/deep/c.md  (text)
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / "a.txt").write_text("hello world\n", encoding="utf-8")
    sub = root / "sub"
    sub.mkdir()
    (sub / "b.bin").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")
    (sub / "deep").mkdir()
    (sub / "deep" / "c.md").write_text("# Title\n", encoding="utf-8")

    if not _can_symlink(tmp_path):
        pytest.skip("Symbolic links are not supported on this platform.")
    (sub / "link").symlink_to(root / "a.txt")

    return root


@pytest.fixture
def reset_logging():
    """Detach our root handlers and stop our listener before and after a test."""
    from sharedfolder.infra.logging import (
        _CONFIGURED_FLAG_ATTR,
        _HANDLER_TAG_ATTR,
        _QUEUE_LISTENER_ATTR,
    )

    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if isinstance(listener, QueueListener) and getattr(listener, "_thread", None) is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)

        for h in list(root.handlers):
            if not getattr(h, _HANDLER_TAG_ATTR, False):
                continue
            root.removeHandler(h)
            h.close()

        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _reset()
    yield
    _reset()
