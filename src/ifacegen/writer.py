"""Atomic file writes for rendered output and configuration files.

Generated declaration files are usually checked into a client repository and
picked up by a compiler or bundler watching the directory. Writing through a
temporary file and renaming it over the target means watchers never observe a
half-written file, and a failed render never clobbers the previous output.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional


def write_output(text: str, path: str | Path) -> Path:
    """Write rendered *text* to *path* atomically.

    Parent directories are created as needed and a trailing newline is
    appended when *text* does not already end with one.

    Returns:
        The path written to.
    """
    target = Path(path)
    if not text.endswith("\n"):
        text += "\n"
    atomic_write(target, text)
    return target


def atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is guaranteed to be an atomic rename on POSIX systems.
    On success the temp file is renamed over *path*; on any failure the temp
    file is cleaned up.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None  # prevent double-close below
        os.replace(tmp_path, path)
    except BaseException:
        # Includes KeyboardInterrupt
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise
