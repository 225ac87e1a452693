# -*- coding: utf-8 -*-
"""File helpers shared by the JSON stores."""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

from .exceptions import StoreParseError

logger = logging.getLogger(__name__)


def atomic_write_text(path: Path, text: str) -> None:
    """Replace *path* with *text* without ever exposing a partial file.

    The content goes to a uniquely named temp file in the same directory
    (so the final ``os.replace`` stays on one filesystem) and is renamed
    onto *path*. If anything fails, the temp file is removed on a
    best-effort basis and the original error is re-raised; the previous
    contents of *path*, if any, are left untouched.
    """
    path = Path(path)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.tmp.",
        dir=path.parent,
    )
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        if path.exists():
            # mkstemp creates 0600 files; keep whatever the user had.
            os.chmod(tmp, stat.S_IMODE(path.stat().st_mode))
        os.replace(tmp, path)
    except BaseException:
        try:
            tmp.unlink(missing_ok=True)
        except OSError as e:
            logger.debug("Failed to remove temp file %s: %s", tmp, e)
        raise
    logger.debug("Wrote %s", path)


def dump_json(data: Any) -> str:
    """Serialize *data* the way every store file is written."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def read_json_file(path: Path) -> Any:
    """Return the parsed JSON in *path*, or ``None`` if it does not exist.

    Raises :class:`StoreParseError` if the file holds invalid JSON.
    """
    if not path.exists():
        logger.debug("%s does not exist", path)
        return None
    raw = path.read_bytes()
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise StoreParseError(path, str(e)) from e
