"""Raw JSON file helpers: the only place that touches collection files on disk.

Writes go to a temporary sibling file which then replaces the target, so a
reader never observes a half-written document.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from shopdesk.domain.exceptions import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)


def read_json(path: Path, default: Any) -> Any:
    """Load the JSON document at ``path``.

    A missing file is created with ``default`` and ``default`` is returned.
    A file that exists but cannot be read or parsed raises StorageReadError;
    it is never reset, since that would discard the data in it.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info("Creating missing data file %s", path)
        write_json(path, default)
        return default
    except OSError as exc:
        raise StorageReadError(str(path), f"Could not read file ({exc.strerror})") from exc

    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StorageReadError(str(path), f"Invalid JSON at line {exc.lineno}") from exc


def write_json(path: Path, data: Any) -> None:
    """Serialize ``data`` to ``path`` (2-space indent), replacing it atomically."""
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2, ensure_ascii=False)
        os.replace(tmp_name, path)
        tmp_name = None
    except (OSError, TypeError, ValueError) as exc:
        raise StorageWriteError(str(path), f"Could not write file ({exc})") from exc
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)

    logger.debug("Wrote %s", path)
