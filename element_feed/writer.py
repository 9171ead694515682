"""
Atomic JSON writer for the published documents.

The display client may poll a snapshot while it is being regenerated, so a
document is written to a temporary file next to its target and moved into
place only once it is complete. Concurrent runs follow last-writer-wins.
"""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path
from typing import Any

from .errors import OutputWriteError

logger = logging.getLogger(__name__)


def dump_json(document: Any, indent: int = 2) -> str:
    """Serialize a document as indented, human-readable JSON."""
    return json.dumps(document, indent=indent, ensure_ascii=False)


def read_json(path: str | Path) -> Any:
    """Read a JSON document written by AtomicJsonWriter."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class AtomicJsonWriter:
    """Handles atomic writes of JSON documents.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Check the written text parses back as JSON
    3. Atomically replace the target file

    An interrupted run never leaves a half-written document behind.
    """

    def __init__(self, indent: int = 2):
        """Initialize the writer.

        Args:
            indent: Indentation of the serialized JSON
        """
        self.indent = indent

    def write(self, path: str | Path, document: Any) -> Path:
        """Write a document to ``path`` atomically.

        Args:
            path: Target file path; parent directories are created
            document: JSON-serializable document

        Returns:
            The path written

        Raises:
            OutputWriteError: If serialization, validation or the write fails
        """
        path = Path(path)
        try:
            content = dump_json(document, self.indent)
        except (TypeError, ValueError) as e:
            raise OutputWriteError(f"Document for {path} is not JSON serializable: {e}") from e

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path_str = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                text=True,
            )
        except OSError as e:
            raise OutputWriteError(f"Cannot create {path.parent}: {e}") from e

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            self._validate(temp_path)

            # rename() is atomic on POSIX when source and target share a filesystem
            temp_path.replace(path)
        except Exception as e:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    logger.warning("Could not remove temporary file %s", temp_path)
            if isinstance(e, OutputWriteError):
                raise
            raise OutputWriteError(f"Failed to write {path}: {e}") from e

        logger.info("Wrote %s", path)
        return path

    def _validate(self, temp_path: Path) -> None:
        """Check the temporary file holds well-formed JSON.

        Raises:
            OutputWriteError: If the content does not parse back
        """
        try:
            read_json(temp_path)
        except json.JSONDecodeError as e:
            raise OutputWriteError(f"Written document is not valid JSON: {e}") from e
