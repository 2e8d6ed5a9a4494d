"""SequenceService — cut, delete and insert over an input file's lines."""

from __future__ import annotations

import logging
from pathlib import Path

from aockit.domain import sequence
from aockit.infrastructure.filesystem import read_lines, read_single_line
from aockit.services.base import HANDLED_ERRORS, BaseService
from aockit.services.result import ServiceResult

logger = logging.getLogger(__name__)


class SequenceService(BaseService):
    """Splices the line sequence of a file. The file itself is never written."""

    def show(self, path: Path, *, first_only: bool = False) -> ServiceResult:
        """Return the file's lines, or only its first line."""
        op = "seq_show"
        try:
            if first_only:
                items = [read_single_line(path, encoding=self.encoding)]
            else:
                items = read_lines(path, encoding=self.encoding)
        except HANDLED_ERRORS as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(items), "items": items},
            meta=self._meta(path),
        )

    def cut(self, path: Path, start: int, end: int) -> ServiceResult:
        """Remove lines ``[start, end)``."""
        op = "seq_cut"
        try:
            items = read_lines(path, encoding=self.encoding)
            removed = items[start:end] if 0 <= start <= end else []
            sequence.cut(items, start, end)
        except HANDLED_ERRORS as exc:
            return self._failure(op, exc, start=start, end=end)
        logger.debug("Cut [%d, %d) from %s", start, end, path)
        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(items), "items": items, "removed": removed},
            meta=self._meta(path),
        )

    def delete(self, path: Path, index: int) -> ServiceResult:
        """Remove the line at *index*."""
        op = "seq_delete"
        try:
            items = read_lines(path, encoding=self.encoding)
            removed = items[index] if 0 <= index < len(items) else None
            sequence.delete(items, index)
        except HANDLED_ERRORS as exc:
            return self._failure(op, exc)
        logger.debug("Deleted index %d from %s", index, path)
        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(items), "items": items, "removed": removed},
            meta=self._meta(path),
        )

    def insert(self, path: Path, element: str, index: int) -> ServiceResult:
        """Insert *element* as a new line at *index*."""
        op = "seq_insert"
        try:
            items = read_lines(path, encoding=self.encoding)
            sequence.insert(items, element, index)
        except HANDLED_ERRORS as exc:
            return self._failure(op, exc)
        logger.debug("Inserted at index %d into %s", index, path)
        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(items), "items": items, "inserted": element, "index": index},
            meta=self._meta(path),
        )
