"""BaseService — shared foundation for aockit services.

Every service receives the frozen :class:`AockitSettings` at
construction time and reads input encoding, delimiters and tree options
from it. Exceptions raised while reading input or running a domain
operation are converted to failed ServiceResults by :meth:`_failure`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from aockit.domain.errors import (
    ConversionError,
    EmptyCollection,
    IndexOutOfRange,
    OutlineError,
)
from aockit.services.result import ErrorCode, ServiceError, ServiceResult

if TYPE_CHECKING:
    from aockit.config.settings import AockitSettings

logger = logging.getLogger(__name__)

# First match wins, so subclasses precede their bases.
_ERROR_CODES: tuple[tuple[type[Exception], ErrorCode], ...] = (
    (IndexOutOfRange, ErrorCode.INDEX_OUT_OF_RANGE),
    (EmptyCollection, ErrorCode.EMPTY_COLLECTION),
    (ConversionError, ErrorCode.CONVERSION_ERROR),
    (OutlineError, ErrorCode.OUTLINE_ERROR),
    (FileNotFoundError, ErrorCode.FILE_NOT_FOUND),
    (OSError, ErrorCode.IO_ERROR),
    (UnicodeDecodeError, ErrorCode.IO_ERROR),
    (ValueError, ErrorCode.INVALID_ARGUMENT),
    (TypeError, ErrorCode.INVALID_ARGUMENT),
)

# Exceptions a service may turn into a failed result. Anything else is a bug
# and propagates.
HANDLED_ERRORS: tuple[type[Exception], ...] = (
    IndexOutOfRange,
    EmptyCollection,
    ConversionError,
    OutlineError,
    OSError,
    ValueError,
    TypeError,
)


def error_code_for(exc: Exception) -> ErrorCode:
    """Map an exception to its :class:`ErrorCode`."""
    for exc_type, code in _ERROR_CODES:
        if isinstance(exc, exc_type):
            return code
    return ErrorCode.INVALID_ARGUMENT


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class SequenceService(BaseService):
            def cut(self, path: Path, start: int, end: int) -> ServiceResult:
                try:
                    ...
                except HANDLED_ERRORS as exc:
                    return self._failure("seq_cut", exc)
    """

    def __init__(self, settings: AockitSettings) -> None:
        self._settings = settings

    @property
    def encoding(self) -> str:
        return self._settings.input.encoding

    @staticmethod
    def _meta(path: Path | str) -> dict[str, Any]:
        return {"input": str(path)}

    @staticmethod
    def _failure(op: str, exc: Exception, **detail: Any) -> ServiceResult:
        """Build a failed result from *exc* and log it at DEBUG."""
        code = error_code_for(exc)
        if isinstance(exc, IndexOutOfRange):
            if exc.index is not None:
                detail.setdefault("index", exc.index)
            if exc.length is not None:
                detail.setdefault("length", exc.length)
        if isinstance(exc, OSError) and exc.filename is not None:
            detail.setdefault("path", str(exc.filename))
            message = f"{exc.strerror or exc}: {exc.filename}"
        else:
            message = str(exc)
        logger.debug("%s failed with %s: %s", op, code, message)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code.value, message=message, detail=detail),
        )
