"""StackService — replay push/pop/unshift/shift operations on a file's lines.

Operation syntax (one token per operation)::

    push=VALUE     append VALUE to the tail
    pop            remove the tail
    unshift=VALUE  prepend VALUE to the head
    shift          remove the head
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from aockit.domain.stack import Stack
from aockit.infrastructure.filesystem import read_lines
from aockit.services.base import HANDLED_ERRORS, BaseService
from aockit.services.result import ServiceResult

logger = logging.getLogger(__name__)

_VALUE_OPS = frozenset({"push", "unshift"})
_BARE_OPS = frozenset({"pop", "shift"})


def parse_operation(token: str) -> tuple[str, str | None]:
    """Split an operation token into ``(name, value)``.

    Raises:
        ValueError: Unknown operation, or a value missing/present where
            the operation does not take one.
    """
    name, sep, value = token.partition("=")
    name = name.strip().lower()
    if name in _VALUE_OPS:
        if not sep:
            msg = f"Operation {name!r} needs a value: {name}=VALUE"
            raise ValueError(msg)
        return name, value
    if name in _BARE_OPS:
        if sep:
            msg = f"Operation {name!r} takes no value"
            raise ValueError(msg)
        return name, None
    msg = f"Unknown stack operation: {token!r}"
    raise ValueError(msg)


class StackService(BaseService):
    """Loads a file's lines into a :class:`Stack` and applies operations in order."""

    def run(self, path: Path, operations: Sequence[str] = ()) -> ServiceResult:
        """Apply *operations* and report removed values plus the final stack.

        Operations are validated before the file is read, so a typo never
        leaves a half-applied run.
        """
        op = "stack_run"
        try:
            parsed = [parse_operation(token) for token in operations]
            stack = Stack(read_lines(path, encoding=self.encoding))
        except HANDLED_ERRORS as exc:
            return self._failure(op, exc)

        removed: list[str] = []
        for step, (name, value) in enumerate(parsed, start=1):
            try:
                if name == "push":
                    stack.push(value)
                elif name == "unshift":
                    stack.unshift(value)
                elif name == "pop":
                    removed.append(stack.pop())
                else:
                    removed.append(stack.shift())
            except HANDLED_ERRORS as exc:
                return self._failure(op, exc, step=step, operation=name)
            logger.debug("Step %d: %s (size %d)", step, name, len(stack))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "count": len(stack),
                "items": stack.to_list(),
                "removed": removed,
            },
            meta={**self._meta(path), "operations": len(parsed)},
        )
