"""TreeService — enumerate the nodes of an outline file."""

from __future__ import annotations

from pathlib import Path

from aockit.domain.tree import TraversalOrder
from aockit.infrastructure.filesystem import read_outline
from aockit.services.base import HANDLED_ERRORS, BaseService
from aockit.services.result import ServiceResult


class TreeService(BaseService):
    """Builds the tree from an indented outline file and lists its nodes."""

    def enumerate(
        self,
        path: Path,
        *,
        order: TraversalOrder | str | None = None,
        indent_width: int | None = None,
    ) -> ServiceResult:
        """List outline elements in *order* (default from ``[tree] order``)."""
        op = "tree_enumerate"
        tree_config = self._settings.tree
        width = tree_config.indent_width if indent_width is None else indent_width
        try:
            resolved = TraversalOrder(order) if order is not None else tree_config.order
            root = read_outline(path, width, encoding=self.encoding)
        except HANDLED_ERRORS as exc:
            return self._failure(op, exc)

        if root is None:
            return ServiceResult(
                ok=True,
                op=op,
                data={"order": resolved.value, "count": 0, "items": []},
                warnings=[f"Outline is empty: {path}"],
                meta=self._meta(path),
            )

        items = root.elements(resolved)
        return ServiceResult(
            ok=True,
            op=op,
            data={"order": resolved.value, "count": len(items), "items": items},
            meta=self._meta(path),
        )
