"""General trees in left-child/right-sibling form.

Each node links to its first child and to its next sibling. Both links
own the subtree they point at; there are no parent references, so a
tree built through these links is acyclic. The toolkit only reads trees.
The outline builder at the bottom of this module is the one place that
constructs them.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum

from aockit.domain.errors import OutlineError


class TraversalOrder(StrEnum):
    """Node orders offered by :meth:`TreeNode.elements`."""

    SIBLING_FIRST = "sibling-first"
    DEPTH_FIRST = "depth-first"


@dataclass(eq=False)
class TreeNode[T]:
    """One tree node. Compared by identity, so *T* needs no ``__eq__``."""

    element: T
    first_child: TreeNode[T] | None = None
    next_sibling: TreeNode[T] | None = None

    def children(self) -> Iterator[TreeNode[T]]:
        """Yield this node's direct children, first to last."""
        child = self.first_child
        while child is not None:
            yield child
            child = child.next_sibling

    def nodes(self) -> list[TreeNode[T]]:
        """Enumerate this node, its sibling chain, then its children.

        See :func:`enumerate_nodes`.
        """
        return enumerate_nodes(self)

    def depth_first(self) -> list[TreeNode[T]]:
        """Classic pre-order over the subtree rooted here.

        Each child's whole subtree is listed before the next child.
        Unlike :meth:`nodes`, this node's own siblings are not visited.
        """
        result: list[TreeNode[T]] = []
        pending: list[TreeNode[T]] = [self]
        while pending:
            current = pending.pop()
            result.append(current)
            pending.extend(reversed(list(current.children())))
        return result

    def elements(self, order: TraversalOrder | str = TraversalOrder.SIBLING_FIRST) -> list[T]:
        """Return node elements in the requested *order*."""
        order = TraversalOrder(order)
        if order is TraversalOrder.DEPTH_FIRST:
            return [node.element for node in self.depth_first()]
        return [node.element for node in self.nodes()]


def enumerate_nodes[T](node: TreeNode[T]) -> list[TreeNode[T]]:
    """List *node*, then everything reachable through its next sibling,
    then everything reachable through its first child.

    This pre-order visits the complete sibling-chain enumeration before
    descending, so for a root R whose children are A and B, where A has a
    single child C, the result is ``[R, A, B, C]``.

    Uses an explicit work list; long sibling chains do not recurse.
    """
    result: list[TreeNode[T]] = []
    pending: list[TreeNode[T]] = [node]
    while pending:
        current = pending.pop()
        result.append(current)
        # LIFO: the sibling is pushed last so its enumeration completes first.
        if current.first_child is not None:
            pending.append(current.first_child)
        if current.next_sibling is not None:
            pending.append(current.next_sibling)
    return result


def build_outline(lines: Iterable[str], indent_width: int = 2) -> TreeNode[str] | None:
    """Build a tree from indented text, one node per non-blank line.

    Nesting depth is the leading whitespace divided by *indent_width*
    (tabs expand to *indent_width* spaces). Lines at depth 0 form the
    root's sibling chain. Returns None when there are no non-blank lines.

    Example outline::

        root
          a
            c
          b

    Raises:
        OutlineError: Indentation is not a multiple of *indent_width*, or a
            line is nested more than one level below its predecessor.
    """
    if indent_width < 1:
        msg = f"indent_width must be positive, got {indent_width}"
        raise ValueError(msg)

    first: TreeNode[str] | None = None
    # path[d] is the most recent node seen at depth d.
    path: list[TreeNode[str]] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n").expandtabs(indent_width)
        text = line.strip()
        if not text:
            continue
        leading = len(line) - len(line.lstrip(" "))
        if leading % indent_width:
            msg = f"Line {lineno}: indentation {leading} is not a multiple of {indent_width}"
            raise OutlineError(msg)
        depth = leading // indent_width
        if depth > len(path):
            if path:
                msg = f"Line {lineno}: depth {depth} follows a line at depth {len(path) - 1}"
            else:
                msg = f"Line {lineno}: the first line must not be indented"
            raise OutlineError(msg)

        node = TreeNode(text)
        if depth == len(path):
            if path:
                path[-1].first_child = node
            else:
                first = node
        else:
            path[depth].next_sibling = node
            del path[depth:]
        path.append(node)
    return first
