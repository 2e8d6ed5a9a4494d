"""Pure container logic: sequences, stacks, grids, trees, and number helpers.

No I/O and no logging. Infrastructure and services depend on this
package, never the other way round.
"""

from aockit.domain.errors import (
    ConversionError,
    EmptyCollection,
    IndexOutOfRange,
    OutlineError,
    ToolkitError,
)
from aockit.domain.grid import Coordinate, Grid, in_bounds
from aockit.domain.sequence import cut, delete, insert
from aockit.domain.stack import Stack
from aockit.domain.tree import TreeNode, enumerate_nodes

__all__ = [
    "ConversionError",
    "Coordinate",
    "EmptyCollection",
    "Grid",
    "IndexOutOfRange",
    "OutlineError",
    "Stack",
    "ToolkitError",
    "TreeNode",
    "cut",
    "delete",
    "enumerate_nodes",
    "in_bounds",
    "insert",
]
