"""Exception classes for mathedit.

All errors are programmer-error class faults: they are raised synchronously by
the call whose precondition was violated, before any state is changed.
"""

from __future__ import annotations


class MatheditError(Exception):
    """Base exception for all mathedit errors.

    Subclass this for specific error categories.
    """

    pass


class IndexOutOfRange(MatheditError, IndexError):
    """Expression mutation or query with an invalid index.

    Also raised when a path link no longer fits the tree it is resolved
    against.
    """

    def __init__(self, index: int, length: int, action: str = "access") -> None:
        """Initialize with the offending index.

        Args:
            index: The index that was requested
            length: Length of the expression at the time of the call
            action: Short verb describing the attempted operation
        """
        self.index = index
        self.length = length
        self.action = action
        super().__init__(f"Cannot {action} index {index} of expression with {length} node(s)")


class EmptyPath(MatheditError, LookupError):
    """Attempt to read or pop a link from an empty cursor path."""

    def __init__(self, message: str = "Cursor path is empty") -> None:
        super().__init__(message)


class NoEnclosingNode(EmptyPath):
    """Attempt to leave or remove the enclosing node while at the root."""

    def __init__(self, operation: str) -> None:
        """Initialize with the operation that required an enclosing node.

        Args:
            operation: Name of the cursor operation (e.g. "leave_node")
        """
        self.operation = operation
        super().__init__(f"{operation}: cursor is at the root expression; there is no enclosing node")


class ElementNotRendered(MatheditError, LookupError):
    """Query for a visual element that the last render pass did not produce."""

    def __init__(self, element_id: str) -> None:
        self.element_id = element_id
        super().__init__(f"Element '{element_id}' has not been rendered yet")


class NodeInUse(MatheditError, ValueError):
    """Insertion of a node that already belongs to an expression."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Node {node_id} already belongs to an expression; remove it first")


class ForeignLink(MatheditError, ValueError):
    """A path link that is not part of the location it was passed to."""

    def __init__(self, depth: int, path_length: int) -> None:
        self.depth = depth
        self.path_length = path_length
        super().__init__(f"Link at depth {depth} is not part of this path (length {path_length})")
