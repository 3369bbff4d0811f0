"""Path-based cursor location.

A CursorLocation says which expression the cursor is editing, as a path of
links descending from the root. It knows nothing about where inside that
expression the cursor sits; that is the Cursor's position.

Think of the path as a file path: in ``/home/Desktop/photos`` one link is
``Desktop``. Each link names a node in the enclosing expression and which of
that node's child expressions to descend into.

Example, for the expression ``ab*sqrt(c)`` with the cursor inside the root::

    location = CursorLocation(root)
    location.at_root()          # True
    location.move_into(3, 0)    # descend into sqrt's radicand ``c``
    location.enclosing_node()   # the sqrt node

The tree can mutate between queries, so every query re-resolves the path from
the root instead of caching nodes.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from mathedit.errors import EmptyPath, ForeignLink, IndexOutOfRange
from mathedit.nodes import Expression, Node


@dataclass(frozen=True, slots=True)
class PathLink:
    """One step of a cursor path.

    Attributes:
        node_index: Index of the node within its enclosing expression
        child_index: Which child expression of that node is descended into
        depth: Position of this link within the path (0 = outermost)

    """

    node_index: int
    child_index: int
    depth: int


@dataclass(frozen=True, slots=True)
class LocationInfo:
    """What a link resolves to: the node addressed and the expression it leads into."""

    enclosing_expression: Expression
    enclosing_node: Node | None


class CursorLocation:
    """Root expression plus the ordered path of links to the cursor's expression."""

    __slots__ = ("_root", "_path")

    def __init__(self, root: Expression) -> None:
        self._root = root
        self._path: list[PathLink] = []

    @property
    def root(self) -> Expression:
        return self._root

    @property
    def path(self) -> tuple[PathLink, ...]:
        """Read-only view of the path, outermost link first."""
        return tuple(self._path)

    @property
    def depth(self) -> int:
        return len(self._path)

    def move_into(self, node_index: int, child_index: int) -> PathLink:
        """Push a link descending into a node's child expression.

        Callers validate the indices; use ``Cursor.enter_node`` rather than
        calling this directly.
        """
        link = PathLink(node_index=node_index, child_index=child_index, depth=len(self._path))
        self._path.append(link)
        return link

    def pop(self) -> PathLink:
        """Remove and return the innermost link.

        Raises:
            EmptyPath: If the cursor is already at the root
        """
        if not self._path:
            raise EmptyPath("Cannot pop cursor path link; path is empty")
        return self._path.pop()

    def get_parent(self, link: PathLink) -> PathLink | None:
        """Return the link one level shallower, or None for the first link."""
        self._check_member(link)
        if link.depth == 0:
            return None
        return self._path[link.depth - 1]

    def resolve(self, link: PathLink) -> LocationInfo:
        """Walk the path from the root up to and including ``link``.

        Raises:
            ForeignLink: If the link is not part of this path
            IndexOutOfRange: If a link no longer fits the tree
        """
        self._check_member(link)
        return _walk(self._root, self._path[: link.depth + 1])

    def at_root(self) -> bool:
        return not self._path

    def top_level_link(self) -> PathLink:
        """Return the innermost link.

        Raises:
            EmptyPath: If the cursor is at the root
        """
        if not self._path:
            raise EmptyPath("Cannot get top level cursor path link; path is empty")
        return self._path[-1]

    def enclosing_expression(self) -> Expression:
        """The expression the cursor is editing; the root when the path is empty."""
        if not self._path:
            return self._root
        return self.resolve(self._path[-1]).enclosing_expression

    def enclosing_node(self) -> Node | None:
        """The node addressed by the innermost link; None at the root."""
        if not self._path:
            return None
        return self.resolve(self._path[-1]).enclosing_node

    def reset(self, links: Iterable[tuple[int, int]] = ()) -> None:
        """Replace the whole path with ``(node_index, child_index)`` pairs.

        The new path is validated against the tree before anything changes.

        Raises:
            IndexOutOfRange: If a pair does not fit the tree
        """
        new_path = [
            PathLink(node_index=node_index, child_index=child_index, depth=depth)
            for depth, (node_index, child_index) in enumerate(links)
        ]
        _walk(self._root, new_path)
        self._path = new_path

    def _check_member(self, link: PathLink) -> None:
        if not (0 <= link.depth < len(self._path) and self._path[link.depth] == link):
            raise ForeignLink(link.depth, len(self._path))

    def __repr__(self) -> str:
        steps = ", ".join(f"({link.node_index}, {link.child_index})" for link in self._path)
        return f"CursorLocation([{steps}])"


def _walk(root: Expression, links: list[PathLink]) -> LocationInfo:
    expression = root
    node: Node | None = None
    for link in links:
        node = expression[link.node_index]
        if not 0 <= link.child_index < node.arity:
            raise IndexOutOfRange(link.child_index, node.arity, "descend into child")
        expression = node.children[link.child_index]
    return LocationInfo(enclosing_expression=expression, enclosing_node=node)


def path_to_node(root: Expression, node_id: str) -> tuple[list[tuple[int, int]], int] | None:
    """Locate a node by id.

    Returns:
        ``(links, index)`` where ``links`` are the ``(node_index, child_index)``
        pairs leading to the expression holding the node and ``index`` is its
        position there, or None if no node in the tree has that id.

    """
    for index, node in enumerate(root):
        if node.id == node_id:
            return [], index
        for child_index, child in enumerate(node.children):
            found = path_to_node(child, node_id)
            if found is not None:
                links, inner_index = found
                return [(index, child_index), *links], inner_index
    return None
