"""Expression tree for mathedit.

The document is an Expression: an ordered, mutable sequence of Nodes. Each
Node owns a fixed tuple of child Expressions whose length is the node's arity.

Node Hierarchy:
Node (base)
├── Character            arity 0, immutable display symbol
├── SingleChildNode      arity 1 (see mathedit.elements)
└── DoubleChildNode      arity 2 (see mathedit.elements)

Ownership:
A Node belongs to at most one Expression at a time. Expression.insert()
refuses a node that is still attached elsewhere, and remove_at() detaches the
removed node, so there are no dangling references into the tree.

Rendering:
Rendering is a pure function of the subtree and the cursor. The cursor only
shows inside the one expression it is logically inside.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, ClassVar

from mathedit.errors import IndexOutOfRange, NodeInUse
from mathedit.utils.ids import provision_new_id

if TYPE_CHECKING:
    from mathedit.cursor import Cursor


class Expression:
    """An ordered sequence of nodes forming one slot of content.

    Examples:
        ``a+b`` is an expression with nodes ``a``, ``+`` and ``b``; in
        ``a+sqrt(b)`` the ``sqrt`` node owns a child expression ``b``.

    """

    __slots__ = ("_nodes",)

    def __init__(self, nodes: list[Node] | None = None) -> None:
        self._nodes: list[Node] = []
        for node in nodes or ():
            self.insert(len(self._nodes), node)

    @property
    def nodes(self) -> tuple[Node, ...]:
        """Read-only view of the nodes, in order."""
        return tuple(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(tuple(self._nodes))

    def __getitem__(self, index: int) -> Node:
        if not 0 <= index < len(self._nodes):
            raise IndexOutOfRange(index, len(self._nodes))
        return self._nodes[index]

    def __repr__(self) -> str:
        return f"Expression({self._nodes!r})"

    def insert(self, index: int, node: Node) -> None:
        """Insert a node before ``index``, shifting later nodes right.

        Example, with nodes ``[b, c, d]``::

            expr.insert(0, a)  # [a, b, c, d]
            expr.insert(4, e)  # [a, b, c, d, e]

        Raises:
            IndexOutOfRange: If index is not in [0, len]
            NodeInUse: If the node already belongs to an expression
        """
        if not 0 <= index <= len(self._nodes):
            raise IndexOutOfRange(index, len(self._nodes), "insert at")
        if node._owner is not None:
            raise NodeInUse(node.id)
        self._nodes.insert(index, node)
        node._owner = self

    def remove_at(self, index: int) -> Node:
        """Remove and return the node at ``index``; it becomes detached.

        Raises:
            IndexOutOfRange: If index is not in [0, len)
        """
        if not 0 <= index < len(self._nodes):
            raise IndexOutOfRange(index, len(self._nodes), "remove")
        node = self._nodes.pop(index)
        node._owner = None
        return node

    def index_of(self, node: Node) -> int:
        """Return the index of ``node`` compared by identity.

        Raises:
            ValueError: If the node is not in this expression
        """
        for i, candidate in enumerate(self._nodes):
            if candidate is node:
                return i
        raise ValueError(f"{node!r} is not in this expression")

    def walk(self) -> Iterator[Node]:
        """Yield every node of the subtree, depth-first, parents first."""
        for node in tuple(self._nodes):
            yield node
            for child in node.children:
                yield from child.walk()

    def render(self, cursor: Cursor) -> str:
        """Render this expression to LaTeX markup.

        Each node renders itself. If this is the cursor's enclosing expression
        and the cursor renders a glyph, the glyph is spliced in between the
        fragments at the cursor position; an unfocused cursor adds nothing,
        not even a separator. An expression that renders to nothing yields
        the placeholder token so empty slots stay visible.
        """
        config = cursor.config
        parts = [node.render(cursor) for node in self._nodes]
        if cursor.enclosing_expression is self:
            glyph = cursor.render()
            if glyph:
                parts.insert(cursor.position, glyph)
        rendered = config.separator.join(parts)
        if rendered == "":
            return config.placeholder
        return rendered


class Node:
    """A single tree element that may own child expressions.

    Subclasses set the ``kind`` tag and ``arity``, and implement ``render``.
    The set of kinds is closed; see ``mathedit.elements.NODE_KINDS``.

    """

    __slots__ = ("_id", "_children", "_owner")

    kind: ClassVar[str] = "node"
    arity: ClassVar[int] = 0

    def __init__(self) -> None:
        self._id = provision_new_id()
        self._children: tuple[Expression, ...] = tuple(Expression() for _ in range(self.arity))
        self._owner: Expression | None = None

    @property
    def id(self) -> str:
        """Immutable unique identifier."""
        return self._id

    @property
    def children(self) -> tuple[Expression, ...]:
        """Child expressions, one per slot."""
        return self._children

    @property
    def has_children(self) -> bool:
        return self.arity > 0

    @property
    def attached(self) -> bool:
        """True while the node belongs to an expression."""
        return self._owner is not None

    def element_id(self, prefix: str = "node-") -> str:
        """Element id used to find this node's rendered element."""
        return f"{prefix}{self._id}"

    def marker(self, cursor: Cursor) -> str:
        """Addressable marker prefixed to every rendered node."""
        return f"\\htmlId{{{self.element_id(cursor.config.node_id_prefix)}}}"

    def render(self, cursor: Cursor) -> str:
        """Render this node and its children to LaTeX markup."""
        raise NotImplementedError(f"{type(self).__name__} must implement render()")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"


class Character(Node):
    """A node representing an atomic math symbol.

    Examples:
        ``a`` as in ``abc``, ``+`` as in ``a+b``, ``\\pi``.

    """

    __slots__ = ("_symbol",)

    kind: ClassVar[str] = "character"
    arity: ClassVar[int] = 0

    def __init__(self, symbol: str) -> None:
        super().__init__()
        self._symbol = symbol

    @property
    def symbol(self) -> str:
        return self._symbol

    def render(self, cursor: Cursor) -> str:
        return self.marker(cursor) + self._symbol

    def __repr__(self) -> str:
        return f"Character({self._symbol!r})"


class SingleChildNode(Node):
    """A node with one child expression.

    Example: ``lim_{x -> a}`` where ``{x -> a}`` is the child.
    """

    __slots__ = ()

    arity: ClassVar[int] = 1


class DoubleChildNode(Node):
    """A node with two child expressions.

    Example: ``int^a_b`` where ``a`` and ``b`` are the children.
    """

    __slots__ = ()

    arity: ClassVar[int] = 2
