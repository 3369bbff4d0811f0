"""LaTeX renderer with element correlation.

Renders the tree to KaTeX-flavoured LaTeX (nodes carry ``\\htmlId`` markers)
and remembers which element ids the last pass produced. The display backend
uses that map to re-attach its per-node handlers after every redraw and to
turn a clicked element back into a node id for ``Cursor.handle_click``.

Handlers attached for an earlier render are stale once markup is
regenerated; always re-read ``element_ids()`` after ``render()``.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from mathedit.errors import ElementNotRendered
from mathedit.utils.logger import get_logger

if TYPE_CHECKING:
    from mathedit.cursor import Cursor
    from mathedit.nodes import Expression

logger = get_logger(__name__)


@dataclass(slots=True)
class RenderContext:
    """Element ids produced by one render pass.

    Created fresh for each render() call.
    """

    node_ids: dict[str, str] = field(default_factory=dict)
    cursor_element_id: str | None = None


class LatexRenderer:
    """Render a tree to LaTeX and answer element queries about the last pass.

    Usage:
        >>> renderer = LatexRenderer()
        >>> markup = renderer.render(cursor.root, cursor)
        >>> for element_id, node_id in renderer.element_ids().items():
        ...     backend.bind_click(element_id, node_id)

    """

    __slots__ = ("_last_context",)

    def __init__(self) -> None:
        self._last_context: RenderContext | None = None

    def render(self, root: Expression, cursor: Cursor) -> str:
        """Render ``root`` with the cursor shown where it is logically located."""
        ctx = RenderContext()
        markup = root.render(cursor)

        prefix = cursor.config.node_id_prefix
        for node in root.walk():
            ctx.node_ids[node.element_id(prefix)] = node.id
        if cursor.focused and cursor.root is root:
            ctx.cursor_element_id = cursor.config.cursor_element_id

        self._last_context = ctx
        logger.debug("rendered %d node element(s)", len(ctx.node_ids))
        return markup

    def element_ids(self) -> dict[str, str]:
        """Map of element id to node id for every node in the last render.

        Raises:
            ElementNotRendered: If render() has not been called yet
        """
        return dict(self._context("document").node_ids)

    def element_id_for(self, node_id: str) -> str:
        """Element id of the node with ``node_id`` in the last render.

        Raises:
            ElementNotRendered: If the node was not part of the last render
        """
        for element_id, candidate in self._context(node_id).node_ids.items():
            if candidate == node_id:
                return element_id
        raise ElementNotRendered(node_id)

    def node_for_element(self, element_id: str) -> str:
        """Node id behind a rendered element id.

        Raises:
            ElementNotRendered: If the element was not part of the last render
        """
        node_id = self._context(element_id).node_ids.get(element_id)
        if node_id is None:
            raise ElementNotRendered(element_id)
        return node_id

    def cursor_element_id(self) -> str:
        """Element id of the cursor glyph in the last render.

        Raises:
            ElementNotRendered: If the cursor was not shown (e.g. unfocused)
        """
        ctx = self._context("cursor")
        if ctx.cursor_element_id is None:
            raise ElementNotRendered("cursor")
        return ctx.cursor_element_id

    def _context(self, element_id: str) -> RenderContext:
        if self._last_context is None:
            raise ElementNotRendered(element_id)
        return self._last_context
