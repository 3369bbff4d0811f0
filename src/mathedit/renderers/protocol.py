"""DocumentRenderer protocol: the stable interface for tree renderers.

Any renderer that implements ``render(root, cursor) -> str`` conforms to this
protocol. The built-in ``LatexRenderer`` is the reference implementation.

Example:
    from mathedit.renderers.protocol import DocumentRenderer

    def redraw(renderer: DocumentRenderer, cursor: Cursor) -> str:
        return renderer.render(cursor.root, cursor)

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mathedit.cursor import Cursor
    from mathedit.nodes import Expression


class DocumentRenderer(Protocol):
    """Protocol for expression tree renderers."""

    def render(self, root: Expression, cursor: Cursor) -> str:
        """Render the tree under ``root`` with the live cursor.

        Args:
            root: The document root expression.
            cursor: The cursor editing this tree.

        Returns:
            Rendered markup.

        """
        ...
