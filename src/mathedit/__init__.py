"""
mathedit: structural editor core for nested math expressions

The document is a tree of typed nodes, not text. A single cursor walks the
tree by path, edits it, and renders it to KaTeX-flavoured LaTeX with itself
spliced in. Zero runtime dependencies.

Quick Start:
    >>> from mathedit import Cursor, LatexRenderer, handle_key
    >>> cursor = Cursor()
    >>> cursor.focus()
    >>> for key in "x^2":
    ...     handle_key(cursor, key)
    >>> markup = LatexRenderer().render(cursor.root, cursor)

Observing changes:
    >>> renderer = LatexRenderer()
    >>> @cursor.on_change
    ... def redraw() -> None:
    ...     backend.show(renderer.render(cursor.root, cursor))

"""

from mathedit.blink import BlinkState, BlinkTimer, blink_due
from mathedit.config import (
    EditorConfig,
    editor_config_context,
    get_editor_config,
    reset_editor_config,
    set_editor_config,
)
from mathedit.cursor import Cursor, Side
from mathedit.elements import (
    NODE_KINDS,
    BigOperator,
    Bracket,
    CommandEnclosable,
    EvaluatedFrom,
    Fraction,
    Limit,
    Subscript,
    SubscriptableFunction,
    Superscript,
)
from mathedit.errors import (
    ElementNotRendered,
    EmptyPath,
    ForeignLink,
    IndexOutOfRange,
    MatheditError,
    NodeInUse,
    NoEnclosingNode,
)
from mathedit.keymap import KeyAction, classify_key, handle_key
from mathedit.location import CursorLocation, LocationInfo, PathLink, path_to_node
from mathedit.menu import MenuItem, MenuRegistry, MenuRegistryBuilder, SymbolMenu, create_default_registry
from mathedit.nodes import Character, DoubleChildNode, Expression, Node, SingleChildNode
from mathedit.renderers import DocumentRenderer, LatexRenderer

__version__ = "0.1.0"


def render(cursor: Cursor) -> str:
    """Render the cursor's whole tree with the live cursor.

    Convenience for ``LatexRenderer().render(cursor.root, cursor)`` when no
    element correlation is needed.
    """
    return cursor.render_document()


__all__ = [
    "NODE_KINDS",
    "BigOperator",
    "BlinkState",
    "BlinkTimer",
    "Bracket",
    "Character",
    "CommandEnclosable",
    "Cursor",
    "CursorLocation",
    "DocumentRenderer",
    "DoubleChildNode",
    "EditorConfig",
    "ElementNotRendered",
    "EmptyPath",
    "EvaluatedFrom",
    "Expression",
    "ForeignLink",
    "Fraction",
    "IndexOutOfRange",
    "KeyAction",
    "LatexRenderer",
    "Limit",
    "LocationInfo",
    "MatheditError",
    "MenuItem",
    "MenuRegistry",
    "MenuRegistryBuilder",
    "Node",
    "NodeInUse",
    "NoEnclosingNode",
    "PathLink",
    "Side",
    "SingleChildNode",
    "Subscript",
    "SubscriptableFunction",
    "Superscript",
    "SymbolMenu",
    "blink_due",
    "classify_key",
    "create_default_registry",
    "editor_config_context",
    "get_editor_config",
    "handle_key",
    "path_to_node",
    "render",
    "reset_editor_config",
    "set_editor_config",
    "__version__",
]
