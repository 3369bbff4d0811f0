"""The cursor: navigation and mutation engine of the editor.

State is the pair (path, position): the path (a CursorLocation) selects the
enclosing expression and ``position`` is the insertion index inside it, with
``0 <= position <= len(enclosing_expression)`` at all times.

Transitions:
    enter_node(i, c, side)   push (i, c); position 0 (leading) or len (trailing)
    leave_node(side)         pop; position i (leading) or i + 1 (trailing)
    move_right / move_left   step over atoms, enter nodes with children,
                             leave at the expression boundary
    move_down / move_up      switch to the next / previous child slot of the
                             enclosing node; down lands at the end of the
                             sibling, up at its start

Every public operation validates before it mutates and finishes with exactly
one notify(), so a failing call leaves the last valid state untouched.

Example:
    >>> cursor = Cursor()
    >>> cursor.insert_character_at_cursor("x")
    0
    >>> index = cursor.insert_node_at_cursor(Fraction())
    >>> cursor.enter_node(index, 0, Side.LEADING)
    >>> cursor.path
    (PathLink(node_index=1, child_index=0, depth=0),)

"""

from __future__ import annotations

import functools
import threading
import time
from collections.abc import Callable
from enum import Enum
from typing import ParamSpec, TypeVar

from mathedit.blink import BlinkState, BlinkTimer
from mathedit.config import EditorConfig, get_editor_config
from mathedit.errors import IndexOutOfRange, NoEnclosingNode
from mathedit.location import CursorLocation, PathLink, path_to_node
from mathedit.nodes import Character, Expression, Node
from mathedit.utils.logger import get_logger

logger = get_logger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def _synchronized(method: Callable[P, R]) -> Callable[P, R]:
    """Run a Cursor method while holding the cursor's lock."""

    @functools.wraps(method)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        with args[0]._lock:  # type: ignore[attr-defined]
            return method(*args, **kwargs)

    return wrapper


class Side(Enum):
    """Which end of an expression the cursor lands on."""

    LEADING = "leading"
    TRAILING = "trailing"


class Cursor:
    """Single cursor over one expression tree.

    Owns the cursor location, the insertion position, focus and blink state,
    and the observer lists. Also the interface between the tree and the host:
    hosts subscribe with ``on_change`` and re-render ``root`` on every call.

    Args:
        root: Document root; a new empty expression when omitted
        config: Editor configuration; the active context config when omitted
        clock: Monotonic time source in seconds, injectable for tests
        scheduler: Hands blink ticks to the host's dispatch thread; see
            BlinkTimer. Without it ticks run on the timer thread.

    Thread Safety:
    State changes, ticks and rendering are serialized by a reentrant lock,
    so a blink tick never interleaves with an edit. Observers run on the
    thread that triggered the change.

    """

    __slots__ = (
        "_root",
        "_location",
        "_position",
        "_config",
        "_clock",
        "_focused",
        "_blink",
        "_timer",
        "_lock",
        "_change_callbacks",
        "_focus_callbacks",
    )

    def __init__(
        self,
        root: Expression | None = None,
        *,
        config: EditorConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
        scheduler: Callable[[Callable[[], None]], object] | None = None,
    ) -> None:
        self._root = root if root is not None else Expression()
        self._location = CursorLocation(self._root)
        self._position = 0
        self._config = config or get_editor_config()
        self._clock = clock
        self._focused = False
        self._blink = BlinkState()
        self._change_callbacks: list[Callable[[], None]] = []
        self._focus_callbacks: list[Callable[[], None]] = []
        self._lock = threading.RLock()
        self._timer = BlinkTimer(self._config.blink_interval, self.tick, scheduler=scheduler)
        if self._config.blink_autostart:
            self._timer.start()

    # =========================================================================
    # State
    # =========================================================================

    @property
    def root(self) -> Expression:
        return self._root

    @property
    def config(self) -> EditorConfig:
        return self._config

    @property
    def location(self) -> CursorLocation:
        return self._location

    @property
    def path(self) -> tuple[PathLink, ...]:
        return self._location.path

    @property
    def position(self) -> int:
        """Insertion index inside the enclosing expression."""
        return self._position

    @property
    def enclosing_expression(self) -> Expression:
        return self._location.enclosing_expression()

    @property
    def enclosing_node(self) -> Node | None:
        return self._location.enclosing_node()

    @property
    def focused(self) -> bool:
        return self._focused

    @property
    def blink_visible(self) -> bool:
        return self._blink.visible

    def at_root(self) -> bool:
        return self._location.at_root()

    # =========================================================================
    # Entering and leaving nodes
    # =========================================================================

    @_synchronized
    def enter_node(self, node_index: int, child_index: int, side: Side = Side.LEADING) -> None:
        """Descend into child ``child_index`` of the node at ``node_index``.

        Raises:
            IndexOutOfRange: If either index is invalid; nothing changes
        """
        self._enter(node_index, child_index, side)
        self.notify()

    @_synchronized
    def leave_node(self, side: Side) -> PathLink:
        """Move out of the enclosing node and return the link just left.

        With ``Side.LEADING`` the cursor lands immediately before the node,
        with ``Side.TRAILING`` immediately after it.

        Raises:
            NoEnclosingNode: If the cursor is at the root
        """
        link = self._leave(side, "leave_node")
        self.notify()
        return link

    def _enter(self, node_index: int, child_index: int, side: Side) -> None:
        node = self._location.enclosing_expression()[node_index]
        if not 0 <= child_index < node.arity:
            raise IndexOutOfRange(child_index, node.arity, "enter child")
        self._location.move_into(node_index, child_index)
        child = node.children[child_index]
        self._position = 0 if side is Side.LEADING else len(child)
        logger.debug("entered %r slot %d at position %d", node, child_index, self._position)

    def _leave(self, side: Side, operation: str) -> PathLink:
        if self._location.at_root():
            raise NoEnclosingNode(operation)
        link = self._location.pop()
        self._position = link.node_index if side is Side.LEADING else link.node_index + 1
        logger.debug("left node %d to position %d", link.node_index, self._position)
        return link

    # =========================================================================
    # Directional moves
    # =========================================================================

    @_synchronized
    def move_right(self) -> None:
        expression = self._location.enclosing_expression()
        if self._position == len(expression):
            # Only move outwards if we're not at the root
            if not self._location.at_root():
                self._leave(Side.TRAILING, "move_right")
        elif expression[self._position].has_children:
            self._enter(self._position, 0, Side.LEADING)
        else:
            self._position += 1
        self.notify()

    @_synchronized
    def move_left(self) -> None:
        expression = self._location.enclosing_expression()
        if self._position == 0:
            if not self._location.at_root():
                self._leave(Side.LEADING, "move_left")
        elif expression[self._position - 1].has_children:
            self._enter(self._position - 1, 0, Side.TRAILING)
        else:
            self._position -= 1
        self.notify()

    @_synchronized
    def move_down(self) -> None:
        """Switch to the next child slot, landing at the end of it."""
        if not self._location.at_root():
            link = self._location.top_level_link()
            node = self._location.resolve(link).enclosing_node
            if node is not None and link.child_index < node.arity - 1:
                self._leave(Side.LEADING, "move_down")
                self._enter(link.node_index, link.child_index + 1, Side.TRAILING)
        self.notify()

    @_synchronized
    def move_up(self) -> None:
        """Switch to the previous child slot, landing at the start of it."""
        if not self._location.at_root():
            link = self._location.top_level_link()
            if link.child_index > 0:
                self._leave(Side.LEADING, "move_up")
                self._enter(link.node_index, link.child_index - 1, Side.LEADING)
        self.notify()

    # =========================================================================
    # Mutation
    # =========================================================================

    def insert_character_at_cursor(self, symbol: str) -> int:
        """Insert an atomic symbol before the cursor; return its index."""
        return self.insert_node_at_cursor(Character(symbol))

    @_synchronized
    def insert_node_at_cursor(self, node: Node) -> int:
        """Insert ``node`` before the cursor and step over it.

        Returns:
            The index of the inserted node, so callers can ``enter_node`` it
        """
        index = self._position
        self._location.enclosing_expression().insert(index, node)
        self._position += 1
        logger.debug("inserted %r at %d", node, index)
        self.notify()
        return index

    @_synchronized
    def delete_character_at_cursor(self) -> Node:
        """Remove and return the node immediately before the cursor.

        Raises:
            IndexOutOfRange: At position 0; call remove_enclosing_node instead
        """
        node = self._location.enclosing_expression().remove_at(self._position - 1)
        self._position -= 1
        logger.debug("deleted %r at %d", node, self._position)
        self.notify()
        return node

    @_synchronized
    def remove_enclosing_node(self) -> Node:
        """Leave the enclosing node and remove it from its parent expression.

        The cursor lands where the node used to be.

        Raises:
            NoEnclosingNode: If the cursor is at the root
        """
        if self._location.at_root():
            raise NoEnclosingNode("remove_enclosing_node")
        link = self._location.top_level_link()
        self._location.resolve(link)
        self._location.pop()
        node = self._location.enclosing_expression().remove_at(link.node_index)
        self._position = link.node_index
        logger.debug("removed enclosing %r", node)
        self.notify()
        return node

    @_synchronized
    def handle_click(self, event: object, node_id: str) -> None:
        """Place the cursor immediately after the clicked node.

        Called by the display backend with the pointer event and the id
        recovered from the clicked element. Ids not in the tree are ignored.
        """
        found = path_to_node(self._root, node_id)
        if found is None:
            logger.warning("click on unknown node %s ignored (%r)", node_id, event)
            return
        links, index = found
        self._location.reset(links)
        self._position = index + 1
        logger.debug("click on %s placed cursor at depth %d", node_id, self._location.depth)
        self.notify()

    # =========================================================================
    # Focus and blinking
    # =========================================================================

    @_synchronized
    def focus(self) -> None:
        """Call whenever the editor gains focus."""
        self._focused = True
        self._blink.interrupt(self._clock())
        self.notify()

    @_synchronized
    def blur(self) -> None:
        """Call whenever the editor loses focus."""
        self._focused = False
        self.notify()

    @_synchronized
    def interrupt(self) -> None:
        """Record user activity: show the cursor and hold off blinking."""
        self._blink.interrupt(self._clock())
        self.notify()

    @_synchronized
    def tick(self) -> None:
        """Blink timer callback; notifies only when the phase flips."""
        if self._blink.tick(self._clock(), self._config.blink_quiescent):
            self.notify()

    def start_blinking(self) -> None:
        self._timer.start()

    def close(self) -> None:
        """Stop the blink timer. The cursor must not be used afterwards."""
        self._timer.stop()

    def __enter__(self) -> Cursor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # =========================================================================
    # Rendering
    # =========================================================================

    @_synchronized
    def render(self) -> str:
        """Render the cursor glyph itself; empty when unfocused."""
        if not self._focused:
            return ""
        config = self._config
        color = config.cursor_visible_color if self._blink.visible else config.cursor_hidden_color
        return f"\\!\\htmlId{{{config.cursor_element_id}}}{{\\textcolor{{{color}}}{{|}}}}"

    @_synchronized
    def render_document(self) -> str:
        """Render the whole tree with the live cursor."""
        return self._root.render(self)

    # =========================================================================
    # Observers
    # =========================================================================

    def on_change(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register a callback run after every state-affecting operation.

        Returns the callback, so this also works as a decorator.
        """
        self._change_callbacks.append(callback)
        return callback

    def on_focus_requested(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register a callback run when the cursor asks the host for focus."""
        self._focus_callbacks.append(callback)
        return callback

    def notify(self) -> None:
        for callback in tuple(self._change_callbacks):
            callback()

    def request_focus(self) -> None:
        for callback in tuple(self._focus_callbacks):
            callback()

    def __repr__(self) -> str:
        return f"Cursor({self._location!r}, position={self._position})"
