"""Keyboard dispatch.

Maps one logical key (a DOM-style ``KeyboardEvent.key`` name such as ``"a"``,
``"Backspace"`` or ``"ArrowLeft"``) to exactly one editor action. The table
is fixed:

    letters, digits, !@#&-=+':<>,.?|   insert literally
    *  %  $  space                     insert \\cdot, \\%, \\$, ~
    Backspace                          delete before cursor, or remove the
                                       enclosing node at position 0
    \\                                  open the symbol menu
    ( { [                              bracket, cursor inside
    /  _  ^                            fraction, subscript, superscript
    arrow keys                         directional moves

Example:
    >>> cursor = Cursor()
    >>> handle_key(cursor, "/")
    <KeyAction.INSERT_ELEMENT: 'insert-element'>
    >>> cursor.path
    (PathLink(node_index=0, child_index=0, depth=0),)

"""

from __future__ import annotations

import string
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING

from mathedit.cursor import Side
from mathedit.elements import Bracket, Fraction, Subscript, Superscript
from mathedit.utils.logger import get_logger

if TYPE_CHECKING:
    from mathedit.cursor import Cursor
    from mathedit.nodes import Node

logger = get_logger(__name__)

ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
LITERAL_PUNCTUATION = frozenset("!@#&-=+':<>,.?|")

OPERATOR_ALIASES: dict[str, str] = {
    "*": "\\cdot",
    "%": "\\%",
    "$": "\\$",
    " ": "~",
}

ELEMENT_SHORTCUTS: dict[str, Callable[[], Node]] = {
    "(": lambda: Bracket("(", ")"),
    "{": lambda: Bracket("\\{", "\\}"),
    "[": lambda: Bracket("[", "]"),
    "/": Fraction,
    "_": Subscript,
    "^": Superscript,
}

MENU_KEY = "\\"


class KeyAction(Enum):
    """What a key press did."""

    INSERT_LITERAL = "insert-literal"
    INSERT_OPERATOR = "insert-operator"
    DELETE = "delete"
    LEAVE = "leave"
    OPEN_MENU = "open-menu"
    INSERT_ELEMENT = "insert-element"
    MOVE_LEFT = "move-left"
    MOVE_RIGHT = "move-right"
    MOVE_UP = "move-up"
    MOVE_DOWN = "move-down"
    IGNORED = "ignored"


_MOVES: dict[str, KeyAction] = {
    "ArrowLeft": KeyAction.MOVE_LEFT,
    "ArrowRight": KeyAction.MOVE_RIGHT,
    "ArrowUp": KeyAction.MOVE_UP,
    "ArrowDown": KeyAction.MOVE_DOWN,
}


def classify_key(key: str) -> KeyAction:
    """Return the action ``key`` maps to, without performing it."""
    if key in ALPHANUMERIC or key in LITERAL_PUNCTUATION:
        return KeyAction.INSERT_LITERAL
    if key in OPERATOR_ALIASES:
        return KeyAction.INSERT_OPERATOR
    if key == "Backspace":
        return KeyAction.DELETE
    if key == MENU_KEY:
        return KeyAction.OPEN_MENU
    if key in ELEMENT_SHORTCUTS:
        return KeyAction.INSERT_ELEMENT
    return _MOVES.get(key, KeyAction.IGNORED)


def handle_key(
    cursor: Cursor,
    key: str,
    *,
    open_menu: Callable[[], None] | None = None,
) -> KeyAction:
    """Apply one key press to ``cursor``.

    Every key counts as user activity and interrupts blinking first.

    Args:
        cursor: The cursor to drive
        key: Logical key name
        open_menu: Called for the menu key; the host prevents the key's
            default action and shows its menu

    Returns:
        The action taken. Backspace reports LEAVE when it removed the
        enclosing node, and IGNORED at the very start of the root.

    """
    cursor.interrupt()
    action = classify_key(key)

    match action:
        case KeyAction.INSERT_LITERAL:
            cursor.insert_character_at_cursor(key)
        case KeyAction.INSERT_OPERATOR:
            cursor.insert_character_at_cursor(OPERATOR_ALIASES[key])
        case KeyAction.DELETE:
            if cursor.position > 0:
                cursor.delete_character_at_cursor()
            elif not cursor.at_root():
                cursor.remove_enclosing_node()
                action = KeyAction.LEAVE
            else:
                action = KeyAction.IGNORED
        case KeyAction.OPEN_MENU:
            if open_menu is not None:
                open_menu()
        case KeyAction.INSERT_ELEMENT:
            index = cursor.insert_node_at_cursor(ELEMENT_SHORTCUTS[key]())
            cursor.enter_node(index, 0, Side.LEADING)
        case KeyAction.MOVE_LEFT:
            cursor.move_left()
        case KeyAction.MOVE_RIGHT:
            cursor.move_right()
        case KeyAction.MOVE_UP:
            cursor.move_up()
        case KeyAction.MOVE_DOWN:
            cursor.move_down()

    logger.debug("key %r -> %s", key, action.value)
    return action
