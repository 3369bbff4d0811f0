"""Tests for keyboard dispatch."""

import pytest

from mathedit import Cursor, KeyAction, Side, classify_key, handle_key
from mathedit.elements import Bracket, Fraction, Subscript, Superscript
from mathedit.location import PathLink
from mathedit.nodes import Character

from conftest import FakeClock


def _symbols(cursor: Cursor) -> list[str]:
    return [node.symbol for node in cursor.enclosing_expression]  # type: ignore[attr-defined]


class TestClassifyKey:
    """The fixed key table."""

    @pytest.mark.parametrize("key", ["a", "Z", "0", "9", "!", "=", "+", "'", "|", "<"])
    def test_literals(self, key: str) -> None:
        assert classify_key(key) is KeyAction.INSERT_LITERAL

    @pytest.mark.parametrize("key", ["*", "%", "$", " "])
    def test_operators(self, key: str) -> None:
        assert classify_key(key) is KeyAction.INSERT_OPERATOR

    @pytest.mark.parametrize("key", ["(", "{", "[", "/", "_", "^"])
    def test_elements(self, key: str) -> None:
        assert classify_key(key) is KeyAction.INSERT_ELEMENT

    def test_special_keys(self) -> None:
        assert classify_key("Backspace") is KeyAction.DELETE
        assert classify_key("\\") is KeyAction.OPEN_MENU
        assert classify_key("ArrowLeft") is KeyAction.MOVE_LEFT
        assert classify_key("ArrowRight") is KeyAction.MOVE_RIGHT
        assert classify_key("ArrowUp") is KeyAction.MOVE_UP
        assert classify_key("ArrowDown") is KeyAction.MOVE_DOWN

    @pytest.mark.parametrize("key", ["Shift", "Tab", "Enter", ")", "]", "~", "é"])
    def test_ignored(self, key: str) -> None:
        assert classify_key(key) is KeyAction.IGNORED


class TestHandleKey:
    """Each key performs exactly one editor action."""

    def test_literal_inserts_key(self, cursor: Cursor) -> None:
        assert handle_key(cursor, "x") is KeyAction.INSERT_LITERAL
        assert _symbols(cursor) == ["x"]

    def test_operator_aliases(self, cursor: Cursor) -> None:
        for key in "*%$ ":
            handle_key(cursor, key)
        assert _symbols(cursor) == ["\\cdot", "\\%", "\\$", "~"]

    @pytest.mark.parametrize(
        ("key", "kind"),
        [("/", Fraction), ("_", Subscript), ("^", Superscript), ("(", Bracket)],
    )
    def test_element_keys_enter_first_slot(self, cursor: Cursor, key: str, kind: type) -> None:
        handle_key(cursor, "a")
        assert handle_key(cursor, key) is KeyAction.INSERT_ELEMENT
        assert isinstance(cursor.enclosing_node, kind)
        assert cursor.path == (PathLink(1, 0, 0),)
        assert cursor.position == 0

    def test_brace_and_square_brackets(self, cursor: Cursor) -> None:
        handle_key(cursor, "{")
        node = cursor.enclosing_node
        assert isinstance(node, Bracket)
        assert (node.opening, node.closing) == ("\\{", "\\}")
        handle_key(cursor, "ArrowRight")
        handle_key(cursor, "[")
        node = cursor.enclosing_node
        assert isinstance(node, Bracket)
        assert (node.opening, node.closing) == ("[", "]")

    def test_backspace_deletes(self, cursor: Cursor) -> None:
        handle_key(cursor, "a")
        handle_key(cursor, "b")
        assert handle_key(cursor, "Backspace") is KeyAction.DELETE
        assert _symbols(cursor) == ["a"]

    def test_backspace_at_start_of_slot_removes_node(self, cursor: Cursor) -> None:
        handle_key(cursor, "x")
        handle_key(cursor, "/")
        assert handle_key(cursor, "Backspace") is KeyAction.LEAVE
        assert cursor.at_root()
        assert cursor.position == 1
        assert _symbols(cursor) == ["x"]

    def test_backspace_at_start_of_root_ignored(self, cursor: Cursor) -> None:
        handle_key(cursor, "x")
        handle_key(cursor, "ArrowLeft")
        assert handle_key(cursor, "Backspace") is KeyAction.IGNORED
        assert _symbols(cursor) == ["x"]

    def test_menu_key_calls_host(self, cursor: Cursor) -> None:
        opened = []
        assert handle_key(cursor, "\\", open_menu=lambda: opened.append(True)) is KeyAction.OPEN_MENU
        assert opened == [True]
        assert len(cursor.root) == 0

    def test_menu_key_without_host(self, cursor: Cursor) -> None:
        assert handle_key(cursor, "\\") is KeyAction.OPEN_MENU
        assert len(cursor.root) == 0

    def test_arrows(self, cursor: Cursor) -> None:
        handle_key(cursor, "/")
        handle_key(cursor, "1")
        assert handle_key(cursor, "ArrowDown") is KeyAction.MOVE_DOWN
        assert cursor.path == (PathLink(0, 1, 0),)
        assert handle_key(cursor, "ArrowUp") is KeyAction.MOVE_UP
        assert cursor.path == (PathLink(0, 0, 0),)
        assert cursor.position == 0
        assert handle_key(cursor, "ArrowLeft") is KeyAction.MOVE_LEFT
        assert cursor.at_root()

    def test_ignored_key_changes_nothing(self, cursor: Cursor) -> None:
        handle_key(cursor, "a")
        assert handle_key(cursor, "Shift") is KeyAction.IGNORED
        assert cursor.position == 1
        assert _symbols(cursor) == ["a"]

    def test_every_key_interrupts_blink(self, cursor: Cursor, clock: FakeClock) -> None:
        cursor.focus()
        clock.advance(1.0)
        cursor.tick()
        assert cursor.blink_visible is False
        handle_key(cursor, "Shift")
        assert cursor.blink_visible is True

    def test_typing_builds_fraction(self, cursor: Cursor) -> None:
        for key in ["x", "/", "1", "ArrowDown", "2", "ArrowRight", "+"]:
            handle_key(cursor, key)
        root = cursor.root
        assert cursor.at_root()
        assert isinstance(root[1], Fraction)
        numerator, denominator = root[1].children
        assert [n.symbol for n in numerator] == ["1"]  # type: ignore[attr-defined]
        assert [n.symbol for n in denominator] == ["2"]  # type: ignore[attr-defined]
        assert isinstance(root[2], Character)
        assert cursor.position == 3

    def test_enter_then_leave_side(self, cursor: Cursor) -> None:
        handle_key(cursor, "^")
        cursor.leave_node(Side.LEADING)
        assert cursor.position == 0
