"""Tests for the insertion menu: registry, search, catalog and session."""

import pytest

from mathedit import Cursor, Side
from mathedit.elements import BigOperator, CommandEnclosable, Fraction, SubscriptableFunction
from mathedit.location import PathLink
from mathedit.menu import (
    MenuItem,
    MenuRegistryBuilder,
    SymbolMenu,
    create_default_registry,
    insert_element,
    insert_symbol,
    string_similarity,
)
from mathedit.menu.catalog import OPERATOR_FUNCTIONS


def _noop(cursor: Cursor) -> None:
    pass


@pytest.fixture(scope="module")
def registry():  # type: ignore[no-untyped-def]
    return create_default_registry()


# =============================================================================
# Similarity and search
# =============================================================================


class TestStringSimilarity:
    """Prefix matches beat substring matches; case is ignored."""

    def test_exact(self) -> None:
        assert string_similarity("pi", "Pi") == 1.0

    def test_prefix(self) -> None:
        assert string_similarity("in", "Infinity") == 0.25

    def test_substring_scores_half(self) -> None:
        assert string_similarity("fin", "Infinity") == 0.1875

    def test_no_match(self) -> None:
        assert string_similarity("xyz", "Infinity") == 0.0


class TestRegistry:
    """Builder validation and ordered search."""

    def test_builder_chains(self) -> None:
        builder = MenuRegistryBuilder()
        result = builder.register(MenuItem("A", "a", _noop)).register(MenuItem("B", "b", _noop))
        assert result is builder
        assert len(builder) == 2
        assert [item.display_name for item in builder.build()] == ["A", "B"]

    def test_non_callable_rejected(self) -> None:
        builder = MenuRegistryBuilder()
        with pytest.raises(TypeError, match="non-callable"):
            builder.register(MenuItem("Broken", "x", "not callable"))  # type: ignore[arg-type]
        assert len(builder) == 0

    def test_built_registry_is_independent(self) -> None:
        builder = MenuRegistryBuilder().register(MenuItem("A", "a", _noop))
        registry = builder.build()
        builder.register(MenuItem("B", "b", _noop))
        assert len(registry) == 1

    def test_search_orders_by_score_then_registration(self) -> None:
        registry = (
            MenuRegistryBuilder()
            .register_all(
                [
                    MenuItem("Cosine", "c", _noop),
                    MenuItem("Arc Cosine", "a", _noop),
                    MenuItem("Cos", "s", _noop),
                    MenuItem("Sine", "n", _noop),
                ]
            )
            .build()
        )
        names = [item.display_name for item in registry.search("cos")]
        assert names == ["Cos", "Cosine", "Arc Cosine"]

    def test_aliases_are_searched(self) -> None:
        registry = MenuRegistryBuilder().register(
            MenuItem("Uppercase Pi", "\\Pi", _noop, aliases=("upi",))
        ).build()
        assert registry.search("upi")[0].display_name == "Uppercase Pi"

    @pytest.mark.parametrize("query", ["", "   "])
    def test_blank_query_matches_nothing(self, registry, query: str) -> None:  # type: ignore[no-untyped-def]
        assert registry.search(query) == []


# =============================================================================
# Default catalog
# =============================================================================


class TestDefaultCatalog:
    """Built-in symbols and elements."""

    def test_has_many_items(self, registry) -> None:  # type: ignore[no-untyped-def]
        assert len(registry) > 150

    def test_operator_function_table_complete(self, registry) -> None:  # type: ignore[no-untyped-def]
        assert len(OPERATOR_FUNCTIONS) == 46
        for function in ("arccoth", "csch", "adj", "erf", "lerp", "mod", "Si", "Ci"):
            assert function in OPERATOR_FUNCTIONS
        codes = {item.latex_code for item in registry}
        for function in OPERATOR_FUNCTIONS:
            assert f"\\operatorname{{{function}}}" in codes

    def test_operator_function_alias(self, registry) -> None:  # type: ignore[no-untyped-def]
        assert registry.search("arcsinh")[0].display_name == "Inverse Hyperbolic Sine"

    def test_pi_ranks_first(self, registry) -> None:  # type: ignore[no-untyped-def]
        names = [item.display_name for item in registry.search("pi")]
        assert names[:2] == ["Pi", "Product"]

    def test_sqrt_alias(self, registry) -> None:  # type: ignore[no-untyped-def]
        assert registry.search("sqrt")[0].display_name == "Square Root"

    def test_uppercase_greek_alias(self, registry) -> None:  # type: ignore[no-untyped-def]
        assert registry.search("udelta")[0].latex_code == "\\Delta"

    def test_every_item_selectable(self, registry, cursor: Cursor) -> None:  # type: ignore[no-untyped-def]
        for item in registry:
            item.on_select(cursor)
            while not cursor.at_root():
                cursor.leave_node(Side.TRAILING)
        assert len(cursor.root) == len(registry)


class TestSelectionActions:
    """insert_symbol and insert_element."""

    def test_insert_symbol(self, cursor: Cursor) -> None:
        insert_symbol("\\alpha")(cursor)
        assert cursor.root[0].symbol == "\\alpha"  # type: ignore[attr-defined]
        assert cursor.position == 1

    def test_insert_element_enters_first_slot(self, cursor: Cursor) -> None:
        cursor.insert_character_at_cursor("x")
        insert_element(Fraction)(cursor)
        assert isinstance(cursor.enclosing_node, Fraction)
        assert cursor.path == (PathLink(1, 0, 0),)
        assert cursor.position == 0

    def test_each_selection_builds_a_fresh_node(self, cursor: Cursor) -> None:
        action = insert_element(Fraction)
        action(cursor)
        cursor.leave_node(Side.TRAILING)
        action(cursor)
        assert cursor.root[0] is not cursor.root[1]

    def test_catalog_element_kinds(self, registry, cursor: Cursor) -> None:  # type: ignore[no-untyped-def]
        registry.search("Summation")[0].on_select(cursor)
        node = cursor.enclosing_node
        assert isinstance(node, BigOperator)
        assert node.command == "sum"
        cursor.leave_node(Side.TRAILING)

        registry.search("Cube Root")[0].on_select(cursor)
        node = cursor.enclosing_node
        assert isinstance(node, CommandEnclosable)
        assert node.command == "\\sqrt[3]"
        cursor.leave_node(Side.TRAILING)

        registry.search("Infimum")[0].on_select(cursor)
        node = cursor.enclosing_node
        assert isinstance(node, SubscriptableFunction)
        assert node.name == "inf"


# =============================================================================
# Session
# =============================================================================


class TestSymbolMenu:
    """Open, search, select, close."""

    def test_results_limited(self, cursor: Cursor, registry) -> None:  # type: ignore[no-untyped-def]
        menu = SymbolMenu(cursor, registry, limit=3)
        assert len(menu.results("a")) == 3

    def test_default_limit_from_config(self, cursor: Cursor, registry) -> None:  # type: ignore[no-untyped-def]
        menu = SymbolMenu(cursor, registry)
        assert len(menu.results("a")) == cursor.config.menu_result_limit

    def test_select_inserts_and_closes(self, cursor: Cursor, registry) -> None:  # type: ignore[no-untyped-def]
        focus_requests = []
        cursor.on_focus_requested(lambda: focus_requests.append(True))
        menu = SymbolMenu(cursor, registry)
        menu.open()

        item = menu.select_best("sqrt")

        assert item is not None
        assert item.display_name == "Square Root"
        assert isinstance(cursor.enclosing_node, CommandEnclosable)
        assert not menu.is_open
        assert focus_requests == [True]

    def test_select_best_without_match(self, cursor: Cursor, registry) -> None:  # type: ignore[no-untyped-def]
        menu = SymbolMenu(cursor, registry)
        menu.open()
        assert menu.select_best("qqqqqq") is None
        assert menu.is_open
        assert len(cursor.root) == 0

    def test_close_when_closed_does_nothing(self, cursor: Cursor, registry) -> None:  # type: ignore[no-untyped-def]
        focus_requests = []
        cursor.on_focus_requested(lambda: focus_requests.append(True))
        menu = SymbolMenu(cursor, registry)
        menu.close()
        assert focus_requests == []

    def test_default_registry(self, cursor: Cursor) -> None:
        menu = SymbolMenu(cursor)
        assert len(menu.registry) > 150
