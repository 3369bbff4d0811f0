"""Searchable registry of insertable symbols and elements.

Thread Safety:
MenuRegistry is immutable after creation. Safe to share.
Use MenuRegistryBuilder for mutable construction.

Example:
    >>> builder = MenuRegistryBuilder()
    >>> builder.register(MenuItem("Pi", "\\\\pi", lambda cursor: cursor.insert_character_at_cursor("\\\\pi")))
    >>> registry = builder.build()
    >>> [item.display_name for item in registry.search("pi")]
    ['Pi']

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mathedit.cursor import Cursor


@dataclass(frozen=True, slots=True)
class MenuItem:
    """One selectable menu entry.

    Attributes:
        display_name: Human readable name, searched and shown under the preview
        latex_code: LaTeX used to draw the preview
        on_select: Called with the cursor; inserts at the cursor
        aliases: Extra search terms (e.g. "upi" for uppercase pi)

    """

    display_name: str
    latex_code: str
    on_select: Callable[[Cursor], None]
    aliases: tuple[str, ...] = ()

    @property
    def searchable_names(self) -> tuple[str, ...]:
        return (self.display_name, *self.aliases)


def string_similarity(query: str, name: str) -> float:
    """Case-insensitive similarity score; higher is more similar.

    A prefix match scores the covered fraction of ``name``; a match elsewhere
    scores half of that; no match scores 0.

    Example:
        >>> string_similarity("pi", "Pi")
        1.0
        >>> string_similarity("in", "Infinity")
        0.25
        >>> string_similarity("fin", "Infinity")
        0.1875
    """
    query = query.lower()
    name = name.lower()

    if name.startswith(query):
        return len(query) / len(name)
    if query in name:
        return len(query) / len(name) / 2
    return 0.0


class MenuRegistry:
    """Immutable, ordered collection of menu items."""

    __slots__ = ("_items",)

    def __init__(self, items: tuple[MenuItem, ...]) -> None:
        """Use MenuRegistryBuilder to create instances."""
        self._items = items

    @property
    def items(self) -> tuple[MenuItem, ...]:
        return self._items

    def search(self, query: str) -> list[MenuItem]:
        """Return items matching ``query``, most relevant first.

        Items with equal scores keep registration order. A blank query
        matches nothing.
        """
        query = query.strip()
        if not query:
            return []

        scored: list[tuple[float, MenuItem]] = []
        for item in self._items:
            score = max(string_similarity(query, name) for name in item.searchable_names)
            if score > 0:
                scored.append((score, item))

        scored.sort(key=lambda pair: pair[0], reverse=True)
        return [item for _, item in scored]

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class MenuRegistryBuilder:
    """Mutable builder for MenuRegistry.

    Example:
            >>> builder = MenuRegistryBuilder()
            >>> builder.register(item).register(other)
            >>> registry = builder.build()

    """

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[MenuItem] = []

    def register(self, item: MenuItem) -> MenuRegistryBuilder:
        """Register an item.

        Raises:
            TypeError: If ``on_select`` is not callable
        """
        if not callable(item.on_select):
            msg = f"Menu item {item.display_name!r} has a non-callable on_select"
            raise TypeError(msg)
        self._items.append(item)
        return self

    def register_all(self, items: list[MenuItem]) -> MenuRegistryBuilder:
        for item in items:
            self.register(item)
        return self

    def build(self) -> MenuRegistry:
        return MenuRegistry(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)
