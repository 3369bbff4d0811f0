"""Symbol menu session.

Drives the insertion dialog's behaviour: searching, selecting an item, and
handing focus back to the editor on close. Drawing the popup is the host's
job; it only calls into this class.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mathedit.menu.catalog import create_default_registry
from mathedit.utils.logger import get_logger

if TYPE_CHECKING:
    from mathedit.cursor import Cursor
    from mathedit.menu.registry import MenuItem, MenuRegistry

logger = get_logger(__name__)


class SymbolMenu:
    """Search-and-insert dialog state bound to one cursor.

    Usage:
        >>> menu = SymbolMenu(cursor)
        >>> menu.open()
        >>> menu.results("sqrt")[0].display_name
        'Square Root'
        >>> menu.select_best("sqrt")  # Enter: insert the best match, close

    """

    __slots__ = ("_cursor", "_registry", "_limit", "_is_open")

    def __init__(
        self,
        cursor: Cursor,
        registry: MenuRegistry | None = None,
        *,
        limit: int | None = None,
    ) -> None:
        self._cursor = cursor
        self._registry = registry if registry is not None else create_default_registry()
        self._limit = limit if limit is not None else cursor.config.menu_result_limit
        self._is_open = False

    @property
    def registry(self) -> MenuRegistry:
        return self._registry

    @property
    def is_open(self) -> bool:
        return self._is_open

    def open(self) -> None:
        self._is_open = True
        logger.debug("symbol menu opened")

    def results(self, query: str) -> list[MenuItem]:
        """Top matches for ``query``, at most the configured limit."""
        return self._registry.search(query)[: self._limit]

    def select(self, item: MenuItem) -> None:
        """Run the item's selection action at the cursor, then close."""
        logger.debug("selected %s", item.display_name)
        item.on_select(self._cursor)
        self.close()

    def select_best(self, query: str) -> MenuItem | None:
        """Select the best match for ``query``; does nothing if none match."""
        matches = self._registry.search(query)
        if not matches:
            return None
        self.select(matches[0])
        return matches[0]

    def close(self) -> None:
        """Close the menu and ask the host to give focus back to the editor."""
        if not self._is_open:
            return
        self._is_open = False
        self._cursor.request_focus()
