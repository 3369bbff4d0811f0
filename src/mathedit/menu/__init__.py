"""Symbol and element insertion menu.

Provides:
- registry: MenuItem, MenuRegistry, MenuRegistryBuilder
- catalog: create_default_registry with the built-in symbols and elements
- session: SymbolMenu, the open/search/select/close dialog state
"""

from mathedit.menu.catalog import create_default_registry, insert_element, insert_symbol
from mathedit.menu.registry import MenuItem, MenuRegistry, MenuRegistryBuilder, string_similarity
from mathedit.menu.session import SymbolMenu

__all__ = [
    "MenuItem",
    "MenuRegistry",
    "MenuRegistryBuilder",
    "SymbolMenu",
    "create_default_registry",
    "insert_element",
    "insert_symbol",
    "string_similarity",
]
