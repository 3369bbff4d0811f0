"""ContextVar-based editor configuration for mathedit.

A Cursor captures the active EditorConfig when it is constructed and carries
it for its whole lifetime, so rendering stays a function of the tree and the
cursor alone.

Usage:
    from mathedit.config import EditorConfig, editor_config_context

    with editor_config_context(EditorConfig(placeholder="\\square")):
        cursor = Cursor()  # renders empty slots as \\square

    # Or set it for the current context
    set_editor_config(EditorConfig(blink_autostart=True))
    try:
        cursor = Cursor()
    finally:
        reset_editor_config()

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Immutable editor configuration.

    Attributes:
        blink_interval: Seconds between blink timer ticks
        blink_quiescent: Seconds without an interrupt before the cursor may blink
        blink_autostart: Start the blink timer when the Cursor is constructed
        separator: Joins rendered node fragments inside one expression
        placeholder: Rendered for an expression with no nodes and no cursor
        cursor_element_id: Element id of the rendered cursor glyph
        node_id_prefix: Prefix turning a node id into its element id
        cursor_visible_color: Cursor colour in the visible blink phase
        cursor_hidden_color: Cursor colour in the hidden blink phase
        menu_result_limit: Maximum number of results shown by the symbol menu

    """

    blink_interval: float = 0.7
    blink_quiescent: float = 0.5
    blink_autostart: bool = False
    separator: str = " "
    placeholder: str = "~"
    cursor_element_id: str = "__cursor"
    node_id_prefix: str = "node-"
    cursor_visible_color: str = "black"
    cursor_hidden_color: str = "white"
    menu_result_limit: int = 12

    @classmethod
    def from_dict(cls, config_dict: dict) -> "EditorConfig":
        """Create EditorConfig from dictionary.

        Only includes keys that are valid EditorConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = EditorConfig.from_dict({"placeholder": "?", "theme": "dark"})
            >>> config.placeholder
            '?'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: EditorConfig = EditorConfig()

_editor_config: ContextVar[EditorConfig] = ContextVar(
    "editor_config",
    default=_DEFAULT_CONFIG,
)


def get_editor_config() -> EditorConfig:
    """Get the active editor configuration for this context."""
    return _editor_config.get()


def set_editor_config(config: EditorConfig) -> None:
    """Set the editor configuration for the current context."""
    _editor_config.set(config)


def reset_editor_config() -> None:
    """Reset to the module-level default configuration."""
    _editor_config.set(_DEFAULT_CONFIG)


@contextmanager
def editor_config_context(config: EditorConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with editor_config_context(EditorConfig(separator="")):
        ...     get_editor_config().separator
        ''

    """
    previous = _editor_config.get()
    _editor_config.set(config)
    try:
        yield
    finally:
        _editor_config.set(previous)


__all__ = [
    "EditorConfig",
    "get_editor_config",
    "set_editor_config",
    "reset_editor_config",
    "editor_config_context",
]
