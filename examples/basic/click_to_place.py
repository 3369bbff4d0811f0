"""Correlate rendered elements back to nodes, as a display backend does."""

from mathedit import Cursor, LatexRenderer, handle_key

renderer = LatexRenderer()

with Cursor() as cursor:
    cursor.focus()

    @cursor.on_change
    def redraw() -> None:
        renderer.render(cursor.root, cursor)

    for key in "a+b":
        handle_key(cursor, key)

    # The backend binds a click handler to every element id it was given
    element_ids = renderer.element_ids()
    first = next(iter(element_ids))
    print(f"clicking {first}")
    cursor.handle_click(event=None, node_id=renderer.node_for_element(first))
    print(f"cursor now at position {cursor.position}")
