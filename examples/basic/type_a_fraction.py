"""Type x = 1/2 + y with the keyboard table and print the LaTeX after each key."""

from mathedit import Cursor, handle_key, render

with Cursor() as cursor:
    cursor.focus()
    for key in ["x", "=", "/", "1", "ArrowDown", "2", "ArrowRight", "+", "y"]:
        action = handle_key(cursor, key)
        print(f"{key!r:14} {action.value:16} {cursor!r}")

    print()
    print(render(cursor))
