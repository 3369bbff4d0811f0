"""Search the insertion menu and insert the best match."""

from mathedit import Cursor, SymbolMenu, render

with Cursor() as cursor:
    menu = SymbolMenu(cursor)
    cursor.on_focus_requested(lambda: print("menu closed, editor focused"))

    for query in ["pi", "int", "sqrt", "uomega"]:
        names = [item.display_name for item in menu.results(query)[:5]]
        print(f"{query:8} -> {names}")

    menu.open()
    menu.select_best("sqrt")
    cursor.insert_character_at_cursor("2")
    print(render(cursor))
