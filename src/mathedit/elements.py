"""Compound node kinds.

Every kind renders as its marker followed by a KaTeX template whose slots are
filled by the rendered child expressions. New kinds extend ``NODE_KINDS``.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from mathedit.nodes import Character, DoubleChildNode, Node, SingleChildNode

if TYPE_CHECKING:
    from mathedit.cursor import Cursor

BIG_OPERATORS = frozenset(
    {"int", "iint", "iiint", "oint", "oiint", "oiiint", "sum", "prod", "bigcup", "bigcap"}
)


class Fraction(DoubleChildNode):
    """Numerator (child 0) over denominator (child 1)."""

    __slots__ = ()

    kind: ClassVar[str] = "fraction"

    def render(self, cursor: Cursor) -> str:
        numerator = self.children[0].render(cursor)
        denominator = self.children[1].render(cursor)
        return self.marker(cursor) + f"{{\\frac{{{numerator}}}{{{denominator}}}}}"


class BigOperator(DoubleChildNode):
    """Integral-like or sum-like operator with bounds.

    Child 0 is the upper bound, child 1 the lower bound, so moving down goes
    from the upper to the lower bound.
    """

    __slots__ = ("_command",)

    kind: ClassVar[str] = "big-operator"

    def __init__(self, command: str) -> None:
        if command not in BIG_OPERATORS:
            raise ValueError(f"Unknown big operator: {command!r}")
        super().__init__()
        self._command = command

    @property
    def command(self) -> str:
        return self._command

    def render(self, cursor: Cursor) -> str:
        upper = self.children[0].render(cursor)
        lower = self.children[1].render(cursor)
        return self.marker(cursor) + f"{{\\displaystyle\\{self._command}_{{{lower}}}^{{{upper}}}}}"


class EvaluatedFrom(DoubleChildNode):
    """Evaluation bar, ``|_b^a``."""

    __slots__ = ()

    kind: ClassVar[str] = "evaluated-from"

    def render(self, cursor: Cursor) -> str:
        upper = self.children[0].render(cursor)
        lower = self.children[1].render(cursor)
        return self.marker(cursor) + f"{{\\displaystyle{{\\Large\\vert}}_{{{lower}}}^{{{upper}}}}}"


class SubscriptableFunction(SingleChildNode):
    """Functions such as sup, inf, min and max with a subscript expression."""

    __slots__ = ("_name",)

    kind: ClassVar[str] = "subscriptable-function"

    def __init__(self, name: str) -> None:
        super().__init__()
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def render(self, cursor: Cursor) -> str:
        content = self.children[0].render(cursor)
        return self.marker(cursor) + f"{{\\displaystyle\\{self._name}_{{{content}}}}}"


class CommandEnclosable(SingleChildNode):
    """A LaTeX command applied to one argument, e.g. ``\\sqrt`` or ``\\vec``."""

    __slots__ = ("_command",)

    kind: ClassVar[str] = "command"

    def __init__(self, command: str) -> None:
        super().__init__()
        self._command = command

    @property
    def command(self) -> str:
        return self._command

    def render(self, cursor: Cursor) -> str:
        content = self.children[0].render(cursor)
        return self.marker(cursor) + f"{{{self._command}{{{content}}}}}"


class Limit(SingleChildNode):
    __slots__ = ()

    kind: ClassVar[str] = "limit"

    def render(self, cursor: Cursor) -> str:
        content = self.children[0].render(cursor)
        return self.marker(cursor) + f"{{\\displaystyle\\lim_{{{content}}}}}"


class Bracket(SingleChildNode):
    """Auto-sized delimiters around one expression."""

    __slots__ = ("_opening", "_closing")

    kind: ClassVar[str] = "bracket"

    def __init__(self, opening: str, closing: str) -> None:
        super().__init__()
        self._opening = opening
        self._closing = closing

    @property
    def opening(self) -> str:
        return self._opening

    @property
    def closing(self) -> str:
        return self._closing

    def render(self, cursor: Cursor) -> str:
        content = self.children[0].render(cursor)
        return (
            self.marker(cursor)
            + f"{{\\kern-0.1em\\left{self._opening}{content}\\right{self._closing}}}"
        )


class Superscript(SingleChildNode):
    __slots__ = ()

    kind: ClassVar[str] = "superscript"

    def render(self, cursor: Cursor) -> str:
        return self.marker(cursor) + f"{{{{}}^{{{self.children[0].render(cursor)}}}}}"


class Subscript(SingleChildNode):
    __slots__ = ()

    kind: ClassVar[str] = "subscript"

    def render(self, cursor: Cursor) -> str:
        return self.marker(cursor) + f"{{{{}}_{{{self.children[0].render(cursor)}}}}}"


# Closed set of node kinds, keyed by their kind tag.
NODE_KINDS: dict[str, type[Node]] = {
    cls.kind: cls
    for cls in (
        Character,
        Fraction,
        BigOperator,
        EvaluatedFrom,
        SubscriptableFunction,
        CommandEnclosable,
        Limit,
        Bracket,
        Superscript,
        Subscript,
    )
}


__all__ = [
    "BIG_OPERATORS",
    "BigOperator",
    "Bracket",
    "CommandEnclosable",
    "EvaluatedFrom",
    "Fraction",
    "Limit",
    "NODE_KINDS",
    "Subscript",
    "SubscriptableFunction",
    "Superscript",
]
