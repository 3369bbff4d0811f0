"""Default catalog of symbols and elements for the insertion menu.

Symbols insert a single Character. Elements insert a compound node and move
the cursor into its first slot, leading side.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from mathedit.cursor import Side
from mathedit.elements import (
    BigOperator,
    Bracket,
    CommandEnclosable,
    EvaluatedFrom,
    Fraction,
    Limit,
    SubscriptableFunction,
)
from mathedit.menu.registry import MenuItem, MenuRegistry, MenuRegistryBuilder
from mathedit.utils.logger import get_logger

if TYPE_CHECKING:
    from mathedit.cursor import Cursor
    from mathedit.nodes import Node

logger = get_logger(__name__)

GREEK_LETTERS = (
    "alpha", "beta", "gamma", "delta", "epsilon", "zeta", "eta", "theta",
    "iota", "kappa", "lambda", "mu", "nu", "xi", "omicron", "pi", "rho",
    "sigma", "tau", "upsilon", "phi", "chi", "psi", "omega",
)  # fmt: skip

# (display name, code, aliases)
SYMBOLS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("Epsilon", "\\varepsilon", ("varepsilon", "veps")),
    ("Kappa", "\\varkappa", ("varkappa", "vkap")),
    ("Phi", "\\varphi", ("varphi", "vphi")),
    ("Nabla", "\\nabla", ("gradient", "divergence", "curl")),
    ("Partial Derivative", "\\partial", ()),
    ("Imaginary Component", "\\Im", ()),
    ("Real Component", "\\Re", ()),
    ("Natural Numbers", "\\N", ()),
    ("Integers", "\\Z", ("z",)),
    ("Rational Numbers", "\\mathbb{Q}", ("q",)),
    ("Real Numbers", "\\R", ()),
    ("Complex Numbers", "\\Complex", ()),
    ("Cursive L", "\\ell", ("l",)),
    ("Aleph", "\\aleph", ()),
    ("Universal Quantifier", "\\forall", ("forall",)),
    ("Existential Quantifier", "\\exists", ("exists",)),
    ("Negated Existential Quantifier", "\\nexists", ("nexists",)),
    ("Subset", "\\subseteq", ()),
    ("Strict Subset", "\\subset", ("subset",)),
    ("Superset", "\\supseteq", ()),
    ("Strict Superset", "\\supset", ("supset",)),
    ("Logical AND", "\\land", ("land",)),
    ("Logical OR", "\\lor", ("lor",)),
    ("Negation", "\\neg", ("neg", "not", "logical not")),
    ("Empty Set", "\\empty", ()),
    ("Empty Set", "\\varnothing", ("varnothing",)),
    ("Therefore", "\\therefore", ()),
    ("Because", "\\because", ()),
    ("Element of", "\\in", ("in",)),
    ("Not an Element of", "\\notin", ("notin",)),
    ("Center Dots", "\\cdots", ("ellipsis",)),
    ("Plus/Minus", "\\pm", ("pm",)),
    ("Not Equal to", "\\neq", ("neq",)),
    ("Less Than or Equal to", "\\leq", ("leq",)),
    ("Greater than or Equal to", "\\geq", ("geq",)),
    ("Much Greater than", "\\gg", ("gg",)),
    ("Much Less than", "\\ll", ("ll",)),
    ("Equivalent to", "\\equiv", ()),
    ("Congruent to", "\\cong", ()),
    ("Approximately", "\\approx", ()),
    ("Divided By", "\\div", ("div",)),
    ("Union", "\\cup", ("cup",)),
    ("Intersection", "\\cap", ("cap",)),
    ("Set Subtraction", "\\setminus", ()),
    ("Infinity", "\\infty", ("infty",)),
    ("Filled Black Square", "\\blacksquare", ("black square", "qed")),
    ("Circle", "\\circ", ()),
    ("Degree", "\\degree", ()),
    ("Checkmark", "\\checkmark", ()),
    ("Angle", "\\angle", ()),
    ("Short Right Arrow", "\\to", ("to", "approaches", "right arrow")),
    ("Short Left Arrow", "\\gets", ("gets", "left arrow")),
    ("Long Left Arrow", "\\longleftarrow", ()),
    ("Long Right Arrow", "\\longrightarrow", ()),
    ("Implies", "\\implies", ("double arrow",)),
    ("Implied by", "\\impliedby", ("double arrow",)),
    ("If and Only If", "\\iff", ()),
)

OPERATOR_FUNCTIONS: dict[str, str] = {
    "sin": "Sine",
    "cos": "Cosine",
    "tan": "Tangent",
    "csc": "Cosecant",
    "sec": "Secant",
    "cot": "Cotangent",
    "arccos": "Inverse Cosine",
    "arcsin": "Inverse Sine",
    "arctan": "Inverse Tangent",
    "arccsc": "Inverse Cosecant",
    "arcsec": "Inverse Secant",
    "arccot": "Inverse Cotangent",
    "sinh": "Hyperbolic Sine",
    "cosh": "Hyperbolic Cosine",
    "tanh": "Hyperbolic Tangent",
    "csch": "Hyperbolic Cosecant",
    "sech": "Hyperbolic Secant",
    "coth": "Hyperbolic Cotangent",
    "arcsinh": "Inverse Hyperbolic Sine",
    "arccosh": "Inverse Hyperbolic Cosine",
    "arctanh": "Inverse Hyperbolic Tangent",
    "arccsch": "Inverse Hyperbolic Cosecant",
    "arcsech": "Inverse Hyperbolic Secant",
    "arccoth": "Inverse Hyperbolic Cotangent",
    "log": "Logarithm",
    "ln": "Natural Logarithm",
    "adj": "Adjugate",
    "arg": "Argument of",
    "argmax": "Argument of Maximum",
    "argmin": "Argument of Minimum",
    "cov": "Covariance",
    "crd": "Chord",
    "deg": "Degree Function",
    "det": "Determinant",
    "dim": "Dimension",
    "erf": "Error Function",
    "exp": "Exponential Function",
    "gcd": "Greatest Common Denominator",
    "ker": "Kernel",
    "lcm": "Least Common Multiple",
    "lerp": "Linear Interpolation Function",
    "mod": "Modulo Function",
    "rank": "Rank",
    "sgn": "Sign Function",
    "Si": "Sine Integral Function",
    "Ci": "Cosine Integral Function",
}

# (display name, preview code, command, aliases)
BIG_OPERATOR_ITEMS: tuple[tuple[str, str, str, tuple[str, ...]], ...] = (
    ("Integral", "\\small\\int_b^a", "int", ()),
    ("Double Integral", "\\small\\iint", "iint", ("iiint",)),
    ("Triple Integral", "\\small\\iiint", "iiint", ("iiint",)),
    ("Contour Integral", "\\tiny\\oint", "oint", ()),
    ("Double Contour Integral", "\\tiny\\oiint", "oiint", ("iiint",)),
    ("Triple Contour Integral", "\\tiny\\oiiint", "oiiint", ("iiint",)),
    ("Summation", "\\tiny\\sum_{i=1}^{n}", "sum", ("sigma",)),
    ("Product", "\\tiny\\prod_{i=1}^{n}", "prod", ("pi",)),
    ("Union Notation", "\\tiny\\bigcup_{i=1}^{n}", "bigcup", ()),
    ("Intersection Notation", "\\tiny\\bigcap_{i=1}^{n}", "bigcap", ()),
)

# (display name, preview code, command, aliases)
COMMAND_ITEMS: tuple[tuple[str, str, str, tuple[str, ...]], ...] = (
    ("Square Root", "\\sqrt{~}", "\\sqrt", ("sqrt",)),
    ("Cube Root", "\\sqrt[3]{~}", "\\sqrt[3]", ()),
    ("Fourth Root", "\\sqrt[4]{~}", "\\sqrt[4]", ()),
    ("Nth Root", "\\sqrt[n]{~}", "\\sqrt[n]", ()),
    ("Vector Notation", "\\vec{a}", "\\vec", ()),
    ("Bar Notation", "\\bar{a}", "\\bar", ()),
    ("Dot Notation", "\\dot{a}", "\\dot", ()),
    ("Hat Notation", "\\hat{a}", "\\hat", ()),
    ("Tilde Notation", "\\tilde{a}", "\\tilde", ()),
    ("Cancel", "\\cancel{abc}", "\\cancel", ()),
)

SUBSCRIPTABLE_FUNCTIONS = ("Infimum", "Maximum", "Minimum", "Supremum")


def insert_symbol(code: str) -> Callable[[Cursor], None]:
    """Selection action inserting ``code`` as a single character."""

    def select(cursor: Cursor) -> None:
        cursor.insert_character_at_cursor(code)

    return select


def insert_element(factory: Callable[[], Node]) -> Callable[[Cursor], None]:
    """Selection action inserting a fresh node and entering its first slot."""

    def select(cursor: Cursor) -> None:
        index = cursor.insert_node_at_cursor(factory())
        cursor.enter_node(index, 0, Side.LEADING)

    return select


def _greek_items() -> list[MenuItem]:
    items = []
    for letter in GREEK_LETTERS:
        display_name = letter.capitalize()
        items.append(MenuItem(display_name, f"\\{letter}", insert_symbol(f"\\{letter}")))
        # "upi" finds uppercase pi
        items.append(
            MenuItem(
                f"Uppercase {display_name}",
                f"\\{display_name}",
                insert_symbol(f"\\{display_name}"),
                aliases=(f"u{letter}",),
            )
        )
    return items


def _element_items() -> list[MenuItem]:
    items = [
        MenuItem("Fraction", "\\small\\frac{a}{b}", insert_element(Fraction)),
        MenuItem("Evaluated from", "{\\Large|}_b^a", insert_element(EvaluatedFrom)),
        MenuItem("Limit", "\\lim_{x\\to a}", insert_element(Limit)),
        MenuItem("Absolute Value", "|x|", insert_element(lambda: Bracket("|", "|"))),
        MenuItem(
            "Norm",
            "\\lVert\\vec{x}\\rVert",
            insert_element(lambda: Bracket("\\lVert", "\\rVert")),
        ),
    ]
    for name, preview, command, aliases in BIG_OPERATOR_ITEMS:
        items.append(
            MenuItem(name, preview, insert_element(lambda c=command: BigOperator(c)), aliases)
        )
    for name, preview, command, aliases in COMMAND_ITEMS:
        items.append(
            MenuItem(name, preview, insert_element(lambda c=command: CommandEnclosable(c)), aliases)
        )
    for display_name in SUBSCRIPTABLE_FUNCTIONS:
        # "Infimum" -> "inf"
        name = display_name[:3].lower()
        items.append(
            MenuItem(
                display_name,
                f"\\small\\{name}_{{x\\in S}}",
                insert_element(lambda n=name: SubscriptableFunction(n)),
            )
        )
        items.append(MenuItem(display_name, f"\\{name}", insert_symbol(f"\\{name}")))
    return items


def _script_letter_items() -> list[MenuItem]:
    items = []
    for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
        items.append(
            MenuItem(
                f"Calligraphic {letter}",
                f"\\mathcal{{{letter}}}",
                insert_symbol(f"{{\\mathcal{{{letter}}}}}"),
                aliases=(f"mathcal {letter}",),
            )
        )
        items.append(
            MenuItem(
                f"Script {letter}",
                f"\\mathscr{{{letter}}}",
                insert_symbol(f"{{\\mathscr{{{letter}}}}}"),
                aliases=(f"mathscr {letter}",),
            )
        )
    return items


def create_default_registry() -> MenuRegistry:
    """Create the registry with every built-in symbol and element."""
    builder = MenuRegistryBuilder()
    builder.register_all(_greek_items())
    for display_name, code, aliases in SYMBOLS:
        builder.register(MenuItem(display_name, code, insert_symbol(code), aliases))
    for function, display_name in OPERATOR_FUNCTIONS.items():
        builder.register(
            MenuItem(
                display_name,
                f"\\operatorname{{{function}}}",
                insert_symbol(f"{{\\operatorname{{{function}}}}}"),
                aliases=(function,),
            )
        )
    builder.register_all(_element_items())
    builder.register_all(_script_letter_items())

    registry = builder.build()
    logger.debug("Added %d menu items", len(registry))
    return registry
