"""mathedit renderers.

Renderers convert the expression tree, with the live cursor, into markup for
a display backend.

Available Renderers:
- LatexRenderer: Renders to KaTeX-flavoured LaTeX and tracks element ids

"""

from mathedit.renderers.latex import LatexRenderer
from mathedit.renderers.protocol import DocumentRenderer

__all__ = ["DocumentRenderer", "LatexRenderer"]
