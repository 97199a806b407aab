"""Virtual size of a diagram tree."""

from ..core.diagram import Annotated, Below, Beside, Diagram, Primitive
from ..core.geometry import Size


def size(diagram: Diagram) -> Size:
    """Compute the natural (unscaled) size of a diagram.

    Beside adds widths and takes the larger height, Below adds heights and
    takes the larger width, annotations do not change the size. Nothing is
    cached: every call walks the whole subtree.
    """
    match diagram:
        case Primitive(sz, _):
            return sz
        case Beside(left, right):
            ls = size(left)
            rs = size(right)
            return Size(ls.width + rs.width, max(ls.height, rs.height))
        case Below(top, bottom):
            ts = size(top)
            bs = size(bottom)
            return Size(max(ts.width, bs.width), ts.height + bs.height)
        case Annotated(_, child):
            return size(child)
    raise TypeError(f"Not a diagram node: {diagram!r}")
