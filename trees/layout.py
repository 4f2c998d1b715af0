"""Layout of parse trees as drawable primitives, and their SVG form.

A tree is drawn in a box of width*HSEP by height*VSEP, with the sentence
it generates in a strip beneath the box.
"""
from html import escape
from typing import NamedTuple, Union

from .core import NonTerminalTree, ParseTree, TerminalTree

HSEP = 30
VSEP = 45
STRIP_HEIGHT = 30
TOP = 15
BOTTOM = 5
H_PADDING = 20
V_PADDING = 20
TERM_SYMBOL_COLOUR = "#0000cc"
TERM_LINE_COLOUR = "#dddddd"
NT_SYMBOL_COLOUR = "#cc0000"
NT_LINE_COLOUR = "black"
NT_NULL_COLOUR = "#aaaaaa"
NT_NULL_SYMBOL = "ε"
BOX_COLOUR = "#fff7db"
STRIP_COLOUR = "#f0e6bc"
FONT_SIZE = 15


class Line(NamedTuple):
    x1: float
    y1: float
    x2: float
    y2: float


class Text(NamedTuple):
    x: float
    y: float
    colour: str
    text: str


class Lines(NamedTuple):
    colour: str
    lines: tuple[Line, ...]


class Rect(NamedTuple):
    y: float
    width: float
    height: float
    colour: str


Primitive = Union[Text, Lines, Rect]


class Drawing(NamedTuple):
    width: float
    height: float
    primitives: list[Primitive]


def draw(tree: ParseTree, out: list[Primitive], x: float, y: float, levels: int) -> float:
    """Append the primitives for tree and the sentence it produces to out.

    :param x: x-coordinate of the left of the tree
    :param y: y-coordinate of the root of the tree
    :param levels: height of the root of the tree above the sentence strip
    :return: x-coordinate of the root of the tree
    """
    match tree:
        case TerminalTree(symbol):
            # terminal at its position in the tree
            out.append(Text(x, y, TERM_SYMBOL_COLOUR, symbol))
            # and again directly below, in the sentence strip
            ly = y + levels * VSEP - 10
            out.append(Text(x, ly, TERM_SYMBOL_COLOUR, symbol))
            out.append(Lines(TERM_LINE_COLOUR, (Line(x, y + BOTTOM, x, ly - TOP),)))
            return x

        case NonTerminalTree(symbol, children):
            # subtree root y-coordinate
            ty = y + VSEP
            # subtree root x-coordinates
            trx: list[float] = []
            tx = x
            for child in children:
                trx.append(draw(child, out, tx, ty, levels - 1))
                tx += child.width * HSEP

            # root above the median of the subtree roots
            n = len(trx)
            rx = x if n == 0 else (trx[(n - 1) // 2] + trx[n // 2]) / 2
            out.append(Text(rx, y, NT_SYMBOL_COLOUR, symbol))

            y1, y2 = y + BOTTOM, ty - TOP
            if n == 0:
                out.append(Text(x, ty, NT_NULL_COLOUR, NT_NULL_SYMBOL))
                out.append(Lines(NT_NULL_COLOUR, (Line(x, y1, x, y2),)))
            else:
                out.append(
                    Lines(NT_LINE_COLOUR, tuple(Line(rx, y1, cx, y2) for cx in trx))
                )
            return rx

        case _:
            raise TypeError(f"Expected a parse tree, got {type(tree)}")


def draw_tree(tree: ParseTree) -> Drawing:
    box_width = tree.width * HSEP
    box_height = tree.height * VSEP
    primitives: list[Primitive] = [
        # background of parse tree
        Rect(0, box_width, box_height, BOX_COLOUR),
        # background of generated sentence
        Rect(box_height, box_width, STRIP_HEIGHT, STRIP_COLOUR),
    ]
    draw(tree, primitives, HSEP / 2, 30, tree.height)
    return Drawing(
        box_width + H_PADDING, box_height + STRIP_HEIGHT + V_PADDING, primitives
    )


def _fmt(v: float) -> str:
    return f"{v:g}"


def primitive_to_svg(primitive: Primitive) -> str:
    match primitive:
        case Text(x, y, colour, text):
            return (
                f'<text x="{_fmt(x)}" y="{_fmt(y)}" text-anchor="middle" '
                f'fill="{colour}">{escape(text)}</text>'
            )
        case Lines(colour, lines):
            segments = "".join(
                f'<line x1="{_fmt(x1)}" y1="{_fmt(y1)}" x2="{_fmt(x2)}" y2="{_fmt(y2)}"/>'
                for x1, y1, x2, y2 in lines
            )
            return (
                f'<g stroke="{colour}" stroke-width="1" stroke-linecap="round">'
                f"{segments}</g>"
            )
        case Rect(y, width, height, colour):
            return (
                f'<rect y="{_fmt(y)}" width="{_fmt(width)}" '
                f'height="{_fmt(height)}" fill="{colour}"/>'
            )
        case _:
            raise TypeError(f"Expected a drawing primitive, got {type(primitive)}")


def to_svg(drawing: Drawing) -> str:
    body = "\n  ".join(primitive_to_svg(p) for p in drawing.primitives)
    return (
        f'<svg width="{_fmt(drawing.width)}" height="{_fmt(drawing.height)}" '
        f'xmlns="http://www.w3.org/2000/svg" version="1.1" '
        f'font-family="sans-serif" font-size="{FONT_SIZE}">\n  {body}\n</svg>'
    )
