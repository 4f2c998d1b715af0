import pytest

from trees import (
    NonTerminalTree,
    TerminalTree,
    compare_trees,
    draw,
    draw_tree,
    sort_trees,
    to_svg,
)
from trees.layout import HSEP, STRIP_HEIGHT, VSEP, Lines, Rect, Text
from utils.dot import tree_to_dot


def nt(symbol, *children):
    return NonTerminalTree(symbol, children)


a, b = TerminalTree("a"), TerminalTree("b")


def test_structural_equality():
    first = nt("S", a, nt("S", b))
    second = nt("S", TerminalTree("a"), nt("S", TerminalTree("b")))
    assert first is not second
    assert first == second
    assert hash(first) == hash(second)
    assert first != nt("S", b, nt("S", a))
    assert TerminalTree("S") != nt("S")


@pytest.mark.parametrize(
    "tree,height,width,sentence",
    [
        (a, 1, 1, "a"),
        (nt("S"), 2, 1, ""),
        (nt("S", a), 2, 1, "a"),
        (nt("S", a, b), 2, 2, "ab"),
        (nt("S", a, nt("S"), b), 3, 3, "ab"),
        (nt("S", nt("S", a, nt("S", a)), nt("T", b)), 4, 3, "aab"),
        (nt("S", nt("A"), nt("B")), 3, 2, ""),
    ],
)
def test_derived_values(tree, height, width, sentence):
    assert tree.height == height
    assert tree.width == width
    assert tree.sentence == sentence


def test_non_terminal():
    assert nt("Expr", a).non_terminal() == "Expr"


def test_display_order():
    deep_a = nt("S", nt("S", a))
    trees = [nt("S", a, b), deep_a, nt("S", b), nt("S", a), nt("S")]
    assert sort_trees(trees) == [
        nt("S"),
        nt("S", a),
        deep_a,
        nt("S", b),
        nt("S", a, b),
    ]
    assert compare_trees(nt("S", a), nt("S", b)) == -1
    assert compare_trees(nt("S", a, b), nt("S", b)) == 1
    assert compare_trees(nt("S", a), nt("T", a)) == 0


def test_draw_terminal():
    out = []
    assert draw(a, out, 10, 30, 1) == 10
    texts = [p for p in out if isinstance(p, Text)]
    assert [t.text for t in texts] == ["a", "a"]
    assert texts[1].y == 30 + VSEP - 10


def test_draw_root_above_median():
    two = nt("S", a, b)
    assert draw(two, [], 0, 0, two.height) == HSEP / 2
    three = nt("S", a, b, a)
    assert draw(three, [], 0, 0, three.height) == HSEP
    # widths of subtrees shift their positions
    wide = nt("S", nt("S", a, b), a)
    assert draw(wide, [], 0, 0, wide.height) == (HSEP / 2 + 2 * HSEP) / 2


def test_draw_empty_expansion():
    out = []
    assert draw(nt("S"), out, 5, 0, 2) == 5
    assert Text(5, VSEP, "#aaaaaa", "ε") in out
    assert any(isinstance(p, Lines) for p in out)


def test_drawing_dimensions():
    tree = nt("S", a, nt("S"), b)
    drawing = draw_tree(tree)
    assert drawing.width == 3 * HSEP + 20
    assert drawing.height == 3 * VSEP + STRIP_HEIGHT + 20
    assert drawing.primitives[0] == Rect(0, 3 * HSEP, 3 * VSEP, "#fff7db")
    assert drawing.primitives[1].y == 3 * VSEP


def test_svg():
    svg = to_svg(draw_tree(nt("S", TerminalTree("<"), TerminalTree("&"))))
    assert svg.startswith("<svg ")
    assert svg.endswith("</svg>")
    assert ">&lt;</text>" in svg
    assert ">&amp;</text>" in svg
    assert svg.count("<rect ") == 2


def test_dot():
    graph = tree_to_dot(nt("S", a, nt("S")))
    assert graph[0].startswith("digraph G")
    assert graph[-1] == "}"
    assert sum("->" in line for line in graph) == 2
    assert any('label="S → ε"' in line for line in graph)
    assert any("0:from_false -> 1:from_node" in line for line in graph)
    assert any("0:from_false -> 2:from_node" in line for line in graph)


def test_deep_trees_hash_without_recursion():
    first, second = nt("S", a), nt("S", a)
    for _ in range(5000):
        first, second = nt("S", a, first), nt("S", a, second)
    assert hash(first) == hash(second)
    assert first in {first}
    assert len({first, nt("S", b)}) == 2
