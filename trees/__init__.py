from .core import (
    NonTerminalTree,
    ParseTree,
    TerminalTree,
    compare_trees,
    display_key,
    sort_trees,
)
from .layout import Drawing, draw, draw_tree, to_svg
