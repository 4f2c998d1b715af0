from dataclasses import dataclass, field
from typing import Iterable, Union


@dataclass(frozen=True)
class TerminalTree:
    symbol: str

    @property
    def height(self) -> int:
        return 1

    @property
    def width(self) -> int:
        return 1

    @property
    def sentence(self) -> str:
        return self.symbol

    def __str__(self):
        return self.symbol


@dataclass(frozen=True)
class NonTerminalTree:
    """A nonterminal and the trees of the symbols it was expanded to.

    A node without children stands for an empty expansion; it is drawn
    with an ε beneath it, so it is two levels high."""

    symbol: str
    children: tuple["ParseTree", ...] = ()
    # derived values
    height: int = field(init=False, compare=False, repr=False)
    width: int = field(init=False, compare=False, repr=False)
    sentence: str = field(init=False, compare=False, repr=False)
    # built from the children's stored hashes, so hashing never recurses
    _hash: int = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(
            self, "height", 1 + max((t.height for t in self.children), default=1)
        )
        object.__setattr__(
            self, "width", max(1, sum(t.width for t in self.children))
        )
        object.__setattr__(
            self, "sentence", "".join(t.sentence for t in self.children)
        )
        object.__setattr__(
            self, "_hash", hash((self.symbol, tuple(hash(t) for t in self.children)))
        )

    def __hash__(self):
        return self._hash

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, NonTerminalTree):
            return NotImplemented
        return (
            self._hash == other._hash
            and self.symbol == other.symbol
            and self.children == other.children
        )

    def non_terminal(self) -> str:
        return self.symbol

    def __str__(self):
        return f"{self.symbol}({' '.join(str(t) for t in self.children)})"


ParseTree = Union[TerminalTree, NonTerminalTree]


def display_key(tree: ParseTree) -> tuple[int, str, int]:
    """Order trees first by length of generated sentence, then generated
    text, then tree height"""
    return len(tree.sentence), tree.sentence, tree.height


def compare_trees(a: ParseTree, b: ParseTree) -> int:
    key_a, key_b = display_key(a), display_key(b)
    return (key_a > key_b) - (key_a < key_b)


def sort_trees(trees: Iterable[ParseTree]) -> list[ParseTree]:
    return sorted(trees, key=display_key)
