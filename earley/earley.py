import logging
from collections import deque
from typing import Iterable, NamedTuple, Optional, Sequence

from more_itertools import one
from typeguard import typechecked

from grammar import START, Grammar, Rhs, split_symbols
from trees import NonTerminalTree, ParseTree, TerminalTree
from utils.cons import Cons, List, elements

logger = logging.getLogger(__name__)

# guard against unlimited expansion of a single state set
EXPANSION_LIMIT = 100


class EarleyItem(NamedTuple):
    """An item of the form A -> u.v, where A -> uv is a production in the grammar.

    Items are scanned from right to left: `dot` counts the symbols of u,
    which are still to be matched, and `parsed` holds one parse tree for
    each symbol of v."""

    name: str
    rule: Rhs
    dot: int
    parsed: List
    # position in the input of the end of the item
    finish: int

    def __repr__(self):
        return (
            f"[bold red]{self.name}[/bold red] -> "
            f"{' '.join(self.rule[:self.dot])}"
            f" ● "
            f"{' '.join(self.rule[self.dot:])}     ({self.finish})"
        )

    def advance(self, tree: ParseTree) -> "EarleyItem":
        """Move the dot one symbol left, given a parse tree for that symbol"""
        assert not self.completed(), "cannot advance a completed item"
        return EarleyItem(
            self.name, self.rule, self.dot - 1, Cons(tree, self.parsed), self.finish
        )

    def completed(self) -> bool:
        return self.dot == 0

    def finished_with(self, non_terminal: str) -> bool:
        return self.dot == 0 and self.name == non_terminal

    def matches(self, symbol: str) -> bool:
        """Does symbol occur immediately to the left of the dot?"""
        return self.dot > 0 and self.rule[self.dot - 1] == symbol

    def current(self) -> str:
        assert not self.completed(), "a completed item has no current symbol"
        return self.rule[self.dot - 1]

    def start(self) -> int:
        """Position in the input immediately to the right of this item"""
        return self.finish

    def complete(self) -> NonTerminalTree:
        assert self.completed(), "only a completed item has a parse tree"
        return NonTerminalTree(self.name, tuple(elements(self.parsed)))

    def complete_top(self) -> NonTerminalTree:
        """Parse tree of the start symbol, from the completed Start -> S item"""
        assert self.finished_with(START), "expected a completed start item"
        tree = one(elements(self.parsed))
        assert isinstance(tree, NonTerminalTree)
        return tree


def predicted_item(name: str, rule: Rhs, finish: int) -> EarleyItem:
    """An item with the dot at the end of the rule"""
    return EarleyItem(name, rule, len(rule), None, finish)


class EarleySet(list[EarleyItem]):
    """The items ending at one input position, in order of discovery"""

    def __init__(self, items: Iterable[EarleyItem] = ()):
        super().__init__()
        self._members: set[EarleyItem] = set()
        self.extend(items)

    def append(self, item: EarleyItem) -> bool:  # type: ignore[override]
        if item in self._members:
            return False
        self._members.add(item)
        super().append(item)
        return True

    def extend(self, items: Iterable[EarleyItem]) -> None:  # type: ignore[override]
        for item in items:
            self.append(item)

    def __contains__(self, item) -> bool:
        return item in self._members

    def yield_finished(self):
        for item in self:
            if item.completed():
                yield item

    def __str__(self):
        return "\n".join(repr(item) for item in self)


class ParseResult(NamedTuple):
    # all possible parses are included in trees
    complete: bool
    # possible parses
    trees: list[NonTerminalTree]


@typechecked
def parse(
    grammar: Grammar,
    tokens: Sequence[str],
    *,
    expansion_limit: int = EXPANSION_LIMIT,
) -> ParseResult:
    """Find the parse trees of tokens, starting from the end of the input.

    If some state set grows beyond expansion_limit items, its remaining work
    is abandoned and the result is marked incomplete: the trees returned are
    then a sample of the parse forest.
    """
    states: list[EarleySet] = [EarleySet() for _ in range(len(tokens) + 1)]

    truncated = False
    for pos in range(len(tokens), -1, -1):
        queue: deque[EarleyItem] = deque()
        if pos == len(tokens):
            # initial state (starting from end of string)
            queue.append(predicted_item(START, (grammar.start,), pos))
        else:
            # Scanner - advance the items expecting the next input symbol
            next_sym = tokens[pos]
            if grammar.is_terminal(next_sym):
                tree = TerminalTree(next_sym)
                queue.extend(
                    item.advance(tree) for item in states[pos + 1] if item.matches(next_sym)
                )

        state = states[pos]
        # completions at this position that match no input
        empties: list[NonTerminalTree] = []
        while queue:
            if len(state) > expansion_limit:
                logger.warning(
                    "state set %d exceeded %d items; %d items left unexplored",
                    pos,
                    expansion_limit,
                    len(queue),
                )
                truncated = True
                break
            item = queue.popleft()
            if not state.append(item):
                continue

            if item.completed():
                # Completer - advance the items that were expecting
                # this nonterminal at the end of this item
                tree = item.complete()
                end = item.start()
                if end == pos:
                    # null expansions need special treatment
                    empties.append(tree)
                queue.extend(
                    prev.advance(tree) for prev in states[end] if prev.matches(item.name)
                )
            else:
                # Predictor - add items for all expansions of the
                # nonterminal to the left of the dot
                nt = item.current()
                if grammar.is_non_terminal(nt):
                    queue.extend(
                        predicted_item(nt, rule, pos) for rule in grammar.expansions(nt)
                    )
                    queue.extend(
                        item.advance(tree)
                        for tree in empties
                        if tree.non_terminal() == nt
                    )
        logger.debug("state set %d has %d items", pos, len(state))

    trees = [
        item.complete_top() for item in states[0].yield_finished() if item.name == START
    ]
    return ParseResult(not truncated, trees)


def parse_sentence(
    grammar: Grammar, sentence: str, *, expansion_limit: Optional[int] = None
) -> ParseResult:
    """Parse a sentence of single character terminals, ignoring whitespace"""
    return parse(
        grammar,
        split_symbols(sentence),
        expansion_limit=EXPANSION_LIMIT if expansion_limit is None else expansion_limit,
    )
