import logging
from itertools import product

from grammar import Grammar, Rhs
from trees import NonTerminalTree, ParseTree, TerminalTree

logger = logging.getLogger(__name__)

# limit on the total size of trees when expanding the grammar
LIMIT = 10000


class DerivationEnumerator:
    """Derivation trees of every nonterminal, grown one level of depth at a time.

    After n successful calls of expand(), the trees of each nonterminal are
    exactly its derivation trees of depth at most n. Growth stops for good
    once the total size (height*width summed over every tree ever built)
    exceeds the limit.
    """

    def __init__(self, grammar: Grammar, limit: int = LIMIT):
        self.grammar = grammar
        self.limit = limit
        # total size (width*height) of derivation trees
        self._count = 0
        # number of times the languages have been expanded
        self._expand_count = 0
        # true if last expansion reached a fixed point
        self._finished = False
        # derivation trees for each nonterminal
        self._languages: dict[str, list[NonTerminalTree]] = {
            nt: [] for nt in grammar.non_terminals
        }

    def expand(self) -> bool:
        """Given the trees up to depth n, update to trees up to depth n+1.
        :return: False, leaving the trees unchanged, if the size limit was exceeded
        """
        new_languages: dict[str, list[NonTerminalTree]] = {}
        for nt in self.grammar.non_terminals:
            trees: list[NonTerminalTree] = []
            for rhs in self.grammar.expansions(nt):
                for children in self._expand_symbols(rhs):
                    tree = NonTerminalTree(nt, children)
                    trees.append(tree)
                    self._count += tree.height * tree.width
                    if self._count > self.limit:
                        logger.info(
                            "size limit %d exceeded at depth %d",
                            self.limit,
                            self._expand_count + 1,
                        )
                        return False
            new_languages[nt] = trees

        prev_size = self.size()
        self._languages = new_languages
        self._expand_count += 1
        if self.size() == prev_size:
            self._finished = True
        logger.debug(
            "depth %d: %d derivations, total size %d",
            self._expand_count,
            self.size(),
            self._count,
        )
        return True

    def _expand_symbols(self, symbols: Rhs) -> product:
        """Every combination of the current trees of the symbols"""
        choices: list[list[ParseTree]] = []
        for sym in symbols:
            if self.grammar.is_terminal(sym):
                choices.append([TerminalTree(sym)])
            else:
                choices.append(self._languages[sym])
        return product(*choices)

    def expand_to_depth(self, max_depth: int) -> None:
        while self._expand_count < max_depth and not self._finished and self.expand():
            pass

    def derivations(self, non_terminal: str) -> list[NonTerminalTree]:
        return self._languages[non_terminal]

    def depth(self) -> int:
        return self._expand_count

    def size(self) -> int:
        return sum(len(trees) for trees in self._languages.values())

    def complete(self) -> bool:
        return self._finished
