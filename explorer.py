"""Caller-facing entry points: grammar issues and galleries of derivation trees."""
import logging
from typing import NamedTuple, Optional

from derivations import LIMIT, DerivationEnumerator
from earley import parse_sentence
from grammar import Grammar, GrammarProperties
from trees import NonTerminalTree, sort_trees

logger = logging.getLogger(__name__)

# depth of expansion beyond the number of nonterminals
EXTRA_DEPTH = 9


class Gallery(NamedTuple):
    caption: str
    trees: list[NonTerminalTree]


def grammar_issues(grammar: Grammar) -> list[str]:
    if not grammar:
        return []
    return GrammarProperties(grammar).issues()


def all_derivations(
    grammar: Grammar, *, limit: int = LIMIT, max_depth: Optional[int] = None
) -> Gallery:
    """All derivation trees of the start symbol, or those of bounded depth
    if the grammar generates too many"""
    if not grammar:
        return Gallery("There are no derivations", [])
    if max_depth is None:
        max_depth = len(grammar.non_terminals) + EXTRA_DEPTH
    enumerator = DerivationEnumerator(grammar, limit)
    enumerator.expand_to_depth(max_depth)
    trees = enumerator.derivations(grammar.start)

    caption = (
        "All derivation trees"
        if enumerator.complete()
        else f"Derivation trees of depth at most {enumerator.depth()}"
    )
    logger.debug("%s: %d trees", caption, len(trees))
    return Gallery(caption, sort_trees(trees))


def derive_sentence(
    grammar: Grammar, sentence: str, *, expansion_limit: Optional[int] = None
) -> Gallery:
    """Derivation trees of a sentence of single character terminals"""
    if not grammar:
        return Gallery(f"There are no derivations for '{sentence}'", [])
    result = parse_sentence(grammar, sentence, expansion_limit=expansion_limit)

    if not result.complete:
        prefix = "Some of the derivations"
    elif not result.trees:
        prefix = "There are no derivations"
    elif len(result.trees) == 1:
        prefix = "Derivation tree"
    else:
        prefix = "Derivation trees"
    return Gallery(f"{prefix} for '{sentence}'", sort_trees(result.trees))
