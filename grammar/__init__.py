from .core import START, Grammar, Rhs, parse_rhs, split_symbols
from .properties import GrammarProperties
