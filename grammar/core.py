import re
from collections.abc import Mapping
from typing import Iterable, Iterator, Sequence

from typeguard import typechecked

# right-hand side of a production
Rhs = tuple[str, ...]

# additional start nonterminal, with a unit production Start -> S
START = "Start"


class Grammar(Mapping[str, tuple[Rhs, ...]]):
    """An ordered context free grammar over plain string symbols.

    The first nonterminal added is the start symbol.
    A symbol is a terminal if and only if it has no productions,
    so the classification depends on the grammar alone."""

    __slots__ = ("_lhss", "_productions")

    def __init__(self, lhss: Sequence[str], productions: Mapping[str, Sequence[Rhs]]):
        self._lhss: tuple[str, ...] = tuple(lhss)
        self._productions: dict[str, tuple[Rhs, ...]] = {
            lhs: tuple(productions[lhs]) for lhs in self._lhss
        }

    @property
    def start(self) -> str:
        assert self._lhss, "an empty grammar has no start symbol"
        return self._lhss[0]

    @property
    def non_terminals(self) -> tuple[str, ...]:
        return self._lhss

    @property
    def terminals(self) -> tuple[str, ...]:
        seen: dict[str, None] = {}
        for _, rhs in self.iter_productions():
            for symbol in rhs:
                if self.is_terminal(symbol):
                    seen.setdefault(symbol)
        return tuple(seen)

    def is_terminal(self, symbol: str) -> bool:
        return symbol not in self._productions

    def is_non_terminal(self, symbol: str) -> bool:
        return symbol in self._productions

    def expansions(self, non_terminal: str) -> tuple[Rhs, ...]:
        assert self.is_non_terminal(non_terminal), f"{non_terminal!r} is a terminal"
        return self._productions[non_terminal]

    def iter_productions(self) -> Iterator[tuple[str, Rhs]]:
        for origin, expansions in self.items():
            for expansion in expansions:
                yield origin, expansion

    def __getitem__(self, non_terminal: str) -> tuple[Rhs, ...]:
        return self._productions[non_terminal]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lhss)

    def __len__(self) -> int:
        return len(self._lhss)

    def __str__(self) -> str:
        return "\n".join(
            f"{lhs} -> {' | '.join(''.join(rhs) or 'ε' for rhs in expansions)}"
            for lhs, expansions in self.items()
        )

    def __repr__(self) -> str:
        return "\n".join(
            f"[bold red]{lhs}[/bold red] => "
            + " | ".join(
                " ".join(
                    f"[bold red]{sym}[/bold red]"
                    if self.is_non_terminal(sym)
                    else f"[bold blue]{sym}[/bold blue]"
                    for sym in rhs
                )
                or "[bold cyan]ε[/bold cyan]"
                for rhs in expansions
            )
            for lhs, expansions in self.items()
        )

    @staticmethod
    def from_str(grammar_str: str) -> "Grammar":
        return _parse_grammar(grammar_str)

    @staticmethod
    def from_rules(rules: Iterable[tuple[str, str]]) -> "Grammar":
        return _parse_rules(rules)

    class Builder:
        __slots__ = ("_lhss", "_dict")

        def __init__(self) -> None:
            self._lhss: list[str] = []
            self._dict: dict[str, list[Rhs]] = {}

        @typechecked
        def add_production(self, lhs: str, rhs: Sequence[str]) -> "Grammar.Builder":
            if lhs == START:
                raise ValueError(
                    f"grammar with name {START} not allowed \n"
                    f"{START} is an implicit start symbol used by the parser"
                )
            if lhs not in self._dict:
                self._lhss.append(lhs)
                self._dict[lhs] = []
            self._dict[lhs].append(tuple(rhs))
            return self

        def build(self) -> "Grammar":
            return Grammar(self._lhss, self._dict)


def split_symbols(text: str) -> Rhs:
    """The individual characters of text, ignoring whitespace"""
    return tuple(c for c in text if not c.isspace())


def parse_rhs(text: str) -> list[Rhs]:
    return [split_symbols(alternative) for alternative in text.split("|")]


def _parse_rules(rules: Iterable[tuple[str, str]]) -> Grammar:
    grammar_builder = Grammar.Builder()
    for lhs, rhs in rules:
        lhs = lhs.strip()
        # no production defined here
        if not lhs:
            continue
        for expansion in parse_rhs(rhs):
            grammar_builder.add_production(lhs, expansion)
    return grammar_builder.build()


def _parse_grammar(grammar_str: str) -> Grammar:
    """Ad Hoc grammar parser: one `lhs -> alternatives` rule per line"""
    rules: list[tuple[str, str]] = []
    for line in grammar_str.strip().splitlines():
        if not line.strip():
            continue
        if (m := re.match(r"^\s*(\S+)\s*->(.*)$", line)) is None:
            raise ValueError(f"Invalid rule: {line.strip()!r}, expected 'lhs -> rhs'")
        rules.append((m.group(1), m.group(2)))
    return _parse_rules(rules)
