from collections import deque
from typing import Iterable

from prettytable import PrettyTable

from utils.fixpoint import fixpoint, identities, transitive_closure

from .core import Grammar, Rhs


class GrammarProperties:
    """Statically computable properties of a grammar.

    All four sets are computed once, when the properties are constructed;
    a changed grammar needs a fresh instance."""

    __slots__ = ("grammar", "unreachable", "unrealizable", "nullable", "cyclic")

    def __init__(self, grammar: Grammar):
        self.grammar = grammar
        # nonterminals that cannot be reached from the start symbol
        self.unreachable: frozenset[str] = self._compute_unreachable()
        # nonterminals that do not generate any strings
        self.unrealizable: frozenset[str] = self._compute_unrealizable()
        # nonterminals that can generate the null string
        self.nullable: frozenset[str] = self._compute_nullable()
        # nonterminals that can derive themselves; needs nullable
        self.cyclic: frozenset[str] = self._compute_cyclic()

    def infinitely_ambiguous(self) -> bool:
        """Some strings have infinitely many derivations.
        This occurs if and only if a cyclic nonterminal is both
        reachable and realizable."""
        return any(
            nt not in self.unreachable and nt not in self.unrealizable
            for nt in self.cyclic
        )

    def ordered(self, non_terminals: Iterable[str]) -> list[str]:
        """The given nonterminals, in the order they appear in the grammar"""
        members = set(non_terminals)
        return [nt for nt in self.grammar.non_terminals if nt in members]

    def issues(self) -> list[str]:
        issues: list[str] = []
        if self.unreachable:
            issues.append(
                self.describe(
                    self.unreachable,
                    f"unreachable from the start symbol {self.grammar.start}",
                )
            )
        if self.unrealizable:
            issues.append(
                self.describe(
                    self.unrealizable, "unrealizable (cannot generate any strings)"
                )
            )
        if self.cyclic:
            issues.append(
                self.describe(
                    self.cyclic,
                    "cyclic, so some strings have infinitely many derivations"
                    if self.infinitely_ambiguous()
                    else "cyclic",
                )
            )
        return issues

    def describe(self, non_terminals: Iterable[str], adjective: str) -> str:
        """Sentence saying a nonempty set of nonterminals have a property"""
        nts = self.ordered(non_terminals)
        plural = len(nts) > 1
        return (
            ("Nonterminals " if plural else "Nonterminal ")
            + ", ".join(nts)
            + (" are " if plural else " is ")
            + adjective
            + "."
        )

    def to_pretty_table(self) -> PrettyTable:
        table = PrettyTable()
        table.field_names = ["<NT>", "reachable", "realizable", "nullable", "cyclic"]
        for nt in self.grammar.non_terminals:
            table.add_row(
                [
                    nt,
                    nt not in self.unreachable,
                    nt not in self.unrealizable,
                    nt in self.nullable,
                    nt in self.cyclic,
                ]
            )
        return table

    def _compute_unreachable(self) -> frozenset[str]:
        if not self.grammar:
            return frozenset()
        # build up the reachable nonterminals from the start symbol
        reachable: set[str] = set()
        queue = deque([self.grammar.start])
        while queue:
            nt = queue.popleft()
            if nt not in reachable:
                reachable.add(nt)
                for rhs in self.grammar.expansions(nt):
                    queue.extend(
                        sym for sym in rhs if self.grammar.is_non_terminal(sym)
                    )
        return frozenset(self.grammar.non_terminals) - reachable

    def _compute_unrealizable(self) -> frozenset[str]:
        def realizable(rhs: Rhs, unrealizable: frozenset[str]) -> bool:
            return all(sym not in unrealizable for sym in rhs)

        def step(unrealizable: frozenset[str]) -> frozenset[str]:
            return frozenset(
                nt
                for nt in unrealizable
                if not any(
                    realizable(rhs, unrealizable)
                    for rhs in self.grammar.expansions(nt)
                )
            )

        return fixpoint(step)(frozenset(self.grammar.non_terminals))

    def _compute_nullable(self) -> frozenset[str]:
        def step(nullable: frozenset[str]) -> frozenset[str]:
            return nullable | frozenset(
                nt
                for nt, rhs in self.grammar.iter_productions()
                if all(sym in nullable for sym in rhs)
            )

        return fixpoint(step)(frozenset())

    def _compute_cyclic(self) -> frozenset[str]:
        return identities(transitive_closure(self._direct_expansion()))

    def _direct_expansion(self) -> dict[str, frozenset[str]]:
        """For each nonterminal A, find the symbols B that occur in
        productions of the form A -> uBv where u and v are nullable."""
        expansion: dict[str, frozenset[str]] = {}
        for nt in self.grammar.non_terminals:
            targets: set[str] = set()
            for rhs in self.grammar.expansions(nt):
                non_null = [sym for sym in rhs if sym not in self.nullable]
                if not non_null:
                    targets.update(rhs)
                elif len(non_null) == 1:
                    targets.update(
                        sym for sym in non_null if self.grammar.is_non_terminal(sym)
                    )
            if targets:
                expansion[nt] = frozenset(targets)
        return expansion

    def __repr__(self):
        return (
            f"{self.__class__.__name__}("
            f"unreachable={self.ordered(self.unreachable)}, "
            f"unrealizable={self.ordered(self.unrealizable)}, "
            f"nullable={self.ordered(self.nullable)}, "
            f"cyclic={self.ordered(self.cyclic)})"
        )
