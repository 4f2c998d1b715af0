from typing import Callable, Hashable, Mapping, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

Relation = Mapping[H, frozenset[H]]


class FixpointError(RuntimeError):
    ...


def fixpoint(f: Callable[[T], T], max_iterations: int = 1000) -> Callable[[T], T]:
    """Iterate f from an initial argument until a full pass changes nothing.

    f must be monotone on a finite lattice (sets that only grow or only
    shrink), otherwise the iteration bound is hit.
    """

    def helper(arg: T) -> T:
        iterations = 0
        while iterations < max_iterations:
            result = f(arg)
            if result == arg:
                return arg
            arg = result
            iterations += 1
        raise FixpointError(f"Too many iterations for function {f.__name__}")

    return helper


def transitive_closure(relation: Relation) -> dict[H, frozenset[H]]:
    """Expand a relation to its transitive closure.
    Ex.: A->B, B->C => A->{B, C}
    """
    closed: dict[H, set[H]] = {x: set(ys) for x, ys in relation.items()}

    changed = True
    while changed:
        changed = False
        for ys in closed.values():
            entries_copy = ys.copy()
            for target in entries_copy:
                ys.update(closed.get(target, ()))
            if entries_copy < ys:
                changed = True
    return {x: frozenset(ys) for x, ys in closed.items()}


def identities(relation: Relation) -> frozenset[H]:
    """Elements related to themselves"""
    return frozenset(x for x, ys in relation.items() if x in ys)
