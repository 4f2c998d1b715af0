"""Representation of (possibly infinite) regular languages.

A language is a lazy sequence of levels: level n is the set of strings of
length n, held as a tuple in alphabetical order without duplicates. The
sequence ends once no longer strings exist, but for most starred
expressions it never ends, so consumers must bound what they take.
"""
from functools import reduce
from itertools import chain, count, zip_longest
from typing import Callable, Iterable, Iterator, Optional

# strings of the same length, in order and without duplicates
StringSet = tuple[str, ...]


class Language:
    """A replayable lazy sequence of levels.

    Levels are pulled from the underlying iterator on demand and cached,
    so any number of readers can iterate from the start, including the
    iterator itself when a language is defined in terms of its own
    earlier levels."""

    __slots__ = ("_source", "_levels", "_exhausted")

    def __init__(self, levels: Iterable[StringSet]):
        self._source: Iterator[StringSet] = iter(levels)
        self._levels: list[StringSet] = []
        self._exhausted = False

    def _fill(self, n: int) -> bool:
        """Make level n available, if the language has one"""
        while len(self._levels) <= n and not self._exhausted:
            try:
                self._levels.append(next(self._source))
            except StopIteration:
                self._exhausted = True
        return n < len(self._levels)

    def level(self, n: int) -> Optional[StringSet]:
        return self._levels[n] if self._fill(n) else None

    def __iter__(self) -> Iterator[StringSet]:
        n = 0
        while self._fill(n):
            yield self._levels[n]
            n += 1

    @staticmethod
    def fixpoint(f: Callable[["Language"], Iterable[StringSet]]) -> "Language":
        """The language whose levels are f applied to that language.

        This works only if f never demands level n of its argument before
        producing its own level n."""

        def levels() -> Iterator[StringSet]:
            yield from f(language)

        language = Language(levels())
        return language

    def __repr__(self):
        shown = ", ".join(str(list(level)) for level in self._levels)
        return f"Language([{shown}{', ...' if not self._exhausted else ''}])"


# Operations on string sets


def union(xs: StringSet, ys: StringSet) -> StringSet:
    """Union of two string sets, merging the ordered tuples"""
    # shortcuts for special cases
    if not xs:
        return ys
    if not ys:
        return xs

    i, j = 0, 0
    result: list[str] = []
    while i < len(xs) or j < len(ys):
        if j == len(ys) or (i < len(xs) and xs[i] < ys[j]):
            result.append(xs[i])
            i += 1
        else:
            result.append(ys[j])
            if i < len(xs) and xs[i] == ys[j]:
                i += 1
            j += 1
    return tuple(result)


def unions(string_sets: Iterable[StringSet]) -> StringSet:
    return reduce(union, string_sets, ())


def append(xs: StringSet, ys: StringSet) -> StringSet:
    """Concatenation of all combinations"""
    return unions(tuple(x + y for y in ys) for x in xs)


# Language operators


def empty_string() -> Language:
    return Language([("",)])


def single_letter(c: str) -> Language:
    return Language([(), (c,)])


def union_languages(l1: Language, l2: Language) -> Language:
    """Level-wise union, for as long as either language has levels"""
    return Language(
        union(xs, ys) for xs, ys in zip_longest(l1, l2, fillvalue=())
    )


def _diagonals(l1: Iterable[StringSet], l2: Iterable[StringSet]) -> Iterator[StringSet]:
    # level n is the union of the concatenations of levels i and j, i+j = n
    p1, p2 = iter(l1), iter(l2)
    xs: list[StringSet] = []
    ys: list[StringSet] = []
    for n in count():
        if (x := next(p1, None)) is not None:
            xs.append(x)
        if (y := next(p2, None)) is not None:
            ys.append(y)
        lo = max(0, n - len(ys) + 1)
        hi = min(n, len(xs) - 1)
        if lo > hi:
            return
        yield unions(append(xs[i], ys[n - i]) for i in range(lo, hi + 1))


def concatenate_languages(l1: Language, l2: Language) -> Language:
    return Language(_diagonals(l1, l2))


def _drop_first(language: Language) -> Iterator[StringSet]:
    levels = iter(language)
    next(levels, None)
    yield from levels


def star_language(language: Language) -> Language:
    """L* = {ε} ∪ (L≥1 · L*)

    The non-empty strings of L are one level shifted, so level n of the
    concatenation holds strings of length n+1 and only needs levels up to n
    of L*, which are already known."""

    def levels(l_star: Language) -> Iterator[StringSet]:
        yield ("",)
        yield from _diagonals(_drop_first(language), l_star)

    return Language.fixpoint(levels)


def strings(language: Language) -> Iterator[str]:
    """All strings, in order of length and then contents"""
    return chain.from_iterable(language)
