from typing import Any, Iterator, NamedTuple, Optional


class Cons(NamedTuple):
    """A cell of a persistent singly linked list; None is the empty list.

    Prepending never copies, so lists built from a common suffix share it.
    Equality is elementwise."""

    head: Any
    tail: Optional["Cons"]

    def __repr__(self):
        return f"[{', '.join(repr(x) for x in elements(self))}]"


List = Optional[Cons]


def elements(xs: List) -> Iterator[Any]:
    while xs is not None:
        yield xs.head
        xs = xs.tail
