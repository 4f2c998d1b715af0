from dataclasses import dataclass
from typing import Union

from .language import (
    Language,
    concatenate_languages,
    empty_string,
    single_letter,
    star_language,
    union_languages,
)


@dataclass(frozen=True)
class EmptyExpr:
    """The empty string"""

    def __str__(self):
        return "ε"


@dataclass(frozen=True)
class SingleExpr:
    char: str

    def __str__(self):
        return self.char


@dataclass(frozen=True)
class OrExpr:
    left: "RegExpr"
    right: "RegExpr"

    def __str__(self):
        return f"{self.left}|{self.right}"


@dataclass(frozen=True)
class AndExpr:
    left: "RegExpr"
    right: "RegExpr"

    def __str__(self):
        # the parser builds every term on top of an empty expression
        if isinstance(self.left, EmptyExpr):
            return _group(self.right)
        return f"{self.left}{_group(self.right)}"


@dataclass(frozen=True)
class StarExpr:
    expr: "RegExpr"

    def __str__(self):
        match self.expr:
            case SingleExpr() | EmptyExpr() | StarExpr():
                return f"{self.expr}*"
            case _:
                return f"({self.expr})*"


RegExpr = Union[EmptyExpr, SingleExpr, OrExpr, AndExpr, StarExpr]


def _group(expr: RegExpr) -> str:
    return f"({expr})" if isinstance(expr, OrExpr) else str(expr)


def language(expr: RegExpr) -> Language:
    """The regular language denoted by a regular expression"""
    match expr:
        case EmptyExpr():
            return empty_string()
        case SingleExpr(char):
            return single_letter(char)
        case OrExpr(left, right):
            return union_languages(language(left), language(right))
        case AndExpr(left, right):
            return concatenate_languages(language(left), language(right))
        case StarExpr(inner):
            return star_language(language(inner))
        case _:
            raise TypeError(f"Expected a regular expression, got {type(expr)}")
