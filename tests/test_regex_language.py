from itertools import islice

import pytest

from regexpr import (
    Language,
    concatenate_languages,
    empty_string,
    language,
    language_string,
    parse_regex,
    regex_language,
    single_letter,
    star_language,
    strings,
    union,
    union_languages,
)


def levels(source, n):
    return list(islice(language(parse_regex(source)), n))


def test_union_of_string_sets():
    assert union(("a", "c"), ("b", "c", "d")) == ("a", "b", "c", "d")
    assert union((), ("a",)) == ("a",)
    assert union(("a",), ()) == ("a",)


def test_language_is_replayable():
    lang = Language(iter([("",), ("a",)]))
    assert list(lang) == [("",), ("a",)]
    assert list(lang) == [("",), ("a",)]
    assert lang.level(1) == ("a",)
    assert lang.level(2) is None


def test_operators():
    ab = concatenate_languages(single_letter("a"), single_letter("b"))
    assert list(ab) == [(), (), ("ab",)]
    a_or_eps = union_languages(single_letter("a"), empty_string())
    assert list(a_or_eps) == [("",), ("a",)]
    assert list(islice(star_language(single_letter("b")), 3)) == [
        ("",),
        ("b",),
        ("bb",),
    ]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a|b", ["a", "b"]),
        ("b|a", ["a", "b"]),
        ("a|a", ["a"]),
        ("", [""]),
        ("|", [""]),
        ("ε*", [""]),
        ("(ε|ε)*", [""]),
        ("(a|ε)(b|ε)", ["", "a", "b", "ab"]),
        ("(a|b)c", ["ac", "bc"]),
    ],
)
def test_finite_languages(source, expected):
    assert list(strings(language(parse_regex(source)))) == expected


def test_star():
    assert levels("a*", 4) == [("",), ("a",), ("aa",), ("aaa",)]


def test_level_of_concatenation():
    assert levels("(a|b)c", 3)[2] == ("ac", "bc")


def test_star_of_alternatives():
    assert levels("(a|b)*", 3)[2] == ("aa", "ab", "ba", "bb")
    assert levels("(aa|b)*", 4)[3] == ("aab", "baa", "bbb")


def test_star_of_star():
    assert levels("a**", 3) == [("",), ("a",), ("aa",)]


def test_strings_in_length_order():
    first = list(islice(strings(language(parse_regex("b*|a"))), 4))
    assert first == ["", "a", "b", "bb"]


def test_preview_of_finite_language():
    assert regex_language("a|b") == "{ a, b }"
    assert regex_language("") == "{ ε }"
    assert regex_language("(a|ε)b") == "{ b, ab }"


def test_preview_is_truncated():
    preview = regex_language("a*")
    assert preview.startswith("{ ε, a, aa, aaa")
    assert preview.endswith(", ... }")
    # lengths 0 to 14 fit in the budget
    assert "a" * 14 + "," in preview
    assert "a" * 15 not in preview


def test_preview_budget():
    expr = parse_regex("a|b")
    assert language_string(expr, limit=3) == "{ a, ... }"
    assert language_string(expr, limit=6) == "{ a, b }"


def test_preview_of_malformed_expression():
    assert regex_language("(a") == (
        "Malformed expression: end of input found when expecting ')'"
    )
    assert regex_language("a)") == "Malformed expression: unexpected ')'"
