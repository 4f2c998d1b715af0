# Sample grammars in the `lhs -> alternatives` format of Grammar.from_str.
# Every symbol is a single character; an empty alternative is ε.

GRAMMAR_ANBN = """
    S -> aSb |
"""

GRAMMAR_DYCK = """
    S -> (S)S |
"""

GRAMMAR_RIGHT_LINEAR = """
    S -> aS | a
"""

GRAMMAR_AMBIGUOUS_CONCAT = """
    S -> SS | a
"""

GRAMMAR_AMBIGUOUS_PLUS_MINUS = """
    A -> A+A | A-A | a
"""

GRAMMAR_ARITHMETIC = """
    E -> E+T | T
    T -> T*F | F
    F -> (E) | x | y
"""

GRAMMAR_PALINDROMES = """
    P -> aPa | bPb | a | b |
"""

GRAMMAR_FINITE = """
    S -> a | b
"""

GRAMMAR_UNREACHABLE = """
    S -> A
    A -> a
    B -> b
"""

GRAMMAR_UNREALIZABLE = """
    S -> aS | A | c
    A -> bA
"""

GRAMMAR_NULLABLE = """
    S -> AB
    A -> | a
    B ->
"""

GRAMMAR_CYCLIC = """
    S -> S | a
"""

GRAMMAR_CYCLIC_UNREACHABLE = """
    S -> a
    C -> C | c
"""

GRAMMAR_NULLABLE_CYCLE = """
    S -> ASB | c
    A -> | a
    B ->
"""
