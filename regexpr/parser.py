from .expressions import AndExpr, EmptyExpr, OrExpr, RegExpr, SingleExpr, StarExpr
from .scanner import CharScanner, is_alnum


def parse_regex(source: str) -> RegExpr:
    """Parse the whole of source as a regular expression.

    Alphanumeric characters stand for themselves, ε for the empty string,
    and the meta-characters |, *, ( and ) have their usual meaning.

    :raises RegexError: if source is malformed
    """
    scanner = CharScanner(source)
    e = _expr(scanner)
    if scanner.get() != "":
        scanner.fail(f"unexpected '{scanner.get()}'")
    return e


# e = t ('|' t)*
def _expr(scanner: CharScanner) -> RegExpr:
    e = _term(scanner)
    while scanner.get() == "|":
        scanner.advance()
        e = OrExpr(e, _term(scanner))
    return e


# t = f*
def _term(scanner: CharScanner) -> RegExpr:
    t: RegExpr = EmptyExpr()
    while (c := scanner.get()) == "(" or is_alnum(c) or c == "ε":
        t = AndExpr(t, _factor(scanner))
    return t


# f = (symbol | '(' e ')' | 'ε') '*'*
def _factor(scanner: CharScanner) -> RegExpr:
    c = scanner.get()
    f: RegExpr
    if is_alnum(c):
        f = SingleExpr(c)
        scanner.advance()
    elif c == "(":
        scanner.advance()
        f = _expr(scanner)
        scanner.match(")")
    elif c == "ε":
        f = EmptyExpr()
        scanner.advance()
    else:
        scanner.fail("letter or '(' expected")
    while scanner.get() == "*":
        f = StarExpr(f)
        scanner.advance()
    return f
