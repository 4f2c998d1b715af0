from more_itertools import peekable


class RegexError(SyntaxError):
    """A malformed regular expression"""

    def __init__(self, message: str, source: str, offset: int):
        self.message = message
        self.source = source
        self.position = offset
        super().__init__(message)

    def __str__(self):
        return self.message

    def pretty(self) -> str:
        return f"{self.message}\n > {self.source}\n > {' ' * self.position}^"


def is_alnum(c: str) -> bool:
    return len(c) == 1 and (
        "a" <= c <= "z" or "A" <= c <= "Z" or "0" <= c <= "9"
    )


class CharScanner:
    """Scanner for the recursive descent parser of regular expressions"""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self._chars = peekable(source)

    def get(self) -> str:
        """The current character, or '' at the end of the input"""
        return self._chars.peek("")

    def advance(self) -> None:
        if self._chars:
            next(self._chars)
            self.pos += 1

    def fail(self, message: str):
        raise RegexError(message, self.source, self.pos)

    def match(self, expected: str) -> None:
        c = self.get()
        if c != expected:
            found = f"'{c}'" if c else "end of input"
            self.fail(f"{found} found when expecting '{expected}'")
        self.advance()
