import logging

from .expressions import RegExpr, language
from .language import strings
from .parser import parse_regex
from .scanner import RegexError

logger = logging.getLogger(__name__)

# approximate limit on the length of the language string
LANG_LIMIT = 150


def language_string(expr: RegExpr, limit: int = LANG_LIMIT) -> str:
    """The set of strings denoted by expr, truncated to approximately
    limit characters"""
    remaining = limit
    shown: list[str] = []
    for s in strings(language(expr)):
        remaining -= len(s) + 2
        if remaining < 0:
            shown.append("...")
            break
        shown.append(s)
    if shown and shown[0] == "":
        shown[0] = "ε"
    return "{ " + ", ".join(shown) + " }"


def regex_language(source: str, limit: int = LANG_LIMIT) -> str:
    """The language preview of source, or a message if it is malformed"""
    try:
        expr = parse_regex(source)
    except RegexError as e:
        logger.debug("malformed expression %r: %s", source, e)
        return f"Malformed expression: {e}"
    return language_string(expr, limit)
