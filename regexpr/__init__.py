from .expressions import (
    AndExpr,
    EmptyExpr,
    OrExpr,
    RegExpr,
    SingleExpr,
    StarExpr,
    language,
)
from .language import (
    Language,
    concatenate_languages,
    empty_string,
    single_letter,
    star_language,
    strings,
    union,
    union_languages,
    unions,
)
from .parser import parse_regex
from .preview import LANG_LIMIT, language_string, regex_language
from .scanner import CharScanner, RegexError, is_alnum
