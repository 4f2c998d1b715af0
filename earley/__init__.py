from .earley import (
    EXPANSION_LIMIT,
    EarleyItem,
    EarleySet,
    ParseResult,
    parse,
    parse_sentence,
    predicted_item,
)
