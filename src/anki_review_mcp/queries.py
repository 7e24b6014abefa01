"""Search shorthand used in resource URIs and tools."""

DECK_PREFIX = "deck"
IS_PREFIX = "is"


def format_query(keyword: str) -> str:
    """Turn a search keyword into an Anki search query.

    ``deckcurrent`` becomes ``deck:current`` and ``isdue`` becomes
    ``is:due``. Anything else is passed through as a raw Anki query.

    Example:
        >>> format_query("deckMath")
        'deck:Math'
        >>> format_query("tag:x")
        'tag:x'
    """
    if keyword.startswith(DECK_PREFIX):
        return f"deck:{keyword[len(DECK_PREFIX):]}"
    if keyword.startswith(IS_PREFIX):
        return f"is:{keyword[len(IS_PREFIX):]}"
    return keyword
