"""Identifier casing for generated type names.

Model names in API docs documents are usually written in ``snake_case`` or
``kebab-case``; interface names are emitted in upper camel case. The
conversion is purely textual and locale-independent. Letters and digits
from any script are kept; only Unicode non-alphanumerics act as delimiters.
"""

from __future__ import annotations

import re

_DELIMITER = re.compile(r"[\W_]+")


def _is_boundary(prev: str, cur: str, nxt: str) -> bool:
    # "fooBar" -> foo|Bar, "v2Response" -> v2|Response
    if cur.isupper() and (prev.islower() or prev.isdigit()):
        return True
    # "HTTPServer" -> HTTP|Server
    return prev.isupper() and cur.isupper() and nxt.islower()


def _split_chunk(chunk: str) -> list[str]:
    words: list[str] = []
    start = 0
    for i in range(1, len(chunk)):
        nxt = chunk[i + 1] if i + 1 < len(chunk) else ""
        if _is_boundary(chunk[i - 1], chunk[i], nxt):
            words.append(chunk[start:i])
            start = i
    words.append(chunk[start:])
    return words


def split_words(name: str) -> list[str]:
    """Split *name* into words on delimiters and case boundaries.

    Examples:
        >>> split_words("foo_bar-baz")
        ['foo', 'bar', 'baz']
        >>> split_words("HTTPServerError")
        ['HTTP', 'Server', 'Error']
    """
    words: list[str] = []
    for chunk in _DELIMITER.split(name):
        if chunk:
            words.extend(_split_chunk(chunk))
    return words


def to_pascal_case(name: str) -> str:
    """Convert *name* to upper camel case.

    The first letter of each word is capitalised, the rest lowercased, and
    delimiters are removed. A name made only of delimiters yields ``""``.

    Examples:
        >>> to_pascal_case("foo_bar")
        'FooBar'
        >>> to_pascal_case("café_menu")
        'CaféMenu'
        >>> to_pascal_case("userID")
        'UserId'
    """
    return "".join(word[0].upper() + word[1:].lower() for word in split_words(name))
