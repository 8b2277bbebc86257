"""
Naming utilities for safe code generation.

Converts PocketBase collection and field names into identifiers for the
generated code.
"""

from itertools import groupby

ASCII_DIGITS = "0123456789"


def is_word_char(char: str) -> bool:
    """Return True for Unicode letters and ASCII digits."""
    return char.isalpha() or char in ASCII_DIGITS


def _capitalize_word(word: str) -> str:
    """Upper-case the first letter of a word, lower-case the rest.

    A leading run of digits is kept as is, so ``2fa`` becomes ``2Fa``.
    """
    for index, char in enumerate(word):
        if char.isalpha():
            return word[:index] + char.upper() + word[index + 1 :].lower()
    return word


def to_pascal_case(name: str) -> str:
    """
    Convert a collection name to a PascalCase identifier.

    Names made only of letters and digits keep their casing apart from the
    first character. Anything else is split on non-word characters, each word
    is capitalized and the separators are dropped.

    Args:
        name: Raw collection or field name

    Returns:
        PascalCase identifier (empty if the name has no letters or digits)
    """
    if name and all(is_word_char(char) for char in name):
        return name[0].upper() + name[1:]

    return "".join(
        _capitalize_word("".join(chars))
        for is_word, chars in groupby(name, key=is_word_char)
        if is_word
    )
