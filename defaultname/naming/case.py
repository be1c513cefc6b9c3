"""Case transforms applied to override name templates."""

from __future__ import annotations

from enum import StrEnum
import re


class CaseTransform(StrEnum):
    NONE = "none"
    CAMEL = "camelCase"
    PASCAL = "PascalCase"
    SNAKE = "snake_case"


_SPLIT_PATTERNS = (
    re.compile(r"([a-z0-9])([A-Z])"),
    re.compile(r"([A-Z])([A-Z][a-z])"),
)
_SEPARATOR_PATTERN = re.compile(r"[^A-Za-z0-9]+")


def split_words(value: str) -> list[str]:
    """Split on lower-to-upper and acronym-to-word boundaries and on non-alphanumeric runs.

    >>> split_words("fooBar-baz_HTMLParser2")
    ['foo', 'Bar', 'baz', 'HTML', 'Parser2']
    """
    spaced = value
    for pattern in _SPLIT_PATTERNS:
        spaced = pattern.sub(r"\1 \2", spaced)
    return [word for word in _SEPARATOR_PATTERN.split(spaced) if word]


def camel_case(value: str) -> str:
    words = split_words(value)
    return "".join(word.lower() if index == 0 else _pascal_word(word, index) for index, word in enumerate(words))


def pascal_case(value: str) -> str:
    return "".join(_pascal_word(word, index) for index, word in enumerate(split_words(value)))


def snake_case(value: str) -> str:
    return "_".join(word.lower() for word in split_words(value))


def apply_case_transform(value: str, transform: CaseTransform | str | None) -> str:
    """Apply `transform` to `value`; `none`, `None` and unknown transforms leave it unchanged."""
    match transform:
        case CaseTransform.CAMEL:
            return camel_case(value)
        case CaseTransform.PASCAL:
            return pascal_case(value)
        case CaseTransform.SNAKE:
            return snake_case(value)
        case _:
            return value


def _pascal_word(word: str, index: int) -> str:
    first, rest = word[0], word[1:].lower()
    # Words after the first that start with a digit keep a `_` so `v1 2` stays `v1_2`.
    if index > 0 and first.isdigit():
        return f"_{first}{rest}"
    return f"{first.upper()}{rest}"
