"""Name normalisation utilities used to derive file and type identifiers."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["FeatureName", "normalize", "to_pascal_case", "to_snake_case"]


_UPPERCASE = re.compile(r"[A-Z]")
_WORD_SEPARATORS = re.compile(r"[_\s]+")
_WHITESPACE = re.compile(r"\s")


@dataclass(frozen=True, slots=True)
class FeatureName:
    """Canonical casing forms of a user supplied feature name.

    Attributes
    ----------
    raw:
        The feature name exactly as it was provided.
    snake_case:
        Lowercase, underscore separated form used for directories and file
        names.
    pascal_case:
        Capitalised, separator free form used for generated type identifiers.
    """

    raw: str
    snake_case: str
    pascal_case: str

    @property
    def upper_snake_case(self) -> str:
        """Uppercase variant of :attr:`snake_case` used in config headers."""

        return self.snake_case.upper()

    def __str__(self) -> str:
        return self.snake_case


def to_snake_case(value: str) -> str:
    """Return ``value`` converted to ``snake_case``.

    An underscore is inserted before every uppercase letter except the first
    character and letters that already follow whitespace or an underscore, each
    whitespace character is then replaced by an underscore. Existing separators
    are kept as typed, so ``"a  b"`` becomes ``"a__b"``.
    """

    def _split_word(match: re.Match[str]) -> str:
        start = match.start()
        letter = match.group(0).lower()
        previous = value[start - 1] if start else ""
        if not previous or previous == "_" or previous.isspace():
            return letter
        return f"_{letter}"

    text = _UPPERCASE.sub(_split_word, value)
    return _WHITESPACE.sub("_", text).lower()


def to_pascal_case(value: str) -> str:
    """Return ``value`` converted to ``PascalCase``."""

    if not value:
        return ""

    words = _WORD_SEPARATORS.split(value)
    return "".join(word.capitalize() for word in words if word)


def normalize(raw: str) -> FeatureName:
    """Build a :class:`FeatureName` from ``raw``.

    No validation is performed: characters that are illegal in paths are
    passed through and empty input produces empty forms. The PascalCase form is
    derived from the snake_case form so ``"OrderHistory"`` and
    ``"order history"`` share the same identifiers.
    """

    snake = to_snake_case(raw)
    return FeatureName(raw=raw, snake_case=snake, pascal_case=to_pascal_case(snake))
