"""Placeholder templates and the linear scan shared by pattern-based masks."""

from __future__ import annotations

import string
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from ..core.types import PlaceholderClass

DEFAULT_TRANSLATION: dict[str, PlaceholderClass] = {
    "9": PlaceholderClass.DIGIT,
    "A": PlaceholderClass.LETTER,
    "S": PlaceholderClass.ALNUM,
    "*": PlaceholderClass.ANY,
}


def only_digits(value: str) -> str:
    """Keep the ASCII digits of a value, in order."""
    return "".join(char for char in value if char in string.digits)


@dataclass(frozen=True)
class Token:
    """One template position: a placeholder when `placeholder` is set, else a literal."""

    char: str
    placeholder: Optional[PlaceholderClass] = None

    @property
    def is_literal(self) -> bool:
        return self.placeholder is None

    def accepts(self, char: str) -> bool:
        return self.placeholder is not None and self.placeholder.accepts(char)


@dataclass(frozen=True)
class ScanResult:
    """Outcome of pairing a text with a template."""

    display: str
    raw: str
    filled: int
    capacity: int

    @property
    def complete(self) -> bool:
        return self.filled == self.capacity


@dataclass(frozen=True)
class Template:
    """An immutable, ordered sequence of placeholder and literal tokens."""

    pattern: str
    tokens: tuple[Token, ...]

    @property
    def capacity(self) -> int:
        """Number of placeholders, i.e. the longest raw value accepted."""
        return sum(1 for token in self.tokens if not token.is_literal)

    def scan(self, text: str, formatted: bool = False) -> ScanResult:
        """Pair the characters of `text` with the template in one pass.

        At a placeholder, characters the placeholder rejects are skipped and
        the first accepted one is consumed. Consecutive literals are matched
        as one run: when the whole run appears at the current position it is
        taken as formatting already present and skipped, otherwise nothing
        is consumed. Literals are held back until a later placeholder is
        filled, so the display never ends in literals. Characters left over
        once the template is exhausted are dropped.

        A run whose first character the next placeholder also accepts (``-``
        before ``*``, ``55`` before ``9``) is ambiguous. By default such text
        is raw input and fills the placeholders. With `formatted` set, the
        text is a display value and every matching run is skipped.
        """
        display: list[str] = []
        raw: list[str] = []
        pending: list[str] = []
        pos = 0
        size = len(text)
        tokens = self.tokens
        index = 0

        while index < len(tokens):
            token = tokens[index]
            if token.is_literal:
                end = index
                while end < len(tokens) and tokens[end].is_literal:
                    end += 1
                run = "".join(t.char for t in tokens[index:end])
                if text.startswith(run, pos) and (
                    formatted or end == len(tokens) or not tokens[end].accepts(run[0])
                ):
                    pos += len(run)
                pending.append(run)
                index = end
                continue

            while pos < size and not token.accepts(text[pos]):
                pos += 1
            if pos >= size:
                break

            display.extend(pending)
            pending.clear()
            display.append(text[pos])
            raw.append(text[pos])
            pos += 1
            index += 1

        return ScanResult(
            display="".join(display),
            raw="".join(raw),
            filled=len(raw),
            capacity=self.capacity,
        )


@lru_cache(maxsize=256)
def _parse(
    pattern: str, translation: tuple[tuple[str, PlaceholderClass], ...]
) -> Template:
    table = dict(translation)
    tokens = tuple(Token(char, table.get(char)) for char in pattern)
    return Template(pattern=pattern, tokens=tokens)


def parse_template(
    pattern: str, translation: Optional[Mapping[str, PlaceholderClass]] = None
) -> Template:
    """Parse a pattern into a template.

    `translation` adds to (or overrides) the default placeholder characters:
    ``9`` digit, ``A`` letter, ``S`` letter or digit, ``*`` anything.
    """
    table = {**DEFAULT_TRANSLATION, **(translation or {})}
    return _parse(pattern, tuple(sorted(table.items())))

