"""Read-only phrase lookup used when the translation API is not configured."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Pattern

from ..logging_config import preview
from ..schemas.translation import Dialect
from . import phrases

logger = logging.getLogger(__name__)


def _freeze(entries: Iterable[tuple[str, str]], *, lower: bool) -> Mapping[str, str]:
    """Build an immutable mapping where the first occurrence of a key wins."""

    table: dict[str, str] = {}
    for key, value in entries:
        normalized = key.strip().lower() if lower else key.strip()
        if not normalized:
            continue
        if normalized in table:
            logger.debug("Ignoring duplicate phrase key %r", normalized)
            continue
        table[normalized] = value
    return MappingProxyType(table)


def _longest_first(table: Mapping[str, str]) -> tuple[str, ...]:
    # sorted() is stable, so equal-length keys keep insertion order
    return tuple(sorted(table, key=len, reverse=True))


@dataclass(frozen=True)
class _EnglishIndex:
    table: Mapping[str, str]
    patterns: tuple[tuple[Pattern[str], str], ...]

    @classmethod
    def build(cls, entries: Iterable[tuple[str, str]]) -> "_EnglishIndex":
        table = _freeze(entries, lower=True)
        patterns = tuple(
            (re.compile(rf"\b{re.escape(key)}\b", re.IGNORECASE), key)
            for key in _longest_first(table)
        )
        return cls(table=table, patterns=patterns)


@dataclass(frozen=True)
class _ChineseIndex:
    table: Mapping[str, str]
    keys: tuple[str, ...]

    @classmethod
    def build(cls, entries: Iterable[tuple[str, str]]) -> "_ChineseIndex":
        table = _freeze(entries, lower=False)
        return cls(table=table, keys=_longest_first(table))


class PhraseTable:
    """Bidirectional phrase lookup, one pair of tables per dialect.

    English keys are matched as whole words so that short entries such as
    "hi" never fire inside longer words like "this". Chinese has no word
    delimiters, so Chinese keys are matched by containment instead. In both
    directions the longest key wins.
    """

    def __init__(
        self,
        english_to_dialect: Mapping[Dialect, Iterable[tuple[str, str]]],
        dialect_to_english: Mapping[Dialect, Iterable[tuple[str, str]]],
    ) -> None:
        self._english = MappingProxyType(
            {d: _EnglishIndex.build(e) for d, e in english_to_dialect.items()}
        )
        self._chinese = MappingProxyType(
            {d: _ChineseIndex.build(e) for d, e in dialect_to_english.items()}
        )

    def english_entries(self, dialect: Dialect) -> Mapping[str, str]:
        index = self._english.get(dialect)
        return index.table if index else MappingProxyType({})

    def chinese_entries(self, dialect: Dialect) -> Mapping[str, str]:
        index = self._chinese.get(dialect)
        return index.table if index else MappingProxyType({})

    def match_english(self, text: str, dialect: Dialect) -> Optional[str]:
        """Translate English ``text`` into ``dialect`` or return ``None``."""

        index = self._english.get(dialect)
        if index is None:
            return None
        normalized = text.strip().lower()
        exact = index.table.get(normalized)
        if exact is not None:
            return exact
        for pattern, key in index.patterns:
            if pattern.search(normalized):
                logger.info("Matched phrase %r in %r", key, preview(normalized))
                return index.table[key]
        return None

    def match_chinese(self, text: str, dialect: Dialect) -> Optional[str]:
        """Translate ``dialect`` text into English or return ``None``."""

        index = self._chinese.get(dialect)
        if index is None:
            return None
        exact = index.table.get(text.strip())
        if exact is not None:
            return exact
        for key in index.keys:
            if key in text:
                logger.info("Matched Chinese phrase %r in %r", key, preview(text))
                return index.table[key]
        return None


def default_phrase_table() -> PhraseTable:
    """Return the built-in phrase table."""

    return PhraseTable(
        english_to_dialect={
            Dialect.MANDARIN: phrases.ENGLISH_TO_MANDARIN,
            Dialect.CANTONESE: phrases.ENGLISH_TO_CANTONESE,
        },
        dialect_to_english={
            Dialect.MANDARIN: phrases.MANDARIN_TO_ENGLISH,
            Dialect.CANTONESE: phrases.CANTONESE_TO_ENGLISH,
        },
    )


__all__ = ["PhraseTable", "default_phrase_table"]
