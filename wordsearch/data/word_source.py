"""Word source interfaces and local adapters."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Protocol, Sequence

from ..core.exceptions import WordSourceError
from ..core.models import WordEntry
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)

# Built-in word list used when no hosted dictionary is reachable.
STATIC_WORDS: Sequence[str] = (
    "CAT", "DOG", "HAT", "PEN", "SUN", "TWO",
    "BOOK", "GAME", "TREE", "FISH", "MOON", "STAR",
    "RIVER", "HOUSE", "CLOUD", "STONE", "WIND", "PATH",
)


@dataclass(frozen=True)
class WordRequest:
    """Query sent to a word source."""

    min_length: int
    max_length: int
    desired_count: int
    exclude_words: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def limit(self) -> int:
        return self.desired_count * 2

    def accepts(self, word: str) -> bool:
        return (
            self.min_length <= len(word) <= self.max_length
            and word not in self.exclude_words
        )


class WordSource(Protocol):
    """Protocol implemented by all word providers."""

    def fetch(self, request: WordRequest) -> List[WordEntry]:
        ...


def select_entries(
    words: Iterable[str],
    request: WordRequest,
    rng: Optional[random.Random] = None,
) -> List[WordEntry]:
    """Normalize, filter, deduplicate and shuffle ``words`` for ``request``."""

    seen: set[str] = set()
    entries: List[WordEntry] = []
    for raw in words:
        word = clean_word(raw)
        if not word or word in seen or not request.accepts(word):
            continue
        seen.add(word)
        entries.append(WordEntry.from_word(word))
    (rng or random.Random()).shuffle(entries)
    return entries[: request.limit]


class StaticWordSource:
    """Serves words from a fixed in-memory list."""

    def __init__(self, words: Sequence[str] = STATIC_WORDS, seed: Optional[int] = None) -> None:
        self.words = list(words)
        self.rng = random.Random(seed)

    def fetch(self, request: WordRequest) -> List[WordEntry]:
        entries = select_entries(self.words, request, self.rng)
        LOGGER.info("Static source produced %s words", len(entries))
        return entries


class UserWordListSource(StaticWordSource):
    """Returns a user-supplied list of words, one entry per item."""

    def __init__(self, raw_words: Sequence[str], seed: Optional[int] = None) -> None:
        words = [item.strip() for item in raw_words if item and item.strip()]
        super().__init__(words, seed=seed)

    def fetch(self, request: WordRequest) -> List[WordEntry]:
        return select_entries(self.words, request, self.rng)


class FallbackWordSource:
    """Attempt the primary source, then cascaded fallbacks, deduplicating results."""

    def __init__(self, primary: WordSource, fallbacks: Sequence[WordSource]) -> None:
        self.primary = primary
        self.fallbacks = list(fallbacks)

    def fetch(self, request: WordRequest) -> List[WordEntry]:
        collected: List[WordEntry] = []
        seen: set[str] = set()

        def extend(entries: Iterable[WordEntry]) -> None:
            for entry in entries:
                if entry.word in seen or not request.accepts(entry.word):
                    continue
                collected.append(entry)
                seen.add(entry.word)
                if len(collected) >= request.limit:
                    break

        try:
            extend(self.primary.fetch(request))
        except WordSourceError as exc:
            LOGGER.warning("Primary word source failed: %s", exc)

        for source in self.fallbacks:
            if len(collected) >= request.desired_count:
                break
            try:
                extend(source.fetch(request))
            except WordSourceError as exc:
                LOGGER.warning("Fallback word source %s failed: %s", source, exc)

        return collected
