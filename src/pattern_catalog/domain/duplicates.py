"""Near-duplicate content detection between catalog entries."""

import re
from difflib import SequenceMatcher
from itertools import combinations

from pattern_catalog.domain.errors import DuplicateContentWarning
from pattern_catalog.domain.store import EntryStore

_NON_WORD = re.compile(r"[^a-z0-9]+")


class DuplicateContentDetector:
    """
    Flags pairs of same-category entries whose title+summary read the same.

    Two versions of one document (e.g. a second "Factory" write-up) are
    reported for a human to pick the canonical one; nothing is merged.
    """

    def __init__(self, threshold: float = 0.85) -> None:
        if not 0.0 < threshold <= 1.0:
            raise ValueError(f"similarity threshold must be in (0, 1], got {threshold}")
        self.threshold = threshold

    @staticmethod
    def normalize(text: str) -> str:
        return _NON_WORD.sub(" ", text.lower()).strip()

    def similarity(self, left: str, right: str) -> float:
        a, b = self.normalize(left), self.normalize(right)
        if not a or not b:
            return 0.0
        return SequenceMatcher(None, a, b).ratio()

    def detect(self, store: EntryStore) -> list[DuplicateContentWarning]:
        entries = list(store.all())
        found: list[DuplicateContentWarning] = []
        for first, second in combinations(entries, 2):
            if first.category is not second.category:
                continue
            ratio = self.similarity(
                f"{first.title} {first.summary}", f"{second.title} {second.summary}")
            if ratio >= self.threshold:
                found.append(DuplicateContentWarning(first.id, second.id, ratio))
        return found
