# patterns.py
# Wildcard buckets: words sharing all letters but one land in the same bucket.

from collections import defaultdict
from typing import Dict, Iterable, List

from utils import PLACEHOLDER


def pattern_for(word: str, position: int) -> str:
    """Return ``word`` with the letter at ``position`` masked out."""
    return word[:position] + PLACEHOLDER + word[position + 1:]


def word_patterns(word: str) -> List[str]:
    return [pattern_for(word, i) for i in range(len(word))]


def build_pattern_index(words: Iterable[str]) -> Dict[str, List[str]]:
    """
    Group words by pattern, e.g. "C_RE" -> [CARE, CORE, CURE].
    Words are uppercased and visited in sorted order so each bucket is sorted.
    """
    index: Dict[str, List[str]] = defaultdict(list)
    for w in sorted({w.upper() for w in words}):
        for pattern in word_patterns(w):
            index[pattern].append(w)
    return dict(index)
