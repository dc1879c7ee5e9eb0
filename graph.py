# graph.py
# Letter-substitution adjacency for one word length.

import time
from typing import Dict, Iterable, List, Optional, Sequence

from patterns import build_pattern_index, word_patterns
from utils import vlog


def build_graph(words: Iterable[str]) -> Dict[str, List[str]]:
    """
    Build the adjacency mapping word -> sorted neighbor list.

    Two words that share a pattern are equal everywhere except the masked
    position, so bucket co-membership is exactly the one-letter relation.
    Cost is proportional to the bucket sizes instead of all word pairs.
    """
    t0 = time.time()
    wordlist = sorted({w.upper() for w in words})
    lengths = {len(w) for w in wordlist}
    if len(lengths) > 1:
        raise ValueError(f"Words of mixed lengths {sorted(lengths)} cannot share a graph")

    index = build_pattern_index(wordlist)
    vlog(f"Created {len(index)} patterns for {len(wordlist)} words", t0)

    graph: Dict[str, List[str]] = {}
    for w in wordlist:
        neighbors = set()
        for pattern in word_patterns(w):
            neighbors.update(index[pattern])
        neighbors.discard(w)
        graph[w] = sorted(neighbors)

    edges = sum(len(n) for n in graph.values()) // 2
    vlog(f"Graph built with {len(graph)} nodes and {edges} edges", t0)
    return graph


def differ_by_one(a: str, b: str) -> bool:
    """True if ``a`` and ``b`` have equal length and differ in exactly one letter."""
    if len(a) != len(b):
        return False
    diff = 0
    for x, y in zip(a.upper(), b.upper()):
        if x != y:
            diff += 1
            if diff > 1:
                return False
    return diff == 1


def validate_ladder(words: Sequence[str], wordset: Optional[set] = None) -> bool:
    """Check that ``words`` is a ladder, optionally restricted to ``wordset``."""
    if not words:
        return False
    if wordset is not None and any(w.upper() not in wordset for w in words):
        return False
    return all(differ_by_one(a, b) for a, b in zip(words, words[1:]))
