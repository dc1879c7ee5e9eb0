# resolver.py
# Shortest ladder between two dictionary words.

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence

from colorama import Fore

from errors import StoreUnavailable
from utils import MAX_WORD_LENGTH, MIN_WORD_LENGTH, log_with_time, normalize_word, vlog


class FailureKind(Enum):
    MISSING_WORDS = "missing-words"
    LENGTH_MISMATCH = "length-mismatch"
    LENGTH_OUT_OF_RANGE = "length-out-of-range"
    NO_DICTIONARY = "no-dictionary"
    WORD_NOT_FOUND = "word-not-found"
    NOT_CONNECTED = "not-connected"
    NO_PATH = "no-path-found"
    UNAVAILABLE = "unavailable"

    @property
    def category(self) -> str:
        if self in _BAD_INPUT:
            return "bad-input"
        return self.value


_BAD_INPUT = {
    FailureKind.MISSING_WORDS,
    FailureKind.LENGTH_MISMATCH,
    FailureKind.LENGTH_OUT_OF_RANGE,
    FailureKind.NO_DICTIONARY,
    FailureKind.WORD_NOT_FOUND,
}


@dataclass(frozen=True)
class LadderResult:
    path: List[str] = field(default_factory=list)
    failure: Optional[FailureKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def length(self) -> int:
        return len(self.path)

    @classmethod
    def success(cls, path: Sequence[str]) -> "LadderResult":
        return cls(path=list(path))

    @classmethod
    def fail(cls, kind: FailureKind, message: str) -> "LadderResult":
        return cls(failure=kind, message=message)

    def to_response(self) -> dict:
        if self.ok:
            return {"success": True, "path": list(self.path), "length": self.length}
        return {"success": False, "error": self.message, "reason": self.failure.category}


def shortest_path(graph: Mapping[str, Sequence[str]], start: str, end: str) -> Optional[List[str]]:
    """
    Unweighted BFS from ``start``. Stops when ``end`` is dequeued and rebuilds
    the path from the predecessor map. Ties go to the first neighbor in
    ``graph`` order.
    """
    if start not in graph or end not in graph:
        return None
    prev: Dict[str, Optional[str]] = {start: None}
    queue = deque([start])
    while queue:
        word = queue.popleft()
        if word == end:
            path = []
            node: Optional[str] = word
            while node is not None:
                path.append(node)
                node = prev[node]
            path.reverse()
            return path
        for nb in graph[word]:
            if nb not in prev:
                prev[nb] = word
                queue.append(nb)
    return None


class Resolver:
    """Answers shortest-ladder queries against an injected DictionaryStore."""

    def __init__(self, store, min_length: int = MIN_WORD_LENGTH, max_length: int = MAX_WORD_LENGTH):
        self.store = store
        self.min_length = min_length
        self.max_length = max_length
        self.searches = 0

    def resolve(self, start: str, end: str) -> LadderResult:
        start = normalize_word(start)
        end = normalize_word(end)

        if len(start) != len(end):
            return self._expected(
                FailureKind.LENGTH_MISMATCH,
                f"Start and end words must have the same length ({len(start)} vs {len(end)})",
            )

        length = len(start)
        if not self.min_length <= length <= self.max_length:
            return self._expected(
                FailureKind.LENGTH_OUT_OF_RANGE,
                f"Word length must be between {self.min_length} and {self.max_length} letters",
            )

        try:
            artifact = self.store.load(length)
        except StoreUnavailable as e:
            log_with_time(f"Dictionary store unavailable: {e}", color=Fore.RED)
            return LadderResult.fail(FailureKind.UNAVAILABLE, f"{e}. Try again later.")
        if artifact is None:
            return self._expected(
                FailureKind.NO_DICTIONARY,
                f"Dictionary for {length}-letter words not found. Please run preprocessing first.",
            )

        missing = [w for w in dict.fromkeys((start, end)) if not artifact.contains(w)]
        if missing:
            return self._expected(
                FailureKind.WORD_NOT_FOUND,
                f"Not in dictionary: {', '.join(missing)}",
            )

        if start == end:
            return LadderResult.success([start])

        if not artifact.same_component(start, end):
            return self._expected(
                FailureKind.NOT_CONNECTED,
                f"{start} and {end} are not connected. These words cannot be transformed "
                "into each other through valid word ladder steps.",
            )

        self.searches += 1
        path = shortest_path(artifact.graph, start, end)
        if path is None:
            return self._expected(FailureKind.NO_PATH, "No valid word ladder path found")

        vlog(f"{start} -> {end}: {len(path)} words")
        return LadderResult.success(path)

    def _expected(self, kind: FailureKind, message: str) -> LadderResult:
        vlog(f"Query rejected ({kind.value}): {message}")
        return LadderResult.fail(kind, message)
