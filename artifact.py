# artifact.py
# Persisted per-length bundle: word list, adjacency mapping and component partition.

import json
import os
import tempfile
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple

from components import component_index, partition_components
from errors import ArtifactFormatError
from graph import build_graph
from utils import is_ladder_word, vlog

ARTIFACT_VERSION = 1
REQUIRED_FIELDS = ("version", "length", "words", "graph", "groups")


def artifact_path(data_dir, length: int) -> str:
    return os.path.join(data_dir, f"words-{length}.json")


@dataclass(frozen=True)
class DictionaryArtifact:
    """
    Immutable dictionary for one word length.

    Fields:
      length:  word length shared by every word
      words:   sorted word tuple
      graph:   word -> sorted tuple of neighbors
      groups:  component id -> tuple of member words
    ``component_of`` is derived from ``groups`` and is never persisted.
    """

    length: int
    words: Tuple[str, ...]
    graph: Dict[str, Tuple[str, ...]]
    groups: Dict[int, Tuple[str, ...]]
    component_of: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "component_of", component_index(self.groups))

    # ---------- Construction ----------
    @classmethod
    def build(cls, length: int, words: Iterable[str]) -> "DictionaryArtifact":
        t0 = time.time()
        wordlist = sorted({w.upper() for w in words})
        bad = [w for w in wordlist if len(w) != length]
        if bad:
            raise ValueError(f"{len(bad)} words are not {length} letters long (e.g. {bad[0]})")
        graph = build_graph(wordlist)
        groups = partition_components(graph)
        vlog(f"Built {length}-letter artifact: {len(wordlist)} words, {len(groups)} groups", t0)
        return cls(
            length=length,
            words=tuple(wordlist),
            graph={w: tuple(n) for w, n in graph.items()},
            groups={gid: tuple(m) for gid, m in groups.items()},
        )

    # ---------- Queries ----------
    def contains(self, word: str) -> bool:
        return word in self.graph

    def neighbors(self, word: str) -> Tuple[str, ...]:
        return self.graph.get(word, ())

    def same_component(self, a: str, b: str) -> bool:
        ca = self.component_of.get(a)
        return ca is not None and ca == self.component_of.get(b)

    # ---------- Serialization ----------
    def to_json(self) -> dict:
        return {
            "version": ARTIFACT_VERSION,
            "length": self.length,
            "words": list(self.words),
            "graph": {w: list(n) for w, n in self.graph.items()},
            # JSON object keys are strings
            "groups": {str(gid): list(m) for gid, m in self.groups.items()},
        }

    @classmethod
    def from_json(cls, data) -> "DictionaryArtifact":
        """Validate a decoded artifact and build the immutable value. Fails fast."""
        if not isinstance(data, dict):
            raise ArtifactFormatError(f"Artifact must be an object, got {type(data).__name__}")
        missing = [k for k in REQUIRED_FIELDS if k not in data]
        if missing:
            raise ArtifactFormatError(f"Artifact is missing fields: {', '.join(missing)}")
        if data["version"] != ARTIFACT_VERSION:
            raise ArtifactFormatError(
                f"Unsupported artifact version {data['version']!r} (expected {ARTIFACT_VERSION})"
            )

        length = data["length"]
        if not isinstance(length, int) or isinstance(length, bool) or length < 1:
            raise ArtifactFormatError(f"Invalid artifact length {length!r}")

        words = _string_list(data["words"], "words")
        wordset = set(words)
        if len(wordset) != len(words):
            raise ArtifactFormatError("Duplicate entries in words")
        for w in words:
            if len(w) != length or not is_ladder_word(w):
                raise ArtifactFormatError(f"Word {w!r} is not a {length}-letter uppercase word")

        raw_graph = data["graph"]
        if not isinstance(raw_graph, dict):
            raise ArtifactFormatError("graph must be an object")
        if set(raw_graph) != wordset:
            raise ArtifactFormatError("graph keys do not match the word list")
        graph = {}
        for w, nbs in raw_graph.items():
            nbs = _string_list(nbs, f"graph[{w}]")
            for nb in nbs:
                if nb not in wordset or nb == w:
                    raise ArtifactFormatError(f"graph[{w}] has invalid neighbor {nb!r}")
            graph[w] = tuple(nbs)
        for w, nbs in graph.items():
            for nb in nbs:
                if w not in graph[nb]:
                    raise ArtifactFormatError(f"graph is not symmetric: {w} -> {nb}")

        raw_groups = data["groups"]
        if not isinstance(raw_groups, dict):
            raise ArtifactFormatError("groups must be an object")
        groups = {}
        seen = set()
        for key, members in raw_groups.items():
            try:
                gid = int(key)
            except (TypeError, ValueError):
                raise ArtifactFormatError(f"Invalid group id {key!r}") from None
            members = _string_list(members, f"groups[{key}]")
            for m in members:
                if m not in wordset:
                    raise ArtifactFormatError(f"groups[{key}] has unknown word {m!r}")
                if m in seen:
                    raise ArtifactFormatError(f"Word {m!r} appears in more than one group")
                seen.add(m)
            groups[gid] = tuple(members)
        if seen != wordset:
            raise ArtifactFormatError(f"{len(wordset - seen)} words are not assigned to a group")

        artifact = cls(length=length, words=tuple(sorted(words)), graph=graph, groups=groups)
        for w, nbs in graph.items():
            for nb in nbs:
                if not artifact.same_component(w, nb):
                    raise ArtifactFormatError(f"Adjacent words {w} and {nb} are in different groups")
        return artifact


def _string_list(value, name):
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ArtifactFormatError(f"{name} must be a list of strings")
    return value


def read_artifact(path) -> DictionaryArtifact:
    """Read and validate an artifact. OSError propagates to the caller."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except ValueError as e:
            raise ArtifactFormatError(f"{path} is not valid JSON: {e}") from e
    return DictionaryArtifact.from_json(data)


def write_artifact(artifact: DictionaryArtifact, data_dir) -> str:
    """
    Write ``artifact`` under ``data_dir``. The file is written to a temp name in
    the same directory and renamed, so readers never see a partial artifact.
    """
    os.makedirs(data_dir, exist_ok=True)
    target = artifact_path(data_dir, artifact.length)
    fd, tmp = tempfile.mkstemp(prefix=f".words-{artifact.length}-", suffix=".tmp", dir=data_dir)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(artifact.to_json(), f)
        os.replace(tmp, target)
    except BaseException:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise
    return target
