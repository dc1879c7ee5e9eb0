# dictionary_store.py
# Lazily loaded, process-lifetime cache of dictionary artifacts keyed by word length.

import os
import threading
import time
from typing import Dict, Iterable, List, Optional

from colorama import Fore

from artifact import DictionaryArtifact, artifact_path, read_artifact
from errors import ArtifactFormatError, StoreUnavailable
from utils import log_with_time, vlog


class DictionaryStore:
    """
    Loads ``words-<length>.json`` from ``data_dir`` on first use and keeps it.

    There is no eviction: the length domain is small and artifacts are
    immutable. A cached read takes no lock; the first load for a length is
    serialized so concurrent callers share one read.
    """

    def __init__(self, data_dir):
        self.data_dir = data_dir
        self._cache: Dict[int, DictionaryArtifact] = {}
        self._locks: Dict[int, threading.Lock] = {}
        self._locks_guard = threading.Lock()
        self._stats_lock = threading.Lock()
        self.hits = 0
        self.misses = 0
        self.loads = 0

    def _lock_for(self, length: int) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(length)
            if lock is None:
                lock = self._locks[length] = threading.Lock()
            return lock

    def _count(self, name: str):
        with self._stats_lock:
            setattr(self, name, getattr(self, name) + 1)

    def load(self, length: int) -> Optional[DictionaryArtifact]:
        """
        Return the artifact for ``length``, or None if none was built.
        Raises StoreUnavailable if the file exists but cannot be read and
        ArtifactFormatError if its contents are malformed.
        """
        artifact = self._cache.get(length)
        if artifact is not None:
            self._count("hits")
            return artifact

        with self._lock_for(length):
            artifact = self._cache.get(length)
            if artifact is not None:
                self._count("hits")
                return artifact
            self._count("misses")

            path = artifact_path(self.data_dir, length)
            if not os.path.exists(path):
                vlog(f"No dictionary for {length}-letter words at {path}")
                return None

            t0 = time.time()
            try:
                artifact = read_artifact(path)
            except FileNotFoundError:
                return None
            except OSError as e:
                log_with_time(f"Could not read {path}: {e}", color=Fore.RED)
                raise StoreUnavailable(f"Dictionary for {length}-letter words is unreadable: {e}") from e

            if artifact.length != length:
                log_with_time(f"{path} holds {artifact.length}-letter words", color=Fore.RED)
                raise ArtifactFormatError(f"{path} does not hold {length}-letter words")

            self._count("loads")
            self._cache[length] = artifact
            vlog(f"Loaded {len(artifact.words)} {length}-letter words from {path}", t0)
            return artifact

    def preload(self, lengths: Iterable[int]) -> List[int]:
        """Load every available length up front; return the lengths found."""
        return [n for n in lengths if self.load(n) is not None]

    def cached_lengths(self) -> List[int]:
        return sorted(self._cache)

    def print_cache_summary(self):
        print(f"[CACHE SUMMARY] Cached lengths: {self.cached_lengths()}")
        print(f"[CACHE SUMMARY] Artifact loads: {self.loads}")
        print(f"[CACHE SUMMARY] Cache hits: {self.hits}")
        print(f"[CACHE SUMMARY] Cache misses: {self.misses}")
