# preprocess.py
# Offline job: raw word list -> one dictionary artifact per word length.

import concurrent.futures
import os
import re
import time
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

import requests
from colorama import Fore

from artifact import DictionaryArtifact, write_artifact
from components import summarize_components
from errors import DictionarySourceError
from utils import DEFAULT_BUILD_LENGTHS, log_with_time, vlog

_WORD_RE = re.compile(r"^[A-Z]+$")


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_word_source(source: str, skip_header: bool = False) -> List[str]:
    """
    Read a newline-delimited word list from a path or an http(s) URL.
    Words are uppercased, filtered to A-Z and deduplicated (first occurrence wins).
    ``skip_header`` drops the first line, e.g. "Collins Scrabble Words (2019)...".
    """
    t0 = time.time()
    if _is_url(source):
        log_with_time(f"⟳ Downloading word list from {source}…")
        try:
            resp = requests.get(source, timeout=60)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise DictionarySourceError(f"Could not download word list: {e}") from e
        try:
            text = resp.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DictionarySourceError(f"Word list at {source} is not valid UTF-8: {e}") from e
    else:
        try:
            with open(source, "r", encoding="utf-8") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise DictionarySourceError(f"Word list {source} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise DictionarySourceError(f"Could not read word list {source}: {e}") from e

    lines = text.splitlines()
    if skip_header:
        lines = lines[1:]
    words = [ln.strip().upper() for ln in lines]
    words = list(dict.fromkeys(w for w in words if _WORD_RE.match(w)))
    if not words:
        raise DictionarySourceError(f"No usable words in {source}")

    vlog(f"Word list loaded and filtered ({len(words)} words)", t0)
    return words


def group_by_length(words: Iterable[str]) -> Dict[int, List[str]]:
    by_length: Dict[int, List[str]] = defaultdict(list)
    for w in words:
        by_length[len(w)].append(w)
    return dict(by_length)


def build_length(length: int, words: List[str], data_dir) -> dict:
    """Build and publish the artifact for one length. Returns build stats."""
    t0 = time.time()
    artifact = DictionaryArtifact.build(length, words)
    path = write_artifact(artifact, data_dir)
    stats = summarize_components(artifact.groups)
    stats.update(
        length=length,
        words=len(artifact.words),
        path=path,
        size=os.path.getsize(path),
        seconds=time.time() - t0,
    )
    return stats


def _report(stats: dict):
    log_with_time(
        f"✅ {stats['length']}-letter: {stats['words']} words, {stats['components']} groups "
        f"(largest {stats['largest']}, {stats['singletons']} singletons) "
        f"→ {stats['path']} ({stats['size'] / 1024 / 1024:.2f} MB, {stats['seconds']:.2f}s)",
        color=Fore.GREEN,
    )


def build_dictionaries(
    source: str,
    data_dir,
    lengths: Iterable[int] = DEFAULT_BUILD_LENGTHS,
    workers: Optional[int] = None,
    skip_header: bool = False,
) -> Tuple[Dict[int, dict], Dict[int, str]]:
    """
    Build artifacts for ``lengths``. Each length is independent: a failure
    aborts that length only and leaves any previously published file untouched.
    Returns ``(built, failed)`` keyed by length.
    """
    words = read_word_source(source, skip_header=skip_header)
    by_length = group_by_length(words)
    log_with_time(f"Found {len(words)} words in {len(by_length)} lengths")

    jobs = []
    for length in lengths:
        wordlist = by_length.get(length)
        if not wordlist:
            log_with_time(f"Skipping {length}-letter words: none in source", color=Fore.YELLOW)
            continue
        jobs.append((length, wordlist))

    built: Dict[int, dict] = {}
    failed: Dict[int, str] = {}

    if workers and workers > 1 and len(jobs) > 1:
        with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(build_length, length, wordlist, data_dir): length
                for length, wordlist in jobs
            }
            for fut in concurrent.futures.as_completed(futures):
                length = futures[fut]
                try:
                    built[length] = fut.result()
                except (OSError, ValueError) as e:
                    failed[length] = str(e)
                    log_with_time(f"❌ {length}-letter build failed: {e}", color=Fore.RED)
                else:
                    _report(built[length])
    else:
        for length, wordlist in jobs:
            log_with_time(f"Processing {length}-letter words ({len(wordlist)} words)…", color=Fore.CYAN)
            try:
                built[length] = build_length(length, wordlist, data_dir)
            except (OSError, ValueError) as e:
                failed[length] = str(e)
                log_with_time(f"❌ {length}-letter build failed: {e}", color=Fore.RED)
            else:
                _report(built[length])

    return built, failed
