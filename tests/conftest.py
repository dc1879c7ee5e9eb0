import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from collections import deque

import pytest

import utils
from artifact import DictionaryArtifact, write_artifact


# CORE..PORT form the main ladder; QUIZ and JAZZ are isolated.
FOUR_LETTER = [
    'CORE', 'CORK', 'FORK', 'FORT', 'FOOT', 'PORT', 'FORE',
    'CARE', 'BARE', 'WORD', 'WORK', 'QUIZ', 'JAZZ',
]
THREE_LETTER = ['CAT', 'COT', 'DOG', 'DOT', 'COG', 'EMU']


def brute_neighbors(words):
    """Pairwise one-letter neighbors, no pattern index."""
    out = {w: set() for w in words}
    for a in words:
        for b in words:
            if a != b and sum(x != y for x, y in zip(a, b)) == 1:
                out[a].add(b)
    return out


def brute_distance(words, start, end):
    """Number of words on a shortest ladder, or None."""
    nbrs = brute_neighbors(words)
    seen = {start: 1}
    queue = deque([start])
    while queue:
        w = queue.popleft()
        if w == end:
            return seen[w]
        for nb in nbrs[w]:
            if nb not in seen:
                seen[nb] = seen[w] + 1
                queue.append(nb)
    return None


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(utils, 'VERBOSE', False)


@pytest.fixture
def four_letter_artifact():
    return DictionaryArtifact.build(4, FOUR_LETTER)


@pytest.fixture
def data_dir(tmp_path):
    d = tmp_path / 'data'
    write_artifact(DictionaryArtifact.build(4, FOUR_LETTER), str(d))
    write_artifact(DictionaryArtifact.build(3, THREE_LETTER), str(d))
    return str(d)
