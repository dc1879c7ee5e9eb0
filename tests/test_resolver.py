import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import itertools

import pytest
import resolver as resolver_mod
from resolver import Resolver, FailureKind, LadderResult, shortest_path
from dictionary_store import DictionaryStore
from errors import StoreUnavailable
from graph import validate_ladder
from conftest import FOUR_LETTER, THREE_LETTER, brute_distance


@pytest.fixture
def resolver(data_dir):
    return Resolver(DictionaryStore(data_dir))


def test_adjacent_words(resolver):
    result = resolver.resolve('CORE', 'CORK')
    assert result.ok
    assert result.path == ['CORE', 'CORK']
    assert result.length == 2


def test_multi_step_shortest(resolver):
    result = resolver.resolve('CORE', 'FOOT')
    assert result.path == ['CORE', 'FORE', 'FORT', 'FOOT']
    assert result.length == brute_distance(FOUR_LETTER, 'CORE', 'FOOT')


def test_identity(resolver):
    result = resolver.resolve('CORE', 'CORE')
    assert result.ok
    assert result.path == ['CORE']
    assert resolver.searches == 0


def test_case_and_whitespace_normalized(resolver):
    assert resolver.resolve(' core', 'Cork ').path == ['CORE', 'CORK']


def test_word_not_in_dictionary(resolver):
    result = resolver.resolve('CORE', 'ABCD')
    assert not result.ok
    assert result.failure is FailureKind.WORD_NOT_FOUND
    assert 'ABCD' in result.message
    assert 'CORE' not in result.message


def test_disconnected_skips_search(resolver, monkeypatch):
    def no_search(*args):
        raise AssertionError('search should not run for disconnected words')
    monkeypatch.setattr(resolver_mod, 'shortest_path', no_search)
    result = resolver.resolve('QUIZ', 'JAZZ')
    assert result.failure is FailureKind.NOT_CONNECTED
    assert result.failure.category == 'not-connected'
    assert resolver.searches == 0


def test_length_mismatch(resolver):
    result = resolver.resolve('CAT', 'DOGS')
    assert result.failure is FailureKind.LENGTH_MISMATCH
    assert result.failure.category == 'bad-input'


@pytest.mark.parametrize('start,end', [('A', 'B'), ('ABCDEFGHIJKLMNOP', 'ABCDEFGHIJKLMNOQ'), ('', '')])
def test_length_out_of_range(resolver, start, end):
    assert resolver.resolve(start, end).failure is FailureKind.LENGTH_OUT_OF_RANGE


def test_missing_dictionary(resolver):
    result = resolver.resolve('APPLE', 'AMPLE')
    assert result.failure is FailureKind.NO_DICTIONARY
    assert result.failure.category == 'bad-input'


def test_store_failure_is_unavailable(data_dir, monkeypatch):
    store = DictionaryStore(data_dir)

    def broken(length):
        raise StoreUnavailable('disk gone')
    monkeypatch.setattr(store, 'load', broken)
    result = Resolver(store).resolve('CORE', 'CORK')
    assert result.failure is FailureKind.UNAVAILABLE
    assert result.failure.category == 'unavailable'


def test_custom_bounds(data_dir):
    r = Resolver(DictionaryStore(data_dir), min_length=4, max_length=4)
    assert r.resolve('CAT', 'COT').failure is FailureKind.LENGTH_OUT_OF_RANGE
    assert r.resolve('CORE', 'CORK').ok


@pytest.mark.parametrize('words', [FOUR_LETTER, THREE_LETTER])
def test_paths_minimal_and_valid(resolver, words):
    wordset = set(words)
    for a, b in itertools.permutations(words, 2):
        result = resolver.resolve(a, b)
        expected = brute_distance(words, a, b)
        if expected is None:
            assert result.failure is FailureKind.NOT_CONNECTED
            continue
        assert result.ok
        assert result.path[0] == a and result.path[-1] == b
        assert result.length == expected
        assert validate_ladder(result.path, wordset)


def test_results_deterministic(data_dir):
    first = Resolver(DictionaryStore(data_dir)).resolve('BARE', 'WORD').path
    second = Resolver(DictionaryStore(data_dir)).resolve('BARE', 'WORD').path
    assert first == second


def test_shortest_path_direct():
    graph = {'A': ['B', 'C'], 'B': ['A', 'D'], 'C': ['A', 'D'], 'D': ['B', 'C'], 'E': []}
    assert shortest_path(graph, 'A', 'D') == ['A', 'B', 'D']
    assert shortest_path(graph, 'A', 'E') is None
    assert shortest_path(graph, 'A', 'Z') is None
    assert shortest_path(graph, 'A', 'A') == ['A']


def test_result_responses():
    ok = LadderResult.success(['CORE', 'CORK'])
    assert ok.to_response() == {'success': True, 'path': ['CORE', 'CORK'], 'length': 2}
    bad = LadderResult.fail(FailureKind.NO_PATH, 'No valid word ladder path found')
    assert bad.to_response() == {
        'success': False,
        'error': 'No valid word ladder path found',
        'reason': 'no-path-found',
    }
