import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import io
import json
import time

import utils


def test_normalize_word():
    assert utils.normalize_word('  core\n') == 'CORE'
    assert utils.is_ladder_word('CORE')
    assert not utils.is_ladder_word('core')
    assert not utils.is_ladder_word('CO-E')
    assert not utils.is_ladder_word('')


def test_log_with_time_and_vlog(monkeypatch):
    utils.start_time = 0
    out = io.StringIO()
    monkeypatch.setattr('sys.stdout', out)
    utils.log_with_time('Test message', color='')
    utils.vlog('hidden')
    monkeypatch.setattr(utils, 'VERBOSE', True)
    utils.vlog('shown', t0=time.time())
    text = out.getvalue()
    assert 'Test message' in text
    assert 'hidden' not in text
    assert 'shown (took' in text


def _read_log(tmp_path):
    log_file = tmp_path / 'logs' / f"ladder_{time.strftime('%Y-%m-%d')}.json"
    with open(log_file) as f:
        return json.load(f)


def test_log_ladder_keeps_shortest(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    query = {'startWord': 'CORE', 'endWord': 'FOOT'}
    long_path = {'success': True, 'path': ['CORE', 'CORK', 'FORK', 'FORT', 'FOOT'], 'length': 5}
    short_path = {'success': True, 'path': ['CORE', 'FORE', 'FORT', 'FOOT'], 'length': 4}

    utils.log_ladder_to_file(query, long_path)
    assert _read_log(tmp_path)['queries']['CORE->FOOT']['length'] == 5
    utils.log_ladder_to_file(query, short_path)
    assert _read_log(tmp_path)['queries']['CORE->FOOT']['length'] == 4
    utils.log_ladder_to_file(query, long_path)
    assert _read_log(tmp_path)['queries']['CORE->FOOT']['length'] == 4

    failure = {'success': False, 'error': 'No valid word ladder path found', 'reason': 'no-path-found'}
    utils.log_ladder_to_file(query, failure)
    assert _read_log(tmp_path)['queries']['CORE->FOOT']['success'] is True
