import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

import utils
from solver import run_solver


RAW = "apple\nfjord\nglyph\ngucks\nnymph\nvibex\nwaltz\nfjords\nFJORD\n"
EXPECTED = ['fjord gucks nymph vibex waltz']


@pytest.fixture(autouse=True)
def reset_verbose():
    yield
    utils.VERBOSE = False


@pytest.fixture
def files(tmp_path):
    raw = tmp_path / 'words_alpha.txt'
    raw.write_text(RAW)
    return raw, tmp_path / 'words_beta.txt', tmp_path / 'words_out.txt'


@pytest.mark.parametrize("extra", [[], ['--threads', '1'], ['--threads', '4', '--progress'], ['--buffered', '--verbose']])
def test_run_solver_writes_solutions(files, extra):
    raw, cache, out = files
    code = run_solver(['--dict', str(raw), '--cache', str(cache), '--output', str(out)] + extra)
    assert code == 0
    assert out.read_text().splitlines() == EXPECTED
    assert cache.read_text().splitlines()[1:] == ['fjord', 'glyph', 'gucks', 'nymph', 'vibex', 'waltz']


def test_run_solver_no_cache(files):
    raw, cache, out = files
    assert run_solver(['--dict', str(raw), '--cache', str(cache), '--no-cache', '--output', str(out)]) == 0
    assert not cache.exists()
    assert out.read_text().splitlines() == EXPECTED


def test_run_solver_reports_summary(files, capsys):
    raw, cache, out = files
    run_solver(['--dict', str(raw), '--cache', str(cache), '--output', str(out)])
    printed = capsys.readouterr().out
    assert 'Building adjacency list' in printed
    assert 'Found 1 solution(s)' in printed


def test_run_solver_missing_dictionary(tmp_path, capsys):
    code = run_solver(['--dict', str(tmp_path / 'nope.txt'), '--no-cache', '--output', str(tmp_path / 'out.txt')])
    assert code == 1
    assert 'Could not find dictionary file' in capsys.readouterr().out


def test_run_solver_unwritable_output(files, tmp_path, capsys):
    raw, cache, _ = files
    code = run_solver(['--dict', str(raw), '--cache', str(cache), '--output', str(tmp_path)])
    assert code == 1
    assert 'Could not record solutions' in capsys.readouterr().out


def test_run_solver_bad_thread_count(files):
    raw, cache, out = files
    assert run_solver(['--dict', str(raw), '--cache', str(cache), '--output', str(out), '--threads', '0']) == 1


def test_empty_dictionary(tmp_path):
    raw = tmp_path / 'empty.txt'
    raw.write_text('')
    out = tmp_path / 'out.txt'
    assert run_solver(['--dict', str(raw), '--no-cache', '--output', str(out)]) == 0
    assert out.read_text() == ''


def test_run_solver_with_new_dictionary_ignores_stale_cache(tmp_path):
    cache = tmp_path / 'c.txt'
    out = tmp_path / 'out.txt'
    first = tmp_path / 'a.txt'
    first.write_text("fjord\nglyph\n")
    second = tmp_path / 'b.txt'
    second.write_text("fjord\ngucks\nnymph\nvibex\nwaltz\n")

    assert run_solver(['--dict', str(first), '--cache', str(cache), '--output', str(out)]) == 0
    assert out.read_text() == ''
    assert run_solver(['--dict', str(second), '--cache', str(cache), '--output', str(out)]) == 0
    assert out.read_text().splitlines() == EXPECTED


def test_run_solver_cache_write_failure_still_solves(files, tmp_path):
    raw, _, out = files
    cache = tmp_path / 'nodir' / 'c.txt'
    assert run_solver(['--dict', str(raw), '--cache', str(cache), '--output', str(out)]) == 0
    assert out.read_text().splitlines() == EXPECTED
