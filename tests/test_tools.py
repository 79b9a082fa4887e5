from os import environ, pathsep
from pathlib import Path
from subprocess import run

import sys

ROOT = Path(__file__).parent.parent
TOOL = ROOT / 'tools' / 'index-strings.py'

def run_tool(*args, input = ''):
    env = dict(environ)
    env['PYTHONPATH'] = str(ROOT) + pathsep + env.get('PYTHONPATH', '')
    return run([sys.executable, str(TOOL)] + list(args),
               input = input, capture_output = True, text = True,
               cwd = str(ROOT), env = env)

def test_check_passing():
    res = run_tool('check', str(ROOT / 'tests' / 'data' / 'cases.tsv'))
    assert res.returncode == 0
    lines = res.stdout.splitlines()
    assert len(lines) == 5
    assert lines[0] == "Case 0: Passed!, string = 'banana'"
    assert all('Passed!' in line for line in lines)

def test_check_failing(tmp_path):
    path = tmp_path / 'wrong.tsv'
    path.write_text('aaaa\t3,2,1,0\t0,1,2,2\n')
    res = run_tool('check', str(path))
    assert res.returncode == 1
    assert 'Case 0: Failed' in res.stdout
    assert 'lcp given:    [0, 1, 2, 3]' in res.stdout
    assert 'lcp expected: [0, 1, 2, 2]' in res.stdout

def test_check_malformed(tmp_path):
    path = tmp_path / 'bad.tsv'
    path.write_text('banana\t5,3,1,0,4,2\n')
    res = run_tool('check', str(path))
    assert res.returncode == 2
    assert 'Bad fixture file' in res.stderr
    assert res.stdout == ''

def test_repeats():
    res = run_tool('repeats', input = 'banana\nabcd\n')
    assert res.returncode == 0
    assert res.stdout.splitlines() == [
        "'banana': 'ana' (length 3) at 1, 3",
        "'abcd': no repeats"]

def test_print():
    res = run_tool('print', input = 'banana\n\n')
    assert res.returncode == 0
    out = res.stdout
    assert out.startswith("string is: 'banana'\n")
    assert "string is: ''\n(empty)\n" in out
    for suffix in ['a', 'ana', 'anana', 'banana', 'na', 'nana']:
        assert suffix in out

def test_print_crlf():
    res = run_tool('print', input = 'aa\r\n')
    assert res.returncode == 0
    assert res.stdout.startswith("string is: 'aa'\n")
    assert '\r' not in res.stdout

def test_verbose_rounds():
    res = run_tool('-v', 'print', input = 'banana\n')
    assert res.returncode == 0
    assert '* ROUND k = 1' in res.stderr
    assert '* ROUND k = 2' in res.stderr
    assert 'Sorted 6 suffixes in 2 rounds.' in res.stderr
    assert 'ROUND' not in res.stdout
