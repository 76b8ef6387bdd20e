#!/usr/bin/env python3
"""
End-to-end tests: in-process through the API and out-of-process through the CLI.
"""

import os
import subprocess
import sys

import pytest

from tkx import MAX_PROGRAM_OPS, ProgramTooLargeError, SourceReadError, load_file, load_string, run_file, run_string
from tkx.cli import main

ROOT = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..')
PROGRAMS = os.path.join(ROOT, 'programs')


def execute_cli(args, input_data=b""):
    env = dict(os.environ)
    src = os.path.join(ROOT, 'src')
    env['PYTHONPATH'] = src + os.pathsep + env.get('PYTHONPATH', '')
    return subprocess.run(
        [sys.executable, '-m', 'tkx', *args],
        input=input_data,
        capture_output=True,
        env=env,
        cwd=ROOT,
    )


def test_multiply_loop_prints_at_sign():
    result = run_string("++++++++[>++++++++<-]>.")
    assert result.output == b"@"


def test_echo():
    assert run_string(",.", b"A").output == b"A"


def test_comment_only_program():
    result = run_string("nothing to see here")
    assert result.output == b""
    assert result.steps == 0


def test_max_ops_boundary():
    result = run_string("+" * MAX_PROGRAM_OPS)
    assert result.tape[0] == MAX_PROGRAM_OPS % 256
    with pytest.raises(ProgramTooLargeError):
        load_string("+" * (MAX_PROGRAM_OPS + 1))


def test_hello_file():
    result = run_file(os.path.join(PROGRAMS, 'hello.bf'))
    assert result.output == b"Hello World!\n"


def test_load_file_checks_brackets(tmp_path):
    path = tmp_path / "ok.bf"
    path.write_text("+[-]")
    assert len(load_file(path)) == 4


def test_run_file_missing(tmp_path):
    with pytest.raises(SourceReadError):
        run_file(tmp_path / "missing.bf")


def test_cli_usage_without_argument(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_cli_hello():
    proc = execute_cli([os.path.join(PROGRAMS, 'hello.bf')])
    assert proc.returncode == 0
    assert proc.stdout == b"Hello World!\n"


def test_cli_echo():
    proc = execute_cli([os.path.join(PROGRAMS, 'echo3.bf')], input_data=b"abc")
    assert proc.returncode == 0
    assert proc.stdout == b"abc"


def test_cli_input_exhausted():
    proc = execute_cli([os.path.join(PROGRAMS, 'echo3.bf')], input_data=b"ab")
    assert proc.returncode == 1
    assert proc.stdout == b"ab"
    assert b"input exhausted" in proc.stderr


def test_cli_missing_file(tmp_path):
    proc = execute_cli([str(tmp_path / "missing.bf")])
    assert proc.returncode == 1
    assert b"unable to read" in proc.stderr


def test_cli_unmatched_bracket(tmp_path):
    path = tmp_path / "bad.bf"
    path.write_text("+++\n]\n")
    proc = execute_cli([str(path)])
    assert proc.returncode == 1
    assert proc.stdout == b""
    assert b"Unmatched ']'" in proc.stderr
    assert b"line 2, column 1" in proc.stderr


def test_cli_verbose_logs_to_stderr():
    proc = execute_cli(['-v', os.path.join(PROGRAMS, 'hello.bf')])
    assert proc.returncode == 0
    assert proc.stdout == b"Hello World!\n"
    assert b"loaded" in proc.stderr
