"""
Pytest configuration and shared fixtures for lsh-shell tests.

This module provides reusable test fixtures for:
- Captured text streams
- Process construction for builtin tests
- A throwaway working directory
"""

import io
import shutil

import pytest


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def capture_output():
    """
    Provides StringIO objects for capturing command output.

    Returns:
        tuple: (stdout, stderr) StringIO objects

    Example:
        def test_command_output(capture_output):
            stdout, stderr = capture_output
            process = Process('echo', ['hi'], stdout=stdout, stderr=stderr)
            # ... run command ...
            assert stdout.getvalue() == "hi\\n"
    """
    return io.StringIO(), io.StringIO()


@pytest.fixture
def make_process(capture_output):
    """
    Provides a factory building a Process for a builtin from a command line.

    Returns:
        callable: make_process("cd /tmp") -> Process with captured streams

    Example:
        def test_pwd(make_process):
            process = make_process("pwd")
            process.execute()
    """
    from lsh_shell.builtins import get_builtin
    from lsh_shell.process import Process
    from lsh_shell.tokenizer import split_line

    stdout, stderr = capture_output

    def factory(line: str) -> Process:
        argv = split_line(line)
        return Process(
            command=argv[0],
            args=argv[1:],
            stdout=stdout,
            stderr=stderr,
            executor=get_builtin(argv[0]),
        )

    return factory


@pytest.fixture
def in_tmp_dir(tmp_path, monkeypatch):
    """
    Runs the test inside tmp_path; the original directory comes back afterwards.

    Returns:
        pathlib.Path: the temporary working directory
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def executor(capture_output):
    """
    Provides an Executor whose builtin output goes to capture_output.

    External programs still write to the real descriptors; use capfd for them.
    """
    from lsh_shell.executor import Executor

    stdout, stderr = capture_output
    return Executor(stdout=stdout, stderr=stderr)


# ============================================================================
# Helper Functions
# ============================================================================

def require_program(name: str) -> str:
    """Return the PATH location of ``name`` or skip the test"""
    path = shutil.which(name)
    if path is None:
        pytest.skip(f"{name} not available")
    return path


pytest.require_program = require_program
