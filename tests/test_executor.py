import io
import sys

import pytest

from myshell.executor import CommandExecutor
from myshell.parser import ParsedCommand

PY = sys.executable


@pytest.fixture
def streams():
    return io.StringIO(), io.StringIO()


@pytest.fixture
def executor(streams):
    out, err = streams
    return CommandExecutor([], out, err)


def test_foreground_output_redirection(executor, tmp_path):
    target = tmp_path / "out.txt"
    cmd = ParsedCommand(
        args=[PY, "-c", "print('hi')"], output_file=str(target)
    )
    executor.execute(cmd)
    assert target.read_text() == "hi\n"
    assert executor.background_processes == []


def test_append_output(executor, tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("first\n")
    cmd = ParsedCommand(
        args=[PY, "-c", "print('second')"],
        output_file=str(target),
        append_output=True,
    )
    executor.execute(cmd)
    assert target.read_text() == "first\nsecond\n"


def test_truncate_output(executor, tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("old content that is long\n")
    cmd = ParsedCommand(args=[PY, "-c", "print('new')"], output_file=str(target))
    executor.execute(cmd)
    assert target.read_text() == "new\n"


def test_input_redirection(executor, tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("abc")
    target = tmp_path / "out.txt"
    cmd = ParsedCommand(
        args=[PY, "-c", "import sys; sys.stdout.write(sys.stdin.read()[::-1])"],
        input_file=str(source),
        output_file=str(target),
    )
    executor.execute(cmd)
    assert target.read_text() == "cba"


def test_missing_input_file_reports(executor, streams, tmp_path):
    _, err = streams
    missing = tmp_path / "missing.txt"
    executor.execute(ParsedCommand(args=[PY, "-c", "pass"], input_file=str(missing)))
    assert f"Cannot open input file '{missing}'" in err.getvalue()
    assert err.getvalue().startswith("MyShell Error: ")


def test_command_not_found(executor, streams, tmp_path):
    _, err = streams
    name = str(tmp_path / "no-such-program")
    executor.execute(ParsedCommand(args=[name]))
    assert f"Command not found or failed to execute '{name}'" in err.getvalue()
    assert executor.background_processes == []


def test_empty_args_does_nothing(executor, streams):
    out, err = streams
    executor.execute(ParsedCommand(background=True))
    assert executor.background_processes == []
    assert out.getvalue() == ""
    assert err.getvalue() == ""


def test_pipe(executor, tmp_path):
    target = tmp_path / "out.txt"
    cmd = ParsedCommand(
        args=[PY, "-c", "print('hello')"],
        has_pipe=True,
        pipe_command=[PY, "-c", "import sys; sys.stdout.write(sys.stdin.read().upper())"],
        output_file=str(target),
    )
    executor.execute(cmd)
    assert target.read_text() == "HELLO\n"


def test_invalid_pipe(executor, streams):
    _, err = streams
    executor.execute_with_pipe(
        ParsedCommand(args=["ls"], has_pipe=True, background=True)
    )
    assert executor.background_processes == []
    assert err.getvalue() == "MyShell Error: Invalid pipe command\n"


def test_background_then_cleanup(executor, streams):
    out, _ = streams
    executor.execute(
        ParsedCommand(args=[PY, "-c", "raise SystemExit(3)"], background=True)
    )
    assert len(executor.background_processes) == 1
    process = executor.background_processes[0]
    assert f"[Background] Process {process.pid} started: " in out.getvalue()
    process.wait()
    executor.cleanup_background_processes()
    assert executor.background_processes == []
    assert (
        f"[Background] Process {process.pid} completed (exit status: 3)"
        in out.getvalue()
    )


def test_background_pipe_registers_both(executor, streams):
    out, _ = streams
    cmd = ParsedCommand(
        args=[PY, "-c", "print(1)"],
        has_pipe=True,
        pipe_command=[PY, "-c", "import sys; sys.stdin.read()"],
        background=True,
    )
    executor.execute(cmd)
    first, second = executor.background_processes
    assert f"[Background] Pipe processes {first.pid} | {second.pid} started" in out.getvalue()
    first.wait()
    second.wait()
    executor.cleanup_background_processes()
    assert executor.background_processes == []


def test_cleanup_keeps_running(executor):
    executor.execute(
        ParsedCommand(args=[PY, "-c", "import time; time.sleep(5)"], background=True)
    )
    process = executor.background_processes[0]
    try:
        executor.cleanup_background_processes()
        assert executor.background_processes == [process]
    finally:
        process.kill()
        process.wait()