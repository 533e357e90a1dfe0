"""Commands run by the shell itself rather than as separate programs."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Callable
from typing import Any, TextIO

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1

_HELP_TEXT = """\
MyShell Built-in Commands:

  exit [code]      - Exit the shell with optional exit code
  cd [directory]   - Change directory (cd ~ for home, cd - for previous)
  pwd              - Print current working directory
  echo [-n] [args] - Print arguments (-n: no newline)
  export [VAR=val] - Set environment variables
  unset VAR        - Unset environment variables
  history [n]      - Show command history (last n commands)
  jobs             - Show background jobs
  fg [job]         - Bring background job to foreground
  help             - Show this help message

Features:
  • I/O Redirection: cmd < input.txt > output.txt
  • Pipes: cmd1 | cmd2
  • Background: cmd &
  • Variables: $VAR or ${VAR}
  • Command History: Use 'history' command

"""


def _to_int(text: str) -> int:
    """Read a leading integer the way the shell's numeric arguments are read."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


class BuiltinCommands:
    """The shell's built-in commands.

    ``shell`` must provide ``history`` (list of str), ``variables`` (dict),
    ``background_processes`` (list of ``subprocess.Popen``) and ``shutdown()``.
    """

    def __init__(self, shell: Any, stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
        self.shell = shell
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "exit": self._exit,
            "cd": self._cd,
            "pwd": self._pwd,
            "echo": self._echo,
            "export": self._export,
            "unset": self._unset,
            "history": self._history,
            "help": self._help,
            "jobs": self._jobs,
            "fg": self._fg,
        }

    def is_builtin(self, name: str) -> bool:
        """Return True if name is a built-in command."""
        return name in self._commands

    def execute(self, args: list[str]) -> bool:
        """Run the built-in named by args[0]; return False if there is none."""
        if not args:
            return False
        handler = self._commands.get(args[0])
        if handler is None:
            return False
        handler(args)
        return True

    def available_commands(self) -> list[str]:
        """Names of all built-in commands in sorted order."""
        return sorted(self._commands)

    def _out(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.stdout)

    def _err(self, text: str) -> None:
        print(f"MyShell: {text}", file=self.stderr)

    def _exit(self, args: list[str]) -> None:
        code = 0
        if len(args) > 1:
            try:
                code = _to_int(args[1])
            except ValueError:
                self._err("exit: numeric argument required")
                code = 1
        self._out(f"Exiting MyShell with code {code}. Goodbye!")
        self.shell.shutdown()
        self.stdout.flush()
        raise SystemExit(code)

    def _cd(self, args: list[str]) -> None:
        if len(args) == 1:
            path = os.environ.get("HOME")
            if path is None:
                self._err("cd: HOME not set")
                return
        elif len(args) == 2:
            if args[1] == "~":
                path = os.environ.get("HOME")
                if path is None:
                    self._err("cd: HOME not set")
                    return
            elif args[1] == "-":
                path = os.environ.get("OLDPWD")
                if path is None:
                    self._err("cd: OLDPWD not set")
                    return
            else:
                path = args[1]
        else:
            self._err("cd: too many arguments")
            return

        try:
            old = os.getcwd()
        except OSError:
            self._err("cd: cannot get current directory")
            return

        try:
            os.chdir(path)
        except OSError as exc:
            self._err(f"cd: cannot change directory to '{path}': {exc.strerror}")
            return

        os.environ["OLDPWD"] = old
        try:
            os.environ["PWD"] = os.getcwd()
        except OSError:
            pass

    def _pwd(self, args: list[str]) -> None:
        try:
            self._out(os.getcwd())
        except OSError as exc:
            self._err(f"pwd: {exc.strerror}")

    def _echo(self, args: list[str]) -> None:
        words = args[1:]
        newline = True
        if words and words[0] == "-n":
            newline = False
            words = words[1:]
        self._out(" ".join(words), end="\n" if newline else "")

    def _export(self, args: list[str]) -> None:
        if len(args) < 2:
            for name, value in os.environ.items():
                self._out(f"{name}={value}")
            return

        variables = self.shell.variables
        for assignment in args[1:]:
            name, sep, value = assignment.partition("=")
            if sep:
                try:
                    os.environ[name] = value
                except (ValueError, OSError):
                    pass
                variables[name] = value
            elif assignment in variables:
                try:
                    os.environ[assignment] = variables[assignment]
                except (ValueError, OSError):
                    pass
            else:
                self._err(f"export: {assignment}: not found")

    def _unset(self, args: list[str]) -> None:
        if len(args) < 2:
            self._err("unset: not enough arguments")
            return
        for name in args[1:]:
            os.environ.pop(name, None)
            self.shell.variables.pop(name, None)

    def _history(self, args: list[str]) -> None:
        history = self.shell.history
        start = 0
        if len(args) > 1:
            try:
                count = _to_int(args[1])
            except ValueError:
                self._err("history: invalid number")
                return
            start = max(0, len(history) - count)
        for number, entry in enumerate(history[start:], start=start + 1):
            self._out(f"{number}  {entry}")

    def _help(self, args: list[str]) -> None:
        self._out(_HELP_TEXT, end="")

    def _jobs(self, args: list[str]) -> None:
        jobs = self.shell.background_processes
        if not jobs:
            self._out("No background jobs")
            return
        self._out("Background Jobs:")
        for number, process in enumerate(jobs, start=1):
            state = "Running" if process.poll() is None else "Done"
            self._out(f"[{number}] {process.pid} {state}")

    def _fg(self, args: list[str]) -> None:
        jobs = self.shell.background_processes
        if not jobs:
            self._err("fg: no background jobs")
            return

        if len(args) == 1:
            process = jobs.pop()
        else:
            try:
                index = _to_int(args[1]) - 1
            except ValueError:
                self._err("fg: invalid job number")
                return
            if not 0 <= index < len(jobs):
                self._err("fg: job not found")
                return
            process = jobs.pop(index)

        self._out(f"Bringing process {process.pid} to foreground")
        self.stdout.flush()
        try:
            process.wait()
        except OSError as exc:
            self._err(
                f"fg: failed to wait for process {process.pid}: {exc.strerror}"
            )