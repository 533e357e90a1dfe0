"""The interactive shell: read a line, parse it, run it, repeat."""

from __future__ import annotations

import os
import signal
import subprocess
import sys
from typing import TextIO

from myshell.builtins import BuiltinCommands
from myshell.executor import CommandExecutor
from myshell.parser import CommandParser, is_empty

MAX_HISTORY = 1000
DEFAULT_PROMPT = "myshell> "

_WELCOME = """\
╔══════════════════════════════════════════════════════════════╗
║                    Welcome to MyShell v1.0                  ║
║                                                              ║
║  Features:                                                   ║
║  • Built-in commands (cd, pwd, echo, export, etc.)          ║
║  • I/O redirection (<, >, >>)                               ║
║  • Pipes (|)                                                 ║
║  • Background processes (&)                                 ║
║  • Variable expansion ($VAR)                                ║
║  • Command history                                          ║
║                                                              ║
║  Type 'help' for available commands, 'exit' to quit.        ║
╚══════════════════════════════════════════════════════════════╝

"""


class Shell:
    """Holds the shell's state and drives the read-parse-run loop."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

        self.history: list[str] = []
        self.variables: dict[str, str] = {
            "PS1": DEFAULT_PROMPT,
            "USER": os.environ.get("USER") or "unknown",
        }
        self.background_processes: list[subprocess.Popen] = []
        self.running = True

        self.parser = CommandParser(self.variables)
        self.executor = CommandExecutor(
            self.background_processes, self.stdout, self.stderr
        )
        self.builtins = BuiltinCommands(self, self.stdout, self.stderr)

    def _print_prompt(self) -> None:
        self.stdout.write(self.variables.get("PS1", DEFAULT_PROMPT))
        self.stdout.flush()

    def add_to_history(self, command: str) -> None:
        """Record a command unless it is empty or repeats the last one."""
        if not command or (self.history and self.history[-1] == command):
            return
        self.history.append(command)
        if len(self.history) > MAX_HISTORY:
            del self.history[0]

    def cleanup_background_processes(self) -> None:
        """Report and forget background processes that have finished."""
        still_running = []
        for process in self.background_processes:
            if process.poll() is None:
                still_running.append(process)
            else:
                print(
                    f"[Background] Process {process.pid} completed", file=self.stdout
                )
        self.background_processes[:] = still_running

    def run_line(self, command_line: str) -> None:
        """Record, parse and run one command line."""
        if is_empty(command_line):
            return
        self.add_to_history(command_line)
        command = self.parser.parse(command_line)
        if not command.args:
            return
        if self.builtins.is_builtin(command.args[0]):
            self.builtins.execute(command.args)
        else:
            self.executor.execute(command)

    def run(self) -> None:
        """Read and run command lines until end of input or shutdown."""
        self.stdout.write(_WELCOME)
        while self.running:
            self.cleanup_background_processes()
            self._print_prompt()
            line = self.stdin.readline()
            if not line:
                self.stdout.write("\nGoodbye!\n")
                break
            self.run_line(line.removesuffix("\n"))
        self.cleanup_background_processes()

    def shutdown(self) -> None:
        """Stop the loop after the current command."""
        self.running = False


def main(argv: list[str] | None = None) -> int:
    """Start an interactive shell on the standard streams."""
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        Shell().run()
    except Exception as exc:  # noqa: BLE001 - report anything fatal and fail
        print(f"MyShell Fatal Error: {exc}", file=sys.stderr)
        return 1
    finally:
        signal.signal(signal.SIGINT, previous)
    return 0


if __name__ == "__main__":
    sys.exit(main())