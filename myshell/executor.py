"""Running external commands: simple, piped and in the background."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import BinaryIO, TextIO

from myshell.parser import ParsedCommand
from myshell.redirection import RedirectionError, open_input, open_output


class CommandExecutor:
    """Starts external programs for parsed command lines.

    Background processes are appended to the shared ``background_processes``
    list as ``subprocess.Popen`` objects.
    """

    def __init__(
        self,
        background_processes: list[subprocess.Popen] | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.background_processes = (
            background_processes if background_processes is not None else []
        )
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    def _error(self, message: str) -> None:
        print(f"MyShell Error: {message}", file=self.stderr)

    def _open(self, opener, *params) -> tuple[bool, BinaryIO | None]:
        try:
            return True, opener(*params)
        except RedirectionError as exc:
            self._error(exc.strerror)
            return False, None

    def _spawn(self, args: list[str], stdin, stdout) -> subprocess.Popen | None:
        try:
            return subprocess.Popen(args, stdin=stdin, stdout=stdout)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            self._error(
                f"Command not found or failed to execute '{args[0]}' ({reason})"
            )
            return None

    def execute(self, command: ParsedCommand) -> None:
        """Run a parsed command in the foreground or the background."""
        if not command.args:
            return
        if command.has_pipe:
            self.execute_with_pipe(command)
            return

        ok, infile = self._open(open_input, command.input_file)
        if not ok:
            return
        try:
            ok, outfile = self._open(
                open_output, command.output_file, command.append_output
            )
            if not ok:
                return
            try:
                process = self._spawn(command.args, infile, outfile)
            finally:
                if outfile is not None:
                    outfile.close()
        finally:
            if infile is not None:
                infile.close()

        if process is None:
            return
        if command.background:
            self.background_processes.append(process)
            started = "".join(f"{arg} " for arg in command.args)
            print(
                f"[Background] Process {process.pid} started: {started}",
                file=self.stdout,
            )
        else:
            process.wait()

    def execute_with_pipe(self, command: ParsedCommand) -> None:
        """Run two commands with the first one's output feeding the second."""
        if not command.args or not command.pipe_command:
            self._error("Invalid pipe command")
            return

        try:
            read_fd, write_fd = os.pipe()
        except OSError as exc:
            self._error(f"Failed to create pipe: {exc.strerror}")
            return

        writer = reader = None
        try:
            ok, infile = self._open(open_input, command.input_file)
            if ok:
                try:
                    writer = self._spawn(command.args, infile, write_fd)
                finally:
                    if infile is not None:
                        infile.close()

            ok, outfile = self._open(
                open_output, command.output_file, command.append_output
            )
            if ok:
                try:
                    reader = self._spawn(command.pipe_command, read_fd, outfile)
                finally:
                    if outfile is not None:
                        outfile.close()
        finally:
            os.close(read_fd)
            os.close(write_fd)

        started = [process for process in (writer, reader) if process is not None]
        if command.background:
            self.background_processes.extend(started)
            if writer is not None and reader is not None:
                print(
                    f"[Background] Pipe processes {writer.pid} | {reader.pid} started",
                    file=self.stdout,
                )
        else:
            for process in started:
                process.wait()

    def cleanup_background_processes(self) -> None:
        """Report and forget background processes that have finished."""
        still_running = []
        for process in self.background_processes:
            status = process.poll()
            if status is None:
                still_running.append(process)
                continue
            message = f"[Background] Process {process.pid} completed"
            if status >= 0:
                message += f" (exit status: {status})"
            print(message, file=self.stdout)
        self.background_processes[:] = still_running