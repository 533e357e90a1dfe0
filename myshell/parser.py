"""Command-line parsing: variable expansion, tokenizing and operator handling."""

from __future__ import annotations

import os
import re
from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass, field

_WHITESPACE = " \t\n\v\f\r"
_SPLIT_RE = re.compile(r"[ \t\n\v\f\r]+")


@dataclass
class ParsedCommand:
    """Structured form of one command line."""

    args: list[str] = field(default_factory=list)
    input_file: str = ""
    output_file: str = ""
    append_output: bool = False
    background: bool = False
    has_pipe: bool = False
    pipe_command: list[str] = field(default_factory=list)


def tokenize(text: str) -> list[str]:
    """Split text into whitespace-separated tokens."""
    return [token for token in _SPLIT_RE.split(text) if token]


def is_empty(text: str) -> bool:
    """Return True if text is empty or holds only whitespace."""
    return not text.strip(_WHITESPACE)


def _is_name_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


class CommandParser:
    """Turns raw command lines into ParsedCommand objects."""

    def __init__(self, variables: Mapping[str, str]) -> None:
        self.variables = variables

    def _lookup(self, name: str) -> str:
        value = os.environ.get(name)
        if value is not None:
            return value
        return self.variables.get(name, "")

    def expand_variables(self, text: str) -> str:
        """Replace $NAME with its value from the environment or shell variables.

        Unknown names expand to the empty string; substituted values are not
        expanded again.
        """
        result = text
        pos = 0
        while (pos := result.find("$", pos)) != -1:
            start = pos + 1
            end = start
            while end < len(result) and _is_name_char(result[end]):
                end += 1
            if end > start:
                value = self._lookup(result[start:end])
                result = result[:pos] + value + result[end:]
                pos += len(value)
            else:
                pos += 1
        return result

    def parse(self, command_line: str) -> ParsedCommand:
        """Parse a command line into its arguments, redirections, pipe and flags."""
        command = ParsedCommand()
        pending = deque(tokenize(self.expand_variables(command_line)))

        while pending:
            token = pending.popleft()
            if token == "<" and pending:
                command.input_file = pending.popleft()
            elif token == ">" and pending:
                command.output_file = pending.popleft()
                command.append_output = False
            elif token == ">>" and pending:
                command.output_file = pending.popleft()
                command.append_output = True
            elif token == "|" and pending:
                command.has_pipe = True
                for rest in pending:
                    if rest == "&":
                        command.background = True
                    else:
                        command.pipe_command.append(rest)
                break
            elif token == "&":
                command.background = True
            else:
                command.args.append(token)

        return command