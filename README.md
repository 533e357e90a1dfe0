# myshell

A small interactive command-line shell for POSIX systems. It runs external
programs and has a handful of built-in commands. It supports I/O redirection,
a single pipe, background jobs and `$NAME` variable expansion.

## Installation

```
pip install .
```

## Usage

Start the shell:

```
myshell
```

The shell prints a welcome banner and then the prompt `myshell> `. The prompt
is the value of the `PS1` shell variable. Type `exit` or press Ctrl+D to leave.
While the shell runs it ignores Ctrl+C (SIGINT). Programs it starts still
receive the signal.

### Built-in commands

| Command            | Description                                                    |
|--------------------|----------------------------------------------------------------|
| `exit [code]`      | Exit the shell with an optional exit code (non-numeric gives 1) |
| `cd [directory]`   | Change directory (`cd` or `cd ~` for home, `cd -` for previous) and set `OLDPWD` and `PWD` |
| `pwd`              | Print the current working directory                            |
| `echo [-n] [args]` | Print arguments separated by spaces (`-n`: no trailing newline) |
| `export [VAR=val]` | Set variables in the environment and the shell. `export NAME` exports an existing shell variable. With no arguments, lists the environment |
| `unset VAR...`     | Remove variables from the environment and the shell            |
| `history [n]`      | Show the numbered command history, or only the last `n` entries |
| `jobs`             | List background jobs as `Running` or `Done`                    |
| `fg [job]`         | Wait for a background job (the most recent one by default)     |
| `help`             | Show the built-in help                                         |

### Features

- **Redirection:** use `sort < input.txt > output.txt`, or `>>` to append.
  Output files are created with mode 0644 if they do not exist.
- **Pipes:** `ls -l | grep txt`. Each line can hold one pipe. Everything after
  the `|` is the second command.
- **Background jobs:** `sleep 10 &`. Before each prompt the shell reports the
  jobs that have finished.
- **Variables:** `$NAME` is replaced by its value in the environment. If the
  environment does not have it, the shell variable of that name is used. An
  unknown name expands to an empty string. Names are ASCII letters, digits and
  `_`.
- **History:** keeps up to the last 1000 lines. A line that repeats the one
  before it is not recorded.

## Limitations

- Words are split on whitespace only. There is no quoting or escaping.
  Operators (`<`, `>`, `>>`, `|`, `&`) must be separate words.
- `${NAME}` is not expanded. The built-in help mentions it anyway. Only the
  `$NAME` form works.
- There is no job suspension (Ctrl+Z) and no `bg`. `fg` only waits for a
  background job to finish.
- There are no scripts, no control flow, no globbing and no command
  substitution.

## Using it from Python

`myshell.shell.Shell` takes optional `stdin`, `stdout` and `stderr` streams.
`run()` runs the read–parse–run loop. `run_line()` runs one line:

```python
import io
from myshell.shell import Shell

out = io.StringIO()
shell = Shell(stdin=io.StringIO(), stdout=out, stderr=io.StringIO())
shell.run_line("echo hello")
print(out.getvalue())  # "hello\n"
print(shell.history)   # ['echo hello']
```

The `exit` built-in calls `Shell.shutdown()` and then raises `SystemExit` with
the exit code.

`myshell.parser.CommandParser` turns one command line into a `ParsedCommand`.
It takes a mapping of shell variables. Environment variables take precedence
over that mapping:

```python
from myshell.parser import CommandParser, tokenize, is_empty

command = CommandParser({"GREETING": "world"}).parse("echo $GREETING > greeting.txt &")
command.args          # ['echo', 'world'] (if GREETING is not set in the environment)
command.output_file   # 'greeting.txt'
command.append_output # False
command.background    # True

tokenize("ls   -l\t/tmp")  # ['ls', '-l', '/tmp']
is_empty("  \t ")          # True
```

The other modules are:

- `myshell.executor.CommandExecutor` runs a `ParsedCommand` with `subprocess`:
  `execute()`, `execute_with_pipe()` and `cleanup_background_processes()`.
- `myshell.builtins.BuiltinCommands` provides `is_builtin()`, `execute()` and
  `available_commands()`.
- `myshell.redirection` provides `open_input()` and `open_output()`. These
  return `None` for an empty file name and raise `RedirectionError` when a file
  cannot be opened.