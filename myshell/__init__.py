"""A small interactive command-line shell with pipes, redirection, background jobs and variable expansion."""

__version__ = "1.0.0"
__all__ = ["builtins", "executor", "parser", "redirection", "shell"]