"""Shell building blocks: lexer, command execution, text helpers, printf and line reading."""

__version__ = "0.1.0"

__all__ = ["executor", "fmt", "linereader", "textutils", "tokens"]