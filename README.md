# minishell

Building blocks of a small POSIX-style shell, as a Python library with no
third-party runtime dependencies.

## Modules

### `minishell.tokens`

`tokenize(line)` splits one command line into a list of `Token` objects. Each
token has a `content` string and a `kind`, a member of `TokenType`:
`WORD`, `PIPE`, `REDIR_IN`, `REDIR_OUT`, `APPEND` or `HEREDOC`.

- Spaces and tabs separate tokens and are never part of one
  (`is_blank(char)`).
- `<`, `>` and `|` start operators (`is_operator(char)`); `<<` and `>>` are
  recognised before their one-character forms.
- Quote handling is minimal: a `'` or `"` opens a span that runs to the next
  occurrence of the same character, and blanks and operators inside it stay
  in the word. A quote at the start of a word is dropped, and when a word
  contains a quote its last scanned character is dropped too. A word in
  quotes at the end of a line therefore comes out without its quotes.

```python
from minishell.tokens import tokenize

[(t.content, t.kind.name) for t in tokenize("ls -l | wc -l >> out.txt")]
# [('ls', 'WORD'), ('-l', 'WORD'), ('|', 'PIPE'), ('wc', 'WORD'),
#  ('-l', 'WORD'), ('>>', 'APPEND'), ('out.txt', 'WORD')]

tokenize("echo 'hello world'")[1].content   # 'hello world'
```

### `minishell.executor`

`Command(argv, path)` holds an argument vector and the program file to run.
Every program is started with an empty environment.

- `run_command(command)` runs it with the current standard streams, waits,
  and returns the exit status.
- `run_with_infile(command, stream=None)` treats `argv[0]` as the name of a
  file to feed to standard input and the rest as the argument vector. The
  program's output is copied to `stream` (standard error's binary buffer by
  default). It returns the exit status, or `None` without running anything
  when there is nothing after the file name.
- `run_pipeline(commands)` connects the commands with pipes, waits for all
  of them and returns their exit statuses in order.
- `is_exit(line)` is true when a line starts with `exit`.

```python
from minishell.executor import Command, run_pipeline

run_pipeline([
    Command(["printf", "a\nb\n"], "/usr/bin/printf"),
    Command(["wc", "-l"], "/usr/bin/wc"),
])   # prints 2, returns [0, 0]
```

### `minishell.textutils`

String helpers with the edge-case behaviour of the classic C routines:

- `atoi(text)`: skips leading whitespace, reads one sign and digits, wraps to
  32 bits. `atol(text)`: no whitespace skipping, wraps to 64 bits, `None`
  gives 0.
- `itoa(number)`, `split(text, sep)` (empty pieces dropped),
  `strtrim(text, charset)`, `substr(text, start, length)`.
- `strnstr(haystack, needle, length)`: index of `needle` within the first
  `length` characters, or `None`.
- `strncmp(first, second, n)` stops at a NUL byte; `memcmp(first, second, n)`
  does not, and raises `ValueError` if a buffer is shorter than `n`. Both
  return the difference of the first differing bytes.

```python
from minishell.textutils import atoi, split

atoi("  -42abc")         # -42
split("a,,b,c", ",")     # ['a', 'b', 'c']
```

### `minishell.fmt`

`cformat(fmt, *args)` expands `%c %s %p %d %i %u %x %X %%` and `%@` (a long
integer); unknown conversions produce nothing, and too few arguments raise
`TypeError`. `%s` of `None` gives `(null)`, `%p` of zero gives `(nil)`.
`printf(fmt, *args)` writes the result to standard output and returns the
number of characters written.

```python
from minishell.fmt import cformat

cformat("%d items, mask %x", 42, 255)   # '42 items, mask ff'
```

### `minishell.linereader`

`LineReader(source, buffer_size=42)` reads lines as `bytes`, newline
included, from a file descriptor or a binary stream. `read_line()` returns
the next line, the unterminated remainder, or `None` at end of input;
iterating yields every line. `get_next_line(fd)` keeps one reader per
descriptor and raises `ValueError` for descriptors outside 0–1023.

```python
import os
import sys
from minishell.linereader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd):
    sys.stdout.buffer.write(line)
os.close(fd)
```

## What this package does not do

There is no interactive shell command and no prompt loop. Nothing turns a
token list into `Command` objects or looks programs up on a search path: the
caller supplies each `Command.path`. Output redirection, appending and
here-documents are recognised by the lexer but not carried out, and there is
no variable expansion.

## Requirements

Python 3.10 or newer on a POSIX system. The `test` extra installs pytest.