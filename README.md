# pipex

`pipex` prepares a pipe line of the shape

    < file1 cmd1 | cmd2 > file2

It takes the four operands `file1 cmd1 cmd2 file2` and splits each command
into words. It looks the first word of each command up along `PATH` and
returns the result as plain data.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Parsing an invocation

```python
import os
from pipex.parsing import parse

invocation = parse(["in.txt", "grep error", "wc -l", "out.txt"], os.environ)
invocation.infile            # "in.txt"
invocation.outfile           # "out.txt"
invocation.commands[0].argv  # ("grep", "error")
invocation.commands[0].path  # e.g. "/usr/bin/grep"
invocation.search_path       # the PATH directories, in order
```

`parse(argv, env)` needs exactly four operands. Each command is split on
spaces, and empty words are dropped. No quoting or shell expansion is done.
`env` may be a mapping such as `os.environ` or a sequence of `KEY=VALUE`
strings.

The result is an `Invocation`, which holds a tuple of `Command` objects. Each
`Command` has:

- `argv`: the command's words
- `path`: the resolved executable
- `redirect`: the file the command reads from or writes to
- `name`: the first word

The building blocks can also be called on their own:

- `find_path(env)` returns the directories listed in `PATH`, with empty
  entries dropped. In a sequence of `KEY=VALUE` strings, the first `PATH=`
  entry is used.
- `cat_path_cmd(directory, name)` joins a directory and a name with `/`.
- `access_path(name, search_path)` returns the first `directory/name` that
  exists and is executable.

## Errors

Every error derives from `PipexError` and carries an `exit_status`:

- wrong number of operands: `PipexError` with the usage line as its message,
  status 1
- no `PATH` in the environment: `PathNotFoundError`, status 1
- an empty command, or a command found nowhere along `PATH`:
  `CommandNotFoundError`, status 0

## Helpers

`pipex.libft` holds small helpers with C-string semantics. In these helpers
a string ends at its first NUL character.

- `pipex.libft.ctype`: ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `str_is_numeric`) and case conversion
  (`to_lower`, `to_upper`)
- `pipex.libft.convert`: `atoi`, 32-bit parsing of a leading integer, and
  `itoa`
- `pipex.libft.memory`: `bzero`, `calloc`, `memset`, `memchr`, `memcmp`,
  `memcpy`, `memmove`, `memccpy` on bytearrays
- `pipex.libft.strings`: `strlen`, `split`, `strchr`, `strrchr`, `strnstr`,
  `strcmp`, `strncmp`
- `pipex.libft.transform`: `strlcpy`, `strlcat`, `strdup`, `strndup`,
  `substr`, `strjoin`, `strjoin_char`, `strtrim`, `strmapi`, `striteri`
- `pipex.libft.lists`: `LinkedList`, a singly linked list with
  `push_front`, `push_back`, `last`, `pop_front`, `clear`, `for_each` and
  `map`

## What it does not do

This package only parses and resolves a pipe line. It does not:

- start the commands
- connect the commands with a pipe
- open or create the input and output files
- print anything to a file descriptor

It installs no command-line program.