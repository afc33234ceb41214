"""Command-line parsing and command lookup along PATH."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence, Tuple, Union

from .libft.strings import split

Environment = Union[Mapping[str, str], Iterable[str]]

USAGE = "Usage: ./pipex file1 cmd1 cmd2 file2"


class PipexError(Exception):
    """Base error; exit_status is the status the program ends with."""

    exit_status = 1


class PathNotFoundError(PipexError):
    """The environment has no PATH entry."""

    exit_status = 1


class CommandNotFoundError(PipexError):
    """No executable for a command was found along PATH."""

    exit_status = 0


@dataclass(frozen=True)
class Command:
    """A command's arguments, its resolved executable and its redirection file."""

    argv: Tuple[str, ...]
    path: str
    redirect: str

    @property
    def name(self) -> str:
        return self.argv[0]


@dataclass(frozen=True)
class Invocation:
    """Everything a run of the pipeline needs."""

    commands: Tuple[Command, ...]
    search_path: Tuple[str, ...]

    @property
    def infile(self) -> str:
        return self.commands[0].redirect

    @property
    def outfile(self) -> str:
        return self.commands[-1].redirect


def find_path(env: Environment) -> Tuple[str, ...]:
    """The directories listed in PATH, empty entries dropped.

    env is either a mapping or a sequence of KEY=VALUE strings; in the
    latter the first PATH entry is used.
    """
    if isinstance(env, Mapping):
        value = env.get("PATH")
    else:
        value = next(
            (entry[len("PATH="):] for entry in env if entry.startswith("PATH=")),
            None,
        )
    if value is None:
        raise PathNotFoundError("PATH not found")
    return tuple(split(value, ":"))


def cat_path_cmd(directory: str, name: str) -> str:
    """directory and name joined by a slash."""
    return f"{directory}/{name}"


def access_path(name: str, search_path: Iterable[str]) -> str:
    """The first directory/name along search_path that exists and is executable."""
    if name:
        for directory in search_path:
            candidate = cat_path_cmd(directory, name)
            if os.access(candidate, os.F_OK | os.X_OK):
                return candidate
    raise CommandNotFoundError("command not found")


def parse(argv: Sequence[str], env: Environment) -> Invocation:
    """Build an Invocation from the operands file1 cmd1 cmd2 file2."""
    if len(argv) != 4:
        raise PipexError(USAGE)
    infile, first, second, outfile = argv
    words = (split(first, " "), split(second, " "))
    search_path = find_path(env)
    commands = []
    for args, redirect in zip(words, (infile, outfile)):
        if not args:
            raise CommandNotFoundError("command not found")
        commands.append(
            Command(tuple(args), access_path(args[0], search_path), redirect)
        )
    return Invocation(tuple(commands), search_path)