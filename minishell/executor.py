"""Running resolved commands, alone, from an input file, or in a pipeline."""

from __future__ import annotations

import shutil
import subprocess
import sys
from dataclasses import dataclass, field
from typing import BinaryIO, Iterable

EXIT_COMMAND = "exit"


@dataclass
class Command:
    """A command ready to run: its argument vector and the program to execute."""

    argv: list[str] = field(default_factory=list)
    path: str = ""


def is_exit(line: str) -> bool:
    """Return True when the line asks the shell to quit (it starts with "exit")."""
    return line.startswith(EXIT_COMMAND)


def _spawn(argv: list[str], path: str, **streams) -> subprocess.Popen:
    # Commands run with an empty environment.
    return subprocess.Popen(argv, executable=path, env={}, **streams)


def run_command(command: Command) -> int:
    """Run one command with the shell's standard streams and wait for it.

    Returns its exit status.
    """
    process = _spawn(command.argv, command.path)
    return process.wait()


def run_with_infile(command: Command, stream: BinaryIO | None = None) -> int | None:
    """Run a command that reads its standard input from a file.

    ``command.argv[0]`` names the input file and the rest is the argument
    vector of the program at ``command.path``. What the program writes is
    copied to ``stream`` (standard error by default). When there is nothing
    after the file name, nothing runs and None is returned; otherwise the
    exit status is returned.
    """
    if len(command.argv) < 2:
        return None
    if stream is None:
        stream = sys.stderr.buffer
    infile_name, *argv = command.argv
    with open(infile_name, "rb") as infile:
        with _spawn(argv, command.path, stdin=infile, stdout=subprocess.PIPE) as process:
            shutil.copyfileobj(process.stdout, stream)
    stream.flush()
    return process.returncode


def run_pipeline(commands: Iterable[Command]) -> list[int]:
    """Run commands connected by pipes and wait for all of them.

    The first command reads the shell's standard input, the last writes to
    its standard output. Returns the exit statuses in command order.
    """
    commands = list(commands)
    processes: list[subprocess.Popen] = []
    upstream = None
    try:
        for position, command in enumerate(commands, start=1):
            last = position == len(commands)
            process = _spawn(
                command.argv,
                command.path,
                stdin=upstream,
                stdout=None if last else subprocess.PIPE,
            )
            if upstream is not None:
                upstream.close()
            upstream = process.stdout
            processes.append(process)
    except BaseException:
        if upstream is not None:
            upstream.close()
        for process in processes:
            process.wait()
        raise
    return [process.wait() for process in processes]