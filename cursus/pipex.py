"""Run a chain of commands between an input and an output file, like a shell pipe."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TextIO

HERE_DOC = "here_doc"
RANDOM_SOURCE = "/dev/urandom"
RANDOM_CHUNK = 1024
PROMPT = "here_doc> "
NOT_FOUND_STATUS = 127


class PipexError(RuntimeError):
    """The arguments, files or environment do not allow the pipeline to run."""


def _failure(message: str, exc: OSError | None = None) -> PipexError:
    if exc is None:
        return PipexError(message)
    return PipexError(f"{message}: {exc.strerror or exc}")


@dataclass
class Pipeline:
    """Commands whose output feeds the next one, from ``input_data`` to ``output_path``.

    A command is the list of its words with the resolved program first, or
    None when its program was not found.
    """

    commands: list[list[str] | None]
    output_path: str
    input_data: bytes = b""
    append: bool = False
    environ: dict[str, str] = field(default_factory=dict)

    def run(self) -> list[int]:
        """Run every command in turn and return their exit statuses."""
        statuses: list[int] = []
        data = self.input_data
        for command in self.commands:
            status, data = self._run_one(command, data)
            statuses.append(status)
        with open(self.output_path, "ab" if self.append else "wb") as handle:
            handle.write(data)
        return statuses

    def _run_one(self, command: list[str] | None, data: bytes) -> tuple[int, bytes]:
        if not command:
            return NOT_FOUND_STATUS, b""
        if not os.access(command[0], os.X_OK):
            sys.stderr.write("Error: Failed to execute command\n")
            return NOT_FOUND_STATUS, b""
        try:
            completed = subprocess.run(
                command,
                input=data,
                stdout=subprocess.PIPE,
                env=self.environ,
                check=False,
            )
        except OSError as exc:
            sys.stderr.write(f"Error: Failed to execute command: {exc.strerror or exc}\n")
            return NOT_FOUND_STATUS, b""
        return completed.returncode, completed.stdout


def search_paths(environ: Mapping[str, str]) -> list[str]:
    """The directories listed in PATH, empty entries dropped."""
    if "PATH" not in environ:
        raise PipexError("PATH not found in environment")
    return [entry for entry in environ["PATH"].split(":") if entry]


def resolve_command(word: str, paths: Sequence[str]) -> str | None:
    """The executable a command word names, or None when there is none.

    A word starting with '/' or '.' is taken as it is if executable; every
    word is otherwise looked up in each directory of ``paths`` in order.
    """
    if word.startswith(("/", ".")) and os.access(word, os.X_OK):
        return word
    for directory in paths:
        candidate = f"{directory}/{word}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def parse_commands(commands: Sequence[str], paths: Sequence[str]) -> list[list[str] | None]:
    """Split each command on spaces and resolve its program; None where not found."""
    parsed: list[list[str] | None] = []
    for text in commands:
        words = [word for word in text.split(" ") if word]
        program = None
        if words and words[0].strip(" \t"):
            program = resolve_command(words[0], paths)
        if program is None:
            sys.stderr.write("Command not found in PATH\n")
            parsed.append(None)
        else:
            parsed.append([program, *words[1:]])
    return parsed


def read_here_doc(delimiter: str, stream: TextIO, prompt: TextIO | None = None) -> str:
    """Read lines from ``stream`` until one is exactly the delimiter, or the end.

    The prompt is written to ``prompt`` before each line when it is given.
    """
    terminator = delimiter + "\n"
    lines: list[str] = []
    while True:
        if prompt is not None:
            prompt.write(PROMPT)
            prompt.flush()
        line = stream.readline()
        if not line or line == terminator:
            break
        lines.append(line)
    return "".join(lines)


def _touch_output(path: str, append: bool) -> None:
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        os.close(os.open(path, flags, 0o644))
    except OSError as exc:
        raise _failure("Failed to open outfile", exc) from exc


def _read_input(path: str) -> bytes:
    if path == RANDOM_SOURCE:
        try:
            with open(path, "rb") as handle:
                return handle.read(RANDOM_CHUNK)
        except OSError as exc:
            raise _failure("Failed to read from /dev/urandom", exc) from exc
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except OSError as exc:
        raise _failure("Failed to open infile", exc) from exc


def build_pipeline(args: Sequence[str], environ: Mapping[str, str],
                   here_doc_stream: TextIO | None = None) -> Pipeline:
    """Check the arguments, open the files and resolve the commands.

    ``args`` is ``infile cmd... outfile`` or ``here_doc LIMITER cmd... outfile``;
    the here-document is read from ``here_doc_stream`` (standard input if None).
    """
    args = list(args)
    if len(args) < 4:
        raise PipexError("Not enough arguments")
    here_doc = args[0] == HERE_DOC
    output_path = args[-1]
    if here_doc:
        if len(args) < 5:
            raise PipexError("Not enough arguments for here_doc")
        _touch_output(output_path, append=True)
        input_data = b""
    else:
        input_data = _read_input(args[0])
        _touch_output(output_path, append=False)
    paths = search_paths(environ)
    if here_doc:
        stream = sys.stdin if here_doc_stream is None else here_doc_stream
        input_data = read_here_doc(args[1], stream, sys.stdout).encode("utf-8")
    first = 2 if here_doc else 1
    commands = parse_commands(args[first:-1], paths)
    return Pipeline(
        commands=commands,
        output_path=output_path,
        input_data=input_data,
        append=here_doc,
        environ=dict(environ),
    )


def _execute(args: Sequence[str]) -> int:
    try:
        pipeline = build_pipeline(args, os.environ)
    except PipexError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    pipeline.run()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``infile cmd1 cmd2 outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        sys.stderr.write("Usage: pipex file1 cmd1 cmd2 file2\n")
        return 1
    return _execute(args)


def main_bonus(argv: Sequence[str] | None = None) -> int:
    """Run any number of commands, with ``here_doc LIMITER`` as an input option."""
    args = sys.argv[1:] if argv is None else list(argv)
    return _execute(args)


if __name__ == "__main__":
    sys.exit(main())