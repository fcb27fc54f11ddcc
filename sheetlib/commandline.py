"""An interactive shell that creates and removes a tree of temporary files and directories."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from typing import TextIO

from sheetlib.tempfs import TempDirectory, TempFile

DEFAULT_BASEDIR = "/tmp/raii"
_INDEX = re.compile(r"\d+")


class CommandLine:
    """Reads commands line by line and manages temporary files and directories."""

    def __init__(self, output: TextIO | None = None) -> None:
        self._output = output
        self._directories: list[TempDirectory] = []
        self._files: list[TempFile] = []
        self._dir_count = 0
        self._file_count = 0

    def _say(self, text: str, end: str = "\n") -> None:
        stream = self._output if self._output is not None else sys.stdout
        print(text, end=end, file=stream, flush=True)

    @property
    def _current(self) -> TempDirectory | None:
        return self._directories[-1] if self._directories else None

    def run(self, basedir: str, lines: Iterable[str] | None = None) -> None:
        """Create basedir, then execute commands from lines (standard input by default)."""
        source = sys.stdin if lines is None else lines
        self._directories.append(TempDirectory(str(basedir)))
        try:
            commands = iter(source)
            while True:
                self._say("> ", end="")
                line = next(commands, None)
                if line is None:
                    break
                command = line.rstrip("\r\n")
                self.handle_command(command)
                if command == "quit":
                    break
        finally:
            self._shutdown()

    def _shutdown(self) -> None:
        files, self._files = self._files, []
        for temp in files:
            temp.close()
        while self._directories:
            self._directories.pop().close()

    def _parse_index(self, command: str) -> int | None:
        tokens = command.split()
        if len(tokens) < 2:
            return None
        match = _INDEX.match(tokens[1])
        return int(match.group()) if match else None

    def handle_command(self, command: str) -> None:
        """Execute one command and print its result."""
        current = self._current
        if command in ("enter", "current", "create") and current is None:
            self._say("no current directory")
        elif command == "enter":
            name = f"dir{self._dir_count}"
            self._dir_count += 1
            directory = TempDirectory(name, current)
            self._directories.append(directory)
            self._say(f"entering directory {directory.path}")
        elif command == "current":
            self._say(f"current directory: {current.path}")
        elif command == "leave":
            if self._directories:
                directory = self._directories.pop()
                self._say(f"leaving directory {directory.path}")
                directory.close()
        elif command == "create":
            name = f"file{self._file_count}"
            self._file_count += 1
            temp = TempFile(current, name)
            self._files.append(temp)
            self._say(f"created file {temp.path}")
        elif command == "list":
            for index, temp in enumerate(self._files):
                self._say(f"[{index}] {temp.path}")
        elif command.startswith("remove"):
            index = self._parse_index(command)
            if index is not None and index < len(self._files):
                temp = self._files.pop(index)
                self._say(f"removed file {temp.path}")
                temp.close()
        elif command == "quit":
            self._shutdown()
            self._say("quitting")
        else:
            self._say("wrong command")


def main(argv: list[str] | None = None) -> int:
    """Run the shell in the given base directory, or the default one."""
    args = sys.argv[1:] if argv is None else argv
    basedir = args[0] if args else DEFAULT_BASEDIR
    CommandLine().run(basedir)
    return 0


if __name__ == "__main__":
    sys.exit(main())