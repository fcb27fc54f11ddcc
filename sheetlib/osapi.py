"""Thin, exception-raising helpers for the file system calls used by the temp tree."""

from __future__ import annotations

import os
import random
import time

RAND_MAX = 2**31 - 1
_DIR_MODE = 0o700
_FILE_MODE = 0o600


def create_dir(path: str) -> None:
    """Create a directory at path, readable and writable by the owner only."""
    os.mkdir(path, _DIR_MODE)


def create_subdir(parent_fd: int, name: str) -> None:
    """Create a subdirectory called name inside the directory open as parent_fd."""
    os.mkdir(name, _DIR_MODE, dir_fd=parent_fd)


def remove_dir(path: str) -> None:
    """Remove the empty directory at path."""
    os.rmdir(path)


def remove_subdir(parent_fd: int, name: str) -> None:
    """Remove the empty subdirectory name from the directory open as parent_fd."""
    os.rmdir(name, dir_fd=parent_fd)


def remove_file(parent_fd: int, name: str) -> None:
    """Remove the file name from the directory open as parent_fd."""
    os.unlink(name, dir_fd=parent_fd)


def remove_path(path: str) -> None:
    """Remove the file at path."""
    os.unlink(path)


def open_dir(path: str) -> int:
    """Open the directory at path and return its descriptor."""
    return os.open(path, os.O_RDONLY | os.O_DIRECTORY)


def open_subdir(parent_fd: int, name: str) -> int:
    """Open the subdirectory name of the directory open as parent_fd."""
    return os.open(name, os.O_RDONLY | os.O_DIRECTORY, dir_fd=parent_fd)


def open_file(dir_fd: int, name: str) -> int:
    """Create (if needed) and open the file name inside the directory open as dir_fd."""
    return os.open(name, os.O_RDONLY | os.O_CREAT, _FILE_MODE, dir_fd=dir_fd)


def create_file(path: str) -> int:
    """Create (if needed) and open the file at path for writing."""
    return os.open(path, os.O_WRONLY | os.O_CREAT, _FILE_MODE)


def close_fd(fd: int) -> None:
    """Close a file or directory descriptor."""
    os.close(fd)


def get_random_number() -> int:
    """Return a pseudo-random number in [0, RAND_MAX], seeded from the current second."""
    return random.Random(int(time.time())).randint(0, RAND_MAX)