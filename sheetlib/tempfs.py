"""Temporary directories and files that remove themselves when closed."""

from __future__ import annotations

from sheetlib.osapi import (
    close_fd,
    create_dir,
    create_subdir,
    open_dir,
    open_file,
    open_subdir,
    remove_dir,
    remove_file,
    remove_subdir,
)


class TempDirectory:
    """A directory created on construction and removed once closed and no longer in use.

    ``parent_fd`` is either None (``path`` is then created as given), the
    descriptor of an open directory, or a parent TempDirectory. A parent
    TempDirectory stays on disk until every directory and file created in it
    has been removed.
    """

    def __init__(self, path: str, parent_fd: int | TempDirectory | None = None) -> None:
        parent = parent_fd if isinstance(parent_fd, TempDirectory) else None
        self.path = path
        self._parent = parent
        self._parent_fd = parent.fd if parent is not None else parent_fd
        self._users = 0
        self._released = False
        if self._parent_fd is None:
            create_dir(path)
            try:
                self._fd: int | None = open_dir(path)
            except OSError:
                remove_dir(path)
                raise
        else:
            create_subdir(self._parent_fd, path)
            try:
                self._fd = open_subdir(self._parent_fd, path)
            except OSError:
                remove_subdir(self._parent_fd, path)
                raise
        if parent is not None:
            parent._adopt()

    @property
    def fd(self) -> int:
        """The descriptor of the open directory."""
        if self._fd is None:
            raise ValueError(f"directory {self.path} has been removed")
        return self._fd

    @property
    def removed(self) -> bool:
        """Whether the directory has been removed from disk."""
        return self._fd is None

    def _adopt(self) -> None:
        if self._fd is None:
            raise ValueError(f"directory {self.path} has been removed")
        self._users += 1

    def _disown(self) -> None:
        self._users -= 1
        self._remove_if_unused()

    def _remove_if_unused(self) -> None:
        if not self._released or self._users or self._fd is None:
            return
        fd, self._fd = self._fd, None
        try:
            if self._parent_fd is None:
                remove_dir(self.path)
            else:
                remove_subdir(self._parent_fd, self.path)
        finally:
            close_fd(fd)
            if self._parent is not None:
                self._parent._disown()

    def close(self) -> None:
        """Give up this handle; the directory goes as soon as nothing inside it is in use."""
        if self._released:
            return
        self._released = True
        self._remove_if_unused()

    def __enter__(self) -> TempDirectory:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"TempDirectory({self.path!r})"


class TempFile:
    """A file created inside a TempDirectory and removed again when closed."""

    def __init__(self, parent: TempDirectory, name: str) -> None:
        self.path = f"{parent.path}/{name}"
        self.name = name
        self._parent = parent
        self._fd: int | None = open_file(parent.fd, name)
        parent._adopt()

    @property
    def closed(self) -> bool:
        """Whether the file has been removed."""
        return self._fd is None

    def close(self) -> None:
        """Remove the file and release its directory."""
        if self._fd is None:
            return
        fd, self._fd = self._fd, None
        try:
            remove_file(self._parent.fd, self.name)
        finally:
            close_fd(fd)
            self._parent._disown()

    def __enter__(self) -> TempFile:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"TempFile({self.path!r})"