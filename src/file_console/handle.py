"""File handles — one owned, open reference to the target file.

A handle is opened once and then reused for every append, truncate,
and print until it is closed or replaced.  The workflow is:

1. ``FileHandle.open(path)`` → open in read+append mode, creating the
   file if it does not exist yet.
2. ``append(text)`` → write at the end of the file.
3. ``read_all()`` → flush pending writes, rewind to offset 0, read
   everything.
4. ``truncate()`` → reset the length to zero and rewind.
5. ``close()`` → release the underlying file.

Key concepts:

- **Write cursor**: after an append the position sits at the end of
  the file, so reads must rewind first.
- **Append mode**: writes always land at the end regardless of the
  current position, mirroring ``O_APPEND``.
"""

from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import TextIO


class HandleError(Exception):
    """Raise when a file handle operation fails."""


class FileHandle:
    """An open text file held across console commands.

    Construct through ``FileHandle.open()``.  Every operation converts
    ``OSError`` and encoding failures into ``HandleError`` so callers deal
    with a single failure type.
    """

    def __init__(self, path: Path, file: TextIO) -> None:
        """Wrap an already-open file object.

        Args:
            path: The path the file was opened from.
            file: A text file opened in ``a+`` mode.

        """
        self._path = path
        self._file = file

    @classmethod
    def open(cls, path: Path | str) -> FileHandle:
        """Open *path* for reading and appending, creating it if absent.

        Raises:
            HandleError: If the file cannot be opened.

        """
        target = Path(path)
        try:
            file = target.open("a+", encoding="utf-8", newline="")
        except OSError as e:
            msg = f"Cannot open '{target}': {e.strerror or e}"
            raise HandleError(msg) from e
        return cls(target, file)

    @property
    def path(self) -> Path:
        """Return the path this handle was opened from."""
        return self._path

    @property
    def closed(self) -> bool:
        """Return True once the handle has been closed."""
        return self._file.closed

    def append(self, text: str) -> None:
        """Write *text* verbatim at the end of the file."""
        self._check_open()
        try:
            self._file.write(text)
        except OSError as e:
            msg = f"Cannot append to '{self._path}': {e.strerror or e}"
            raise HandleError(msg) from e
        except UnicodeEncodeError as e:
            msg = f"Cannot append to '{self._path}': {e.reason}"
            raise HandleError(msg) from e

    def truncate(self) -> None:
        """Reset the file length to zero, keeping the handle open."""
        self._check_open()
        try:
            self._file.flush()
            self._file.seek(0)
            self._file.truncate()
        except OSError as e:
            msg = f"Cannot truncate '{self._path}': {e.strerror or e}"
            raise HandleError(msg) from e

    def read_all(self) -> str:
        """Return the whole file content.

        Pending writes are flushed and the position rewound first,
        since the cursor normally sits after the last write.
        """
        self._check_open()
        try:
            self._file.flush()
            self._file.seek(0)
            return self._file.read()
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Cannot read '{self._path}': {e}"
            raise HandleError(msg) from e

    def close(self) -> None:
        """Close the handle.  Closing twice is a no-op."""
        self._file.close()

    def _check_open(self) -> None:
        if self._file.closed:
            msg = f"Handle for '{self._path}' is closed"
            raise HandleError(msg)

    def __enter__(self) -> FileHandle:
        """Return the handle itself."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Close the handle on leaving the ``with`` block."""
        self.close()
