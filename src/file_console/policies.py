"""File policies — how the console reaches the target file.

The console's commands are the same either way; what changes is how
each command gets at the file on disk:

    - ``ReopenPolicy`` — open the path afresh for every command and
      close it again straight after.  Nothing is held between commands.
    - ``HandlePolicy`` — Create/Open opens one ``FileHandle`` and every
      later append, truncate, and print reuses it.  Delete drops it.

Both implement the ``FilePolicy`` protocol — the Strategy pattern.

Failures come back as two exception types so the console can tell them
apart when logging:

    - ``PreconditionError`` — the command was refused before any I/O
      (file already exists, nothing open yet).  The message is guidance.
    - ``OperationError`` — the filesystem call itself failed.

Truncate never creates the file under either policy: the reopen policy
opens without the create flag, and the handle policy needs an open
handle first.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Protocol, TypeAlias

from file_console.handle import FileHandle, HandleError

# Type alias for the nested prompt used by Append: takes a prompt, returns a line.
LineReader: TypeAlias = Callable[[str], str]

APPEND_PROMPT = "Write a line that will be appended to the file:"


class PreconditionError(Exception):
    """Raise when a command is refused before touching the file."""


class OperationError(Exception):
    """Raise when a filesystem operation on the target file fails."""


def _reason(error: OSError) -> str:
    return error.strerror or str(error)


class FilePolicy(Protocol):
    """Protocol for file access policies (Strategy pattern)."""

    create_label: str

    @property
    def path(self) -> Path:
        """Return the target file path."""
        ...

    @property
    def has_handle(self) -> bool:
        """Return True while an open handle is held."""
        ...

    def create(self) -> str:
        """Create or open the target file and return a status line."""
        ...

    def delete(self) -> str:
        """Remove the target file and return a status line."""
        ...

    def append(self, read_line: LineReader) -> str:
        """Prompt for one line, append it, and return a status line."""
        ...

    def truncate(self) -> str:
        """Reset the target file to zero length and return a status line."""
        ...

    def read(self) -> str:
        """Return the full text content of the target file."""
        ...

    def close(self) -> None:
        """Release anything the policy holds open."""
        ...


class ReopenPolicy:
    """Open the path for each command; hold nothing in between.

    Create refuses to touch a file that already exists.  Append,
    truncate, and print all need the file to exist.
    """

    create_label = "Create the file"

    def __init__(self, path: Path | str) -> None:
        """Create a policy for the file at *path*."""
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Return the target file path."""
        return self._path

    @property
    def has_handle(self) -> bool:
        """Return False; this policy never keeps a handle."""
        return False

    def create(self) -> str:
        """Create the file exclusively."""
        if self._path.exists():
            msg = "File already exists."
            raise PreconditionError(msg)
        try:
            self._path.open("x", encoding="utf-8", newline="").close()
        except FileExistsError as e:
            msg = "File already exists."
            raise PreconditionError(msg) from e
        except OSError as e:
            msg = f"could not create file ({_reason(e)})"
            raise OperationError(msg) from e
        return "File has been created."

    def delete(self) -> str:
        """Unlink the file."""
        try:
            self._path.unlink()
        except OSError as e:
            msg = f"could not delete file ({_reason(e)})"
            raise OperationError(msg) from e
        return "File has been deleted."

    def append(self, read_line: LineReader) -> str:
        """Open for appending, prompt for a line, write it verbatim."""
        if not self._path.is_file():
            msg = "The file does not exist. Create it first."
            raise PreconditionError(msg)
        try:
            file = self._path.open("a", encoding="utf-8", newline="")
        except OSError as e:
            msg = f"could not open file ({_reason(e)})"
            raise OperationError(msg) from e
        with file:
            line = read_line(APPEND_PROMPT)
            try:
                file.write(line)
                file.flush()
            except OSError as e:
                msg = f"could not append to file ({_reason(e)})"
                raise OperationError(msg) from e
            except UnicodeEncodeError as e:
                msg = f"could not append to file ({e.reason})"
                raise OperationError(msg) from e
        return "Line appended."

    def truncate(self) -> str:
        """Open without the create flag and cut the file to zero length."""
        try:
            with self._path.open("r+", encoding="utf-8", newline="") as file:
                file.truncate(0)
        except OSError as e:
            msg = f"could not truncate file ({_reason(e)})"
            raise OperationError(msg) from e
        return "File has been truncated."

    def read(self) -> str:
        """Read the file through a fresh read-only handle."""
        try:
            with self._path.open(encoding="utf-8", newline="") as file:
                return file.read()
        except OSError as e:
            msg = f"could not read file ({_reason(e)})"
            raise OperationError(msg) from e
        except UnicodeDecodeError as e:
            msg = f"could not read file ({e.reason})"
            raise OperationError(msg) from e

    def close(self) -> None:
        """Nothing to release."""


class HandlePolicy:
    """Keep one open handle across commands.

    The handle is absent at start, created by Create/Open, replaced by
    a later Create/Open, and dropped by Delete.  Append, truncate, and
    print without a handle are refused with guidance.
    """

    create_label = "Create/Open the file"

    def __init__(self, path: Path | str) -> None:
        """Create a policy for the file at *path* with no handle yet."""
        self._path = Path(path)
        self._handle: FileHandle | None = None

    @property
    def path(self) -> Path:
        """Return the target file path."""
        return self._path

    @property
    def has_handle(self) -> bool:
        """Return True while an open handle is held."""
        return self._handle is not None

    def create(self) -> str:
        """Open (creating if needed) and replace any held handle."""
        existed = self._path.exists()
        try:
            handle = FileHandle.open(self._path)
        except HandleError as e:
            raise OperationError(str(e)) from e
        self.close()
        self._handle = handle
        return "File has been opened." if existed else "File has been created."

    def delete(self) -> str:
        """Drop the handle, then unlink the file."""
        self.close()
        try:
            self._path.unlink()
        except OSError as e:
            msg = f"could not delete file ({_reason(e)})"
            raise OperationError(msg) from e
        return "File has been deleted."

    def append(self, read_line: LineReader) -> str:
        """Prompt for a line and write it through the held handle."""
        handle = self._require_handle()
        line = read_line(APPEND_PROMPT)
        try:
            handle.append(line)
        except HandleError as e:
            raise OperationError(str(e)) from e
        return "Line appended."

    def truncate(self) -> str:
        """Cut the file to zero length through the held handle."""
        handle = self._require_handle()
        try:
            handle.truncate()
        except HandleError as e:
            raise OperationError(str(e)) from e
        return "File has been truncated."

    def read(self) -> str:
        """Flush, rewind, and read through the held handle."""
        handle = self._require_handle()
        try:
            return handle.read_all()
        except HandleError as e:
            raise OperationError(str(e)) from e

    def close(self) -> None:
        """Close and drop the held handle, if any."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def _require_handle(self) -> FileHandle:
        if self._handle is None:
            msg = "No file is open. Choose 'Create/Open the file' first."
            raise PreconditionError(msg)
        return self._handle
