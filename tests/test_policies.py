"""Tests for the two file policies.

``ReopenPolicy`` opens the path per command; ``HandlePolicy`` keeps
one handle between commands.  Both refuse to truncate a file that is
not there.
"""

from pathlib import Path

import pytest

from file_console.policies import (
    APPEND_PROMPT,
    HandlePolicy,
    LineReader,
    OperationError,
    PreconditionError,
    ReopenPolicy,
)


def _reader(line: str) -> tuple[list[str], LineReader]:
    """Return a list that records prompts and a reader that answers *line*."""
    prompts: list[str] = []

    def read_line(prompt: str) -> str:
        prompts.append(prompt)
        return line

    return prompts, read_line


class TestReopenPolicy:
    """Verify the reopen-per-call policy."""

    def test_create_new_file(self, tmp_path: Path) -> None:
        """Create makes an empty file."""
        target = tmp_path / "file.txt"
        assert ReopenPolicy(target).create() == "File has been created."
        assert target.read_text() == ""

    def test_create_twice_reports_already_exists(self, tmp_path: Path) -> None:
        """A second create is refused and leaves the content alone."""
        target = tmp_path / "file.txt"
        policy = ReopenPolicy(target)
        policy.create()
        target.write_text("keep me")
        with pytest.raises(PreconditionError, match="already exists"):
            policy.create()
        assert target.read_text() == "keep me"

    def test_create_in_missing_directory_fails(self, tmp_path: Path) -> None:
        """An unreachable path reports an operation failure."""
        with pytest.raises(OperationError, match="could not create"):
            ReopenPolicy(tmp_path / "nope" / "file.txt").create()

    def test_delete_existing_file(self, tmp_path: Path) -> None:
        """Delete removes the file."""
        target = tmp_path / "file.txt"
        target.write_text("x")
        assert ReopenPolicy(target).delete() == "File has been deleted."
        assert not target.exists()

    def test_delete_missing_file_fails(self, tmp_path: Path) -> None:
        """Deleting a missing file is an operation failure."""
        with pytest.raises(OperationError, match="could not delete"):
            ReopenPolicy(tmp_path / "file.txt").delete()

    def test_append_prompts_and_writes_verbatim(self, tmp_path: Path) -> None:
        """Append asks for a line and writes exactly what it gets."""
        target = tmp_path / "file.txt"
        target.write_text("a\n")
        prompts, read_line = _reader("b\n")
        assert ReopenPolicy(target).append(read_line) == "Line appended."
        assert prompts == [APPEND_PROMPT]
        assert target.read_text() == "a\nb\n"

    def test_append_missing_file_does_not_prompt(self, tmp_path: Path) -> None:
        """Without a file, append is refused before prompting."""
        target = tmp_path / "file.txt"
        prompts, read_line = _reader("lost")
        with pytest.raises(PreconditionError, match="does not exist"):
            ReopenPolicy(target).append(read_line)
        assert prompts == []
        assert not target.exists()

    def test_truncate_existing_file(self, tmp_path: Path) -> None:
        """Truncate empties the file."""
        target = tmp_path / "file.txt"
        target.write_text("content")
        assert ReopenPolicy(target).truncate() == "File has been truncated."
        assert target.read_text() == ""

    def test_truncate_does_not_create(self, tmp_path: Path) -> None:
        """Truncating a missing file fails instead of creating it."""
        target = tmp_path / "file.txt"
        with pytest.raises(OperationError, match="could not truncate"):
            ReopenPolicy(target).truncate()
        assert not target.exists()

    def test_read_returns_content(self, tmp_path: Path) -> None:
        """Read returns the whole file."""
        target = tmp_path / "file.txt"
        target.write_text("one\ntwo\n")
        assert ReopenPolicy(target).read() == "one\ntwo\n"

    def test_read_missing_file_fails(self, tmp_path: Path) -> None:
        """Reading a missing file is an operation failure."""
        with pytest.raises(OperationError, match="could not read"):
            ReopenPolicy(tmp_path / "file.txt").read()

    def test_never_holds_a_handle(self, tmp_path: Path) -> None:
        """The reopen policy has nothing open between commands."""
        policy = ReopenPolicy(tmp_path / "file.txt")
        policy.create()
        assert not policy.has_handle


class TestHandlePolicy:
    """Verify the persistent-handle policy."""

    def test_no_handle_at_start(self, tmp_path: Path) -> None:
        """The handle is absent until Create/Open."""
        assert not HandlePolicy(tmp_path / "file.txt").has_handle

    def test_create_missing_file(self, tmp_path: Path) -> None:
        """Create/Open on a missing path creates it and holds a handle."""
        target = tmp_path / "file.txt"
        policy = HandlePolicy(target)
        assert policy.create() == "File has been created."
        assert policy.has_handle
        assert target.exists()
        policy.close()

    def test_open_existing_file_keeps_content(self, tmp_path: Path) -> None:
        """Create/Open on an existing file opens it without truncating."""
        target = tmp_path / "file.txt"
        target.write_text("kept")
        policy = HandlePolicy(target)
        assert policy.create() == "File has been opened."
        assert policy.read() == "kept"
        policy.close()

    def test_reopen_replaces_handle(self, tmp_path: Path) -> None:
        """A second Create/Open replaces the handle; content survives."""
        policy = HandlePolicy(tmp_path / "file.txt")
        policy.create()
        _prompts, read_line = _reader("hello")
        policy.append(read_line)
        assert policy.create() == "File has been opened."
        assert policy.read() == "hello"
        policy.close()

    @pytest.mark.parametrize("operation", ["truncate", "read"])
    def test_operations_need_a_handle(self, tmp_path: Path, operation: str) -> None:
        """Truncate and read without a handle give guidance."""
        target = tmp_path / "file.txt"
        with pytest.raises(PreconditionError, match="No file is open"):
            getattr(HandlePolicy(target), operation)()
        assert not target.exists()

    def test_append_without_handle_writes_nothing(self, tmp_path: Path) -> None:
        """Append without a handle neither prompts nor writes."""
        target = tmp_path / "file.txt"
        target.write_text("")
        prompts, read_line = _reader("lost")
        with pytest.raises(PreconditionError, match="No file is open"):
            HandlePolicy(target).append(read_line)
        assert prompts == []
        assert target.read_text() == ""

    def test_append_then_read(self, tmp_path: Path) -> None:
        """Open, append 'hello', read ends in 'hello'."""
        policy = HandlePolicy(tmp_path / "file.txt")
        policy.create()
        _prompts, read_line = _reader("hello")
        assert policy.append(read_line) == "Line appended."
        assert policy.read().endswith("hello")
        policy.close()

    def test_append_truncate_read_is_empty(self, tmp_path: Path) -> None:
        """Open, append 'a', truncate, read gives empty content."""
        policy = HandlePolicy(tmp_path / "file.txt")
        policy.create()
        _prompts, read_line = _reader("a")
        policy.append(read_line)
        assert policy.truncate() == "File has been truncated."
        assert policy.read() == ""
        policy.close()

    def test_delete_drops_handle(self, tmp_path: Path) -> None:
        """Delete removes the file and invalidates the handle."""
        target = tmp_path / "file.txt"
        policy = HandlePolicy(target)
        policy.create()
        assert policy.delete() == "File has been deleted."
        assert not policy.has_handle
        assert not target.exists()

    def test_delete_missing_file_fails(self, tmp_path: Path) -> None:
        """Deleting a missing file is an operation failure."""
        with pytest.raises(OperationError, match="could not delete"):
            HandlePolicy(tmp_path / "file.txt").delete()

    def test_create_failure_holds_no_handle(self, tmp_path: Path) -> None:
        """If opening fails, no handle is stored."""
        policy = HandlePolicy(tmp_path / "missing" / "file.txt")
        with pytest.raises(OperationError, match="Cannot open"):
            policy.create()
        assert not policy.has_handle

    def test_close_is_idempotent(self, tmp_path: Path) -> None:
        """Closing with no handle is a no-op."""
        policy = HandlePolicy(tmp_path / "file.txt")
        policy.close()
        policy.create()
        policy.close()
        policy.close()
        assert not policy.has_handle


class TestVerbatimContent:
    """Verify that both policies treat the file as an opaque blob."""

    @pytest.mark.parametrize("policy_type", [ReopenPolicy, HandlePolicy])
    def test_unencodable_line_is_an_operation_error(
        self, tmp_path: Path, policy_type: type[ReopenPolicy | HandlePolicy]
    ) -> None:
        """A line with a lone surrogate fails cleanly and writes nothing."""
        target = tmp_path / "file.txt"
        target.write_text("before\n")
        policy = policy_type(target)
        if isinstance(policy, HandlePolicy):
            policy.create()
        _prompts, read_line = _reader("bad\udcff")
        with pytest.raises(OperationError, match="could not append|Cannot append"):
            policy.append(read_line)
        assert policy.read() == "before\n"
        policy.close()

    @pytest.mark.parametrize("policy_type", [ReopenPolicy, HandlePolicy])
    def test_line_endings_survive_round_trip(
        self, tmp_path: Path, policy_type: type[ReopenPolicy | HandlePolicy]
    ) -> None:
        """CRLF and lone CR are neither translated on write nor on read."""
        target = tmp_path / "file.txt"
        target.write_bytes(b"dos\r\nmac\r")
        policy = policy_type(target)
        if isinstance(policy, HandlePolicy):
            policy.create()
        _prompts, read_line = _reader("unix\n")
        policy.append(read_line)
        assert policy.read() == "dos\r\nmac\runix\n"
        policy.close()
        assert target.read_bytes() == b"dos\r\nmac\runix\n"
