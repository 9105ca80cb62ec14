"""The console — menu command interpreter for the target file.

The console reads one line of user input, parses it into a ``Command``,
dispatches to the matching handler, and returns a one-line result.

Design choices:
    - **Returns strings, not prints.**  This keeps the console fully
      testable; the REPL and the web front-end decide how to show it.
    - **Command dispatch via a dict.**  One handler method per command.
    - **All file access goes through a policy.**  The console never
      opens files itself; ``ReopenPolicy`` or ``HandlePolicy`` does.
    - **Only the control channel may escape.**  File failures become
      ``Error: ...`` strings, but anything raised by the line reader
      (stdin closed, Ctrl+C) propagates to the caller.
"""

from collections.abc import Callable
from typing import TypeAlias

from file_console.commands import Command, format_menu, parse_command
from file_console.logging import Logger, LogLevel
from file_console.policies import (
    FilePolicy,
    LineReader,
    OperationError,
    PreconditionError,
)

# Type alias for a command handler: takes the line reader, returns output.
_Handler: TypeAlias = Callable[[LineReader], str]

_SOURCE = "console"


class Console:
    """Command interpreter bound to one file policy.

    The console is single-use: once Quit runs it stops accepting
    commands.
    """

    EXIT_SENTINEL = "__EXIT__"
    UNRECOGNIZED = "Unrecognized option, try again."

    def __init__(
        self,
        policy: FilePolicy,
        *,
        read_line: LineReader = input,
        logger: Logger | None = None,
    ) -> None:
        """Create a console over *policy*.

        Args:
            policy: How the target file is reached.
            read_line: Nested prompt used by Append to read its line.
            logger: Audit log to record into (a fresh one by default).

        """
        self._policy = policy
        self._read_line = read_line
        self._logger = logger if logger is not None else Logger()
        self._running = True

        self._commands: dict[Command, _Handler] = {
            Command.CREATE: self._cmd_create,
            Command.DELETE: self._cmd_delete,
            Command.APPEND: self._cmd_append,
            Command.TRUNCATE: self._cmd_truncate,
            Command.PRINT: self._cmd_print,
            Command.QUIT: self._cmd_quit,
        }

    @property
    def policy(self) -> FilePolicy:
        """Return the file policy in use."""
        return self._policy

    @property
    def logger(self) -> Logger:
        """Return the console's audit log."""
        return self._logger

    @property
    def running(self) -> bool:
        """Return False once Quit has run."""
        return self._running

    @property
    def menu(self) -> str:
        """Return the menu text for this console's policy."""
        return format_menu(self._policy.create_label)

    def execute(self, text: str, *, read_line: LineReader | None = None) -> str:
        """Parse and execute one menu choice.

        Args:
            text: The raw line typed by the user (e.g. ``" 3 "`` or ``"Append"``).
            read_line: Reader for Append's nested prompt, overriding the
                one given at construction for this call only.

        Returns:
            The result line, ``Console.EXIT_SENTINEL`` on Quit, or an
            error message.

        Raises:
            RuntimeError: If the console has already quit.

        """
        if not self._running:
            msg = "Console has quit"
            raise RuntimeError(msg)

        command = parse_command(text)
        if command is None:
            self._logger.log(
                LogLevel.WARNING, f"unrecognized input {text.strip()!r}", source=_SOURCE
            )
            return self.UNRECOGNIZED

        handler = self._commands[command]
        try:
            result = handler(read_line if read_line is not None else self._read_line)
        except PreconditionError as e:
            self._logger.log(LogLevel.WARNING, f"{command}: {e}", source=_SOURCE)
            return str(e)
        except OperationError as e:
            self._logger.log(LogLevel.ERROR, f"{command}: {e}", source=_SOURCE)
            return f"Error: {e}"

        self._logger.log(LogLevel.INFO, f"{command}: ok", source=_SOURCE)
        return result

    def close(self) -> None:
        """Release the policy's open handle, if any."""
        self._policy.close()

    # -- command handlers ----------------------------------------------------

    def _cmd_create(self, _read_line: LineReader) -> str:
        return self._policy.create()

    def _cmd_delete(self, _read_line: LineReader) -> str:
        return self._policy.delete()

    def _cmd_append(self, read_line: LineReader) -> str:
        return self._policy.append(read_line)

    def _cmd_truncate(self, _read_line: LineReader) -> str:
        return self._policy.truncate()

    def _cmd_print(self, _read_line: LineReader) -> str:
        return self._policy.read()

    def _cmd_quit(self, _read_line: LineReader) -> str:
        """Release the handle and signal the REPL to stop."""
        self._policy.close()
        self._running = False
        return self.EXIT_SENTINEL
