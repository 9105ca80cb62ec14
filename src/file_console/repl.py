"""Interactive REPL (Read-Eval-Print Loop) for the file console.

The REPL is the terminal interface.  It prints a banner once, then
enters the classic loop:

    1. **Read** — print the menu and read a choice after ``> ``.
    2. **Eval** — pass the choice to ``console.execute()``.
    3. **Print** — display the result.
    4. **Loop** — repeat until the console returns the exit sentinel.

This module keeps the I/O loop separate from the console logic.  The
console is fully testable (returns strings, no I/O); the REPL is the
thin I/O wrapper that connects it to ``stdin``/``stdout``.

Exit codes:
    - ``0`` — the user chose Quit.
    - ``1`` — stdin was closed or stdin/stdout failed.
    - ``130`` — interrupted with Ctrl+C.
"""

import readline
import sys

from file_console import DEFAULT_PATH
from file_console.commands import Command, parse_command
from file_console.completer import Completer
from file_console.console import Console
from file_console.policies import FilePolicy, HandlePolicy, ReopenPolicy

_BANNER_WIDTH = 38
_PROMPT = "> "

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_INTERRUPTED = 130


def format_banner(console: Console) -> str:
    """Format the start-up banner naming the target file.

    Args:
        console: The console about to be run.

    Returns:
        A formatted string suitable for printing to the console.

    """
    border = "=" * _BANNER_WIDTH
    return f"  {border}\n    file-console on {console.policy.path}\n  {border}"


def prompt_user(prompt: str) -> str:
    """Print *prompt* on its own line and read one line after ``> ``.

    Raises:
        EOFError: If stdin is closed.

    """
    print(prompt)  # noqa: T201
    return input(_PROMPT)


def read_appended_line(prompt: str) -> str:
    """Read the line for Append, keeping its line terminator.

    Tab completion is switched off while the line is typed, so Tab
    cannot drop command words into the appended text.
    """
    completer = readline.get_completer()
    readline.set_completer(None)
    try:
        return prompt_user(prompt) + "\n"
    finally:
        readline.set_completer(completer)


def build_console(policy: FilePolicy) -> Console:
    """Create a console over *policy* wired to the terminal."""
    return Console(policy, read_line=read_appended_line)


def run(console: Console) -> int:
    """Run the interactive loop until Quit or a control-channel failure.

    Handles:
    - Readline tab completion over command words.
    - Graceful handling of Ctrl+C and Ctrl+D.
    - Releasing the console's handle on the way out.

    Args:
        console: The console to drive.

    Returns:
        The process exit code.

    """
    completer = Completer()
    readline.set_completer(completer.complete)
    readline.parse_and_bind("tab: complete")

    print(format_banner(console))  # noqa: T201

    try:
        while True:
            choice = prompt_user(console.menu)
            result = console.execute(choice)
            if result == Console.EXIT_SENTINEL:
                return EXIT_OK
            # Print shows the content even when the file is empty.
            if result or parse_command(choice) is Command.PRINT:
                print(result)  # noqa: T201

    except EOFError:
        # Ctrl+D or stdin closed — nothing more can be read.
        print("\nInput closed.", file=sys.stderr)  # noqa: T201
        return EXIT_IO_ERROR

    except OSError as e:
        print(f"I/O error: {e}", file=sys.stderr)  # noqa: T201
        return EXIT_IO_ERROR

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)  # noqa: T201
        return EXIT_INTERRUPTED

    finally:
        console.close()


def main() -> None:
    """Run the persistent-handle console on ``./file.txt``.

    This is the ``file-console`` console entry point.
    """
    sys.exit(run(build_console(HandlePolicy(DEFAULT_PATH))))


def main_reopen() -> None:
    """Run the reopen-per-call console on ``./file.txt``.

    This is the ``file-console-reopen`` console entry point.
    """
    sys.exit(run(build_console(ReopenPolicy(DEFAULT_PATH))))
