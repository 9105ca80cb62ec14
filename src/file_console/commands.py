"""Menu commands — the closed set of things the console can do.

Every command can be typed three ways:

- its **digit** from the menu (``1`` .. ``6``),
- a single-letter **mnemonic** (``c``, ``d``, ``a``, ``t``, ``p``, ``q``),
- or the **full word** (``create``, ``delete``, ...).

Matching is case-insensitive and ignores surrounding whitespace.
Anything else is *unrecognized*, which is reported as ``None`` rather
than an exception so the menu loop can simply ask again.
"""

from enum import StrEnum


class Command(StrEnum):
    """The six menu commands, in menu order."""

    CREATE = "create"
    DELETE = "delete"
    APPEND = "append"
    TRUNCATE = "truncate"
    PRINT = "print"
    QUIT = "quit"

    @property
    def digit(self) -> str:
        """Return the menu number for this command (``"1"`` .. ``"6"``)."""
        return str(list(Command).index(self) + 1)

    @property
    def letter(self) -> str:
        """Return the single-letter mnemonic."""
        return self.value[0]


# Extra full-word aliases beyond each command's own name.
_EXTRA_WORDS: dict[str, Command] = {"open": Command.CREATE}


def _build_aliases() -> dict[str, Command]:
    """Build the alias -> command lookup table."""
    aliases: dict[str, Command] = {}
    for command in Command:
        aliases[command.digit] = command
        aliases[command.letter] = command
        aliases[command.value] = command
    aliases.update(_EXTRA_WORDS)
    return aliases


ALIASES: dict[str, Command] = _build_aliases()

_MENU_LABELS: dict[Command, str] = {
    Command.DELETE: "Delete the file",
    Command.APPEND: "Append a line to the file",
    Command.TRUNCATE: "Truncate the file",
    Command.PRINT: "Print file content",
    Command.QUIT: "Quit",
}


def parse_command(text: str) -> Command | None:
    """Map free-form user input to a command.

    Args:
        text: The raw line typed by the user.

    Returns:
        The matching command, or ``None`` if the input is unrecognized.

    """
    return ALIASES.get(text.strip().lower())


def format_menu(create_label: str) -> str:
    """Render the six-option menu.

    Args:
        create_label: Label for option 1, which differs between the
            reopen-per-call and persistent-handle consoles.

    Returns:
        The menu text, one option per line.

    """
    labels = {Command.CREATE: create_label, **_MENU_LABELS}
    lines = ["Choose one of the following options:"]
    lines.extend(f"{command.digit}) {labels[command]}" for command in Command)
    return "\n".join(lines)
