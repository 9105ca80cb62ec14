"""Tab completer for the console's menu prompt.

The completer separates **what to complete** (pure logic, fully
testable) from **how to wire it** (readline integration in the REPL).
Candidates are the full-word command aliases; digits and single
letters are already as short as they get.
"""

import readline

from file_console.commands import ALIASES

_WORDS: tuple[str, ...] = tuple(sorted(alias for alias in ALIASES if len(alias) > 1))


class Completer:
    """Complete command words at the menu prompt."""

    def complete(self, text: str, state: int) -> str | None:
        """Readline callback — return the *state*-th candidate for *text*.

        Args:
            text: The partial word being completed.
            state: Index into the candidate list (0, 1, 2, …).

        Returns:
            The candidate at *state*, or ``None`` when exhausted.

        """
        candidates = self.completions(text, readline.get_line_buffer())
        if state < len(candidates):
            return candidates[state]
        return None

    @staticmethod
    def completions(text: str, line: str) -> list[str]:
        """Return command words starting with *text*.

        Matching is case-insensitive, like command parsing.  Only the
        first word on the line is completed.
        """
        if len(line.split()) > 1 or (line.strip() and line.endswith(" ")):
            return []
        prefix = text.lower()
        return [word for word in _WORDS if word.startswith(prefix)]
