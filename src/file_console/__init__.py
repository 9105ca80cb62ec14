"""file-console — a menu-driven console for one text file.

The console reads a menu choice, runs it against a single target file,
and reports the outcome as one line of text.  A ``Console`` runs over
one of two file policies:

- ``ReopenPolicy`` reopens the path for every command.
- ``HandlePolicy`` keeps one open handle across commands.
"""

DEFAULT_PATH = "./file.txt"
