from __future__ import annotations


class SourceUnavailable(Exception):
    """The purchase log could not be opened or read."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Failed to open input file: {path}")
        self.path = path


class SinkUnavailable(Exception):
    """The backup file could not be opened for writing."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Failed to write backup file: {path}")
        self.path = path


class InvalidSelection(Exception):
    """
    A menu choice that is not 1-4.

    discard_line is True when the input was not a number at all,
    so the rest of that input line should be thrown away.
    """

    def __init__(self, message: str, discard_line: bool = False) -> None:
        super().__init__(message)
        self.discard_line = discard_line
