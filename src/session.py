from __future__ import annotations

import sys
from enum import Enum
from typing import Optional, TextIO

from src.errors import InvalidSelection
from src.reporter import Renderer
from src.store import FrequencyTable


QUERY, LIST, HISTOGRAM, EXIT = 1, 2, 3, 4

MENU_TITLE = "Corner Grocer Item Tracker"
MENU_OPTIONS = [
    "1. Query item frequency",
    "2. Print all item frequencies",
    "3. Print histogram",
]
EXIT_OPTION = "4. Exit"
SELECT_PROMPT = "Select an option (1-4): "
ITEM_PROMPT = "Enter item name: "
NOT_A_NUMBER = "Invalid input. Please enter a number from 1 to 4."
OUT_OF_RANGE = "Invalid option. Please select 1-4."
GOODBYE = "Exiting program. Goodbye!"


class State(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class TokenReader:
    """
    Hands out whitespace-delimited tokens from a text stream, one at a time,
    reading a new line only when the current one is used up.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._pending: list[str] = []

    def next_token(self) -> Optional[str]:
        """Next token, or None at end of input."""
        while not self._pending:
            line = self.stream.readline()
            if not line:
                return None
            self._pending = line.split()
        return self._pending.pop(0)

    def discard_line(self) -> None:
        # Whatever is left on the current line is thrown away
        self._pending = []


def parse_selection(token: str) -> int:
    try:
        choice = int(token)
    except ValueError:
        raise InvalidSelection(NOT_A_NUMBER, discard_line=True) from None
    if choice not in (QUERY, LIST, HISTOGRAM, EXIT):
        raise InvalidSelection(OUT_OF_RANGE)
    return choice


class Session:
    """
    Menu loop over a loaded FrequencyTable.

    Stays RUNNING until the user picks Exit (or input runs out).
    Nothing here changes the table.
    """

    def __init__(
        self,
        table: FrequencyTable,
        renderer: Optional[Renderer] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.table = table
        self.renderer = renderer or Renderer()
        self.reader = TokenReader(stdin if stdin is not None else sys.stdin)
        self.out = stdout if stdout is not None else sys.stdout
        self.state = State.RUNNING

    def _print(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.out, flush=True)

    def show_menu(self) -> None:
        self._print(f"\n{MENU_TITLE}")
        for line in MENU_OPTIONS:
            self._print(line)
        self._print(self.renderer.alert(EXIT_OPTION))
        self._print(SELECT_PROMPT, end="")

    def query(self) -> None:
        self._print(ITEM_PROMPT, end="")
        item = self.reader.next_token()
        if item is None:
            self.state = State.TERMINATED
            return
        self._print(f"{item} {self.table.frequency_of(item)}")

    def step(self) -> State:
        """Show the menu, read one selection and act on it."""
        self.show_menu()
        token = self.reader.next_token()
        if token is None:
            # End of input: nothing more can be asked, so leave the loop
            self._print()
            self.state = State.TERMINATED
            return self.state

        try:
            choice = parse_selection(token)
        except InvalidSelection as e:
            if e.discard_line:
                self.reader.discard_line()
            self._print(str(e))
            return self.state

        if choice == QUERY:
            self.query()
        elif choice == LIST:
            self._print(self.renderer.list_view(self.table))
        elif choice == HISTOGRAM:
            self._print(self.renderer.histogram_view(self.table))
        else:
            self._print(self.renderer.alert(GOODBYE))
            self.state = State.TERMINATED
        return self.state

    def run(self) -> None:
        while self.state is State.RUNNING:
            self.step()
