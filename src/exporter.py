from __future__ import annotations

from pathlib import Path
from typing import TextIO, Union

from src.errors import SinkUnavailable
from src.loader import ENCODING, ENCODING_ERRORS
from src.store import FrequencyTable


Sink = Union[str, Path, TextIO]


def _write_entries(table: FrequencyTable, out: TextIO) -> None:
    for item, count in table.all_entries():
        out.write(f"{item} {count}\n")


def export(table: FrequencyTable, sink: Sink) -> None:
    """
    Write the backup: one "<item> <count>" line per item, alphabetical.

    An existing file at the path is overwritten.
    Raises SinkUnavailable if the file cannot be opened for writing.
    """
    if hasattr(sink, "write"):
        _write_entries(table, sink)
        return

    path = Path(sink)
    try:
        with open(path, "w", encoding=ENCODING, errors=ENCODING_ERRORS) as f:
            _write_entries(table, f)
    except OSError as e:
        raise SinkUnavailable(str(path)) from e
