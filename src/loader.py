from __future__ import annotations

from pathlib import Path
from typing import Iterator, TextIO, Union

from src.errors import SourceUnavailable
from src.store import FrequencyTable


Source = Union[str, Path, TextIO]

# Bytes that are not valid UTF-8 (e.g. a latin-1 log) are kept as-is, not rejected
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


def tokenize(text: str) -> Iterator[str]:
    """
    Split on any run of whitespace (spaces, tabs, newlines).
    str.split() with no argument never yields empty tokens.
    """
    yield from text.split()


def _tokens_from_stream(stream: TextIO) -> Iterator[str]:
    # Line by line so large logs are not read into memory at once
    for line in stream:
        yield from tokenize(line)


def load(source: Source) -> FrequencyTable:
    """
    Count every whitespace-separated item in the source.

    source can be a path or an already-open text stream.
    Raises SourceUnavailable if the file cannot be opened or read.
    """
    if hasattr(source, "read"):
        return FrequencyTable.from_tokens(_tokens_from_stream(source))

    path = Path(source)
    try:
        with open(path, "r", encoding=ENCODING, errors=ENCODING_ERRORS) as f:
            return FrequencyTable.from_tokens(_tokens_from_stream(f))
    except OSError as e:
        raise SourceUnavailable(str(path)) from e
