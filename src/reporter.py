from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.store import FrequencyTable


PLACEHOLDER = "[No items loaded]"
LIST_HEADER = "=== Item Frequencies ==="
HISTOGRAM_HEADER = "=== Purchase Histogram ==="


class Band(Enum):
    """Magnitude band of a count. Only used to pick a display style."""
    LOW = "low"
    MID_LOW = "mid-low"
    MID_HIGH = "mid-high"
    HIGH = "high"


def band_for(count: int) -> Band:
    """
    1-3 -> low, 4-6 -> mid-low, 7-9 -> mid-high, 10+ -> high
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    if count <= 3:
        return Band.LOW
    if count <= 6:
        return Band.MID_LOW
    if count <= 9:
        return Band.MID_HIGH
    return Band.HIGH


@dataclass(frozen=True)
class HistogramRow:
    item: str
    band: Band
    bar: str


def render_list(table: FrequencyTable) -> str:
    """
    One "<item> <count>" line per entry, alphabetical.
    Returns the placeholder when nothing was loaded.
    """
    if not len(table):
        return PLACEHOLDER
    return "\n".join(f"{item} {count}" for item, count in table.all_entries())


def render_histogram(table: FrequencyTable, mark: str = "*") -> list[HistogramRow]:
    """
    One row per entry (alphabetical) with a bar of exactly `count` marks.
    Empty table -> empty list; renderers show the placeholder for it.
    """
    return [
        HistogramRow(item=item, band=band_for(count), bar=mark * count)
        for item, count in table.all_entries()
    ]


class DisplayStyle:
    """
    Plain text: band hints are ignored.
    Subclasses map a band (or an alert) to terminal styling.
    """

    def paint(self, text: str, band: Band) -> str:
        return text

    def alert(self, text: str) -> str:
        return text


RESET = "\033[0m"
RED = "\033[31m"
DARK_YELLOW = "\033[33m"  # closest thing to orange on a basic terminal
YELLOW = "\033[93m"
GREEN = "\033[32m"


class AnsiStyle(DisplayStyle):
    """Colors for a terminal that understands ANSI escape codes."""

    BAND_COLORS = {
        Band.LOW: RED,
        Band.MID_LOW: DARK_YELLOW,
        Band.MID_HIGH: YELLOW,
        Band.HIGH: GREEN,
    }

    def paint(self, text: str, band: Band) -> str:
        return f"{self.BAND_COLORS[band]}{text}{RESET}"

    def alert(self, text: str) -> str:
        return f"{RED}{text}{RESET}"


class Renderer:
    """
    Turns a FrequencyTable into the text the session prints.
    The style decides how (or whether) bands and alerts are colored.
    """

    def __init__(self, style: DisplayStyle | None = None, mark: str = "*") -> None:
        self.style = style or DisplayStyle()
        self.mark = mark

    def list_view(self, table: FrequencyTable) -> str:
        return f"\n{LIST_HEADER}\n{render_list(table)}"

    def histogram_view(self, table: FrequencyTable) -> str:
        rows = render_histogram(table, self.mark)
        if not rows:
            return f"\n{HISTOGRAM_HEADER}\n{PLACEHOLDER}"
        lines = [f"{r.item} {self.style.paint(r.bar, r.band)}" for r in rows]
        return f"\n{HISTOGRAM_HEADER}\n" + "\n".join(lines)

    def alert(self, text: str) -> str:
        return self.style.alert(text)


def make_renderer(use_color: bool, mark: str = "*") -> Renderer:
    style = AnsiStyle() if use_color else DisplayStyle()
    return Renderer(style=style, mark=mark)
