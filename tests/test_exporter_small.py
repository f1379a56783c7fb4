import io

import pytest

from src.errors import SinkUnavailable
from src.exporter import export
from src.loader import load
from src.store import FrequencyTable


def test_export_format():
    table = FrequencyTable.from_tokens("apple banana apple apple banana cherry".split())
    out = io.StringIO()

    export(table, out)

    assert out.getvalue() == "apple 3\nbanana 2\ncherry 1\n"


def test_export_round_trip(tmp_path):
    src = tmp_path / "input.txt"
    src.write_text("Onions Limes Onions Garlic\nLimes Onions \"quoted\" NA\n", encoding="utf-8")
    table = load(src)

    backup = tmp_path / "frequency.dat"
    export(table, backup)

    # split each line back into item + integer
    parsed = []
    for line in backup.read_text(encoding="utf-8").splitlines():
        item, count = line.split(" ")
        parsed.append((item, int(count)))

    assert parsed == table.all_entries()


def test_export_overwrites_existing_file(tmp_path):
    backup = tmp_path / "frequency.dat"
    backup.write_text("stale 99\nold 1\n", encoding="utf-8")

    export(FrequencyTable.from_tokens(["Beets"]), backup)

    assert backup.read_text(encoding="utf-8") == "Beets 1\n"


def test_export_unwritable_sink_raises(tmp_path):
    bad = tmp_path / "no_such_dir" / "frequency.dat"
    with pytest.raises(SinkUnavailable) as info:
        export(FrequencyTable.from_tokens(["Beets"]), bad)
    assert "Failed to write backup file" in str(info.value)
