from src.exporter import export
from src.sanity_check import load_backup, main, summarize_backup
from src.store import FrequencyTable


def test_load_backup_keeps_item_text(tmp_path):
    table = FrequencyTable.from_tokens(["NA", "007", "NA", "null", "Kale"])
    path = tmp_path / "frequency.dat"
    export(table, path)

    df = load_backup(path)

    # no NaN and no number coercion for item names
    assert list(df["item"]) == ["007", "Kale", "NA", "null"]
    assert list(df["count"]) == [1, 1, 2, 1]


def test_summarize_backup(tmp_path):
    table = FrequencyTable.from_tokens(["kale"] * 10 + ["figs"] * 4 + ["beets"])
    path = tmp_path / "frequency.dat"
    export(table, path)

    summary = summarize_backup(load_backup(path))

    assert summary["distinct_items"] == 3
    assert summary["total_purchases"] == 15
    assert summary["top_item"] == "kale"
    assert summary["bands"] == {"low": 1, "mid-low": 1, "mid-high": 0, "high": 1}


def test_summarize_empty_backup(tmp_path):
    path = tmp_path / "frequency.dat"
    export(FrequencyTable(), path)

    summary = summarize_backup(load_backup(path))

    assert summary["distinct_items"] == 0
    assert summary["total_purchases"] == 0
    assert summary["top_item"] is None


def test_main_prints_report(tmp_path, capsys):
    path = tmp_path / "frequency.dat"
    export(FrequencyTable.from_tokens(["kale", "kale", "figs"]), path)

    main([str(path)])

    out = capsys.readouterr().out
    assert "Distinct items: 2" in out
    assert "Total purchases: 3" in out
    assert "Most purchased: kale" in out
    assert "DONE ✅" in out


def test_main_missing_backup(tmp_path, capsys):
    missing = tmp_path / "frequency.dat"

    main([str(missing)])

    out = capsys.readouterr().out
    assert f"ERROR: Backup not found: {missing}" in out
    assert "DONE" not in out
