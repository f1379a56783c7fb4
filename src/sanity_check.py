from __future__ import annotations

import csv
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from src.config import Config
from src.loader import ENCODING, ENCODING_ERRORS
from src.reporter import Band, band_for


def load_backup(path: Path) -> pd.DataFrame:
    """
    Read a backup file ("<item> <count>" per line) into columns item, count.

    Item text is kept exactly as written: no quote handling and no
    "NA"/"null" style values turned into NaN.
    """
    try:
        df = pd.read_csv(
            path,
            sep=" ",
            header=None,
            names=["item", "count"],
            dtype={"item": str, "count": "int64"},
            quoting=csv.QUOTE_NONE,
            keep_default_na=False,
            encoding=ENCODING,
            encoding_errors=ENCODING_ERRORS,
        )
    except pd.errors.EmptyDataError:
        # Empty table -> empty backup file
        df = pd.DataFrame({"item": pd.Series(dtype=str), "count": pd.Series(dtype="int64")})
    return df


def summarize_backup(df: pd.DataFrame) -> Dict[str, object]:
    bands = {band.value: 0 for band in Band}
    for count in df["count"]:
        bands[band_for(int(count)).value] += 1

    top_item = None
    if len(df):
        # idxmax returns the first max, and rows are alphabetical
        top_item = str(df.loc[df["count"].idxmax(), "item"])

    return {
        "distinct_items": int(len(df)),
        "total_purchases": int(df["count"].sum()),
        "top_item": top_item,
        "bands": bands,
    }


def main(argv: Optional[List[str]] = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    path = Path(argv[0]) if argv else Path(Config().backup_path)

    # Stop early if file is missing
    if not path.exists():
        print(f"ERROR: Backup not found: {path}")
        print("Fix: run python -m src.app first, it writes the backup at startup")
        return

    df = load_backup(path)
    summary = summarize_backup(df)

    print("=== BACKUP INFO ===")
    print(f"Distinct items: {summary['distinct_items']}")
    print(f"Total purchases: {summary['total_purchases']}")
    print(f"Most purchased: {summary['top_item']}")

    print("\n=== ITEMS PER BAND ===")
    for band, n in summary["bands"].items():
        print(f"{band}: {n}")

    print("\nDONE ✅")


if __name__ == "__main__":
    main()
