"""
Run output for batch replays.

- write_csv:      one row per game, guess/pattern history spread over columns.
- write_manifest: JSON dump of the run configuration and word list report.
- timestamp_id:   compact UTC run id.

Patterns get a leading apostrophe so spreadsheet apps don't read "-GYY-"
as a formula.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import datetime as dt


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_guesses: int, N: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Columns:
      N, answer, status, success, guesses, rejected, time_ms,
      guess_1, patt_1, ..., guess_<max_guesses>, patt_<max_guesses>
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["N", "answer", "status", "success", "guesses", "rejected", "time_ms"]
    for i in range(1, max_guesses + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "N": N,
                "answer": r["answer"],
                "status": r["status"],
                "success": r["success"],
                "guesses": r["guesses"],
                "rejected": r.get("rejected", 0),
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            for i in range(1, max_guesses + 1):
                g, patt = hist[i - 1] if i <= len(hist) else ("", "")
                row[f"guess_{i}"] = g
                row[f"patt_{i}"] = _excel_safe_pattern(patt)
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump the run configuration and summary as indented JSON."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC run id for file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
