"""Equation Engine ledger.

Append-only JSONL history of session events (commit, reject, reset).
One JSON object per line; the file is only written when a ledger path
is configured.
"""

from __future__ import annotations
import datetime
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import VERSION


def now_utc_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


def append_jsonl(path: Path, record: Dict[str, Any]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")


def ledger_record(event: str, snapshot: Dict[str, Any], **extra: Any) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "version": VERSION,
        "timestamp_utc": now_utc_iso(),
        "event": event,
        "canvas_length": len(snapshot.get("canvas", [])),
        "state": snapshot.get("state"),
        "rendered": snapshot.get("rendered", ""),
    }
    record.update(extra)
    return record


def read_ledger(path: Path, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """Return ledger records, oldest first (the last ``limit`` if given)."""
    path = Path(path)
    if not path.is_file():
        return []
    records = []
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            records.append(json.loads(line))
    if limit is not None:
        records = records[-limit:]
    return records
