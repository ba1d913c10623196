"""Equation Engine configuration.

Defaults live at module level. ``load_config`` layers an optional
JSON file and then the environment on top of them:

    EQUATION_MESSAGE_TTL   seconds a rejection message stays visible
    EQUATION_LEDGER_PATH   JSONL file for session events (off when unset)
"""

from __future__ import annotations
import json
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

VERSION = "v1_0"

# resolved against the working directory
DEFAULT_LEDGER_PATH = Path("data") / "ledger" / "session_ledger.jsonl"

# Keys a keyboard surface may feed into the live input.
ALLOWED_KEYS = re.compile(r"[a-zA-Z0-9/+\-*:()= ]")

MESSAGE_TTL = 3.0
ID_PREFIX = "el"


@dataclass
class EngineConfig:
    message_ttl: float = MESSAGE_TTL
    ledger_path: Optional[Path] = None
    id_prefix: str = ID_PREFIX


def load_json(path: Path, default: Any = None) -> Any:
    path = Path(path)
    if not path.is_file():
        return default
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _as_ttl(raw: Any, default: float) -> float:
    if raw is None:
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default
    return value if value >= 0 else default


def load_config(path: Optional[Path] = None) -> EngineConfig:
    """Build the effective configuration."""
    cfg = EngineConfig()

    data = load_json(path, default={}) if path else {}
    cfg.message_ttl = _as_ttl(data.get("message_ttl"), cfg.message_ttl)
    if data.get("ledger_path"):
        cfg.ledger_path = Path(data["ledger_path"])
    if data.get("id_prefix"):
        cfg.id_prefix = str(data["id_prefix"])

    cfg.message_ttl = _as_ttl(os.environ.get("EQUATION_MESSAGE_TTL"), cfg.message_ttl)
    env_ledger = os.environ.get("EQUATION_LEDGER_PATH")
    if env_ledger:
        cfg.ledger_path = Path(env_ledger)

    return cfg
