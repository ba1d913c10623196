"""Equation Engine session.

A ``Session`` owns the mutable state of one editing session:

    canvas       committed elements and operations (append-only, or reset)
    live_input   the uncommitted keystroke buffer
    state        valid / inter / invalid, recomputed after every change
    message      transient rejection message, expires after ``message_ttl``

Event handlers (append_char, backspace, commit, reset, ...) always read
the session as it is at call time. Every handler first runs due timers,
then mutates, then recomputes the state.
"""

from __future__ import annotations
import itertools
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from .commit import CommitResult, commit as commit_input, reset as empty_session
from .config import ALLOWED_KEYS, MESSAGE_TTL, EngineConfig
from .elements import Element, element_to_dict, render
from .evaluator import evaluate_state
from .grammar import ExpressionState
from .ledger import append_jsonl, ledger_record
from .timers import Scheduler, TimerHandle


class Session:
    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.config = config or EngineConfig()
        self.scheduler = Scheduler(clock) if clock else Scheduler()
        self.canvas: List[Element] = []
        self.live_input = ""
        self.state = ExpressionState.VALID
        self._message: Optional[str] = None
        self._message_timer: Optional[TimerHandle] = None
        self._ids = itertools.count(1)

    # ─────────────────────────────
    # Derived state
    # ─────────────────────────────

    def _recompute(self) -> ExpressionState:
        self.state = evaluate_state(self.canvas, self.live_input)
        return self.state

    def _next_id(self) -> str:
        return f"{self.config.id_prefix}-{next(self._ids)}"

    def tick(self) -> int:
        return self.scheduler.run_due()

    @property
    def message(self) -> Optional[str]:
        self.tick()
        return self._message

    @property
    def committable(self) -> bool:
        return self.state != ExpressionState.INVALID

    # ─────────────────────────────
    # Messages
    # ─────────────────────────────

    def clear_message(self) -> None:
        if self._message_timer is not None:
            self._message_timer.cancel()
            self._message_timer = None
        self._message = None

    def show_message(self, text: str) -> None:
        """Show ``text`` until it expires or a newer message replaces it."""
        self.clear_message()
        self._message = text
        ttl = self.config.message_ttl
        if not ttl >= 0:
            ttl = MESSAGE_TTL
        self._message_timer = self.scheduler.call_later(ttl, self._expire_message)

    def _expire_message(self) -> None:
        self._message = None
        self._message_timer = None

    # ─────────────────────────────
    # Live input events
    # ─────────────────────────────

    def append_char(self, ch: str) -> bool:
        """Append one allowed key to the live input; other keys are ignored."""
        self.tick()
        if not isinstance(ch, str) or not ALLOWED_KEYS.fullmatch(ch):
            return False
        self.live_input += ch
        self._recompute()
        return True

    def type_text(self, text: str) -> int:
        """Feed ``text`` one key at a time; return how many keys were accepted."""
        return sum(1 for ch in text if self.append_char(ch))

    def backspace(self) -> None:
        self.tick()
        if self.live_input:
            self.live_input = self.live_input[:-1]
        self._recompute()

    def clear_input(self) -> None:
        self.tick()
        self.live_input = ""
        self._recompute()

    # ─────────────────────────────
    # Commit / reset
    # ─────────────────────────────

    def commit(self) -> CommitResult:
        self.tick()
        self.clear_message()
        state = self._recompute()
        before = len(self.canvas)
        result = commit_input(
            self.canvas, self.live_input, state, new_id=self._next_id
        )

        self.canvas = result.canvas
        self.live_input = result.live_input
        self._recompute()

        if result.message:
            self.show_message(result.message)
            self._log("reject", input=result.live_input, message=result.message)
        elif result.committed:
            self._log("commit", added=len(result.canvas) - before)
        return result

    def reset(self) -> None:
        self.tick()
        fresh = empty_session()
        self.clear_message()
        self.canvas = fresh.canvas
        self.live_input = fresh.live_input
        self._recompute()
        self._log("reset")

    # ─────────────────────────────
    # Inspection
    # ─────────────────────────────

    def snapshot(self) -> Dict[str, Any]:
        return {
            "canvas": [element_to_dict(el) for el in self.canvas],
            "live_input": self.live_input,
            "state": self.state.value,
            "message": self.message,
            "rendered": render(self.canvas),
        }

    def _log(self, event: str, **extra: Any) -> None:
        if self.config.ledger_path is None:
            return
        append_jsonl(Path(self.config.ledger_path), ledger_record(event, self.snapshot(), **extra))
