from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal

HistoryKind = Literal["discovery"]


@dataclass(frozen=True, slots=True)
class HistoryEvent:
    kind: HistoryKind
    text: str
    timestamp: datetime

    @staticmethod
    def discovery(*, text: str) -> "HistoryEvent":
        # Stamped when applied to the session, not when the model produced it.
        return HistoryEvent(kind="discovery", text=text, timestamp=datetime.now(timezone.utc))
