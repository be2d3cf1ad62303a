# ================================
# core/clinical/notes.py
# ================================

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ClinicalNote:
    raw_text: str = ""
    summary: Optional[str] = None
    last_updated: datetime = field(default_factory=now_utc)
