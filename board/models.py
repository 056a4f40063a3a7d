from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Comment:
    author: str
    text: str
    submitted_at: datetime = field(default_factory=_utcnow)
