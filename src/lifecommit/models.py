"""Commit and lifemoji records plus date helpers."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime, timezone

COMMIT_FIELDS = ("lifemoji", "title", "message", "date", "id")
LIFEMOJI_FIELDS = ("emoji", "code", "description")
SHORT_ID_LENGTH = 6


@dataclass
class Commit:
    """A single dated journal entry."""

    id: str
    lifemoji: str
    title: str
    message: str
    date: str

    @classmethod
    def from_dict(cls, data: dict) -> Commit:
        """Build from a stored JSON object. Raises ValueError on missing or non-string fields."""
        missing = [name for name in COMMIT_FIELDS if not isinstance(data.get(name), str)]
        if missing:
            raise ValueError(f"missing or invalid fields: {', '.join(missing)}")
        return cls(**{name: data[name] for name in COMMIT_FIELDS})

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in COMMIT_FIELDS}

    @property
    def short_id(self) -> str:
        return self.id[:SHORT_ID_LENGTH]


@dataclass
class CommitInput:
    """Fields collected for a new commit."""

    lifemoji: str
    title: str
    message: str
    date: str


@dataclass
class CommitPatch:
    """Partial update for an existing commit. None leaves a field untouched."""

    lifemoji: str | None = None
    title: str | None = None
    message: str | None = None
    date: str | None = None

    @classmethod
    def from_input(cls, entry: CommitInput) -> CommitPatch:
        return cls(
            lifemoji=entry.lifemoji,
            title=entry.title,
            message=entry.message,
            date=entry.date,
        )

    def changes(self) -> dict[str, str]:
        return {
            f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class Lifemoji:
    """Vocabulary entry used to tag a commit."""

    emoji: str
    code: str
    description: str

    @classmethod
    def from_dict(cls, data: dict) -> Lifemoji:
        missing = [name for name in LIFEMOJI_FIELDS if not isinstance(data.get(name), str)]
        if missing:
            raise ValueError(f"missing or invalid fields: {', '.join(missing)}")
        return cls(emoji=data["emoji"], code=data["code"], description=data["description"])

    def matches(self, value: str) -> bool:
        return value in (self.emoji, self.code)


def parse_date(value: str) -> datetime:
    """Parse an ISO-8601 date or datetime. Naive values are taken as UTC.

    Accepts the ``...T10:00:00.000Z`` form written by JavaScript date pickers.
    Raises ValueError if the string is not a date.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_date(value: str) -> str:
    """Render a stored date as YYYY/M/D."""
    parsed = parse_date(value)
    return f"{parsed.year}/{parsed.month}/{parsed.day}"
