"""Interactive prompts. Reads answers from stdin, writes questions to stdout."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Protocol, TextIO, runtime_checkable

from lifecommit.errors import PromptAborted
from lifecommit.models import CommitInput, parse_date

if TYPE_CHECKING:
    from lifecommit.models import Lifemoji

EDIT_CHOICES = ("Edit", "Remove")


@runtime_checkable
class Prompter(Protocol):
    """Collects commit fields from the user."""

    def ask_commit(
        self, lifemojis: list[Lifemoji], defaults: CommitInput | None = None
    ) -> CommitInput:
        """Ask for lifemoji, title, message and date."""
        ...

    def ask_edit_choice(self) -> str:
        """Return "Edit" or "Remove"."""
        ...


class TerminalPrompter:
    """Line-based prompter. Empty answers fall back to the defaults when given."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout

    def ask_commit(
        self, lifemojis: list[Lifemoji], defaults: CommitInput | None = None
    ) -> CommitInput:
        lifemoji = self._ask_lifemoji(lifemojis, defaults.lifemoji if defaults else None)
        title = self._ask("Title", defaults.title if defaults else None)
        message = self._ask("Message", defaults.message if defaults else None, allow_empty=True)
        date = self._ask_date(defaults.date if defaults else None)
        return CommitInput(lifemoji=lifemoji, title=title, message=message, date=date)

    def ask_edit_choice(self) -> str:
        while True:
            answer = self._ask("Edit or Remove this commit? [Edit/Remove]", "Edit")
            for choice in EDIT_CHOICES:
                if answer.lower() in (choice.lower(), choice[0].lower()):
                    return choice
            self._write("Please answer Edit or Remove.\n")

    def _ask_lifemoji(self, lifemojis: list[Lifemoji], default: str | None) -> str:
        for i, lifemoji in enumerate(lifemojis, 1):
            self._write(f"{i:>3}. {lifemoji.emoji} - {lifemoji.code} - {lifemoji.description}\n")
        while True:
            answer = self._ask("Choose a lifemoji (number, code or emoji)", default)
            if answer.isdigit() and 1 <= int(answer) <= len(lifemojis):
                return lifemojis[int(answer) - 1].emoji
            for lifemoji in lifemojis:
                if lifemoji.matches(answer):
                    return lifemoji.emoji
            self._write(f"Unknown lifemoji: {answer}\n")

    def _ask_date(self, default: str | None) -> str:
        while True:
            answer = self._ask("Date (YYYY-MM-DD or YYYY-MM-DDTHH:MM)", default)
            try:
                parse_date(answer)
            except ValueError:
                self._write(f"Not a valid date: {answer}\n")
                continue
            return answer

    def _ask(self, question: str, default: str | None = None, allow_empty: bool = False) -> str:
        suffix = f" [{default}]" if default else ""
        while True:
            self._write(f"? {question}{suffix}: ")
            line = self._read_line()
            if line is None:
                raise PromptAborted()
            answer = line.strip()
            if answer:
                return answer
            if default is not None:
                return default
            if allow_empty:
                return ""

    def _read_line(self) -> str | None:
        raw = self._stdin.readline()
        if not raw:
            return None
        return raw.rstrip("\n")

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()
