"""life-commit operations: the commit CRUD plus the command handlers around it.

Responsibilities:
1. Data operations over the commit store (init, add, list, find, edit, export)
2. Command handlers: prompt, call the data operation, report the outcome
3. Error reporting: every LifeCommitError ends the command with exit status 1
"""

from __future__ import annotations

import logging
import sys
import uuid
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from lifecommit.config import LifeConfig
from lifecommit.errors import (
    CommitNotFound,
    CorruptStore,
    InvalidCommit,
    LifeCommitError,
    MissingArgument,
    NotInitialized,
)
from lifecommit.lifemoji.cache import LifemojiCache
from lifecommit.lifemoji.client import HttpLifemojiClient
from lifecommit.models import Commit, CommitInput, CommitPatch, format_date, parse_date
from lifecommit.paths import StoragePaths
from lifecommit.prompts import TerminalPrompter
from lifecommit.site import export_site
from lifecommit.store import CommitStore

if TYPE_CHECKING:
    from datetime import datetime

    from lifecommit.lifemoji.client import LifemojiClient
    from lifecommit.models import Lifemoji
    from lifecommit.prompts import Prompter

logger = logging.getLogger(__name__)

REMOVE = "Remove"


@dataclass
class EditResult:
    """Outcome of an edit: the commit as edited, or as it was before removal."""

    action: Literal["edited", "removed"]
    commit: Commit
    count: int = 1


def find_by_id_prefix(commits: list[Commit], prefix: str) -> int:
    """Index of the first commit whose id contains ``prefix`` anywhere.

    Despite the name this is a substring match, and the empty string matches
    the first commit. Ambiguous fragments resolve to the first match.
    """
    for index, commit in enumerate(commits):
        if prefix in commit.id:
            return index
    raise CommitNotFound()


def sort_newest_first(commits: list[Commit]) -> list[Commit]:
    """Sort by date descending. Equal timestamps keep their stored order."""
    return sorted(commits, key=_date_key, reverse=True)


def log_line(commit: Commit) -> str:
    try:
        when = format_date(commit.date)
    except ValueError as e:
        raise _invalid_stored_date(commit) from e
    return f"* {commit.short_id} - {commit.lifemoji}  {commit.title} {when}"


def _invalid_stored_date(commit: Commit) -> CorruptStore:
    return CorruptStore(f"Commit {commit.short_id} has an invalid date: {commit.date!r}")


def _date_key(commit: Commit) -> datetime:
    try:
        return parse_date(commit.date)
    except ValueError as e:
        raise _invalid_stored_date(commit) from e


def _validate_date(value: str) -> None:
    try:
        parse_date(value)
    except ValueError as e:
        raise InvalidCommit(f"Not a valid date: {value!r}") from e


class LifeCommit:
    """The journal. Owns the store, the lifemoji cache and the prompter."""

    def __init__(
        self,
        config: LifeConfig,
        *,
        client: LifemojiClient | None = None,
        prompter: Prompter | None = None,
    ) -> None:
        self.config = config
        self.paths = StoragePaths(config.home_dir)
        self.store = CommitStore(self.paths)
        self.lifemojis = LifemojiCache(
            self.paths,
            client or HttpLifemojiClient(config.lifemoji.base_url, config.lifemoji.timeout),
            config.lifemoji.path,
        )
        self.prompter = prompter or TerminalPrompter()

    # ── Data operations ───────────────────────────────────────

    def initialize(self) -> None:
        self.store.initialize()

    def add(self, entry: CommitInput, vocabulary: list[Lifemoji] | None = None) -> Commit:
        """Append a new commit with a fresh id and persist the store."""
        commits = self.store.load()
        _validate_date(entry.date)
        if vocabulary is not None and not any(lm.matches(entry.lifemoji) for lm in vocabulary):
            raise InvalidCommit(f"Unknown lifemoji: {entry.lifemoji!r}")

        existing = {c.id for c in commits}
        new_id = str(uuid.uuid4())
        while new_id in existing:
            new_id = str(uuid.uuid4())

        commit = Commit(
            id=new_id,
            lifemoji=entry.lifemoji,
            title=entry.title,
            message=entry.message,
            date=entry.date,
        )
        commits.append(commit)
        self.store.save(commits)
        logger.info("Added commit %s", commit.short_id)
        return commit

    def list_commits(self) -> list[Commit]:
        return sort_newest_first(self.store.load())

    def log_lines(self) -> list[str]:
        return [log_line(commit) for commit in self.list_commits()]

    def find_by_id_prefix(self, prefix: str) -> int:
        return find_by_id_prefix(self.store.load(), prefix)

    def edit(self, prefix: str, choose: str, patch: CommitPatch | None = None) -> EditResult:
        """Remove the matched commit, or merge ``patch`` into it. ``id`` never changes."""
        commits = self.store.load()
        index = find_by_id_prefix(commits, prefix)

        if choose == REMOVE:
            removed = commits.pop(index)
            self.store.save(commits)
            logger.info("Removed commit %s", removed.short_id)
            return EditResult(action="removed", commit=removed)

        changes = patch.changes() if patch else {}
        if "date" in changes:
            _validate_date(changes["date"])
        commits[index] = replace(commits[index], **changes)
        self.store.save(commits)
        logger.info(
            "Edited commit %s (%s)", commits[index].short_id, ", ".join(changes) or "no fields"
        )
        return EditResult(action="edited", commit=commits[index])

    def export_site(self, folder: str | None = None) -> Path:
        commits = sort_newest_first(self.store.load())
        target = Path.cwd() / (folder or self.config.site_folder)
        return export_site(commits, target)

    # ── Command handlers ──────────────────────────────────────

    async def run(self, command: str, args: list[str]) -> int:
        """Run one CLI command. Returns the process exit status."""
        handlers = {
            "init": self.cmd_init,
            "commit": self.cmd_commit,
            "log": self.cmd_log,
            "edit": self.cmd_edit,
            "dir": self.cmd_dir,
        }
        handler = handlers[command]
        try:
            await handler(args)
        except LifeCommitError as e:
            logger.debug("Command %s failed", command, exc_info=True)
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        return 0

    async def cmd_init(self, args: list[str]) -> None:
        self.initialize()
        print("Your life has been initialized successfully!")

    async def cmd_commit(self, args: list[str]) -> None:
        self._require_initialized()
        vocabulary = await self.lifemojis.fetch()
        entry = self.prompter.ask_commit(vocabulary)
        self.add(entry, vocabulary)
        print("1 commit added")

    async def cmd_log(self, args: list[str]) -> None:
        for line in self.log_lines():
            print(line)

    async def cmd_edit(self, args: list[str]) -> None:
        self._require_initialized()
        if not args:
            raise MissingArgument("Please specify the commit id.")

        commits = self.store.load()
        current = commits[find_by_id_prefix(commits, args[0])]
        print(log_line(current))

        choose = self.prompter.ask_edit_choice()
        if choose == REMOVE:
            result = self.edit(current.id, REMOVE)
            print(f"{result.count} commit removed")
            return

        vocabulary = await self.lifemojis.fetch()
        defaults = CommitInput(
            lifemoji=current.lifemoji,
            title=current.title,
            message=current.message,
            date=current.date,
        )
        entry = self.prompter.ask_commit(vocabulary, defaults)
        result = self.edit(current.id, choose, CommitPatch.from_input(entry))
        print(f"{result.count} commit edited")

    async def cmd_dir(self, args: list[str]) -> None:
        self._require_initialized()
        target = self.export_site(args[0] if args else None)
        print(f"Successfully create folder at: {target}\n")
        print("Run the following commands to visualize your commits!")
        print(f"$ cd {target}")
        print("$ python -m http.server")

    def _require_initialized(self) -> None:
        if not self.store.is_initialized():
            raise NotInitialized()
