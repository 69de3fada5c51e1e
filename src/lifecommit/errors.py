"""Error kinds raised by the data layer and reported by the command handlers."""

from __future__ import annotations


class LifeCommitError(Exception):
    """Base class. The message is shown to the user as-is."""


class NotInitialized(LifeCommitError):
    def __init__(self, message: str = "Please initialize your life first.") -> None:
        super().__init__(message)


class AlreadyInitialized(LifeCommitError):
    def __init__(self, message: str = "Your life had been initialized. Start commit now!") -> None:
        super().__init__(message)


class CorruptStore(LifeCommitError):
    pass


class CommitNotFound(LifeCommitError):
    def __init__(self, message: str = "Commit id does not exist.") -> None:
        super().__init__(message)


class MissingArgument(LifeCommitError):
    pass


class NetworkUnavailable(LifeCommitError):
    pass


class ExportFailed(LifeCommitError):
    pass


class InvalidCommit(LifeCommitError):
    pass


class PromptAborted(LifeCommitError):
    def __init__(self, message: str = "Input closed before the prompt was answered.") -> None:
        super().__init__(message)


class StoreUnavailable(LifeCommitError):
    pass
