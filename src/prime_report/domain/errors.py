from __future__ import annotations


class StorageError(RuntimeError):
    # Base for report artifact failures. Both subclasses abort the run; nothing retries.
    def __init__(self, message: str, *, location: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.location = location
        self.cause = cause


class StorageWriteError(StorageError):
    # Artifact could not be created or fully written; any partial artifact is invalid.
    pass


class StorageReadError(StorageError):
    # Artifact could not be reopened or decoded after the write completed.
    pass
