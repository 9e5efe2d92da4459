"""Exceptions raised by the dit version control core."""

from __future__ import annotations


class DitCoreError(Exception):
    """Base class of every error the dit core raises."""

    prefix = ""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        if self.prefix:
            return f"{self.prefix}: {self.message}"
        return self.message


class BranchError(DitCoreError):
    """Errors related to branches."""

    prefix = "branch error"


class StagingError(DitCoreError):
    """Errors related to the staging area."""

    prefix = "staging error"


class CommitError(DitCoreError):
    """Errors related to commits."""

    prefix = "commit error"


class TreeError(DitCoreError):
    """Errors related to trees."""

    prefix = "tree error"


class BlobError(DitCoreError):
    """Errors related to blobs."""

    prefix = "blob error"


class ProjectError(DitCoreError):
    """Errors related to the layout of a dit project."""

    prefix = "project error"


class FsError(DitCoreError):
    """Filesystem errors."""

    prefix = "filesystem error"


class OtherError(DitCoreError):
    """Errors that fit no other category."""

    prefix = "error"