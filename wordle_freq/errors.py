"""Error types raised by the solver and the word-list loader."""

from enum import Enum


class ErrorKind(Enum):
    RESOURCE_MISSING = "resource_missing"
    INTERNAL_INCONSISTENCY = "internal_inconsistency"


class SolverError(Exception):
    """Base class for unrecoverable solver failures."""

    kind: ErrorKind = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResourceMissingError(SolverError):
    """The word list could not be read at startup."""

    kind = ErrorKind.RESOURCE_MISSING


class InternalInconsistencyError(SolverError):
    """Solver and judge disagree: invalid guess or no candidates left."""

    kind = ErrorKind.INTERNAL_INCONSISTENCY
