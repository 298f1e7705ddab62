"""Error hierarchy for archview.

Error layers:
- ArchviewError: Base class for all archview errors
- DomainError: Lookups and index conditions the caller can act on
- InfrastructureError: Filesystem and configuration failures

The CLI maps any ArchviewError to a one-line message on stderr and exit code 1.
"""

from pathlib import Path


class ArchviewError(Exception):
    """Base class for all archview errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(ArchviewError):
    """Base class for domain errors."""


class NotFoundError(DomainError):
    """Record not found."""


class EmptyIndexError(DomainError):
    """A walk found no accession records to index."""

    def __init__(self, root: str | Path, reason: str = "no accession records found") -> None:
        super().__init__(f"Can't build title index for {root}, {reason}", code="EMPTY_INDEX")
        self.root = Path(root)


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(ArchviewError):
    """Base class for infrastructure/system errors."""


class RecordIOError(InfrastructureError):
    """A record directory or file could not be read."""

    def __init__(self, path: str | Path, cause: BaseException | str) -> None:
        super().__init__(f"Can't read {path}, {cause}", code="RECORD_IO")
        self.path = Path(path)
        self.cause = cause


class RecordParseError(InfrastructureError):
    """A record file is not valid JSON for the expected record shape."""

    def __init__(self, path: str | Path, cause: BaseException | str) -> None:
        super().__init__(f"Can't parse {path}, {cause}", code="RECORD_PARSE")
        self.path = Path(path)
        self.cause = cause


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
