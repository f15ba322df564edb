"""Error taxonomy for the ingestion pipeline."""

from __future__ import annotations


class IngestionError(Exception):
    """Base error for ingestion pipeline failures."""


class StagingError(IngestionError):
    """Raised when staging, promoting or discarding uploaded content fails."""


class PomParseError(IngestionError):
    """Raised when a POM is malformed or misses mandatory coordinates."""


class AuthorizationError(IngestionError):
    """Raised when a publisher may not claim a repository."""


class EnrichmentError(IngestionError):
    """Raised when a GitHub side fetch fails. Never surfaced to publishers."""


class IndexWriteError(IngestionError):
    """Raised when a catalog read or write fails."""


class CredentialsError(IngestionError):
    """Raised when publisher credentials cannot be resolved to a user."""
