"""Content-addressed storage for uploaded POM files and GitHub data."""

from __future__ import annotations

import logging
import os
import re
import tempfile
from dataclasses import dataclass
from pathlib import Path

from libindex_api.config.settings import get_settings
from libindex_api.domain import RepositoryIdentity
from libindex_api.errors import StagingError

LOGGER = logging.getLogger(__name__)

POM_DIR = "poms"
TMP_DIR = "tmp"
GITHUB_DIR = "github"

_DIGEST_PATTERN = re.compile(r"^[0-9a-f]{40}$")
_SAFE_PATTERN = re.compile(r"[^A-Za-z0-9._-]+")


def _safe_component(value: str) -> str:
    cleaned = _SAFE_PATTERN.sub("_", value.strip())
    cleaned = cleaned.strip("._-")
    return cleaned or "unknown"


def _check_digest(digest: str) -> str:
    if not _DIGEST_PATTERN.match(digest):
        raise StagingError(f"Invalid content digest '{digest}'")
    return digest


def get_storage_root() -> Path:
    root = Path(get_settings().storage_root).expanduser().resolve()
    root.mkdir(parents=True, exist_ok=True)
    return root


@dataclass(frozen=True)
class StagedContent:
    digest: str
    path: Path


class ContentStore:
    def __init__(self, root: Path | None = None) -> None:
        self._root = Path(root).expanduser().resolve() if root else get_storage_root()

    @property
    def root(self) -> Path:
        return self._root

    def permanent_path(self, digest: str) -> Path:
        return self._root / POM_DIR / f"{_check_digest(digest)}.pom"

    def github_dir(self, identity: RepositoryIdentity) -> Path:
        return self._root / GITHUB_DIR / _safe_component(identity.owner) / _safe_component(identity.name)

    def stage(self, digest: str, data: bytes) -> StagedContent:
        """Write ``data`` to a fresh temp file; concurrent stages of one digest never collide."""
        _check_digest(digest)
        tmp_dir = self._root / TMP_DIR
        try:
            tmp_dir.mkdir(parents=True, exist_ok=True)
            fd, name = tempfile.mkstemp(prefix=f"{digest}-", suffix=".pom", dir=tmp_dir)
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
        except OSError as exc:
            raise StagingError(f"Unable to stage content {digest}") from exc
        return StagedContent(digest=digest, path=Path(name))

    def promote(self, staged: StagedContent) -> Path:
        """Move staged content to its permanent path. Promoting twice is a no-op."""
        target = self.permanent_path(staged.digest)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            if target.is_file():
                self.discard(staged)
                return target
            if not staged.path.is_file():
                raise StagingError(f"Staged content for {staged.digest} is missing")
            os.replace(staged.path, target)
        except OSError as exc:
            raise StagingError(f"Unable to promote content {staged.digest}") from exc
        return target

    def discard(self, staged: StagedContent) -> None:
        try:
            staged.path.unlink(missing_ok=True)
        except OSError as exc:
            raise StagingError(f"Unable to discard staged content {staged.digest}") from exc

    def read(self, digest: str) -> bytes:
        path = self.permanent_path(digest)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StagingError(f"Unable to read content {digest}") from exc

    def write_github_file(self, identity: RepositoryIdentity, filename: str, content: str) -> Path:
        directory = self.github_dir(identity)
        directory.mkdir(parents=True, exist_ok=True)
        target = directory / _safe_component(filename)
        fd, name = tempfile.mkstemp(prefix=f".{target.name}-", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(content)
            os.replace(name, target)
        except OSError:
            Path(name).unlink(missing_ok=True)
            raise
        LOGGER.debug("Wrote %s for %s", target.name, identity)
        return target
