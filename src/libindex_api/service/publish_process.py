"""Publish pipeline: stage, parse, resolve, authorize, enrich and index a POM.

Outcomes:

* non-POM upload (``*.pom.sha1``, jars, ...): ``IGNORED`` without touching disk
* POM without a GitHub SCM reference: ``IGNORED``, staged file discarded
* malformed POM: ``MALFORMED``, staged file discarded
* publisher lacks write access to the repository: ``UNAUTHORIZED``, staged file discarded
* otherwise: POM promoted, GitHub enrichment scheduled, catalog upserted, ``INDEXED``

Staging and catalog failures propagate as ``StagingError`` / ``IndexWriteError``.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable

from libindex_api.domain import ArtifactUpload, PublishOutcome, PublishResult
from libindex_api.errors import AuthorizationError, PomParseError, StagingError
from libindex_api.service.catalog_convert import build_search_record, convert
from libindex_api.service.enrichment import EnrichmentFetcher
from libindex_api.service.index_writer import IndexWriter
from libindex_api.service.pom_parser import parse_pom
from libindex_api.service.publish_auth import require_authorized
from libindex_api.service.repo_identity import resolve_repository
from libindex_api.storage import ContentStore, StagedContent

LOGGER = logging.getLogger(__name__)

REASON_NON_POM = "non_pom"
REASON_NO_REPOSITORY = "no_repository"
REASON_PARSE_FAILED = "parse_failed"
REASON_FORBIDDEN = "forbidden"
REASON_INDEXED = "indexed"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PublishProcess:
    def __init__(
        self,
        *,
        store: ContentStore,
        writer: IndexWriter,
        enrichment: EnrichmentFetcher,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._writer = writer
        self._enrichment = enrichment
        self._clock = clock

    @property
    def enrichment(self) -> EnrichmentFetcher:
        return self._enrichment

    async def publish(self, upload: ArtifactUpload) -> PublishResult:
        if not upload.is_pom:
            LOGGER.info("Ignoring non-POM upload %s", upload.path)
            return PublishResult(outcome=PublishOutcome.IGNORED, reason=REASON_NON_POM)

        digest = upload.digest
        staged = await asyncio.to_thread(self._store.stage, digest, upload.data)
        try:
            coordinate = await asyncio.to_thread(parse_pom, staged.path)
        except PomParseError as exc:
            await self._discard(staged)
            LOGGER.info("Rejected malformed POM %s (%s): %s", upload.path, digest, exc)
            return PublishResult(
                outcome=PublishOutcome.MALFORMED,
                reason=REASON_PARSE_FAILED,
                digest=digest,
                message=str(exc),
            )
        except Exception:
            await self._discard_quietly(staged)
            raise

        repository = resolve_repository(coordinate)
        if repository is None:
            await self._discard(staged)
            LOGGER.info("Ignoring %s from %s (%s): no GitHub SCM reference", coordinate, upload.path, digest)
            return PublishResult(
                outcome=PublishOutcome.IGNORED,
                reason=REASON_NO_REPOSITORY,
                digest=digest,
                coordinate=coordinate,
            )

        try:
            require_authorized(upload.user_state, repository)
        except AuthorizationError as exc:
            await self._discard(staged)
            LOGGER.info("Rejected %s (%s): %s", coordinate, digest, exc)
            return PublishResult(
                outcome=PublishOutcome.UNAUTHORIZED,
                reason=REASON_FORBIDDEN,
                digest=digest,
                coordinate=coordinate,
                repository=repository,
                message=str(exc),
            )

        await asyncio.to_thread(self._store.promote, staged)
        self._enrichment.schedule(repository, upload.credentials, upload.flags)

        search_record = build_search_record(
            coordinate,
            digest=digest,
            size=len(upload.data),
            created=self._clock(),
            path=upload.path,
        )
        project, release = convert(
            coordinate,
            search_record,
            repository=repository,
            keywords=upload.keywords,
        )
        ids = await self._writer.index(project, release)
        LOGGER.info(
            "Indexed %s from %s (%s, repository %s, project %s, release %s)",
            coordinate,
            upload.path,
            digest,
            repository,
            ids.project_id,
            ids.release_id,
        )
        return PublishResult(
            outcome=PublishOutcome.INDEXED,
            reason=REASON_INDEXED,
            digest=digest,
            coordinate=coordinate,
            repository=repository,
            project_id=ids.project_id,
            release_id=ids.release_id,
        )

    async def _discard(self, staged: StagedContent) -> None:
        await asyncio.to_thread(self._store.discard, staged)

    async def _discard_quietly(self, staged: StagedContent) -> None:
        try:
            await self._discard(staged)
        except StagingError:
            LOGGER.warning("Failed to discard staged content %s", staged.path, exc_info=True)
