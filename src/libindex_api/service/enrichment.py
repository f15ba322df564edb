"""Best-effort GitHub enrichment scheduled alongside catalog writes."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Awaitable, Callable

from libindex_api.config.settings import get_settings
from libindex_api.domain import EnrichmentFlags, GithubCredentials, RepositoryIdentity
from libindex_api.errors import EnrichmentError
from libindex_api.service.github_client import GithubClient, GithubClientError
from libindex_api.storage import ContentStore

LOGGER = logging.getLogger(__name__)

REPO_INFO_FILE = "repo.json"
CONTRIBUTORS_FILE = "contributors.json"
README_FILE = "README.html"

ClientFactory = Callable[[GithubCredentials | None], GithubClient]


class EnrichmentFetcher:
    """Fire-and-forget fetches of repository info, contributors and readme.

    Tasks never share state with the index write path; their results land in the
    content store's GitHub directory and every failure is logged and dropped.
    """

    def __init__(
        self,
        store: ContentStore,
        *,
        client_factory: ClientFactory = GithubClient.from_settings,
        enabled: bool | None = None,
    ) -> None:
        self._store = store
        self._client_factory = client_factory
        self._enabled = get_settings().enrichment_enabled if enabled is None else enabled
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def schedule(
        self,
        identity: RepositoryIdentity,
        credentials: GithubCredentials | None,
        flags: EnrichmentFlags,
    ) -> asyncio.Task[None] | None:
        if not self._enabled or not flags.any():
            return None
        task = asyncio.create_task(
            self._run(identity, credentials, flags),
            name=f"enrich-{identity.owner}-{identity.name}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _run(
        self,
        identity: RepositoryIdentity,
        credentials: GithubCredentials | None,
        flags: EnrichmentFlags,
    ) -> None:
        try:
            client = self._client_factory(credentials)
        except Exception:
            LOGGER.warning("Unable to build GitHub client for %s", identity, exc_info=True)
            return
        fetches: list[tuple[str, Callable[[], Awaitable[None]]]] = []
        if flags.info:
            fetches.append(("info", lambda: self._fetch_info(client, identity)))
        if flags.contributors:
            fetches.append(("contributors", lambda: self._fetch_contributors(client, identity)))
        if flags.readme:
            fetches.append(("readme", lambda: self._fetch_readme(client, identity)))
        results = await asyncio.gather(
            *(self._guard(kind, identity, fetch) for kind, fetch in fetches),
        )
        LOGGER.info(
            "GitHub enrichment for %s finished (%d/%d fetches succeeded)",
            identity,
            sum(1 for ok in results if ok),
            len(results),
        )

    async def _guard(
        self,
        kind: str,
        identity: RepositoryIdentity,
        fetch: Callable[[], Awaitable[None]],
    ) -> bool:
        try:
            await fetch()
        except EnrichmentError as exc:
            LOGGER.warning("%s", exc, exc_info=True)
            return False
        except Exception:
            LOGGER.exception("Unexpected failure during GitHub %s fetch for %s", kind, identity)
            return False
        return True

    async def _fetch_info(self, client: GithubClient, identity: RepositoryIdentity) -> None:
        try:
            info = await asyncio.to_thread(client.fetch_repo_info, identity)
            await self._write_json(identity, REPO_INFO_FILE, info)
        except (GithubClientError, OSError) as exc:
            raise EnrichmentError(f"GitHub info fetch failed for {identity}") from exc

    async def _fetch_contributors(self, client: GithubClient, identity: RepositoryIdentity) -> None:
        try:
            contributors = await asyncio.to_thread(client.fetch_contributors, identity)
            await self._write_json(identity, CONTRIBUTORS_FILE, contributors)
        except (GithubClientError, OSError) as exc:
            raise EnrichmentError(f"GitHub contributors fetch failed for {identity}") from exc

    async def _fetch_readme(self, client: GithubClient, identity: RepositoryIdentity) -> None:
        try:
            readme = await asyncio.to_thread(client.fetch_readme, identity)
            await asyncio.to_thread(self._store.write_github_file, identity, README_FILE, readme)
        except (GithubClientError, OSError) as exc:
            raise EnrichmentError(f"GitHub readme fetch failed for {identity}") from exc

    async def _write_json(self, identity: RepositoryIdentity, filename: str, payload: Any) -> None:
        content = json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
        await asyncio.to_thread(self._store.write_github_file, identity, filename, content)
