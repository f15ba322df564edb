"""Resolve publisher credentials to their GitHub repositories."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable

from libindex_api.config.settings import get_settings
from libindex_api.domain import GithubCredentials, UserState
from libindex_api.errors import CredentialsError
from libindex_api.service.github_client import (
    GithubClient,
    GithubClientError,
    GithubUnauthorizedError,
)

LOGGER = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300.0


class UserStateResolver:
    """Looks up push-access repositories for a login, caching results briefly."""

    def __init__(
        self,
        *,
        client_factory: Callable[[GithubCredentials | None], GithubClient] = GithubClient.from_settings,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        trusted_logins: set[str] | None = None,
    ) -> None:
        self._client_factory = client_factory
        self._ttl_seconds = ttl_seconds
        self._trusted = (
            trusted_logins if trusted_logins is not None else get_settings().trusted_logins()
        )
        self._cache: dict[tuple[str, str], tuple[float, UserState]] = {}
        self._lock = threading.Lock()

    def resolve(self, credentials: GithubCredentials) -> UserState:
        key = (credentials.login.lower(), credentials.token)
        now = time.monotonic()
        with self._lock:
            cached = self._cache.get(key)
            if cached and now - cached[0] < self._ttl_seconds:
                return cached[1]

        client = self._client_factory(credentials)
        try:
            user = client.get_user()
            login = str(user.get("login") or credentials.login)
            repos = frozenset(client.list_push_repositories())
        except GithubUnauthorizedError as exc:
            raise CredentialsError("GitHub rejected the publisher credentials.") from exc
        except GithubClientError as exc:
            raise CredentialsError("Unable to resolve publisher repositories.") from exc

        state = UserState(login=login, repos=repos, trusted=login.lower() in self._trusted)
        LOGGER.debug("Resolved %s with %d repositories (trusted=%s)", login, len(repos), state.trusted)
        with self._lock:
            self._evict_expired(time.monotonic())
            self._cache[key] = (now, state)
        return state

    def _evict_expired(self, now: float) -> None:
        expired = [key for key, (stamp, _) in self._cache.items() if now - stamp >= self._ttl_seconds]
        for key in expired:
            del self._cache[key]

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
