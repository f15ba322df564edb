"""HTTP client for the GitHub REST API."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import urlencode, urljoin

import requests
from requests import Response

from libindex_api.config.settings import get_settings
from libindex_api.domain import GithubCredentials, RepositoryIdentity

MAX_PAGES = 10
PAGE_SIZE = 100


class GithubClientError(Exception):
    """Base error for GitHub client operations."""


class GithubNotFoundError(GithubClientError):
    """Raised when GitHub returns 404."""


class GithubUnauthorizedError(GithubClientError):
    """Raised when GitHub rejects the credentials or rate-limits them."""


class GithubRequestError(GithubClientError):
    """Raised for unexpected GitHub failures."""


class GithubClient:
    def __init__(
        self,
        *,
        base_url: str,
        credentials: GithubCredentials | None,
        timeout_seconds: int,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._credentials = credentials
        self._timeout_seconds = timeout_seconds
        self._session = session

    @classmethod
    def from_settings(cls, credentials: GithubCredentials | None) -> GithubClient:
        settings = get_settings()
        return cls(
            base_url=settings.github_api_url,
            credentials=credentials,
            timeout_seconds=int(settings.github_timeout_seconds),
        )

    def get_user(self) -> dict[str, Any]:
        return self._request_json("GET", "/user")

    def list_push_repositories(self) -> list[RepositoryIdentity]:
        """Repositories the authenticated user may push to."""
        items = self._request_paginated(
            "/user/repos",
            params={"affiliation": "owner,collaborator,organization_member"},
        )
        repos: list[RepositoryIdentity] = []
        for item in items:
            permissions = item.get("permissions") or {}
            full_name = item.get("full_name")
            if not permissions.get("push") or not isinstance(full_name, str):
                continue
            try:
                repos.append(RepositoryIdentity.parse(full_name))
            except ValueError:
                continue
        return repos

    def fetch_repo_info(self, identity: RepositoryIdentity) -> dict[str, Any]:
        return self._request_json("GET", f"/repos/{identity.owner}/{identity.name}")

    def fetch_contributors(self, identity: RepositoryIdentity) -> list[dict[str, Any]]:
        return self._request_paginated(f"/repos/{identity.owner}/{identity.name}/contributors")

    def fetch_readme(self, identity: RepositoryIdentity) -> str:
        response = self._request(
            "GET",
            f"/repos/{identity.owner}/{identity.name}/readme",
            accept="application/vnd.github.html",
        )
        return response.text

    def _request_paginated(
        self,
        path: str,
        *,
        params: dict[str, object] | None = None,
    ) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        query = dict(params or {})
        query["per_page"] = PAGE_SIZE
        for page in range(1, MAX_PAGES + 1):
            query["page"] = page
            response = self._request("GET", path, params=query)
            payload = self._decode(response)
            if not isinstance(payload, list):
                raise GithubRequestError(f"Expected a list from {path}.")
            items.extend(item for item in payload if isinstance(item, dict))
            if "next" not in response.links:
                break
        return items

    def _request_json(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, object] | None = None,
    ) -> dict[str, Any]:
        response = self._request(method, path, params=params)
        payload = self._decode(response)
        if not isinstance(payload, dict):
            raise GithubRequestError(f"Expected an object from {path}.")
        return payload

    @staticmethod
    def _decode(response: Response) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except json.JSONDecodeError as exc:
            raise GithubRequestError("GitHub returned invalid JSON.") from exc

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, object] | None = None,
        accept: str = "application/vnd.github+json",
    ) -> Response:
        url = self._build_url(path, params=params)
        auth = None
        if self._credentials is not None:
            auth = (self._credentials.login, self._credentials.token)
        try:
            # Without an injected session each call uses a one-shot connection.
            sender = self._session if self._session is not None else requests
            response = sender.request(
                method,
                url,
                headers={"Accept": accept, "X-GitHub-Api-Version": "2022-11-28"},
                auth=auth,
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            raise GithubRequestError(str(exc)) from exc
        if response.status_code >= 400:
            self._raise_for_status(response)
        return response

    def _build_url(self, path: str, *, params: dict[str, object] | None = None) -> str:
        url = urljoin(f"{self._base_url}/", path.lstrip("/"))
        if params:
            query = urlencode({key: value for key, value in params.items() if value is not None})
            if query:
                return f"{url}?{query}"
        return url

    @staticmethod
    def _raise_for_status(response: Response) -> None:
        if response.status_code == 404:
            raise GithubNotFoundError("GitHub resource not found.")
        if response.status_code in {401, 403}:
            raise GithubUnauthorizedError("GitHub access denied.")
        raise GithubRequestError(f"GitHub request failed with status {response.status_code}.")


__all__ = [
    "GithubClient",
    "GithubClientError",
    "GithubNotFoundError",
    "GithubUnauthorizedError",
    "GithubRequestError",
]
