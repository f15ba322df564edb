import json

import pytest

from libindex_api.domain import EnrichmentFlags, GithubCredentials, RepositoryIdentity
from libindex_api.service.enrichment import EnrichmentFetcher
from libindex_api.service.github_client import GithubRequestError
from libindex_api.storage import ContentStore

IDENTITY = RepositoryIdentity("acme", "lib")
CREDENTIALS = GithubCredentials(login="octocat", token="token-123")


class _FakeClient:
    def __init__(self, *, failing: set[str] = frozenset()) -> None:
        self.failing = failing
        self.calls: list[str] = []

    def _call(self, kind: str):
        self.calls.append(kind)
        if kind in self.failing:
            raise GithubRequestError(f"{kind} unavailable")

    def fetch_repo_info(self, identity):
        self._call("info")
        return {"full_name": str(identity), "stargazers_count": 3}

    def fetch_contributors(self, identity):
        self._call("contributors")
        return [{"login": "octocat", "contributions": 7}]

    def fetch_readme(self, identity):
        self._call("readme")
        return "<h1>lib</h1>"


@pytest.mark.asyncio
async def test_enrichment_writes_all_requested_files(tmp_path):
    store = ContentStore(tmp_path)
    client = _FakeClient()
    fetcher = EnrichmentFetcher(store, client_factory=lambda credentials: client, enabled=True)

    task = fetcher.schedule(IDENTITY, CREDENTIALS, EnrichmentFlags())
    assert task is not None
    await fetcher.drain()

    directory = store.github_dir(IDENTITY)
    assert json.loads((directory / "repo.json").read_text())["stargazers_count"] == 3
    assert json.loads((directory / "contributors.json").read_text())[0]["login"] == "octocat"
    assert (directory / "README.html").read_text() == "<h1>lib</h1>"
    assert fetcher.pending == 0


@pytest.mark.asyncio
async def test_one_failing_fetch_does_not_affect_the_others(tmp_path, caplog):
    store = ContentStore(tmp_path)
    client = _FakeClient(failing={"contributors"})
    fetcher = EnrichmentFetcher(store, client_factory=lambda credentials: client, enabled=True)

    task = fetcher.schedule(IDENTITY, CREDENTIALS, EnrichmentFlags())
    await task

    directory = store.github_dir(IDENTITY)
    assert (directory / "repo.json").exists()
    assert (directory / "README.html").exists()
    assert not (directory / "contributors.json").exists()
    assert task.exception() is None
    assert "contributors fetch failed" in caplog.text


@pytest.mark.asyncio
async def test_flags_select_fetches(tmp_path):
    store = ContentStore(tmp_path)
    client = _FakeClient()
    fetcher = EnrichmentFetcher(store, client_factory=lambda credentials: client, enabled=True)

    await fetcher.schedule(IDENTITY, CREDENTIALS, EnrichmentFlags(info=False, contributors=False))

    assert client.calls == ["readme"]


@pytest.mark.asyncio
async def test_disabled_or_empty_flags_schedule_nothing(tmp_path):
    store = ContentStore(tmp_path)
    enabled = EnrichmentFetcher(store, client_factory=lambda credentials: _FakeClient(), enabled=True)
    disabled = EnrichmentFetcher(store, client_factory=lambda credentials: _FakeClient(), enabled=False)

    assert enabled.schedule(IDENTITY, CREDENTIALS, EnrichmentFlags(False, False, False)) is None
    assert disabled.schedule(IDENTITY, CREDENTIALS, EnrichmentFlags()) is None
