import pytest

from libindex_api.domain import GithubCredentials, RepositoryIdentity
from libindex_api.errors import CredentialsError
from libindex_api.service.github_client import GithubUnauthorizedError
from libindex_api.service.user_state import UserStateResolver

CREDENTIALS = GithubCredentials(login="OctoCat", token="token-123")


class _FakeClient:
    def __init__(self, calls: list[str], *, reject: bool = False) -> None:
        self.calls = calls
        self.reject = reject

    def get_user(self):
        self.calls.append("user")
        if self.reject:
            raise GithubUnauthorizedError("GitHub access denied.")
        return {"login": "octocat"}

    def list_push_repositories(self):
        self.calls.append("repos")
        return [RepositoryIdentity("acme", "lib")]


def test_resolve_caches_state_per_credentials():
    calls: list[str] = []
    resolver = UserStateResolver(
        client_factory=lambda credentials: _FakeClient(calls),
        trusted_logins=set(),
    )

    first = resolver.resolve(CREDENTIALS)
    second = resolver.resolve(CREDENTIALS)

    assert first is second
    assert first.login == "octocat"
    assert first.repos == frozenset({RepositoryIdentity("acme", "lib")})
    assert first.trusted is False
    assert calls == ["user", "repos"]

    resolver.clear()
    resolver.resolve(CREDENTIALS)
    assert calls == ["user", "repos", "user", "repos"]


def test_trusted_login_is_flagged():
    resolver = UserStateResolver(
        client_factory=lambda credentials: _FakeClient([]),
        trusted_logins={"octocat"},
    )

    assert resolver.resolve(CREDENTIALS).trusted is True


def test_rejected_credentials_raise():
    resolver = UserStateResolver(
        client_factory=lambda credentials: _FakeClient([], reject=True),
        trusted_logins=set(),
    )

    with pytest.raises(CredentialsError):
        resolver.resolve(CREDENTIALS)


def test_expired_entries_are_evicted_when_caching():
    resolver = UserStateResolver(
        client_factory=lambda credentials: _FakeClient([]),
        ttl_seconds=0,
        trusted_logins=set(),
    )

    for index in range(50):
        resolver.resolve(GithubCredentials(login="octocat", token=f"token-{index}"))

    assert len(resolver) == 1
