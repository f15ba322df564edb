import json

import pytest
import requests

from libindex_api.domain import GithubCredentials, RepositoryIdentity
from libindex_api.service.github_client import (
    GithubClient,
    GithubNotFoundError,
    GithubUnauthorizedError,
)


def _response(status_code: int, payload=None, *, text: str | None = None, link: str | None = None):
    response = requests.Response()
    response.status_code = status_code
    if text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = json.dumps(payload).encode("utf-8") if payload is not None else b""
    if link:
        response.headers["Link"] = link
    return response


class _FakeSession:
    def __init__(self, responses):
        self.responses = list(responses)
        self.requests: list[dict] = []

    def request(self, method, url, **kwargs):
        self.requests.append({"method": method, "url": url, **kwargs})
        return self.responses.pop(0)


def _client(session) -> GithubClient:
    return GithubClient(
        base_url="https://api.github.test/",
        credentials=GithubCredentials(login="octocat", token="token-123"),
        timeout_seconds=5,
        session=session,
    )


def test_list_push_repositories_follows_pagination_and_filters_push():
    session = _FakeSession(
        [
            _response(
                200,
                [
                    {"full_name": "Acme/Lib", "permissions": {"push": True}},
                    {"full_name": "acme/readonly", "permissions": {"push": False}},
                ],
                link='<https://api.github.test/user/repos?page=2>; rel="next"',
            ),
            _response(200, [{"full_name": "octocat/tool", "permissions": {"push": True}}]),
        ]
    )

    repos = _client(session).list_push_repositories()

    assert repos == [RepositoryIdentity("acme", "lib"), RepositoryIdentity("octocat", "tool")]
    assert len(session.requests) == 2
    assert "page=2" in session.requests[1]["url"]
    assert session.requests[0]["auth"] == ("octocat", "token-123")


def test_fetch_readme_requests_html_media_type():
    session = _FakeSession([_response(200, text="<p>hi</p>")])

    readme = _client(session).fetch_readme(RepositoryIdentity("acme", "lib"))

    assert readme == "<p>hi</p>"
    assert session.requests[0]["headers"]["Accept"] == "application/vnd.github.html"
    assert session.requests[0]["url"] == "https://api.github.test/repos/acme/lib/readme"


@pytest.mark.parametrize(
    "status_code, error",
    [(404, GithubNotFoundError), (401, GithubUnauthorizedError), (403, GithubUnauthorizedError)],
)
def test_error_statuses_map_to_client_errors(status_code, error):
    session = _FakeSession([_response(status_code, {"message": "nope"})])

    with pytest.raises(error):
        _client(session).fetch_repo_info(RepositoryIdentity("acme", "lib"))


def test_client_without_session_sends_one_shot_requests(monkeypatch):
    sent: list[str] = []

    def _request(method, url, **kwargs):
        sent.append(url)
        return _response(200, {"full_name": "acme/lib"})

    def _no_session(*args, **kwargs):
        raise AssertionError("GithubClient must not open a pooled session")

    monkeypatch.setattr(requests, "request", _request)
    monkeypatch.setattr(requests, "Session", _no_session)
    client = GithubClient(base_url="https://api.github.test", credentials=None, timeout_seconds=5)

    assert client.fetch_repo_info(RepositoryIdentity("acme", "lib")) == {"full_name": "acme/lib"}
    assert sent == ["https://api.github.test/repos/acme/lib"]
