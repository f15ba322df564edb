import pytest

from libindex_api.domain import ArtifactCoordinate, RepositoryIdentity, ScmInfo
from libindex_api.service.repo_identity import extract_repository, resolve_repository


@pytest.mark.parametrize(
    "value",
    [
        "https://github.com/acme/lib",
        "https://github.com/acme/lib.git",
        "https://github.com/Acme/Lib/tree/main",
        "git@github.com:acme/lib.git",
        "scm:git:git://github.com/acme/lib.git",
        "scm:git:https://github.com/acme/lib",
        "http://www.github.com/acme/lib#readme",
    ],
)
def test_extract_repository_recognises_github_forms(value):
    assert extract_repository(value) == RepositoryIdentity("acme", "lib")


@pytest.mark.parametrize(
    "value",
    [
        "https://gitlab.com/acme/lib",
        "https://github.com/acme",
        "scm:svn:http://svn.acme.org/lib",
        "https://notgithub.com/acme/lib",
        "https://gist.github.com/acme/lib",
        "scm:git:git@enterprise.github.com:acme/lib.git",
    ],
)
def test_extract_repository_ignores_other_hosts(value):
    assert extract_repository(value) is None


def test_resolve_prefers_scm_connection_over_project_url():
    coordinate = ArtifactCoordinate(
        group_id="org.acme",
        artifact_id="lib",
        version="1.0",
        scm=ScmInfo(
            connection="scm:git:git@github.com:acme/lib.git",
            url="https://github.com/mirror/lib",
        ),
        url="https://github.com/other/lib",
    )

    assert resolve_repository(coordinate) == RepositoryIdentity("acme", "lib")


def test_resolve_falls_back_to_project_url():
    coordinate = ArtifactCoordinate(
        group_id="org.acme",
        artifact_id="lib",
        version="1.0",
        scm=ScmInfo(url="https://acme.org/lib"),
        url="https://github.com/acme/lib",
    )

    assert resolve_repository(coordinate) == RepositoryIdentity("acme", "lib")


def test_resolve_without_github_reference_returns_none():
    coordinate = ArtifactCoordinate(group_id="org.acme", artifact_id="lib", version="1.0")

    assert resolve_repository(coordinate) is None
