import os
import tempfile
from pathlib import Path

_TEST_ROOT = Path(tempfile.mkdtemp(prefix="libindex-tests-"))
os.environ["LIBINDEX_DATABASE_URL"] = f"sqlite:///{(_TEST_ROOT / 'libindex.db').as_posix()}"
os.environ["LIBINDEX_STORAGE_ROOT"] = str(_TEST_ROOT / "storage")
os.environ["LIBINDEX_ENRICHMENT_ENABLED"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from libindex_api.db import Base, engine  # noqa: E402
from libindex_api.domain import (  # noqa: E402
    ArtifactUpload,
    EnrichmentFlags,
    GithubCredentials,
    RepositoryIdentity,
    UserState,
)


def build_pom(
    group_id: str = "org.acme",
    artifact_id: str = "lib_2.12",
    version: str = "1.0",
    *,
    scm_url: str | None = "https://github.com/acme/lib",
    name: str | None = "lib",
    dependencies: list[tuple[str, str, str]] | None = None,
) -> bytes:
    scm = f"<scm><url>{scm_url}</url></scm>" if scm_url else ""
    deps = "".join(
        f"<dependency><groupId>{g}</groupId><artifactId>{a}</artifactId><version>{v}</version></dependency>"
        for g, a, v in (dependencies or [])
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<project xmlns="http://maven.apache.org/POM/4.0.0">'
        "<modelVersion>4.0.0</modelVersion>"
        f"<groupId>{group_id}</groupId>"
        f"<artifactId>{artifact_id}</artifactId>"
        f"<version>{version}</version>"
        + (f"<name>{name}</name>" if name else "")
        + "<licenses><license><name>Apache-2.0</name></license></licenses>"
        + (f"<dependencies>{deps}</dependencies>" if deps else "")
        + scm
        + "</project>"
    ).encode("utf-8")


def make_upload(
    data: bytes,
    *,
    path: str = "org/acme/lib_2.12/1.0/lib_2.12-1.0.pom",
    repos: tuple[str, ...] = ("acme/lib",),
    trusted: bool = False,
    keywords: tuple[str, ...] = (),
    login: str = "octocat",
) -> ArtifactUpload:
    return ArtifactUpload(
        path=path,
        data=data,
        credentials=GithubCredentials(login=login, token="token-123"),
        user_state=UserState(
            login=login,
            repos=frozenset(RepositoryIdentity.parse(repo) for repo in repos),
            trusted=trusted,
        ),
        flags=EnrichmentFlags(),
        keywords=frozenset(keywords),
    )


@pytest.fixture(autouse=True)
def _reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client() -> TestClient:
    from libindex_api.main import app

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
