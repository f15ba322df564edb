import pytest
import pytest_asyncio

from conftest import build_pom, make_upload
from libindex_api.service.catalog_queries import CatalogQueries
from libindex_api.service.enrichment import EnrichmentFetcher
from libindex_api.service.index_writer import IndexWriter
from libindex_api.service.publish_process import PublishProcess
from libindex_api.storage import ContentStore


@pytest_asyncio.fixture
async def seeded(tmp_path):
    store = ContentStore(tmp_path)
    process = PublishProcess(
        store=store,
        writer=IndexWriter(),
        enrichment=EnrichmentFetcher(store, enabled=False),
    )
    publishes = [
        (build_pom("org.acme", "core_2.12", "1.0", scm_url="https://github.com/acme/core"), ("acme/core",), ("json", "http")),
        (build_pom("org.acme", "core_2.12", "1.1", scm_url="https://github.com/acme/core"), ("acme/core",), ("json", "http")),
        (
            build_pom(
                "org.acme",
                "client_sjs0.6_2.12",
                "0.1",
                scm_url="https://github.com/acme/client",
                dependencies=[("org.acme", "core_2.12", "1.1")],
            ),
            ("acme/client",),
            ("http",),
        ),
        (
            build_pom(
                "io.other",
                "server_2.12",
                "2.0",
                scm_url="https://github.com/other/server",
                dependencies=[("org.acme", "core_2.12", "1.0"), ("org.unknown", "missing", "1")],
            ),
            ("other/server",),
            (),
        ),
    ]
    for data, repos, keywords in publishes:
        result = await process.publish(make_upload(data, repos=repos, keywords=keywords))
        assert result.project_id is not None
    return CatalogQueries()


@pytest.mark.asyncio
async def test_find_project_and_releases(seeded):
    project = seeded.find_project_by_reference("org.acme", "core_2.12")
    releases = seeded.find_releases_by_project_reference("org.acme", "core_2.12")

    assert project["repository"] == "acme/core"
    assert project["keywords"] == ["http", "json"]
    assert sorted(release["version"] for release in releases) == ["1.0", "1.1"]
    assert seeded.find_project_by_reference("org.acme", "nope") is None


@pytest.mark.asyncio
async def test_topics_and_targets(seeded):
    assert seeded.topics() == [{"name": "http", "count": 2}, {"name": "json", "count": 1}]
    assert seeded.target_platforms() == [
        {"name": "2.12", "count": 2},
        {"name": "sjs0.6_2.12", "count": 1},
    ]


@pytest.mark.asyncio
async def test_most_depended_upon_counts_distinct_known_projects(seeded):
    ranked = seeded.most_depended_upon()

    assert [(item["artifactId"], item["dependents"]) for item in ranked] == [("core_2.12", 2)]


@pytest.mark.asyncio
async def test_overview_totals(seeded):
    overview = seeded.overview(limit=2)

    assert overview["totalProjects"] == 3
    assert overview["totalReleases"] == 4
    assert len(overview["latestProjects"]) == 2
    assert len(overview["latestReleases"]) == 2
