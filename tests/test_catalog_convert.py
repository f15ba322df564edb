from datetime import datetime, timezone

import pytest

from libindex_api.domain import (
    ArtifactCoordinate,
    DependencyCoordinate,
    RepositoryIdentity,
)
from libindex_api.service.catalog_convert import (
    build_search_record,
    convert,
    normalize_keywords,
    parse_target,
)

CREATED = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def _coordinate(**overrides) -> ArtifactCoordinate:
    values = dict(
        group_id="org.acme",
        artifact_id="lib_sjs0.6_2.12",
        version="1.0",
        name=None,
        description="Library",
        licenses=("MIT",),
        dependencies=(
            DependencyCoordinate("org.typelevel", "cats-core_2.12", "2.0.0"),
            DependencyCoordinate("org.scalatest", "scalatest_2.12", "3.2.0", scope="test"),
            DependencyCoordinate("org.acme", "runtime-only", "1.0", scope="runtime"),
        ),
    )
    values.update(overrides)
    return ArtifactCoordinate(**values)


@pytest.mark.parametrize(
    "artifact_id, expected",
    [
        ("cats-core_2.12", "2.12"),
        ("lib_sjs0.6_2.12", "sjs0.6_2.12"),
        ("lib_native0.4_2.11", "native0.4_2.11"),
        ("lib_3", "3"),
        ("commons-lang3", None),
        ("foo_bar", None),
    ],
)
def test_parse_target(artifact_id, expected):
    assert parse_target(artifact_id) == expected


def test_normalize_keywords_strips_dedupes_and_sorts():
    assert normalize_keywords([" json", "Http", "json", ""]) == ("Http", "json")


def test_build_search_record_uses_group_as_owner():
    record = build_search_record(_coordinate(), digest="a" * 40, size=42, created=CREATED, path="x.pom")

    assert record.package == "org.acme:lib_sjs0.6_2.12"
    assert record.owner == "org.acme"
    assert record.repo == "lib_sjs0.6_2.12"


def test_convert_is_deterministic_and_filters_test_dependencies():
    coordinate = _coordinate()
    record = build_search_record(coordinate, digest="b" * 40, size=10, created=CREATED)
    identity = RepositoryIdentity("acme", "lib")

    first = convert(coordinate, record, repository=identity, keywords={"b", "a"})
    second = convert(coordinate, record, repository=identity, keywords=["a", "b"])

    assert first == second
    project, release = first
    assert project.reference == ("org.acme", "lib_sjs0.6_2.12")
    assert project.keywords == ("a", "b")
    assert release.keywords == ("a", "b")
    assert project.repository == "acme/lib"
    assert release.reference == ("org.acme", "lib_sjs0.6_2.12", "1.0")
    assert release.name == "lib_sjs0.6_2.12"
    assert release.target == "sjs0.6_2.12"
    assert release.dependencies == (
        "org.typelevel:cats-core_2.12:2.0.0",
        "org.acme:runtime-only:1.0",
    )
    assert release.pom_sha1 == "b" * 40
    assert release.released_at == CREATED
    assert project.live_data and release.live_data
