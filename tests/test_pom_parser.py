import pytest

from libindex_api.errors import PomParseError
from libindex_api.service.pom_parser import parse_pom, parse_pom_bytes


def test_parse_reads_coordinates_scm_and_licenses():
    data = b"""<?xml version="1.0"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <groupId>org.acme</groupId>
  <artifactId>lib_2.12</artifactId>
  <version>1.0</version>
  <name>Lib</name>
  <description>A library</description>
  <licenses><license><name>MIT</name></license></licenses>
  <scm>
    <connection>scm:git:git@github.com:acme/lib.git</connection>
    <url>https://github.com/acme/lib</url>
  </scm>
</project>"""

    coordinate = parse_pom_bytes(data)

    assert str(coordinate) == "org.acme:lib_2.12:1.0"
    assert coordinate.name == "Lib"
    assert coordinate.description == "A library"
    assert coordinate.licenses == ("MIT",)
    assert coordinate.scm is not None
    assert coordinate.scm.connection == "scm:git:git@github.com:acme/lib.git"


def test_parse_inherits_parent_coordinates_and_substitutes_properties():
    data = b"""<project>
  <parent><groupId>org.acme</groupId><artifactId>parent</artifactId><version>2.0</version></parent>
  <artifactId>child</artifactId>
  <properties><cats.version>2.9.0</cats.version></properties>
  <dependencies>
    <dependency><groupId>org.typelevel</groupId><artifactId>cats-core_2.13</artifactId><version>${cats.version}</version></dependency>
    <dependency><groupId>org.acme</groupId><artifactId>sibling</artifactId><version>${project.version}</version><scope>test</scope></dependency>
  </dependencies>
</project>"""

    coordinate = parse_pom_bytes(data)

    assert coordinate.release_reference == ("org.acme", "child", "2.0")
    assert [str(dep) for dep in coordinate.dependencies] == [
        "org.typelevel:cats-core_2.13:2.9.0",
        "org.acme:sibling:2.0",
    ]
    assert coordinate.dependencies[1].scope == "test"
    assert coordinate.scm is None


@pytest.mark.parametrize(
    "data",
    [
        b"not xml at all",
        b"<metadata><groupId>a</groupId></metadata>",
        b"<project><groupId>a</groupId><artifactId>b</artifactId></project>",
    ],
)
def test_parse_rejects_malformed_documents(data):
    with pytest.raises(PomParseError):
        parse_pom_bytes(data)


def test_parse_pom_reports_unreadable_file(tmp_path):
    with pytest.raises(PomParseError):
        parse_pom(tmp_path / "missing.pom")
