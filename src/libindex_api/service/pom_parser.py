"""Read Maven POM files into artifact coordinates."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from libindex_api.domain import ArtifactCoordinate, DependencyCoordinate, ScmInfo
from libindex_api.errors import PomParseError

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _strip_namespaces(root: ET.Element) -> ET.Element:
    for element in root.iter():
        if isinstance(element.tag, str):
            element.tag = _local(element.tag)
    return root


def _text(parent: Optional[ET.Element], tag: str) -> Optional[str]:
    if parent is None:
        return None
    child = parent.find(tag)
    if child is None or child.text is None:
        return None
    value = child.text.strip()
    return value or None


def _read_properties(root: ET.Element) -> dict[str, str]:
    properties: dict[str, str] = {}
    node = root.find("properties")
    if node is None:
        return properties
    for child in node:
        if isinstance(child.tag, str) and child.text and child.text.strip():
            properties[child.tag] = child.text.strip()
    return properties


def _substitute(value: Optional[str], properties: dict[str, str]) -> Optional[str]:
    if value is None:
        return None

    def _replace(match: re.Match[str]) -> str:
        return properties.get(match.group(1), match.group(0))

    return _PLACEHOLDER.sub(_replace, value)


def _read_dependencies(root: ET.Element, properties: dict[str, str]) -> tuple[DependencyCoordinate, ...]:
    node = root.find("dependencies")
    if node is None:
        return ()
    dependencies: list[DependencyCoordinate] = []
    for dep in node.findall("dependency"):
        group_id = _substitute(_text(dep, "groupId"), properties)
        artifact_id = _substitute(_text(dep, "artifactId"), properties)
        if not group_id or not artifact_id:
            continue
        dependencies.append(
            DependencyCoordinate(
                group_id=group_id,
                artifact_id=artifact_id,
                version=_substitute(_text(dep, "version"), properties),
                scope=_text(dep, "scope"),
            )
        )
    return tuple(dependencies)


def _read_licenses(root: ET.Element) -> tuple[str, ...]:
    node = root.find("licenses")
    if node is None:
        return ()
    names = [_text(item, "name") or _text(item, "url") for item in node.findall("license")]
    return tuple(name for name in names if name)


def _read_scm(root: ET.Element, properties: dict[str, str]) -> Optional[ScmInfo]:
    node = root.find("scm")
    if node is None:
        return None
    scm = ScmInfo(
        connection=_substitute(_text(node, "connection"), properties),
        developer_connection=_substitute(_text(node, "developerConnection"), properties),
        url=_substitute(_text(node, "url"), properties),
    )
    return scm if scm.candidates() else None


def parse_pom_bytes(data: bytes) -> ArtifactCoordinate:
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise PomParseError(f"Malformed POM: {exc}") from exc
    root = _strip_namespaces(root)
    if root.tag != "project":
        raise PomParseError(f"Unexpected root element '{root.tag}'")

    parent = root.find("parent")
    artifact_id = _text(root, "artifactId")
    group_id = _text(root, "groupId") or _text(parent, "groupId")
    version = _text(root, "version") or _text(parent, "version")

    properties = _read_properties(root)
    builtins = {
        "project.groupId": group_id,
        "project.artifactId": artifact_id,
        "project.version": version,
        "pom.groupId": group_id,
        "pom.artifactId": artifact_id,
        "pom.version": version,
        "project.parent.groupId": _text(parent, "groupId"),
        "project.parent.version": _text(parent, "version"),
    }
    properties.update({key: value for key, value in builtins.items() if value})

    group_id = _substitute(group_id, properties)
    artifact_id = _substitute(artifact_id, properties)
    version = _substitute(version, properties)

    missing = [
        label
        for label, value in (("groupId", group_id), ("artifactId", artifact_id), ("version", version))
        if not value
    ]
    if missing:
        raise PomParseError(f"POM is missing {', '.join(missing)}")

    return ArtifactCoordinate(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        scm=_read_scm(root, properties),
        name=_substitute(_text(root, "name"), properties),
        description=_substitute(_text(root, "description"), properties),
        url=_substitute(_text(root, "url"), properties),
        licenses=_read_licenses(root),
        dependencies=_read_dependencies(root, properties),
    )


def parse_pom(path: Path) -> ArtifactCoordinate:
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise PomParseError(f"Unable to read POM at {path}") from exc
    return parse_pom_bytes(data)
