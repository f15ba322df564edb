"""Extract a GitHub repository identity from POM SCM data."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from libindex_api.domain import ArtifactCoordinate, RepositoryIdentity

# Matches https://github.com/o/n, git@github.com:o/n.git, scm:git:git://github.com/o/n, ...
# The host must be github.com itself or www.github.com.
_GITHUB_PATTERN = re.compile(
    r"(?:^|[/@:])(?:www\.)?github\.com[/:]+(?P<owner>[A-Za-z0-9][A-Za-z0-9_.-]*)/(?P<name>[A-Za-z0-9_.-]+?)(?:\.git)?(?:[/#?].*)?$",
    re.IGNORECASE,
)


def _candidates(coordinate: ArtifactCoordinate) -> Iterable[str]:
    if coordinate.scm is not None:
        yield from coordinate.scm.candidates()
    if coordinate.url:
        yield coordinate.url


def extract_repository(value: str) -> Optional[RepositoryIdentity]:
    match = _GITHUB_PATTERN.search(value.strip())
    if not match:
        return None
    name = match.group("name")
    if name in {".", ".."}:
        return None
    return RepositoryIdentity.of(match.group("owner"), name)


def resolve_repository(coordinate: ArtifactCoordinate) -> Optional[RepositoryIdentity]:
    """Return the first GitHub repository referenced by the coordinate, or ``None``."""
    for candidate in _candidates(coordinate):
        identity = extract_repository(candidate)
        if identity is not None:
            return identity
    return None
