# coding: utf-8

"""
    libindex Public API (v1)
"""

from __future__ import annotations

from datetime import datetime  # noqa: F401
from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr  # noqa: F401
from typing import Any, ClassVar, Dict, List, Optional
from libindex_api.models.count_entry import CountEntry
from libindex_api.models.project_detail import ProjectDetail
from libindex_api.models.release_detail import ReleaseDetail
try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


class CatalogOverview(BaseModel):
    """
    Aggregates shown on the catalog front page.
    """  # noqa: E501

    topics: List[CountEntry] = Field(default_factory=list)
    target_platforms: List[CountEntry] = Field(default_factory=list, alias="targetPlatforms")
    most_depended_upon: List[ProjectDetail] = Field(default_factory=list, alias="mostDependedUpon")
    latest_projects: List[ProjectDetail] = Field(default_factory=list, alias="latestProjects")
    latest_releases: List[ReleaseDetail] = Field(default_factory=list, alias="latestReleases")
    total_projects: StrictInt = Field(default=0, alias="totalProjects")
    total_releases: StrictInt = Field(default=0, alias="totalReleases")
    __properties: ClassVar[list[str]] = ["topics", "targetPlatforms", "mostDependedUpon", "latestProjects", "latestReleases", "totalProjects", "totalReleases"]
    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, json_str: str) -> Self:
        return cls.model_validate_json(json_str)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> Self:
        if obj is None:
            return None
        if not isinstance(obj, dict):
            return cls.model_validate(obj)
        return cls.model_validate(obj)
