"""Public exports for API models."""

from __future__ import annotations

from libindex_api.models.catalog_overview import CatalogOverview
from libindex_api.models.count_entry import CountEntry
from libindex_api.models.error import Error
from libindex_api.models.health_status import HealthStatus
from libindex_api.models.project_detail import ProjectDetail
from libindex_api.models.publish_outcome import PublishOutcome
from libindex_api.models.publish_response import PublishResponse
from libindex_api.models.release_detail import ReleaseDetail
from libindex_api.models.release_list import ReleaseList

__all__ = [
    "CatalogOverview",
    "CountEntry",
    "Error",
    "HealthStatus",
    "ProjectDetail",
    "PublishOutcome",
    "PublishResponse",
    "ReleaseDetail",
    "ReleaseList",
]
