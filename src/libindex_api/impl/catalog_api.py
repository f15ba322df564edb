from __future__ import annotations

import asyncio

from libindex_api.apis.catalog_api_base import BaseCatalogApi
from libindex_api.http.errors import not_found
from libindex_api.models.catalog_overview import CatalogOverview
from libindex_api.models.health_status import HealthStatus
from libindex_api.models.project_detail import ProjectDetail
from libindex_api.models.release_list import ReleaseList
from libindex_api.service.facade import get_index_services


class CatalogApiImpl(BaseCatalogApi):
    async def get_project(
        self,
        group_id: str,
        artifact_id: str,
    ) -> ProjectDetail:
        queries = get_index_services().queries
        record = await asyncio.to_thread(queries.find_project_by_reference, group_id, artifact_id)
        if record is None:
            raise not_found(f"Project {group_id}:{artifact_id} not found.")
        return ProjectDetail.from_dict(record)

    async def list_project_releases(
        self,
        group_id: str,
        artifact_id: str,
    ) -> ReleaseList:
        queries = get_index_services().queries
        records = await asyncio.to_thread(
            queries.find_releases_by_project_reference, group_id, artifact_id
        )
        return ReleaseList.from_dict({"items": records})

    async def get_catalog_overview(self, limit: int) -> CatalogOverview:
        queries = get_index_services().queries
        payload = await asyncio.to_thread(queries.overview, limit)
        return CatalogOverview.from_dict(payload)

    async def get_health(self) -> HealthStatus:
        return HealthStatus(status="ok")
