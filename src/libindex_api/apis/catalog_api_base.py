# coding: utf-8

from typing import ClassVar, Dict, List, Tuple, Any  # noqa: F401

from pydantic import StrictStr
from libindex_api.models.catalog_overview import CatalogOverview
from libindex_api.models.health_status import HealthStatus
from libindex_api.models.project_detail import ProjectDetail
from libindex_api.models.release_list import ReleaseList


class BaseCatalogApi:
    subclasses: ClassVar[Tuple] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        BaseCatalogApi.subclasses = BaseCatalogApi.subclasses + (cls,)

    async def get_project(
        self,
        group_id: StrictStr,
        artifact_id: StrictStr,
    ) -> ProjectDetail:
        ...

    async def list_project_releases(
        self,
        group_id: StrictStr,
        artifact_id: StrictStr,
    ) -> ReleaseList:
        ...

    async def get_catalog_overview(
        self,
        limit: int,
    ) -> CatalogOverview:
        ...

    async def get_health(self) -> HealthStatus:
        ...
