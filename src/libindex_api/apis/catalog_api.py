# coding: utf-8

from typing import Dict, List, Any  # noqa: F401
import importlib
import pkgutil

from libindex_api.apis.catalog_api_base import BaseCatalogApi
import libindex_api.impl

from fastapi import (  # noqa: F401
    APIRouter,
    HTTPException,
    Path,
    Query,
    status,
)

from pydantic import Field, StrictStr
from typing_extensions import Annotated
from libindex_api.models.catalog_overview import CatalogOverview
from libindex_api.models.error import Error
from libindex_api.models.health_status import HealthStatus
from libindex_api.models.project_detail import ProjectDetail
from libindex_api.models.release_list import ReleaseList

router = APIRouter()

ns_pkg = libindex_api.impl
for _, name, _ in pkgutil.iter_modules(ns_pkg.__path__, ns_pkg.__name__ + "."):
    importlib.import_module(name)


@router.get(
    "/api/v1/projects/{groupId}/{artifactId}",
    responses={
        200: {"model": ProjectDetail, "description": "OK"},
        404: {"model": Error, "description": "Not found"},
    },
    tags=["Catalog"],
    summary="Get a project",
    response_model_by_alias=True,
)
async def get_project(
    groupId: Annotated[StrictStr, Field(description="Maven groupId")] = Path(..., description="Maven groupId"),
    artifactId: Annotated[StrictStr, Field(description="Maven artifactId")] = Path(..., description="Maven artifactId"),
) -> ProjectDetail:
    if not BaseCatalogApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    return await BaseCatalogApi.subclasses[0]().get_project(groupId, artifactId)


@router.get(
    "/api/v1/projects/{groupId}/{artifactId}/releases",
    responses={
        200: {"model": ReleaseList, "description": "OK"},
    },
    tags=["Catalog"],
    summary="List releases of a project",
    response_model_by_alias=True,
)
async def list_project_releases(
    groupId: Annotated[StrictStr, Field(description="Maven groupId")] = Path(..., description="Maven groupId"),
    artifactId: Annotated[StrictStr, Field(description="Maven artifactId")] = Path(..., description="Maven artifactId"),
) -> ReleaseList:
    if not BaseCatalogApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    return await BaseCatalogApi.subclasses[0]().list_project_releases(groupId, artifactId)


@router.get(
    "/api/v1/catalog/overview",
    responses={
        200: {"model": CatalogOverview, "description": "OK"},
    },
    tags=["Catalog"],
    summary="Front page aggregates",
    response_model_by_alias=True,
)
async def get_catalog_overview(
    limit: Annotated[int, Field(le=100, ge=1, description="Size of the ranked lists")] = Query(12, description="Size of the ranked lists", alias="limit", ge=1, le=100),
) -> CatalogOverview:
    if not BaseCatalogApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    return await BaseCatalogApi.subclasses[0]().get_catalog_overview(limit)


@router.get(
    "/api/v1/health",
    responses={
        200: {"model": HealthStatus, "description": "OK"},
    },
    tags=["Health"],
    summary="Health check",
    response_model_by_alias=True,
)
async def get_health(
) -> HealthStatus:
    if not BaseCatalogApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    return await BaseCatalogApi.subclasses[0]().get_health()
