# coding: utf-8

from typing import Dict, List, Any  # noqa: F401
import importlib
import pkgutil

from libindex_api.apis.publish_api_base import BasePublishApi
import libindex_api.impl

from fastapi import (  # noqa: F401
    APIRouter,
    Body,
    Depends,
    HTTPException,
    Query,
    Request,
    Response,
    Security,
    status,
)

from pydantic import Field, StrictStr
from typing import List, Optional
from typing_extensions import Annotated
from libindex_api.models.error import Error
from libindex_api.models.extra_models import PublisherModel
from libindex_api.models.publish_response import PublishResponse
from libindex_api.security_api import get_publisher_basicAuth

router = APIRouter()

ns_pkg = libindex_api.impl
for _, name, _ in pkgutil.iter_modules(ns_pkg.__path__, ns_pkg.__name__ + "."):
    importlib.import_module(name)


@router.put(
    "/api/v1/publish",
    responses={
        201: {"model": PublishResponse, "description": "Indexed, or accepted and ignored"},
        204: {"description": "POM has no GitHub SCM reference"},
        400: {"model": Error, "description": "Malformed POM"},
        401: {"model": Error, "description": "Missing or invalid credentials"},
        403: {"model": Error, "description": "No write access to the repository"},
        500: {"model": Error, "description": "Storage or catalog failure"},
    },
    tags=["Publish"],
    summary="Publish an artifact",
    response_model_by_alias=True,
)
async def publish_artifact(
    request: Request,
    response: Response,
    path: Annotated[StrictStr, Field(description="Repository path of the uploaded file")] = Query(..., description="Repository path of the uploaded file", alias="path"),
    info: Annotated[Optional[bool], Field(description="Fetch repository info")] = Query(True, description="Fetch repository info", alias="info"),
    contributors: Annotated[Optional[bool], Field(description="Fetch contributors")] = Query(True, description="Fetch contributors", alias="contributors"),
    readme: Annotated[Optional[bool], Field(description="Fetch README")] = Query(True, description="Fetch README", alias="readme"),
    keywords: Annotated[Optional[List[StrictStr]], Field(description="Project keywords")] = Query(None, description="Project keywords", alias="keywords"),
    publisher: PublisherModel = Security(get_publisher_basicAuth),
) -> Optional[PublishResponse]:
    if not BasePublishApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    body = await request.body()
    result = await BasePublishApi.subclasses[0]().publish_artifact(
        path, body, publisher, info, contributors, readme, keywords
    )
    if result is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    response.status_code = status.HTTP_201_CREATED
    return result
