# coding: utf-8

"""
    libindex Public API

    Publishing endpoint and read-only catalog for Maven libraries hosted on GitHub.

    The version of the OpenAPI document: 1.0.0
"""  # noqa: E501


from fastapi import FastAPI

from libindex_api.apis.catalog_api import router as CatalogApiRouter
from libindex_api.apis.publish_api import router as PublishApiRouter

app = FastAPI(
    title="libindex Public API",
    description="Publishing endpoint and read-only catalog for Maven libraries hosted on GitHub.",
    version="1.0.0",
)

app.include_router(PublishApiRouter)
app.include_router(CatalogApiRouter)
