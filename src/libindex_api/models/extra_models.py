# coding: utf-8

from typing import List

from pydantic import BaseModel, Field


class PublisherModel(BaseModel):
    """Publisher resolved from request credentials."""

    login: str
    token: str = Field(repr=False)
    repos: List[str] = Field(default_factory=list)
    trusted: bool = False
