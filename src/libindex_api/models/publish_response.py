# coding: utf-8

"""
    libindex Public API (v1)
"""

from __future__ import annotations

from datetime import datetime  # noqa: F401
from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr  # noqa: F401
from typing import Any, ClassVar, Dict, List, Optional
from libindex_api.models.publish_outcome import PublishOutcome
try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


class PublishResponse(BaseModel):
    """
    Outcome of a publish call.
    """  # noqa: E501

    outcome: PublishOutcome
    reason: StrictStr = Field(description="Why the upload ended in this outcome.")
    digest: Optional[StrictStr] = Field(default=None, description="SHA-1 of the uploaded content.")
    group_id: Optional[StrictStr] = Field(default=None, alias="groupId")
    artifact_id: Optional[StrictStr] = Field(default=None, alias="artifactId")
    version: Optional[StrictStr] = None
    repository: Optional[StrictStr] = Field(default=None, description="GitHub repository as owner/name.")
    project_id: Optional[StrictStr] = Field(default=None, alias="projectId")
    release_id: Optional[StrictStr] = Field(default=None, alias="releaseId")
    message: Optional[StrictStr] = None
    __properties: ClassVar[list[str]] = ["outcome", "reason", "digest", "groupId", "artifactId", "version", "repository", "projectId", "releaseId", "message"]
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
