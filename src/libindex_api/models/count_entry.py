# coding: utf-8

"""
    libindex Public API (v1)
"""

from __future__ import annotations

from datetime import datetime  # noqa: F401
from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr  # noqa: F401
from typing import Any, ClassVar, Dict, List, Optional

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


class CountEntry(BaseModel):
    """
    A named bucket and its size.
    """  # noqa: E501

    name: StrictStr
    count: StrictInt
    __properties: ClassVar[list[str]] = ["name", "count"]
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
