# coding: utf-8

"""
    libindex Public API (v1)
"""

from __future__ import annotations

import json
from enum import Enum
try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


class PublishOutcome(str, Enum):
    """
    Semantic result of a publish call.
    """

    INDEXED = "indexed"
    IGNORED = "ignored"
    UNAUTHORIZED = "unauthorized"
    MALFORMED = "malformed"

    @classmethod
    def from_json(cls, json_str: str) -> Self:
        return cls(json.loads(json_str))
