"""Database model package."""

from .project import ProjectRecord
from .release import ReleaseRecord

__all__ = [
    "ProjectRecord",
    "ReleaseRecord",
]
