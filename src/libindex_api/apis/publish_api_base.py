# coding: utf-8

from typing import ClassVar, Dict, List, Tuple, Any  # noqa: F401

from pydantic import StrictStr
from typing import List, Optional
from libindex_api.models.extra_models import PublisherModel
from libindex_api.models.publish_response import PublishResponse


class BasePublishApi:
    subclasses: ClassVar[Tuple] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        BasePublishApi.subclasses = BasePublishApi.subclasses + (cls,)

    async def publish_artifact(
        self,
        path: StrictStr,
        body: bytes,
        publisher: PublisherModel,
        info: Optional[bool],
        contributors: Optional[bool],
        readme: Optional[bool],
        keywords: Optional[List[StrictStr]],
    ) -> PublishResponse:
        ...
