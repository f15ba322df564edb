from __future__ import annotations

import logging
from typing import Optional

from libindex_api.apis.publish_api_base import BasePublishApi
from libindex_api.domain import (
    ArtifactUpload,
    EnrichmentFlags,
    GithubCredentials,
    PublishOutcome,
    PublishResult,
    RepositoryIdentity,
    UserState,
)
from libindex_api.errors import IndexWriteError, StagingError
from libindex_api.http.errors import bad_request, forbidden, internal_error
from libindex_api.models.extra_models import PublisherModel
from libindex_api.models.publish_response import PublishResponse
from libindex_api.service.facade import get_index_services
from libindex_api.service.publish_process import REASON_NO_REPOSITORY

LOGGER = logging.getLogger(__name__)


def _to_response(result: PublishResult) -> PublishResponse:
    coordinate = result.coordinate
    return PublishResponse(
        outcome=result.outcome.value,
        reason=result.reason,
        digest=result.digest,
        group_id=coordinate.group_id if coordinate else None,
        artifact_id=coordinate.artifact_id if coordinate else None,
        version=coordinate.version if coordinate else None,
        repository=str(result.repository) if result.repository else None,
        project_id=result.project_id,
        release_id=result.release_id,
        message=result.message,
    )


class PublishApiImpl(BasePublishApi):
    async def publish_artifact(
        self,
        path: str,
        body: bytes,
        publisher: PublisherModel,
        info: bool | None,
        contributors: bool | None,
        readme: bool | None,
        keywords: list[str] | None,
    ) -> Optional[PublishResponse]:
        upload = ArtifactUpload(
            path=path,
            data=body,
            credentials=GithubCredentials(login=publisher.login, token=publisher.token),
            user_state=UserState(
                login=publisher.login,
                repos=frozenset(RepositoryIdentity.parse(repo) for repo in publisher.repos),
                trusted=publisher.trusted,
            ),
            flags=EnrichmentFlags(
                info=info is not False,
                contributors=contributors is not False,
                readme=readme is not False,
            ),
            keywords=frozenset(keywords or ()),
        )
        try:
            result = await get_index_services().publish.publish(upload)
        except (StagingError, IndexWriteError) as exc:
            LOGGER.error("Publish of %s by %s failed: %s", path, publisher.login, exc, exc_info=True)
            raise internal_error("Unable to store the uploaded artifact.") from exc

        if result.outcome is PublishOutcome.MALFORMED:
            raise bad_request(
                result.message or "Malformed POM.",
                error="malformed_pom",
                details={"digest": result.digest},
            )
        if result.outcome is PublishOutcome.UNAUTHORIZED:
            raise forbidden(
                result.message or "No write access to the repository.",
                details={"repository": str(result.repository)} if result.repository else None,
            )
        if result.outcome is PublishOutcome.IGNORED and result.reason == REASON_NO_REPOSITORY:
            return None
        return _to_response(result)
