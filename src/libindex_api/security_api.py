# coding: utf-8

import asyncio
import logging
from typing import Optional

from fastapi import Depends, Security  # noqa: F401
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from libindex_api.domain import GithubCredentials
from libindex_api.errors import CredentialsError
from libindex_api.http.errors import unauthorized
from libindex_api.models.extra_models import PublisherModel
from libindex_api.service.facade import get_index_services

LOGGER = logging.getLogger(__name__)

basic_auth = HTTPBasic(
    description="GitHub login and personal access token",
    auto_error=False,
)


async def get_publisher_basicAuth(
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_auth),
) -> PublisherModel:
    """
    Resolve Basic credentials to a publisher and its push-access repositories.

    :param credentials: login and token from the Authorization header
    :type credentials: HTTPBasicCredentials | None
    :return: resolved publisher
    :rtype: PublisherModel
    """

    if credentials is None or not credentials.username or not credentials.password:
        raise unauthorized("GitHub credentials are required to publish.")

    github_credentials = GithubCredentials(login=credentials.username, token=credentials.password)
    try:
        state = await asyncio.to_thread(
            get_index_services().user_states.resolve,
            github_credentials,
        )
    except CredentialsError as exc:
        LOGGER.info("Rejected credentials for %s: %s", credentials.username, exc)
        raise unauthorized(str(exc)) from exc

    return PublisherModel(
        login=state.login,
        token=credentials.password,
        repos=sorted(str(repo) for repo in state.repos),
        trusted=state.trusted,
    )
