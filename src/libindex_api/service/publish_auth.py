"""Decide whether a publisher may claim a repository."""

from __future__ import annotations

from enum import Enum

from libindex_api.domain import RepositoryIdentity, UserState
from libindex_api.errors import AuthorizationError


class AuthorizationDecision(str, Enum):
    ALLOWED = "allowed"
    DENIED = "denied"


def authorize(user_state: UserState, identity: RepositoryIdentity) -> AuthorizationDecision:
    if user_state.trusted or identity in user_state.repos:
        return AuthorizationDecision.ALLOWED
    return AuthorizationDecision.DENIED


def require_authorized(user_state: UserState, identity: RepositoryIdentity) -> None:
    if authorize(user_state, identity) is AuthorizationDecision.DENIED:
        raise AuthorizationError(f"{user_state.login} has no write access to {identity}")
