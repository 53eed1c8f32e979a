"""Name-based facade over the platform's account, project and build services.

The platform indexes projects and builds by internal identity, while bot
users speak in account and project names. This module hides the resolution
chain (member → account → project → build definitions) behind four async
operations and raises a typed error the moment a supplied name does not
resolve, instead of letting a vague "not found" leak from the transport.

Every step awaits the previous one: the account must be resolved before its
endpoint can be queried for projects, and the project before its builds.
Remote failures (``httpx.HTTPError``) and ``asyncio.CancelledError`` are never
caught here.
"""

from __future__ import annotations

import logging
from typing import Any, Literal, overload

from adapters.vsts.connection import VstsConnectionFactory
from core.domain.capabilities import CapabilityKind
from core.domain.models import (
    Account,
    BuildDefinitionReference,
    OAuthToken,
    Profile,
    TeamProjectReference,
)
from core.errors import AccountNotFoundError, ProjectNotFoundError
from core.interfaces.connection import (
    AccountClient,
    BuildClient,
    Connection,
    ConnectionFactory,
    ProfileClient,
    ProjectClient,
)
from core.preconditions import match_by_name, require_name, require_token

logger = logging.getLogger(__name__)


class VstsService:
    """Resolves account/project names into platform objects.

    The service holds no mutable state; concurrent calls each open their own
    connections.
    """

    def __init__(self, connections: ConnectionFactory | None = None) -> None:
        self._connections = connections or VstsConnectionFactory()

    async def get_profile(self, token: OAuthToken | None) -> Profile:
        """Return the profile of the user owning ``token``."""

        token = require_token(token)
        async with self._connections.open(token) as connection:
            return await self._profile(connection)

    async def get_accounts(self, token: OAuthToken | None, member_id: str) -> list[Account]:
        """Return every account of ``member_id`` exactly as the platform lists them."""

        token = require_token(token)
        async with self._connections.open(token) as connection:
            return await self._accounts(connection, member_id)

    async def get_projects(self, account: str | None, token: OAuthToken | None) -> list[TeamProjectReference]:
        """Return the team projects of the caller's account named ``account``."""

        account = require_name(account, "account")
        token = require_token(token)

        resolved = await self._resolve_account(account, token)
        async with self._connections.open(token, resolved.account_uri) as connection:
            return await self._projects(connection)

    async def get_build_definitions(
        self,
        project: str | None,
        account: str | None,
        token: OAuthToken | None,
    ) -> list[BuildDefinitionReference]:
        """Return the build definitions of ``project`` under ``account``."""

        project = require_name(project, "project")
        account = require_name(account, "account")
        token = require_token(token)

        resolved = await self._resolve_account(account, token)
        async with self._connections.open(token, resolved.account_uri) as connection:
            projects = await self._projects(connection)
            match = match_by_name(projects, project, key=lambda p: p.name)
            if match is None:
                raise ProjectNotFoundError(project)
            logger.debug("Resolved project %r to %s", project, match.id)

            builds = self._client(connection, CapabilityKind.BUILD)
            return await builds.get_definitions(match.id)

    async def _resolve_account(self, account: str, token: OAuthToken) -> Account:
        # The member id is implied by the credential: profile first, then accounts.
        async with self._connections.open(token) as connection:
            profile = await self._profile(connection)
            accounts = await self._accounts(connection, profile.id)

        match = match_by_name(accounts, account, key=lambda a: a.account_name)
        if match is None:
            raise AccountNotFoundError(account)
        logger.debug("Resolved account %r to %s", account, match.account_uri)
        return match

    async def _profile(self, connection: Connection) -> Profile:
        return await self._client(connection, CapabilityKind.PROFILE).get_profile()

    async def _accounts(self, connection: Connection, member_id: str) -> list[Account]:
        return await self._client(connection, CapabilityKind.ACCOUNT).get_accounts_for_member(member_id)

    async def _projects(self, connection: Connection) -> list[TeamProjectReference]:
        return await self._client(connection, CapabilityKind.PROJECT).get_projects()

    @overload
    @staticmethod
    def _client(connection: Connection, kind: Literal[CapabilityKind.PROFILE]) -> ProfileClient: ...

    @overload
    @staticmethod
    def _client(connection: Connection, kind: Literal[CapabilityKind.ACCOUNT]) -> AccountClient: ...

    @overload
    @staticmethod
    def _client(connection: Connection, kind: Literal[CapabilityKind.PROJECT]) -> ProjectClient: ...

    @overload
    @staticmethod
    def _client(connection: Connection, kind: Literal[CapabilityKind.BUILD]) -> BuildClient: ...

    @staticmethod
    def _client(connection: Connection, kind: CapabilityKind) -> Any:
        return connection.get_client(kind)
