"""Shared fakes and fixtures for the tsbot test suite."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

import pytest

from core.config import AppSettings, get_user_env_file
from core.domain.capabilities import CapabilityKind
from core.domain.models import (
    Account,
    BuildDefinitionReference,
    OAuthToken,
    Profile,
    TeamProjectReference,
)
from core.preconditions import require_token
from tests.helpers import GLOBAL_URL, MEMBER_ID, make_account


@dataclass
class FakePlatform:
    """In-memory platform answering capability queries and recording them."""

    profile: Profile = field(default_factory=lambda: Profile(id=MEMBER_ID, displayName="Me"))
    accounts: list[Account] = field(default_factory=list)
    projects: dict[str, list[TeamProjectReference]] = field(default_factory=dict)
    definitions: dict[str, list[BuildDefinitionReference]] = field(default_factory=dict)
    calls: list[tuple] = field(default_factory=list)
    opened: list[str | None] = field(default_factory=list)
    closed: int = 0
    block_accounts: asyncio.Event | None = None
    failures: dict[CapabilityKind, Exception] = field(default_factory=dict)

    def record(self, *call) -> None:
        self.calls.append(call)
        failure = self.failures.get(call[0])
        if failure is not None:
            raise failure

    def kinds_called(self) -> list[CapabilityKind]:
        return [call[0] for call in self.calls]


class FakeProfileClient:
    def __init__(self, platform: FakePlatform, base_url: str) -> None:
        self._platform = platform
        self._base_url = base_url

    async def get_profile(self) -> Profile:
        self._platform.record(CapabilityKind.PROFILE, self._base_url)
        return self._platform.profile


class FakeAccountClient:
    def __init__(self, platform: FakePlatform, base_url: str) -> None:
        self._platform = platform
        self._base_url = base_url

    async def get_accounts_for_member(self, member_id: str) -> list[Account]:
        self._platform.record(CapabilityKind.ACCOUNT, self._base_url, member_id)
        if self._platform.block_accounts is not None:
            await self._platform.block_accounts.wait()
        return self._platform.accounts


class FakeProjectClient:
    def __init__(self, platform: FakePlatform, base_url: str) -> None:
        self._platform = platform
        self._base_url = base_url

    async def get_projects(self, *, state_filter=None, top=None, skip=None) -> list[TeamProjectReference]:
        self._platform.record(CapabilityKind.PROJECT, self._base_url, state_filter, top, skip)
        return self._platform.projects.get(self._base_url, [])


class FakeBuildClient:
    def __init__(self, platform: FakePlatform, base_url: str) -> None:
        self._platform = platform
        self._base_url = base_url

    async def get_definitions(self, project_id: str, **filters) -> list[BuildDefinitionReference]:
        self._platform.record(CapabilityKind.BUILD, self._base_url, project_id, filters)
        return self._platform.definitions.get(project_id, [])


_FAKE_CLIENTS = {
    CapabilityKind.PROFILE: FakeProfileClient,
    CapabilityKind.ACCOUNT: FakeAccountClient,
    CapabilityKind.PROJECT: FakeProjectClient,
    CapabilityKind.BUILD: FakeBuildClient,
}


class FakeConnection:
    def __init__(self, platform: FakePlatform, base_url: str) -> None:
        self._platform = platform
        self._clients: dict[CapabilityKind, object] = {}
        self.base_url = base_url

    def get_client(self, kind: CapabilityKind):
        if kind not in self._clients:
            self._clients[kind] = _FAKE_CLIENTS[kind](self._platform, self.base_url)
        return self._clients[kind]

    async def __aenter__(self) -> "FakeConnection":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self._platform.closed += 1


class FakeConnectionFactory:
    def __init__(self, platform: FakePlatform) -> None:
        self._platform = platform

    def open(self, token: OAuthToken | None, base_url: str | None = None) -> FakeConnection:
        require_token(token)
        self._platform.opened.append(base_url)
        return FakeConnection(self._platform, GLOBAL_URL if base_url is None else base_url)


@pytest.fixture()
def token() -> OAuthToken:
    return OAuthToken(access_token="x25onorum4neacdjmvzvaxjeosik7qxo7fbnn6lebefeday7fxmq")


@pytest.fixture()
def platform() -> FakePlatform:
    myaccount = make_account("MyAccount", "https://myaccount.visualstudio.com")
    other = make_account("Other", "https://other.visualstudio.com")
    myproject = TeamProjectReference(id="proj-1", name="MyProject")
    return FakePlatform(
        accounts=[myaccount, other],
        projects={
            "https://myaccount.visualstudio.com": [myproject, TeamProjectReference(id="proj-2", name="Second")],
            "https://other.visualstudio.com": [TeamProjectReference(id="proj-9", name="Elsewhere")],
        },
        definitions={
            "proj-1": [
                BuildDefinitionReference(id=1, name="CI"),
                BuildDefinitionReference(id=2, name="Nightly"),
            ],
        },
    )


@pytest.fixture()
def factory(platform: FakePlatform) -> FakeConnectionFactory:
    return FakeConnectionFactory(platform)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Keep the developer's ./.env and user config out of AppSettings."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in ("TSBOT_ACCESS_TOKEN", "TSBOT_GLOBAL_BASE_URL", "TSBOT_API_VERSION", "TSBOT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setitem(AppSettings.model_config, "env_file", (".env", str(get_user_env_file())))
