"""Constants and builders shared by the test modules."""

from __future__ import annotations

from core.domain.models import Account

GLOBAL_URL = "https://app.vssps.visualstudio.com"
MEMBER_ID = "6a1b7e0c-2f5d-4c11-9d2a-1d8c43b8f0aa"


def make_account(name: str, uri: str | None = None) -> Account:
    return Account(
        accountId=f"id-{name.lower()}",
        accountName=name,
        accountUri=uri or f"https://{name.lower()}.visualstudio.com",
    )
