"""Capability kinds exposed by a platform connection.

Connections hand out clients by kind token instead of by concrete client
type, so the service layer never needs to know which adapter class backs a
given capability.
"""

from __future__ import annotations

from enum import Enum


class CapabilityKind(str, Enum):
    """Categories of remote query reachable from a connection."""

    PROFILE = "profile"
    ACCOUNT = "account"
    PROJECT = "project"
    BUILD = "build"