# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Scope3 protocol clients."""

from .mcp_client import Scope3Client
from .platform import PartnerClient, PlatformClient
from .reconciler import (
    DebugInfo,
    LenientPolicy,
    ReconciliationPolicy,
    StrictPolicy,
    get_policy,
    reconcile,
    sanitize,
)

__all__ = [
    "DebugInfo",
    "LenientPolicy",
    "PartnerClient",
    "PlatformClient",
    "ReconciliationPolicy",
    "Scope3Client",
    "StrictPolicy",
    "get_policy",
    "reconcile",
    "sanitize",
]
