# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Example agents built on the Scope3 platform client."""

from .allocation import AllocationEngine
from .discovery import ProductDiscovery
from .simple_media_agent import LogOnlyReallocationPolicy, ReallocationPolicy, SimpleMediaAgent

__all__ = [
    "AllocationEngine",
    "LogOnlyReallocationPolicy",
    "ProductDiscovery",
    "ReallocationPolicy",
    "SimpleMediaAgent",
]
