# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Outcome agent: proposal generation and assignment acceptance."""

from .accept_proposal import accept_proposal, validate_assignment
from .get_proposals import get_proposals

__all__ = ["accept_proposal", "get_proposals", "validate_assignment"]
