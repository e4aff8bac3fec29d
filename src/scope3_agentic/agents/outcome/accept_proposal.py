# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Assignment acceptance for the outcome agent."""

from typing import Any, Optional, Union

from ...errors import AssignmentValidationError
from ...models.outcome import AcceptProposalRequest, AcceptProposalResponse
from ...utils.logger import StructuredLogger


def validate_assignment(request: AcceptProposalRequest) -> None:
    """Check that an assignment can be fulfilled.

    Raises:
        AssignmentValidationError: With the reason the assignment is declined
    """
    if not request.tactic_id or request.campaign_context is None:
        raise AssignmentValidationError("Missing required fields: tacticId or campaignContext")
    if request.campaign_context.budget <= 0:
        raise AssignmentValidationError("Budget must be greater than 0")


def accept_proposal(
    request: Union[AcceptProposalRequest, dict[str, Any]],
    logger: Optional[StructuredLogger] = None,
) -> dict[str, Any]:
    """Accept or decline a tactic assigned to this agent.

    Args:
        request: AcceptProposalRequest or its wire-format dict
        logger: Logger for the assignment summary

    Returns:
        {"acknowledged": True} or {"acknowledged": False, "reason": ...}
    """
    logger = logger or StructuredLogger()
    if not isinstance(request, AcceptProposalRequest):
        request = AcceptProposalRequest.model_validate(request)

    context = request.campaign_context
    logger.info(
        "Received assignment",
        {
            "tacticId": request.tactic_id,
            "proposalId": request.proposal_id,
            "brandAgentId": request.brand_agent_id,
            "seatId": request.seat_id,
            "budget": context.budget if context else None,
            "channel": context.channel if context else None,
            "creativesCount": len(context.creatives) if context else 0,
        },
    )

    try:
        validate_assignment(request)
    except AssignmentValidationError as e:
        logger.info("Declining assignment", {"tacticId": request.tactic_id, "reason": str(e)})
        return AcceptProposalResponse(acknowledged=False, reason=str(e)).to_wire()

    logger.info("Assignment accepted", {"tacticId": request.tactic_id})
    return AcceptProposalResponse(acknowledged=True).to_wire()
