"""
FastAPI dependencies shared by the front-end routes.
"""

from fastapi import Request

from proposal_planner.app.services.proposal_service import ProposalService


def get_proposal_service(request: Request) -> ProposalService:
    """Return the service created by ``create_app`` for this application."""
    return request.app.state.proposal_service
