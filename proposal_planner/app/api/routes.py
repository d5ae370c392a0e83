"""
Static route table for the front-end.

The browser application had four pages: ``/home`` (the landing list),
``/proposal`` (create and manage proposals), ``/game/{game_url}`` and a
login screen that navigates to ``/admin`` when the fixed admin pair is
entered.  Each page is exposed here as a JSON endpoint backed by
:class:`ProposalService`, so failures of the remote API show up as
empty lists, 404 or 502 responses rather than exceptions.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status
from fastapi.responses import RedirectResponse

from proposal_planner.app.api.dependencies import get_proposal_service
from proposal_planner.app.core.security import check_credentials
from proposal_planner.app.schemas.login import LoginRequest
from proposal_planner.app.schemas.proposal import Activity, Proposal, ProposalCreate
from proposal_planner.app.services.proposal_service import ProposalService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    return RedirectResponse(url="/home", status_code=status.HTTP_307_TEMPORARY_REDIRECT)


@router.get("/home", response_model=Dict[str, List[Proposal]])
async def home(service: ProposalService = Depends(get_proposal_service)) -> Dict[str, List[Proposal]]:
    """Landing page: every proposal, or an empty list if the API is down."""
    return {"proposals": await service.list_proposals()}


@router.get("/admin", response_model=Dict[str, List[Proposal]])
async def admin(service: ProposalService = Depends(get_proposal_service)) -> Dict[str, List[Proposal]]:
    # Not protected; the login screen only navigates here.
    return {"proposals": await service.list_proposals()}


@router.post("/login")
async def login(request: Request, credentials: LoginRequest) -> RedirectResponse:
    """Navigate to ``/admin`` when the fixed admin pair is entered."""
    if not check_credentials(credentials.username, credentials.password, request.app.state.settings):
        logger.info("Rejected login for %s", credentials.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return RedirectResponse(url="/admin", status_code=status.HTTP_303_SEE_OTHER)


# ----------------------------------------------------------------------
# Proposals
# ----------------------------------------------------------------------
@router.get("/proposal", response_model=List[Proposal])
async def list_proposals(service: ProposalService = Depends(get_proposal_service)) -> List[Proposal]:
    return await service.list_proposals()


@router.post("/proposal", response_model=Proposal, status_code=status.HTTP_201_CREATED)
async def create_proposal(
    proposal_in: ProposalCreate,
    service: ProposalService = Depends(get_proposal_service),
) -> Proposal:
    proposal = await service.add_proposal(proposal_in.name, proposal_in.activities)
    if proposal is None:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Could not create proposal")
    return proposal


@router.get("/proposal/{proposal_id}", response_model=Proposal)
async def get_proposal(proposal_id: str, service: ProposalService = Depends(get_proposal_service)) -> Proposal:
    proposal = await service.get_proposal(proposal_id)
    if proposal is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Proposal not found")
    return proposal


@router.delete("/proposal/{proposal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_proposal(proposal_id: str, service: ProposalService = Depends(get_proposal_service)) -> Response:
    if not await service.delete_proposal(proposal_id):
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Could not delete proposal")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/proposal/{proposal_id}/activities/{activity_id}", response_model=Activity)
async def get_activity(
    proposal_id: str,
    activity_id: int,
    service: ProposalService = Depends(get_proposal_service),
) -> Activity:
    activity = await service.get_activity(proposal_id, activity_id)
    if activity is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Activity not found")
    return activity


@router.post("/proposal/{proposal_id}/activities", response_model=Activity, status_code=status.HTTP_201_CREATED)
async def add_activity(
    proposal_id: str,
    activity_id: int = Body(...),
    service: ProposalService = Depends(get_proposal_service),
) -> Activity:
    activity = await service.add_activity(proposal_id, activity_id)
    if activity is None:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Could not add activity")
    return activity


# ----------------------------------------------------------------------
# Games
# ----------------------------------------------------------------------
@router.get("/game/{game_url}", response_model=Dict[str, Any])
async def game(game_url: str, service: ProposalService = Depends(get_proposal_service)) -> Dict[str, Any]:
    """Show the proposal a game is played on.

    The game url segment is the proposal id.
    """
    proposal = await service.get_proposal(game_url)
    if proposal is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")
    return {"game_url": game_url, "proposal": proposal}
