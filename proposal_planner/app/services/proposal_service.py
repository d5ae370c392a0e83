"""
Lenient facade over :class:`ProposalStore`.

Callers that do not distinguish between failure reasons get plain
values back instead of ``Result`` objects: an empty list when the
proposals cannot be listed, ``False`` when a delete fails and ``None``
for everything else.  The store has already logged the failure by the
time a default is substituted.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

from proposal_planner.app.schemas.proposal import Activity, Proposal
from proposal_planner.app.services.proposal_store import ProposalStore


class ProposalService:
    """Default-value policy for proposal operations."""

    def __init__(self, store: ProposalStore) -> None:
        self.store = store

    async def aclose(self) -> None:
        await self.store.aclose()

    async def list_proposals(self) -> List[Proposal]:
        return (await self.store.list_proposals()).unwrap_or([])

    async def get_proposal(self, proposal_id: Union[str, int]) -> Optional[Proposal]:
        return (await self.store.get_proposal(proposal_id)).unwrap_or(None)

    async def add_proposal(
        self, name: str, activities: Iterable[Union[Activity, Dict[str, Any]]] = ()
    ) -> Optional[Proposal]:
        return (await self.store.add_proposal(name, activities)).unwrap_or(None)

    async def delete_proposal(self, proposal_id: Union[str, int]) -> bool:
        return (await self.store.delete_proposal(proposal_id)).unwrap_or(False)

    async def get_activity(self, proposal_id: Union[str, int], activity_id: int) -> Optional[Activity]:
        return (await self.store.get_activity(proposal_id, activity_id)).unwrap_or(None)

    async def add_activity(self, proposal_id: Union[str, int], activity_id: int) -> Optional[Activity]:
        return (await self.store.add_activity(proposal_id, activity_id)).unwrap_or(None)
