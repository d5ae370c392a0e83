"""Shared fixtures: an in-memory stand-in for the remote proposals API."""

import json
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import unquote

import httpx
import pytest

from proposal_planner.app.services.proposal_service import ProposalService
from proposal_planner.app.services.proposal_store import ProposalStore

BASE_URL = "http://proposals.test"


class FakeProposalsAPI:
    """Serves ``/api/proposals`` from dictionaries and records every request."""

    def __init__(self) -> None:
        self.proposals: Dict[str, Dict[str, Any]] = {}
        self.requests: List[httpx.Request] = []
        self.fail_status: Optional[int] = None
        self.network_down = False
        self._next_id = 100

    def add(self, proposal_id: str, name: str, activities: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
        proposal = {"id": proposal_id, "name": name, "activities": activities or []}
        self.proposals[proposal_id] = proposal
        return proposal

    def count(self, method: str, path: str) -> int:
        return sum(1 for r in self.requests if r.method == method and r.url.path == path)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.network_down:
            raise httpx.ConnectError("connection refused", request=request)
        if self.fail_status is not None:
            return httpx.Response(self.fail_status, json={"message": "server unavailable"})

        # Split before decoding so escaped slashes stay inside one id.
        raw_path = request.url.raw_path.decode("ascii").split("?")[0]
        parts = [unquote(part) for part in raw_path.split("/")[3:]]
        method = request.method
        if not parts:
            if method == "GET":
                return httpx.Response(200, json=list(self.proposals.values()))
            if method == "POST":
                body = json.loads(request.content)
                new_id = str(self._next_id)
                self._next_id += 1
                return httpx.Response(201, json=self.add(new_id, body["name"], body["activities"]))
            return httpx.Response(405)
        proposal = self.proposals.get(parts[0])
        if proposal is None:
            return httpx.Response(404, json={"message": "Proposal not found"})
        if len(parts) == 1:
            if method == "GET":
                return httpx.Response(200, json=proposal)
            if method == "DELETE":
                del self.proposals[parts[0]]
                return httpx.Response(204)
        if len(parts) == 2 and method == "POST":
            activity = {"id": json.loads(request.content)}
            proposal["activities"].append(activity)
            return httpx.Response(201, json=activity)
        if len(parts) == 3 and method == "GET":
            for activity in proposal["activities"]:
                if str(activity["id"]) == parts[2]:
                    return httpx.Response(200, json=activity)
            return httpx.Response(404, json={"detail": "Activity not found"})
        return httpx.Response(405)


def requests_summary(api: FakeProposalsAPI) -> List[Tuple[str, str]]:
    return [(r.method, r.url.path) for r in api.requests]


@pytest.fixture
def api() -> FakeProposalsAPI:
    return FakeProposalsAPI()


@pytest.fixture
async def store(api):
    client = httpx.AsyncClient(transport=api.transport)
    store = ProposalStore(base_url=BASE_URL, client=client)
    yield store
    await client.aclose()


@pytest.fixture
def service(store) -> ProposalService:
    return ProposalService(store)
